from fastapi import APIRouter, Depends, File, UploadFile
from starlette.concurrency import run_in_threadpool

from app.config import settings
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.common import success_response
from app.services.upload_service import save_image

router = APIRouter()


@router.post("/upload", summary="Upload an image (JPG, PNG, WebP, GIF; max 5MB)")
async def upload_image(
    file: UploadFile = File(...),
    _:    User       = Depends(get_current_user),
):
    # one byte past the limit is enough for save_image to reject the file
    content = await file.read(settings.UPLOAD_MAX_BYTES + 1)
    data = await run_in_threadpool(save_image, file.filename, file.content_type, content)
    return success_response("File uploaded", data)
