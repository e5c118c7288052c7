from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from typing import Optional

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.contact import ContactCreateRequest, MessageReadRequest
from app.schemas.common import PaginatedResponse, success_response, paginated_response
from app.services.contact_service import contact_service

router = APIRouter()


# ─── PUBLIC (no login) ────────────────────────────────────────────────────────
@router.post("/contact", status_code=status.HTTP_201_CREATED, summary="[PUBLIC] Send a contact inquiry")
def submit_contact(body: ContactCreateRequest, db: Session = Depends(get_db)):
    message_id = contact_service.submit(db, body)
    return success_response("Message sent. We will get back to you shortly.", {"id": message_id})


# ─── ADMIN INBOX ──────────────────────────────────────────────────────────────
@router.get("/admin/messages", summary="List contact messages (paginated)", response_model=PaginatedResponse)
def list_messages(
    page:   int            = Query(1, ge=1),
    limit:  int            = Query(20, ge=1, le=100),
    unread: Optional[bool] = Query(None),
    db:     Session        = Depends(get_db),
    _:      User           = Depends(get_current_user),
):
    data, total = contact_service.list_messages(db, page, limit, unread)
    return paginated_response("Messages retrieved", data, total, page, limit)


@router.get("/admin/messages/{message_id}", summary="Get contact message")
def get_message(message_id: str, db: Session = Depends(get_db), _: User = Depends(get_current_user)):
    return success_response("Message retrieved", contact_service.get_message(db, message_id))


@router.patch("/admin/messages/{message_id}/read", summary="Mark message read or unread")
def set_read(
    message_id: str,
    body:       MessageReadRequest,
    db:         Session = Depends(get_db),
    _:          User    = Depends(get_current_user),
):
    return success_response("Message updated", contact_service.set_read(db, message_id, body.read))
