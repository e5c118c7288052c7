from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import get_current_user
from app.models.user import User
from app.schemas.catalog import VehicleBrandWriteRequest
from app.schemas.common import success_response
from app.services.brand_service import vehicle_brand_service

router = APIRouter(prefix="/admin/vehicle-brands")


@router.get("", summary="List vehicle brands with linked categories")
def list_brands(db: Session = Depends(get_db), _: User = Depends(get_current_user)):
    return success_response("Vehicle brands retrieved", vehicle_brand_service.list_brands(db))


@router.get("/{brand_id}", summary="Get vehicle brand by ID")
def get_brand(brand_id: str, db: Session = Depends(get_db), _: User = Depends(get_current_user)):
    return success_response("Vehicle brand retrieved", vehicle_brand_service.get_brand(db, brand_id))


@router.post("", status_code=status.HTTP_201_CREATED, summary="Create vehicle brand")
def create_brand(
    body: VehicleBrandWriteRequest,
    db:   Session = Depends(get_db),
    _:    User    = Depends(get_current_user),
):
    data = vehicle_brand_service.create_brand(db, body)
    return success_response("Vehicle brand created successfully", data)


@router.put("/{brand_id}", summary="Replace vehicle brand and its category links")
def update_brand(
    brand_id: str,
    body:     VehicleBrandWriteRequest,
    db:       Session = Depends(get_db),
    _:        User    = Depends(get_current_user),
):
    data = vehicle_brand_service.update_brand(db, brand_id, body)
    return success_response("Vehicle brand updated successfully", data)


@router.delete("/{brand_id}", summary="Delete vehicle brand")
def delete_brand(
    brand_id: str,
    db:       Session = Depends(get_db),
    _:        User    = Depends(get_current_user),
):
    vehicle_brand_service.delete_brand(db, brand_id)
    return success_response("Vehicle brand deleted successfully", None)
