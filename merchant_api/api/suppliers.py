"""
Supplier API endpoints
"""
from typing import Any, Dict, List
import logging

from fastapi import APIRouter, Body, Depends, Response

from merchant_api.constants import HTTPStatus
from merchant_api.dependencies import get_supplier_service, require_admin
from merchant_api.dtos.response import SupplierResponse
from merchant_api.models import User
from merchant_api.services import SupplierService
from merchant_api.utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/suppliers",
    response_model=SupplierResponse,
    status_code=HTTPStatus.CREATED,
)
@handle_api_errors("Create supplier")
def create_supplier(
    payload: Dict[str, Any] = Body(...),
    service: SupplierService = Depends(get_supplier_service),
):
    """Create a supplier with its address. Returns 409 if the tax ID is taken."""
    return service.create(payload)


@router.get("/suppliers", response_model=List[SupplierResponse])
@handle_api_errors("List suppliers")
def list_suppliers(service: SupplierService = Depends(get_supplier_service)):
    return service.list_all()


@router.get("/suppliers/{supplier_id}", response_model=SupplierResponse)
@handle_api_errors("Get supplier")
def get_supplier(supplier_id: int, service: SupplierService = Depends(get_supplier_service)):
    return service.get_by_id(supplier_id)


@router.put(
    "/suppliers/{supplier_id}",
    response_model=SupplierResponse,
)
@handle_api_errors("Update supplier")
def update_supplier(
    supplier_id: int,
    payload: Dict[str, Any] = Body(...),
    service: SupplierService = Depends(get_supplier_service),
    admin: User = Depends(require_admin),
):
    """
    Update name, type and address of a supplier (ADMIN only).

    The tax ID cannot be changed; a taxId key in the body is ignored.
    """
    logger.info(f"Supplier {supplier_id} update requested by {admin.username}")
    return service.update(supplier_id, payload)


@router.delete("/suppliers/{supplier_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete supplier")
def delete_supplier(supplier_id: int, service: SupplierService = Depends(get_supplier_service)):
    service.delete(supplier_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
