"""
Customer API endpoints
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response

from merchant_api.constants import HTTPStatus
from merchant_api.dependencies import get_customer_service
from merchant_api.dtos.response import CustomerResponse
from merchant_api.services import CustomerService
from merchant_api.utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post("/customers", response_model=CustomerResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create customer")
def create_customer(
    payload: Dict[str, Any] = Body(...),
    service: CustomerService = Depends(get_customer_service),
):
    return service.create(payload)


@router.get("/customers", response_model=List[CustomerResponse])
@handle_api_errors("List customers")
def list_customers(service: CustomerService = Depends(get_customer_service)):
    return service.list_all()


@router.get("/customers/{customer_id}", response_model=CustomerResponse)
@handle_api_errors("Get customer")
def get_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    return service.get_by_id(customer_id)


@router.put("/customers/{customer_id}", response_model=CustomerResponse)
@handle_api_errors("Update customer")
def update_customer(
    customer_id: int,
    payload: Dict[str, Any] = Body(...),
    service: CustomerService = Depends(get_customer_service),
):
    return service.update(customer_id, payload)


@router.delete("/customers/{customer_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete customer")
def delete_customer(customer_id: int, service: CustomerService = Depends(get_customer_service)):
    service.delete(customer_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
