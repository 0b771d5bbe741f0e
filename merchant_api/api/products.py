"""
Product API endpoints
"""
from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Response

from merchant_api.constants import HTTPStatus
from merchant_api.dependencies import get_product_service
from merchant_api.dtos.response import ProductResponse
from merchant_api.services import ProductService
from merchant_api.utils.error_handlers import handle_api_errors

router = APIRouter()


@router.post("/products", response_model=ProductResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create product")
def create_product(
    payload: Dict[str, Any] = Body(...),
    service: ProductService = Depends(get_product_service),
):
    """Create a product. Returns 404 if supplierId does not resolve."""
    return service.create(payload)


@router.get("/products", response_model=List[ProductResponse])
@handle_api_errors("List products")
def list_products(service: ProductService = Depends(get_product_service)):
    return service.list_all()


@router.get("/products/{product_id}", response_model=ProductResponse)
@handle_api_errors("Get product")
def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    return service.get_by_id(product_id)


@router.put("/products/{product_id}", response_model=ProductResponse)
@handle_api_errors("Update product")
def update_product(
    product_id: int,
    payload: Dict[str, Any] = Body(...),
    service: ProductService = Depends(get_product_service),
):
    return service.update(product_id, payload)


@router.delete("/products/{product_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete product")
def delete_product(product_id: int, service: ProductService = Depends(get_product_service)):
    service.delete(product_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
