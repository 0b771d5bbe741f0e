"""
Statistics API endpoint
"""
from fastapi import APIRouter, Depends

from merchant_api.dependencies import get_statistics_service
from merchant_api.dtos.response import StatisticsResponse
from merchant_api.services import StatisticsService
from merchant_api.utils.error_handlers import handle_api_errors

router = APIRouter()


@router.get("/statistics", response_model=StatisticsResponse)
@handle_api_errors("Get statistics")
def get_statistics(service: StatisticsService = Depends(get_statistics_service)):
    """Total suppliers, products and customers."""
    return service.get_statistics()
