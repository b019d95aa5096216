"""
Seller management endpoints for administrators.

Administrators browse registered sellers and record the result of a
seller's onboarding audit.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from marketplace_api.app.core.responses import error_response, read_payload, success_response
from marketplace_api.app.schemas.response import ApiResponse
from marketplace_api.app.services.seller_service import SellerService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/sellers", response_model=ApiResponse, summary="List sellers")
async def list_sellers() -> JSONResponse:
    logger.info("Listing sellers")
    try:
        sellers = await SellerService.list_sellers()
        return success_response("Sellers retrieved successfully", data=sellers)
    except Exception as e:
        logger.error("Failed to retrieve sellers: %s", e)
        return error_response("Failed to retrieve sellers")


@router.get("/sellers/{seller_id}", response_model=ApiResponse, summary="Get a seller")
async def get_seller(seller_id: str) -> JSONResponse:
    logger.info("Fetching seller %s", seller_id)
    try:
        seller = await SellerService.get_seller(seller_id)
        return success_response("Seller retrieved successfully", data=seller)
    except Exception as e:
        logger.error("Failed to retrieve seller %s: %s", seller_id, e)
        return error_response("Failed to retrieve seller")


@router.put("/sellers/{seller_id}/audit", response_model=ApiResponse, summary="Audit a seller")
async def audit_seller(seller_id: str, payload: Any = Depends(read_payload)) -> JSONResponse:
    """Approve or reject a seller's application.

    The decision is taken from the request body as sent; it is passed
    to the service without validation.
    """
    logger.info("Auditing seller %s", seller_id)
    try:
        await SellerService.audit_seller(seller_id, payload)
        return success_response("Seller audit submitted successfully")
    except Exception as e:
        logger.error("Failed to audit seller %s: %s", seller_id, e)
        return error_response("Failed to audit seller")
