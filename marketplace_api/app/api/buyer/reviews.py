"""
API endpoints for product reviews.

Buyers submit a review for a received order, check which items of an
order are still eligible for review and edit a review they wrote.
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from marketplace_api.app.core.responses import error_response, read_payload, success_response
from marketplace_api.app.schemas.response import ApiResponse
from marketplace_api.app.services.review_service import ReviewService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/reviews", response_model=ApiResponse, summary="Submit a review")
async def create_review(payload: Any = Depends(read_payload)) -> JSONResponse:
    logger.info("Submitting review")
    try:
        await ReviewService.create_review(payload)
        return success_response("Review submitted successfully")
    except Exception as e:
        logger.error("Failed to submit review: %s", e)
        return error_response("Failed to submit review")


@router.get(
    "/reviews/eligible/{order_id}",
    response_model=ApiResponse,
    summary="Check review eligibility for an order",
)
async def get_review_eligibility(order_id: str) -> JSONResponse:
    """Report which items of ``order_id`` can still be reviewed."""
    logger.info("Checking review eligibility for order %s", order_id)
    try:
        eligibility = await ReviewService.get_eligibility(order_id)
        return success_response("Review eligibility retrieved successfully", data=eligibility)
    except Exception as e:
        logger.error("Failed to check review eligibility for order %s: %s", order_id, e)
        return error_response("Failed to check review eligibility")


@router.put("/reviews/{review_id}", response_model=ApiResponse, summary="Update a review")
async def update_review(review_id: str, payload: Any = Depends(read_payload)) -> JSONResponse:
    logger.info("Updating review %s", review_id)
    try:
        await ReviewService.update_review(review_id, payload)
        return success_response("Review updated successfully")
    except Exception as e:
        logger.error("Failed to update review %s: %s", review_id, e)
        return error_response("Failed to update review")
