"""
Transparent Redirect API Endpoints

Merchant-side endpoints for the checkout form and the processor callback.

Flow:
1. Frontend asks for tr_data for a checkout (amount, order id, options)
2. Browser POSTs card fields plus tr_data straight to form_url
3. Processor redirects the browser to /confirm with a signed query string
"""
from decimal import Decimal
from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field
import logging

from ..config import settings
from ..gateway import Braintree
from ..models.transactions import (
    CallbackResult,
    CustomerRequest,
    TransactionOptions,
    TransactionRequest,
    TransparentRedirectData,
)
from ..services.transparent_redirect import FORM_FIELD, TransparentRedirectGateway

logger = logging.getLogger(__name__)

router = APIRouter()

CONFIRM_PATH = "/api/transparent-redirect/confirm"


class CheckoutRequest(BaseModel):
    """Checkout details the merchant frontend submits."""
    amount: Decimal = Field(gt=0, decimal_places=2)
    order_id: str = Field(min_length=1)
    customer_id: Optional[str] = None
    submit_for_settlement: bool = True
    store_in_vault: bool = False


@lru_cache(maxsize=1)
def get_gateway() -> TransparentRedirectGateway:
    """Gateway built once from settings; overridden in tests."""
    return Braintree.from_settings().transparent_redirect()


@router.post("/transaction-data")
async def create_transaction_data_endpoint(
    checkout: CheckoutRequest,
    gateway: TransparentRedirectGateway = Depends(get_gateway)
) -> Dict[str, Any]:
    """
    Build tr_data for a sale.

    Request Body:
        {
            "amount": "20.00",
            "order_id": "1541415277280",
            "customer_id": "1234",
            "submit_for_settlement": true,
            "store_in_vault": false
        }

    Returns:
        {
            "form_url": str,    # POST target for the checkout form
            "form_field": str,  # name of the hidden field holding tr_data
            "tr_data": str      # signed descriptor
        }
    """
    logger.info(f"Building transparent redirect data for order: {checkout.order_id}")

    data = TransparentRedirectData(
        redirect_url=f"{settings.redirect_base_url}{CONFIRM_PATH}",
        transaction=TransactionRequest(
            type="sale",
            amount=checkout.amount,
            order_id=checkout.order_id,
            customer=CustomerRequest(id=checkout.customer_id) if checkout.customer_id else None,
            options=TransactionOptions(
                submit_for_settlement=checkout.submit_for_settlement,
                store_in_vault=checkout.store_in_vault,
            ),
        ),
    )

    return {
        "form_url": gateway.form_url(),
        "form_field": FORM_FIELD,
        "tr_data": gateway.transaction_data(data),
    }


@router.get("/confirm")
async def confirm_endpoint(
    request: Request,
    gateway: TransparentRedirectGateway = Depends(get_gateway)
) -> Dict[str, Any]:
    """
    Receive the processor redirect.

    Query Parameters:
        Result fields (http_status, id, kind, ...) followed by hash

    Returns:
        {"verified": true, "result": CallbackResult}

    Errors:
        400 braintree:tr:missing_hash - no hash parameter
        400 braintree:tr:malformed_query - repeated or misplaced hash
        400 braintree:tr:invalid_signature - hash does not match
    """
    params = gateway.parse_query_string(request.url.query)
    result = CallbackResult(**params)

    logger.info(f"Transparent redirect confirmed: kind={result.kind} id={result.id} status={result.http_status}")

    return {
        "verified": True,
        "result": result.model_dump(),
    }
