"""
Order endpoints.

POST /orders/payload - Preview the Klarna payload for an order (nothing is sent).
POST /orders/place   - Place the order with Klarna using an authorization token.
"""

from collections.abc import AsyncGenerator
from typing import Any

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from klarna_checkout.api.schemas import PayloadRequest, PlaceOrderRequest, PlaceOrderResult
from klarna_checkout.config import settings
from klarna_checkout.database import get_session
from klarna_checkout.engine.place_order import place_order_with_authorization_token
from klarna_checkout.engine.retry import ProviderError
from klarna_checkout.models.enums import UnsupportedRegionError
from klarna_checkout.models.payment import KlarnaPaymentMethod, KlarnaPaymentSource
from klarna_checkout.models.records import OrderPlacement
from klarna_checkout.providers.base import PaymentsClient
from klarna_checkout.providers.http_client import KlarnaHttpClient
from klarna_checkout.providers.mock_provider import MockPaymentsClient
from klarna_checkout.serializers.order import OrderSerializer

router = APIRouter(prefix="/orders", tags=["orders"])


async def get_client() -> AsyncGenerator[PaymentsClient, None]:
    """One client per request; the HTTP client's connection pool is closed afterwards."""
    if settings.use_mock_client:
        yield MockPaymentsClient()
        return

    client = KlarnaHttpClient()
    try:
        yield client
    finally:
        await client.aclose()


@router.post("/payload")
async def preview_payload(body: PayloadRequest) -> dict[str, Any]:
    """Serialize an order exactly as it would be submitted to Klarna."""
    try:
        serializer = OrderSerializer(
            body.order.to_domain(),
            body.region,
            options=body.options,
            design=body.design,
            skip_personal_data=body.skip_personal_data,
            store=body.store(),
            intent=body.intent,
        )
    except UnsupportedRegionError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return serializer.to_hash()


@router.post("/place", response_model=PlaceOrderResult, status_code=201)
async def place_order(
    body: PlaceOrderRequest,
    session: AsyncSession = Depends(get_session),
    client: PaymentsClient = Depends(get_client),
):
    """
    Place an order with Klarna.

    Provider failures are answered with 502 and the upstream message; the
    failed attempt stays visible in the placement trace.
    """
    order = body.order.to_domain()
    payment_source = KlarnaPaymentSource(
        authorization_token=body.authorization_token,
        payment_method=KlarnaPaymentMethod(
            region=body.region,
            design=body.design,
            skip_personal_data=body.skip_personal_data,
            options=body.options,
        ),
        intent=body.intent,
    )

    try:
        response = await place_order_with_authorization_token(
            order, payment_source, client, session=session, store=body.store(),
        )
    except UnsupportedRegionError as e:
        raise HTTPException(status_code=422, detail=str(e))
    except ProviderError as e:
        raise HTTPException(status_code=502, detail=f"Klarna error ({e.status_code}): {e}")

    result = await session.execute(
        select(OrderPlacement.id).where(OrderPlacement.klarna_order_id == response.order_id)
    )
    return PlaceOrderResult(
        placement_id=result.scalar_one_or_none(),
        order_number=order.number,
        klarna_order_id=response.order_id,
        fraud_status=response.fraud_status,
        redirect_url=response.redirect_url,
    )
