"""
Place a Klarna order from an authorization token.

Flow:
  1. Serialize the order with the payment method's region and preferences.
  2. Submit the payload through the payments client (transient errors retried).
  3. Store the Klarna order id on the payment source.

When a database session is passed, every attempt is recorded as an
OrderPlacement with audit events. Provider errors are recorded and then
re-raised unchanged; this layer never decides that a failed placement is ok.
"""

import logging
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from klarna_checkout.audit.logger import log_event
from klarna_checkout.engine.retry import ProviderError, with_retry
from klarna_checkout.models.enums import PlacementStatus
from klarna_checkout.models.order import Order, Store
from klarna_checkout.models.payment import KlarnaPaymentSource
from klarna_checkout.models.records import OrderPlacement
from klarna_checkout.providers.base import PaymentsClient, PlaceOrderResponse
from klarna_checkout.serializers.order import OrderSerializer

logger = logging.getLogger("klarna_checkout.place_order")


def build_serializer(
    order: Order,
    payment_source: KlarnaPaymentSource,
    store: Optional[Store] = None,
) -> OrderSerializer:
    method = payment_source.payment_method
    return OrderSerializer(
        order,
        method.region,
        options=dict(method.options),
        design=method.design,
        skip_personal_data=method.skip_personal_data,
        store=store,
        intent=payment_source.intent,
    )


async def place_order_with_authorization_token(
    order: Order,
    payment_source: KlarnaPaymentSource,
    client: PaymentsClient,
    *,
    session: Optional[AsyncSession] = None,
    store: Optional[Store] = None,
    max_retries: Optional[int] = None,
) -> PlaceOrderResponse:
    """
    Serialize the order and place it with Klarna.

    Args:
        order: The order being checked out.
        payment_source: Carries the authorization token and Klarna preferences.
        client: Payments client to submit through.
        session: Optional database session for the placement record and audit trail.
        store: Store the order belongs to; required for merchant URLs.
        max_retries: Overrides the retry count for transient failures.

    Raises:
        ProviderError: Propagated unchanged from the client.
    """
    serializer = build_serializer(order, payment_source, store)
    payload = serializer.to_hash()

    placement = None
    if session is not None:
        placement = OrderPlacement(
            order_number=order.number,
            region=serializer.region,
            currency=order.currency,
            order_amount=payload["order_amount"],
            status=PlacementStatus.PENDING.value,
        )
        session.add(placement)
        await session.flush()
        await log_event(session, "payload_built", placement_id=placement.id, details={
            "order_number": order.number,
            "locale": payload.get("locale"),
            "order_lines": len(payload.get("order_lines", [])),
            "order_amount": payload["order_amount"],
            "order_tax_amount": payload.get("order_tax_amount"),
        })

    retry_kwargs = {} if max_retries is None else {"max_retries": max_retries}

    try:
        response = await with_retry(
            client.place_order,
            payment_source.authorization_token,
            payload,
            **retry_kwargs,
        )
    except ProviderError as e:
        logger.error("Placing order %s with %s failed: %s", order.number, client.name, e)
        if placement is not None:
            placement.status = PlacementStatus.FAILED.value
            placement.error = str(e)
            await log_event(session, "order_failed", placement_id=placement.id, details={
                "error": str(e),
                "status_code": e.status_code,
                "retriable": e.retriable,
            })
            await session.commit()
        raise

    payment_source.order_id = response.order_id
    payment_source.fraud_status = response.fraud_status

    logger.info(
        "Order %s placed with %s: klarna_order_id=%s fraud_status=%s",
        order.number,
        response.provider,
        response.order_id,
        response.fraud_status,
    )

    if placement is not None:
        placement.status = PlacementStatus.PLACED.value
        placement.klarna_order_id = response.order_id
        placement.fraud_status = response.fraud_status
        await log_event(session, "order_placed", placement_id=placement.id, details={
            "klarna_order_id": response.order_id,
            "fraud_status": response.fraud_status,
            "provider": response.provider,
        })
        await session.commit()

    return response
