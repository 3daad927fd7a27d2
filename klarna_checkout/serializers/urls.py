"""
Merchant URL resolution.

Klarna redirects the shopper to the confirmation URL and posts order events to
the notification URL. The confirmation URL is resolved in three tiers:

  1. A literal string configured in settings is used as-is.
  2. A configured callable is invoked with (store, order).
  3. Otherwise the storefront order page on the store's host.
"""

from typing import Any, Optional

from klarna_checkout.config import settings
from klarna_checkout.models.order import Order, Store

_UNSET: Any = object()


def store_host(store: Store) -> str:
    """First configured host of the store; stores may list several, one per line."""
    lines = str(store.url or "").splitlines()
    return lines[0].strip() if lines else ""


def _url(host: str, path: str) -> str:
    if "://" in host:
        return f"{host.rstrip('/')}{path}"
    return f"{settings.url_protocol}://{host.rstrip('/')}{path}"


def order_url(store: Store, order: Order) -> str:
    return _url(store_host(store), f"/orders/{order.number}")


def notification_url(store: Store) -> str:
    return _url(store_host(store), "/klarna/notification")


def confirmation_url(store: Store, order: Order, configured: Optional[Any] = _UNSET) -> str:
    if configured is _UNSET:
        configured = settings.confirmation_url

    if isinstance(configured, str):
        return configured
    if callable(configured):
        return configured(store, order)
    return order_url(store, order)


def merchant_urls(store: Optional[Store], order: Order) -> Optional[dict[str, str]]:
    """Merchant URL block, or None when no store is known."""
    if store is None:
        return None
    return {
        "confirmation": confirmation_url(store, order),
        "notification": notification_url(store),
    }
