"""Shared test fixtures."""

from decimal import Decimal

import pytest
import pytest_asyncio

from klarna_checkout.config import settings
from klarna_checkout.database import build_engine, build_sessionmaker, init_db
from klarna_checkout.models.order import (
    Address,
    Country,
    LineItem,
    Order,
    Shipment,
    ShippingMethod,
    State,
    Store,
)


@pytest_asyncio.fixture
async def db_session():
    """Create a fresh in-memory database for each test."""
    engine = build_engine("sqlite+aiosqlite:///:memory:")
    await init_db(engine)

    async with build_sessionmaker(engine)() as session:
        yield session

    await engine.dispose()


@pytest.fixture(autouse=True)
def default_confirmation_url(monkeypatch):
    """Tests start from the computed confirmation URL unless they configure one."""
    monkeypatch.setattr(settings, "confirmation_url", None)
    monkeypatch.setattr(settings, "url_protocol", "http")


@pytest.fixture
def store():
    return Store(name="Test Store", url="shop.example.com\nwww.shop.example.com")


@pytest.fixture
def us_address():
    return Address(
        first_name="Jane",
        last_name="Doe",
        address1="1 Main St",
        address2="Apt 2",
        city="Springfield",
        zipcode="62701",
        country=Country(iso="US", name="United States"),
        state=State(abbr="IL", name="Illinois"),
        phone="555-0100",
    )


@pytest.fixture
def gb_address():
    return Address(
        first_name="James",
        last_name="Thompson",
        address1="10 Downing Street",
        city="London",
        zipcode="SW1A 2AA",
        country=Country(iso="GB", name="United Kingdom"),
        company="HM Treasury",
    )


@pytest.fixture
def us_order(us_address):
    """R100: two line items and one shipment, 1.00 sales tax, 19.99 total."""
    return Order(
        number="R100",
        email="jane@example.com",
        currency="USD",
        total=Decimal("19.99"),
        line_items=[
            LineItem(sku="TS-1", name="T-Shirt", quantity=2, price=Decimal("5.00")),
            LineItem(
                sku="MUG-1",
                name="Mug",
                quantity=1,
                price=Decimal("4.00"),
                promo_total=Decimal("-1.00"),
                product_url="https://shop.example.com/products/mug",
            ),
        ],
        shipments=[
            Shipment(
                number="H100",
                shipping_method=ShippingMethod(name="UPS Ground"),
                cost=Decimal("5.99"),
                tracking="1Z999",
                tracking_url="https://ups.example.com/1Z999",
            ),
        ],
        billing_address=us_address,
        shipping_address=us_address,
        additional_tax_total=Decimal("1.00"),
    )


@pytest.fixture
def uk_order(gb_address):
    """R200: VAT-inclusive prices at 20%, 24.00 total with a 1.00 order discount."""
    return Order(
        number="R200",
        email="james@example.co.uk",
        currency="GBP",
        total=Decimal("24.00"),
        line_items=[
            LineItem(
                sku="TEA-1",
                name="Tea",
                quantity=2,
                price=Decimal("9.00"),
                included_tax_total=Decimal("3.00"),
                tax_rate=Decimal("0.2"),
            ),
        ],
        shipments=[
            Shipment(
                number="H200",
                shipping_method=ShippingMethod(name="Royal Mail"),
                cost=Decimal("7.00"),
                included_tax_total=Decimal("1.17"),
                tax_rate=Decimal("0.2"),
            ),
        ],
        billing_address=gb_address,
        shipping_address=gb_address,
        included_tax_total=Decimal("4.17"),
        order_promo_total=Decimal("-1.00"),
    )
