"""Address block serialization."""

from typing import Any

from klarna_checkout.models.order import Address


class AddressSerializer:
    def __init__(self, address: Address):
        self.address = address

    def to_hash(self) -> dict[str, Any]:
        address = self.address
        state = address.state
        return {
            "organization_name": address.company,
            "given_name": address.first_name,
            "family_name": address.last_name,
            "street_address": address.address1,
            "street_address2": address.address2,
            "postal_code": address.zipcode,
            "city": address.city,
            "region": (state.abbr or state.name) if state else None,
            "phone": address.phone,
            "country": address.country.iso if address.country else None,
        }
