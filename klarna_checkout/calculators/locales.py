"""
Market configuration for VAT-inclusive regions.

Maps the lower-case region token a payment method is configured with to the
Klarna locale and the ISO 3166-1 alpha-2 purchase country used when the order
has no address to take the country from. Tokens missing from the table fall
back to the UK defaults.
"""

from typing import TypedDict


class MarketConfig(TypedDict):
    locale: str  # RFC 1766 locale Klarna renders the widget in
    country: str  # ISO 3166-1 alpha-2


DEFAULT_MARKET: MarketConfig = {"locale": "en-GB", "country": "GB"}

MARKETS: dict[str, MarketConfig] = {
    "us": {"locale": "en-US", "country": "US"},
    # ─── United Kingdom ────────────────────────────────────────────────
    "uk": {"locale": "en-GB", "country": "GB"},
    "gb": {"locale": "en-GB", "country": "GB"},
    # ─── DACH ──────────────────────────────────────────────────────────
    "de": {"locale": "de-DE", "country": "DE"},
    "at": {"locale": "de-AT", "country": "AT"},
    "ch": {"locale": "de-CH", "country": "CH"},
    # ─── Nordics ───────────────────────────────────────────────────────
    "se": {"locale": "sv-SE", "country": "SE"},
    "no": {"locale": "nb-NO", "country": "NO"},
    "fi": {"locale": "fi-FI", "country": "FI"},
    "dk": {"locale": "da-DK", "country": "DK"},
    # ─── Benelux ───────────────────────────────────────────────────────
    "nl": {"locale": "nl-NL", "country": "NL"},
    "be": {"locale": "nl-BE", "country": "BE"},
}


def market_for(region: str) -> MarketConfig:
    return MARKETS.get((region or "").strip().lower(), DEFAULT_MARKET)
