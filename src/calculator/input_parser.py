"""Parsing of raw text quotes into numbers."""
import math
import re
from dataclasses import dataclass, fields
from typing import Optional


INPUT_FIELDS = (
    'nifty_close',
    'ce_premium',
    'pe_premium',
    'rn_ce_premium',
    'rn_pe_premium',
    'entry_price',
)

FIELD_LABELS = {
    'nifty_close': 'Yesterday Nifty Close',
    'ce_premium': 'OTM CE Close Premium',
    'pe_premium': 'OTM PE Close Premium',
    'rn_ce_premium': 'RN CE Close → Gap Down PE Entry',
    'rn_pe_premium': 'RN PE Close → Gap Up CE Entry',
    'entry_price': 'Your Entry Price',
}

_DIGITS = r"\d(?:_?\d)*"

# Integer part: Western (25,542) or Indian (1,00,000) comma groups, or digits
# with single underscores between them
_INTEGER = (
    r"(?:\d{1,3}(?:,\d{3})+"
    r"|\d{1,2}(?:,\d{2})+,\d{3}"
    r"|" + _DIGITS + r")"
)

_NUMBER_PATTERN = re.compile(
    r"^[+-]?(?:" + _INTEGER + r"(?:\.(?:" + _DIGITS + r")?)?"
    r"|\.(?:" + _DIGITS + r"))"
    r"(?:[eE][+-]?\d+)?$"
)


@dataclass(frozen=True)
class CalculationInputs:
    """Raw text of the six calculator fields, as typed by the user."""
    nifty_close: str = ''
    ce_premium: str = ''
    pe_premium: str = ''
    rn_ce_premium: str = ''
    rn_pe_premium: str = ''
    entry_price: str = ''


@dataclass(frozen=True)
class MarketQuotes:
    """Parsed quotes; None marks a field that is empty or not a number."""
    nifty_close: Optional[float] = None
    ce_premium: Optional[float] = None
    pe_premium: Optional[float] = None
    rn_ce_premium: Optional[float] = None
    rn_pe_premium: Optional[float] = None
    entry_price: Optional[float] = None


def parse_quote(text: Optional[str]) -> Optional[float]:
    """Parse a single quote.

    Surrounding whitespace is ignored, as is well-formed digit grouping:
    Western (``25,542``), Indian (``1,00,000``) or single underscores
    (``25_542``). Stray or misplaced separators such as ``1,5`` make the
    text unparsable. Empty text, anything that is not a plain decimal
    number, and NaN or infinite values all come back as None.

    Args:
        text: Raw field text

    Returns:
        Parsed value, or None when the text is not a usable number
    """
    if text is None:
        return None

    cleaned = text.strip()
    if not _NUMBER_PATTERN.match(cleaned):
        return None

    value = float(cleaned.replace(',', '').replace('_', ''))
    if math.isnan(value) or math.isinf(value):
        return None
    return value


def parse_inputs(inputs: CalculationInputs) -> MarketQuotes:
    """Parse every field of the raw inputs."""
    return MarketQuotes(**{
        field.name: parse_quote(getattr(inputs, field.name))
        for field in fields(CalculationInputs)
    })
