"""Panic strategy calculations for NIFTY weekly options."""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum


ROUND_STEP = 100
STRIKE_OFFSET = 100
STOP_LOSS_MULTIPLIER = 0.7  # -30%
TARGET_MULTIPLIER = 1.6  # +60%


class Signal(str, Enum):
    """Gap direction suggested by the closing premiums."""
    IDLE = "idle"
    GAP_UP = "gap-up"
    GAP_DOWN = "gap-down"


@dataclass(frozen=True)
class StrikePair:
    """OTM call and put strikes around the round number."""
    ce: float
    pe: float


@dataclass(frozen=True)
class RiskLevels:
    """Stop loss and target for an entered position."""
    stop_loss: float
    target: float


def round_to_nearest_hundred(value: float) -> float:
    """Round a price to the nearest hundred.

    Ties are rounded half away from zero, so 150 becomes 200 and -150
    becomes -200. The division is done in decimal on the shortest repr of
    the float, which keeps exact half-hundreds on the tie.

    Args:
        value: Index closing price

    Returns:
        Round number (RN)
    """
    quotient = Decimal(repr(float(value))) / ROUND_STEP
    return float(quotient.to_integral_value(rounding=ROUND_HALF_UP) * ROUND_STEP)


def derive_strikes(round_number: float) -> StrikePair:
    """Calculate the OTM CE and PE strikes from the round number.

    Args:
        round_number: Round number from round_to_nearest_hundred

    Returns:
        StrikePair with ce = RN + 100 and pe = RN - 100
    """
    return StrikePair(
        ce=round_number + STRIKE_OFFSET,
        pe=round_number - STRIKE_OFFSET
    )


def average_premium(ce_premium: float, pe_premium: float) -> float:
    """Calculate the panic price, the midpoint of the two OTM premiums."""
    return (ce_premium + pe_premium) / 2


def compute_risk_levels(entry_price: float) -> RiskLevels:
    """Calculate stop loss (-30%) and target (+60%) for an entry price.

    Args:
        entry_price: Price at which the position was entered

    Returns:
        RiskLevels for the entry
    """
    return RiskLevels(
        stop_loss=entry_price * STOP_LOSS_MULTIPLIER,
        target=entry_price * TARGET_MULTIPLIER
    )


def classify_signal(ce_premium: float, pe_premium: float, panic_price: float) -> Signal:
    """Classify the gap signal from the premiums and the panic price.

    A CE premium above the panic price with the PE premium below it points
    to a gap up; the mirror image points to a gap down. Anything else,
    including both premiums on the same side, is idle.

    Args:
        ce_premium: OTM CE closing premium
        pe_premium: OTM PE closing premium
        panic_price: Midpoint of the two premiums

    Returns:
        Signal for the next session
    """
    if ce_premium > panic_price and pe_premium < panic_price:
        return Signal.GAP_UP
    if pe_premium > panic_price and ce_premium < panic_price:
        return Signal.GAP_DOWN
    return Signal.IDLE
