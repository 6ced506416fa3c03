"""Strategy calculation module."""
from .panic_strategy import (
    Signal,
    StrikePair,
    RiskLevels,
    round_to_nearest_hundred,
    derive_strikes,
    average_premium,
    compute_risk_levels,
    classify_signal,
)

__all__ = [
    'Signal',
    'StrikePair',
    'RiskLevels',
    'round_to_nearest_hundred',
    'derive_strikes',
    'average_premium',
    'compute_risk_levels',
    'classify_signal',
]
