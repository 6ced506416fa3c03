"""Full recomputation of the calculator outputs from the current quotes."""
from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from src.calculator.input_parser import CalculationInputs, MarketQuotes, parse_inputs
from src.strategy.panic_strategy import (
    Signal,
    round_to_nearest_hundred,
    derive_strikes,
    average_premium,
    compute_risk_levels,
    classify_signal,
)


@dataclass(frozen=True)
class CalculationResults:
    """Derived levels; each is None when one of its inputs is missing."""
    round_number: Optional[float] = None
    ce_strike: Optional[float] = None
    pe_strike: Optional[float] = None
    panic_price: Optional[float] = None
    stop_loss: Optional[float] = None
    target: Optional[float] = None
    gap_up_entry: Optional[float] = None
    gap_down_entry: Optional[float] = None
    signal: Signal = Signal.IDLE

    def to_dict(self) -> Dict[str, Any]:
        """Convert results to a JSON-friendly dictionary."""
        data = asdict(self)
        data['signal'] = self.signal.value
        return data

    def is_empty(self) -> bool:
        """Check whether no level could be derived."""
        levels = self.to_dict()
        levels.pop('signal')
        return all(value is None for value in levels.values())


def evaluate(quotes: MarketQuotes) -> CalculationResults:
    """Derive every output from the parsed quotes.

    Args:
        quotes: Parsed market quotes

    Returns:
        CalculationResults for the quotes
    """
    round_number = ce_strike = pe_strike = None
    if quotes.nifty_close is not None:
        round_number = round_to_nearest_hundred(quotes.nifty_close)
        strikes = derive_strikes(round_number)
        ce_strike, pe_strike = strikes.ce, strikes.pe

    panic_price = None
    signal = Signal.IDLE
    if quotes.ce_premium is not None and quotes.pe_premium is not None:
        panic_price = average_premium(quotes.ce_premium, quotes.pe_premium)
        signal = classify_signal(quotes.ce_premium, quotes.pe_premium, panic_price)

    stop_loss = target = None
    if quotes.entry_price is not None:
        levels = compute_risk_levels(quotes.entry_price)
        stop_loss, target = levels.stop_loss, levels.target

    # The RN PE close is the gap-up CE entry and the RN CE close the gap-down PE entry
    return CalculationResults(
        round_number=round_number,
        ce_strike=ce_strike,
        pe_strike=pe_strike,
        panic_price=panic_price,
        stop_loss=stop_loss,
        target=target,
        gap_up_entry=quotes.rn_pe_premium,
        gap_down_entry=quotes.rn_ce_premium,
        signal=signal
    )


def calculate(inputs: CalculationInputs) -> CalculationResults:
    """Parse raw text inputs and derive every output."""
    return evaluate(parse_inputs(inputs))
