"""Text rendering of calculator results."""
from typing import List, Optional

from src.calculator.engine import CalculationResults
from src.calculator.input_parser import CalculationInputs, FIELD_LABELS
from src.strategy.panic_strategy import Signal


ABSENT = '—'

SIGNAL_MESSAGES = {
    Signal.GAP_UP: '📈 GAP UP DETECTED → Trade CE Option',
    Signal.GAP_DOWN: '📉 GAP DOWN DETECTED → Trade PE Option',
    Signal.IDLE: '⌛ Enter data to generate signal...',
}


def format_level(value: Optional[float], decimal_places: int = 2) -> str:
    """Format a premium or risk level, or the absent marker."""
    if value is None:
        return ABSENT
    return f"{value:.{decimal_places}f}"


def format_strike(value: Optional[float]) -> str:
    """Format a round number or strike, dropping a zero fraction."""
    if value is None:
        return ABSENT
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def signal_message(signal: Signal) -> str:
    return SIGNAL_MESSAGES[Signal(signal)]


def _section(title: str) -> List[str]:
    return ["", f"🔹 {title}", "─" * 50]


def render_report(inputs: CalculationInputs, results: CalculationResults,
                  instrument: str = 'NIFTY', decimal_places: int = 2) -> str:
    """Render inputs and results as a sectioned text report.

    Args:
        inputs: Raw inputs as entered
        results: Results derived from the inputs
        instrument: Instrument label for the header
        decimal_places: Precision for premiums and risk levels

    Returns:
        Multi-line report
    """
    def raw(field: str) -> str:
        text = getattr(inputs, field).strip()
        return text if text else ABSENT

    def level(value: Optional[float]) -> str:
        return format_level(value, decimal_places)

    lines = [
        "╔" + "═" * 48 + "╗",
        "║" + f"{instrument.upper()} OPTIONS · PANIC STRATEGY".center(48) + "║",
        "╚" + "═" * 48 + "╝",
    ]

    lines += _section("MARKET DATA")
    lines.append(f"  {FIELD_LABELS['nifty_close']:<34} {raw('nifty_close')}")
    lines.append(f"  {'Round Number (RN)':<34} {format_strike(results.round_number)}")
    lines.append(f"  {'OTM CE ▲ (RN + 100)':<34} {format_strike(results.ce_strike)}")
    lines.append(f"  {'OTM PE ▼ (RN − 100)':<34} {format_strike(results.pe_strike)}")

    lines += _section("PREMIUM DATA")
    for field in ('ce_premium', 'pe_premium', 'rn_ce_premium', 'rn_pe_premium'):
        lines.append(f"  {FIELD_LABELS[field]:<34} {raw(field)}")

    lines += _section("PANIC THRESHOLD")
    lines.append(f"  {'Panic Price (CE+PE)÷2':<34} {level(results.panic_price)}")

    lines += _section("LIVE SIGNAL")
    lines.append(f"  {signal_message(results.signal)}")
    lines.append(f"  {'GAP UP → CE entry':<34} {level(results.gap_up_entry)}")
    lines.append(f"  {'GAP DOWN → PE entry':<34} {level(results.gap_down_entry)}")

    lines += _section("TRADE MANAGEMENT")
    lines.append(f"  {FIELD_LABELS['entry_price']:<34} {raw('entry_price')}")
    lines.append(f"  {'Stop Loss (−30%)':<34} {level(results.stop_loss)}")
    lines.append(f"  {'Target (+60%)':<34} {level(results.target)}")

    return "\n".join(lines)
