"""Calculator input parsing, recomputation and reporting."""
from .input_parser import CalculationInputs, MarketQuotes, parse_quote, parse_inputs
from .engine import CalculationResults, evaluate, calculate
from .session import CalculatorSession

__all__ = [
    'CalculationInputs',
    'MarketQuotes',
    'parse_quote',
    'parse_inputs',
    'CalculationResults',
    'evaluate',
    'calculate',
    'CalculatorSession',
]
