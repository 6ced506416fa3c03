"""Calculator session holding the current inputs and their derived outputs."""
from dataclasses import replace
from typing import Optional

from src.calculator.engine import CalculationResults, calculate
from src.calculator.input_parser import CalculationInputs, INPUT_FIELDS, parse_quote
from src.logging.calculator_logger import CalculatorLogger
from src.strategy.panic_strategy import Signal


class CalculatorSession:
    """Keeps the six raw inputs and recomputes every output when one changes.

    Outputs are always derived from the complete current input set; nothing
    from a previous calculation, including the signal, carries over.
    """

    def __init__(self, logger: Optional[CalculatorLogger] = None, log_calculations: bool = True):
        """Initialize the CalculatorSession.

        Args:
            logger: Optional logger for recomputations
            log_calculations: If True, each recomputation is logged at INFO
        """
        self.logger = logger
        self.log_calculations = log_calculations
        self._inputs = CalculationInputs()
        self._results = CalculationResults()

    @property
    def inputs(self) -> CalculationInputs:
        return self._inputs

    @property
    def results(self) -> CalculationResults:
        return self._results

    @property
    def signal(self) -> Signal:
        return self._results.signal

    def set_input(self, field: str, value: Optional[str]) -> CalculationResults:
        """Set the raw text of one field and recompute.

        Args:
            field: Input field name, e.g. 'nifty_close'
            value: Raw text; None clears the field

        Returns:
            Recomputed results

        Raises:
            ValueError: If the field name is unknown
        """
        return self.update(**{field: value})

    def update(self, **values: Optional[str]) -> CalculationResults:
        """Set several fields at once and recompute.

        Raises:
            ValueError: If any field name is unknown
        """
        unknown = [name for name in values if name not in INPUT_FIELDS]
        if unknown:
            raise ValueError(
                f"Unknown input field(s): {', '.join(sorted(unknown))}. "
                f"Valid fields are {list(INPUT_FIELDS)}"
            )

        cleaned = {name: '' if value is None else str(value) for name, value in values.items()}
        self._inputs = replace(self._inputs, **cleaned)

        if self.logger:
            for name, text in cleaned.items():
                if text.strip() and parse_quote(text) is None:
                    self.logger.log_warning(
                        "Ignoring unparsable input",
                        {"field": name, "value": repr(text)}
                    )

        return self._recompute()

    def reset(self) -> CalculationResults:
        """Clear all six inputs; every output becomes absent and the signal idle."""
        self._inputs = CalculationInputs()
        if self.logger:
            self.logger.log_info("Calculator reset")
        return self._recompute()

    def _recompute(self) -> CalculationResults:
        self._results = calculate(self._inputs)

        if self.logger:
            self.logger.log_debug(
                "Inputs recomputed",
                {name: repr(getattr(self._inputs, name)) for name in INPUT_FIELDS}
            )
            if self.log_calculations and not self._results.is_empty():
                self.logger.log_calculation(self._results.to_dict())

        return self._results
