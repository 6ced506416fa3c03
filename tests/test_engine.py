"""Unit tests for the calculation engine."""
import pytest
from src.calculator.engine import CalculationResults, evaluate, calculate
from src.calculator.input_parser import CalculationInputs, MarketQuotes
from src.strategy.panic_strategy import Signal


@pytest.fixture
def full_inputs():
    """Create a fully populated set of raw inputs."""
    return CalculationInputs(
        nifty_close="25542",
        ce_premium="150",
        pe_premium="90",
        rn_ce_premium="210.5",
        rn_pe_premium="185.25",
        entry_price="100"
    )


class TestCalculate:
    """Tests for full recomputation from raw inputs."""

    def test_end_to_end(self, full_inputs):
        """Test every output from a complete input set."""
        results = calculate(full_inputs)

        assert results.round_number == 25500
        assert results.ce_strike == 25600
        assert results.pe_strike == 25400
        assert results.panic_price == 120.0
        assert results.signal == Signal.GAP_UP
        assert results.stop_loss == pytest.approx(70.0)
        assert results.target == pytest.approx(160.0)

    def test_gap_entries_pass_through(self, full_inputs):
        """Test the RN PE close is the gap-up entry and the RN CE close the gap-down entry."""
        results = calculate(full_inputs)

        assert results.gap_up_entry == 185.25
        assert results.gap_down_entry == 210.5

    def test_missing_inputs(self):
        """Test absent inputs suppress their dependants."""
        results = calculate(CalculationInputs(ce_premium="150"))

        assert results.round_number is None
        assert results.ce_strike is None
        assert results.pe_strike is None
        assert results.panic_price is None
        assert results.signal == Signal.IDLE
        assert results.stop_loss is None
        assert results.target is None

    def test_invalid_text_is_not_zero(self):
        """Test unparsable text never becomes a zero value."""
        results = calculate(CalculationInputs(nifty_close="abc", entry_price="n/a"))

        assert results.round_number is None
        assert results.stop_loss is None
        assert results.is_empty()

    def test_only_entry_price(self):
        """Test trade management works without market data."""
        results = calculate(CalculationInputs(entry_price="200"))

        assert results.stop_loss == pytest.approx(140.0)
        assert results.target == pytest.approx(320.0)
        assert results.panic_price is None

    def test_empty_inputs(self):
        """Test blank inputs give empty results."""
        assert calculate(CalculationInputs()) == CalculationResults()


class TestEvaluateSignal:
    """Tests for the signal from parsed quotes."""

    def test_gap_down(self):
        """Test PE premium above the panic price."""
        results = evaluate(MarketQuotes(ce_premium=80.0, pe_premium=120.0))

        assert results.panic_price == 100.0
        assert results.signal == Signal.GAP_DOWN

    def test_equal_premiums_idle(self):
        """Test equal premiums give no signal."""
        results = evaluate(MarketQuotes(ce_premium=100.0, pe_premium=100.0))

        assert results.signal == Signal.IDLE

    def test_ce_120_pe_130_is_gap_down(self):
        """Test CE 120 and PE 130 sit on either side of their 125 midpoint."""
        results = evaluate(MarketQuotes(ce_premium=120.0, pe_premium=130.0))

        assert results.panic_price == 125.0
        assert results.signal == Signal.GAP_DOWN


class TestCalculationResults:
    """Tests for the results record."""

    def test_to_dict(self, full_inputs):
        """Test conversion to a JSON-friendly dictionary."""
        data = calculate(full_inputs).to_dict()

        assert data['signal'] == 'gap-up'
        assert data['round_number'] == 25500
        assert set(data) == {
            'round_number', 'ce_strike', 'pe_strike', 'panic_price',
            'stop_loss', 'target', 'gap_up_entry', 'gap_down_entry', 'signal'
        }

    def test_to_dict_absent_values(self):
        """Test absent values map to None."""
        data = CalculationResults().to_dict()

        assert data['panic_price'] is None
        assert data['signal'] == 'idle'

    def test_is_empty(self, full_inputs):
        """Test emptiness detection."""
        assert CalculationResults().is_empty()
        assert not calculate(full_inputs).is_empty()
        assert not calculate(CalculationInputs(rn_pe_premium="5")).is_empty()
