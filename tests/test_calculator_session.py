"""Unit tests for CalculatorSession."""
import os
import tempfile
from unittest.mock import Mock

import pytest
from src.calculator.engine import CalculationResults
from src.calculator.input_parser import CalculationInputs
from src.calculator.session import CalculatorSession
from src.config.models import LoggingConfig
from src.logging.calculator_logger import CalculatorLogger
from src.strategy.panic_strategy import Signal


@pytest.fixture
def session():
    """Create a session without a logger."""
    return CalculatorSession()


@pytest.fixture
def populated_session(session):
    """Create a session with every field filled in."""
    session.update(
        nifty_close="25542",
        ce_premium="150",
        pe_premium="90",
        rn_ce_premium="210",
        rn_pe_premium="185",
        entry_price="100"
    )
    return session


class TestCalculatorSession:
    """Test cases for CalculatorSession."""

    def test_initial_state(self, session):
        """Test a new session is empty and idle."""
        assert session.inputs == CalculationInputs()
        assert session.results == CalculationResults()
        assert session.signal == Signal.IDLE

    def test_set_input_recomputes(self, session):
        """Test a single field change recomputes outputs."""
        results = session.set_input('nifty_close', '25542')

        assert results.round_number == 25500
        assert session.results is results

    def test_recompute_uses_full_input_set(self, session):
        """Test later changes keep earlier inputs."""
        session.set_input('ce_premium', '150')
        assert session.results.panic_price is None

        session.set_input('pe_premium', '90')

        assert session.results.panic_price == 120.0
        assert session.signal == Signal.GAP_UP

    def test_signal_has_no_memory(self, populated_session):
        """Test the signal follows only the current premiums."""
        assert populated_session.signal == Signal.GAP_UP

        populated_session.update(ce_premium="80", pe_premium="120")
        assert populated_session.signal == Signal.GAP_DOWN

        populated_session.set_input('pe_premium', '')
        assert populated_session.signal == Signal.IDLE

    def test_invalidating_a_field_clears_dependants(self, populated_session):
        """Test an invalid edit turns derived values absent."""
        results = populated_session.set_input('nifty_close', 'oops')

        assert results.round_number is None
        assert results.ce_strike is None
        assert results.pe_strike is None
        assert results.panic_price == 120.0

    def test_none_clears_field(self, populated_session):
        """Test None is stored as empty text."""
        populated_session.set_input('entry_price', None)

        assert populated_session.inputs.entry_price == ''
        assert populated_session.results.stop_loss is None

    def test_reset(self, populated_session):
        """Test reset clears inputs, outputs and signal."""
        results = populated_session.reset()

        assert populated_session.inputs == CalculationInputs()
        assert results.is_empty()
        assert results.signal == Signal.IDLE
        for value in results.to_dict().values():
            assert value in (None, 'idle')

    def test_unknown_field(self, session):
        """Test unknown field names are rejected."""
        with pytest.raises(ValueError, match="Unknown input field"):
            session.set_input('vix', '14')

        with pytest.raises(ValueError, match="strike"):
            session.update(nifty_close="25542", strike="25500")

        # Rejected updates leave the session untouched
        assert session.inputs == CalculationInputs()


class TestCalculatorSessionLogging:
    """Tests for session logging."""

    def test_logs_calculation(self):
        """Test a non-empty recomputation is logged."""
        logger = Mock()
        session = CalculatorSession(logger=logger)

        session.set_input('entry_price', '100')

        logger.log_calculation.assert_called_once()
        logged = logger.log_calculation.call_args[0][0]
        assert logged['stop_loss'] == pytest.approx(70.0)

    def test_calculation_logging_disabled(self):
        """Test log_calculations=False skips calculation logs."""
        logger = Mock()
        session = CalculatorSession(logger=logger, log_calculations=False)

        session.set_input('entry_price', '100')

        logger.log_calculation.assert_not_called()
        logger.log_debug.assert_called_once()

    def test_unparsable_input_warned(self):
        """Test malformed text is logged as a warning and left absent."""
        logger = Mock()
        session = CalculatorSession(logger=logger)

        results = session.update(ce_premium="1,5", pe_premium="90", entry_price="")

        logger.log_warning.assert_called_once_with(
            "Ignoring unparsable input",
            {"field": "ce_premium", "value": "'1,5'"}
        )
        assert results.panic_price is None

    def test_reset_logged(self):
        """Test reset is logged and empty results are not."""
        logger = Mock()
        session = CalculatorSession(logger=logger)

        session.reset()

        logger.log_info.assert_called_once_with("Calculator reset")
        logger.log_calculation.assert_not_called()

    def test_writes_log_file(self):
        """Test calculations reach the log file."""
        with tempfile.TemporaryDirectory() as temp_dir:
            log_path = os.path.join(temp_dir, "session.log")
            logger = CalculatorLogger(LoggingConfig(level="INFO", file_path=log_path, console=False))
            session = CalculatorSession(logger=logger)

            session.update(ce_premium="150", pe_premium="90")

            with open(log_path, 'r') as f:
                content = f.read()
                assert "Calculation complete" in content
                assert "Signal=gap-up" in content
                assert "Panic=120.00" in content
