"""Calculator logger with structured context and rotating log files."""
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from src.config.models import LoggingConfig


class CalculatorLogger:
    """Logger for the panic calculator with key=value context formatting."""

    LOGGER_NAME = 'PanicCalculator'

    def __init__(self, config: LoggingConfig):
        """Initialize the calculator logger.

        Args:
            config: Logging configuration
        """
        self.config = config
        level = getattr(logging, config.level.upper())
        self.logger = logging.getLogger(self.LOGGER_NAME)
        self.logger.setLevel(level)

        # Remove existing handlers to avoid duplicates
        for handler in list(self.logger.handlers):
            handler.close()
        self.logger.handlers.clear()

        formatter = logging.Formatter(
            '[%(asctime)s] [%(levelname)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        log_path = Path(config.file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            config.file_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        self.logger.addHandler(file_handler)

        if config.console:
            console_handler = logging.StreamHandler()
            console_handler.setLevel(level)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

    def _format_context(self, context: Optional[Dict[str, Any]]) -> str:
        """Format context dictionary for logging.

        Args:
            context: Context dictionary

        Returns:
            Formatted context string
        """
        if not context:
            return ""

        context_parts = [f"{key}={value}" for key, value in context.items()]
        return " | " + " | ".join(context_parts)

    def log_info(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Log an info message.

        Args:
            message: Log message
            context: Optional context dictionary for structured data
        """
        self.logger.info(f"{message}{self._format_context(context)}")

    def log_warning(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Log a warning message."""
        self.logger.warning(f"{message}{self._format_context(context)}")

    def log_debug(self, message: str, context: Optional[Dict[str, Any]] = None):
        """Log a debug message."""
        self.logger.debug(f"{message}{self._format_context(context)}")

    def log_error(self, message: str, error: Optional[Exception] = None,
                  context: Optional[Dict[str, Any]] = None):
        """Log an error message.

        Args:
            message: Log message
            error: Optional exception object
            context: Optional context dictionary for structured data
        """
        context_str = self._format_context(context)

        if error:
            error_info = f" | Error: {type(error).__name__}: {str(error)}"
            self.logger.error(f"{message}{context_str}{error_info}", exc_info=True)
        else:
            self.logger.error(f"{message}{context_str}")

    def log_calculation(self, results: Dict[str, Any]):
        """Log a completed calculation.

        Args:
            results: Dictionary from CalculationResults.to_dict() with keys:
                - round_number, ce_strike, pe_strike: Strike levels
                - panic_price: Panic threshold
                - gap_up_entry, gap_down_entry: Gap entry prices
                - stop_loss, target: Trade management levels
                - signal: Signal value
        """
        def fmt(key: str) -> str:
            value = results.get(key)
            return 'N/A' if value is None else f"{value:.2f}"

        message = (
            f"Calculation complete | "
            f"Signal={results.get('signal', 'idle')} | "
            f"RN={fmt('round_number')} | "
            f"CE Strike={fmt('ce_strike')} | "
            f"PE Strike={fmt('pe_strike')} | "
            f"Panic={fmt('panic_price')}"
        )

        if results.get('gap_up_entry') is not None:
            message += f" | Gap Up Entry={fmt('gap_up_entry')}"
        if results.get('gap_down_entry') is not None:
            message += f" | Gap Down Entry={fmt('gap_down_entry')}"
        if results.get('stop_loss') is not None:
            message += f" | Stop Loss={fmt('stop_loss')} | Target={fmt('target')}"

        self.log_info(message)
