"""Data models for configuration."""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = 'INFO'
    file_path: str = 'logs/calculator.log'
    console: bool = True  # Mirror log lines to stderr

    def validate(self) -> tuple[bool, Optional[str]]:
        """Validate logging configuration.

        Returns:
            Tuple of (is_valid, error_message)
        """
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if not isinstance(self.level, str) or self.level.upper() not in valid_levels:
            return False, f"Log level must be one of {valid_levels}"
        if not isinstance(self.file_path, str) or not self.file_path.strip():
            return False, "Log file path is required"
        return True, None


@dataclass
class Config:
    """Main configuration for the calculator."""
    logging_config: LoggingConfig = field(default_factory=LoggingConfig)
    instrument: str = 'NIFTY'  # Display label only
    decimal_places: int = 2  # Precision of premium and risk levels in reports
    log_calculations: bool = True  # Log every recomputation at INFO

    def validate(self) -> tuple[bool, Optional[str]]:
        """Validate the entire configuration.

        Returns:
            Tuple of (is_valid, error_message)
        """
        if not isinstance(self.instrument, str) or not self.instrument.strip():
            return False, "Instrument label cannot be empty"

        if isinstance(self.decimal_places, bool) or not isinstance(self.decimal_places, int):
            return False, "Decimal places must be an integer"
        if self.decimal_places < 0 or self.decimal_places > 8:
            return False, "Decimal places must be between 0 and 8"

        is_valid, error = self.logging_config.validate()
        if not is_valid:
            return False, f"Logging config error: {error}"

        return True, None
