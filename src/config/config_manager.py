"""Configuration manager for loading and validating configuration."""
import json
import os
import re
from .models import Config, LoggingConfig


class ConfigManager:
    """Manages loading and validation of configuration."""

    def __init__(self):
        """Initialize the ConfigManager."""
        self._config: Config = None

    def load_config(self, config_path: str) -> Config:
        """Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
            json.JSONDecodeError: If JSON is malformed
        """
        if not os.path.exists(config_path):
            raise FileNotFoundError(
                f"Configuration file not found: {config_path}\n"
                f"Please create a configuration file at this location."
            )

        try:
            with open(config_path, 'r') as f:
                config_data = json.load(f)
        except json.JSONDecodeError as e:
            raise json.JSONDecodeError(
                f"Invalid JSON format in configuration file: {e.msg}",
                e.doc,
                e.pos
            )

        if not isinstance(config_data, dict):
            raise ValueError("Configuration file must contain a JSON object")

        # Substitute environment variables
        config_data = self._substitute_env_vars(config_data)

        logging_data = config_data.get('logging', {})
        display_data = config_data.get('display', {})

        try:
            logging_config = LoggingConfig(
                level=logging_data.get('level', 'INFO'),
                file_path=logging_data.get('file_path', 'logs/calculator.log'),
                console=self._to_bool(logging_data.get('console', True))
            )
            config = Config(
                logging_config=logging_config,
                instrument=config_data.get('instrument', 'NIFTY'),
                decimal_places=int(display_data.get('decimal_places', 2)),
                log_calculations=self._to_bool(config_data.get('log_calculations', True))
            )
        except (ValueError, TypeError, AttributeError) as e:
            raise ValueError(
                f"Invalid configuration value type: {e}\n"
                f"Please check that numeric values are numbers and other values are correct types."
            )

        self.validate_config(config)

        self._config = config
        return config

    def default_config(self) -> Config:
        """Use the built-in defaults instead of a configuration file.

        Returns:
            Config object with default values
        """
        self._config = Config()
        return self._config

    def _substitute_env_vars(self, data):
        """Recursively substitute environment variables in configuration data.

        Environment variables should be in the format ${VAR_NAME}.

        Args:
            data: Configuration data (dict, list, or string)

        Returns:
            Data with environment variables substituted
        """
        if isinstance(data, dict):
            return {key: self._substitute_env_vars(value) for key, value in data.items()}
        elif isinstance(data, list):
            return [self._substitute_env_vars(item) for item in data]
        elif isinstance(data, str):
            pattern = r'\$\{([^}]+)\}'
            matches = re.findall(pattern, data)
            result = data
            for var_name in matches:
                env_value = os.environ.get(var_name, '')
                result = result.replace(f'${{{var_name}}}', env_value)
            return result
        else:
            return data

    @staticmethod
    def _to_bool(value) -> bool:
        """Interpret booleans that may arrive as text after env substitution."""
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized in ('true', '1', 'yes', 'on'):
                return True
            if normalized in ('false', '0', 'no', 'off', ''):
                return False
            raise ValueError(f"Cannot interpret '{value}' as a boolean")
        return bool(value)

    def validate_config(self, config: Config) -> bool:
        """Validate the configuration.

        Args:
            config: Config object to validate

        Returns:
            True if valid

        Raises:
            ValueError: If validation fails with error message
        """
        is_valid, error_message = config.validate()
        if not is_valid:
            raise ValueError(f"Configuration validation error: {error_message}")
        return True

    def get_instrument(self) -> str:
        """Get the instrument label shown in reports.

        Returns:
            Instrument label
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load_config first.")
        return self._config.instrument

    def get_decimal_places(self) -> int:
        """Get the report precision for premiums and risk levels.

        Returns:
            Number of decimal places
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load_config first.")
        return self._config.decimal_places

    def get_log_calculations(self) -> bool:
        """Get whether every recomputation is logged.

        Returns:
            True if calculations are logged at INFO
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load_config first.")
        return self._config.log_calculations

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration.

        Returns:
            LoggingConfig object
        """
        if self._config is None:
            raise RuntimeError("Configuration not loaded. Call load_config first.")
        return self._config.logging_config
