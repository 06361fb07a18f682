"""Configuration management for payment instruction processing."""

import json
import os
import yaml
from typing import Dict, Any, Optional
import logging

from ..models.core import ProcessorConfig
from .clock import validate_timezone


logger = logging.getLogger(__name__)


VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


class ConfigManager:
    """Manages loading and validation of processor configuration"""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager

        Args:
            config_path: Path to configuration file. If None, searches for default locations.
        """
        self.config_path = config_path
        self._config_cache: Optional[ProcessorConfig] = None

    def load_config(self, force_reload: bool = False) -> ProcessorConfig:
        """Load processor configuration from file or return default

        Args:
            force_reload: Force reload from file even if cached

        Returns:
            ProcessorConfig instance with loaded or default configuration
        """
        if self._config_cache is not None and not force_reload:
            return self._config_cache

        config_data = self._load_config_file()
        defaults = ProcessorConfig()

        self._config_cache = ProcessorConfig(
            timezone=config_data.get('timezone', defaults.timezone),
            log_directory=config_data.get('log_directory', defaults.log_directory),
            log_level=config_data.get('log_level', defaults.log_level).upper(),
            enable_console_logging=config_data.get('enable_console_logging', defaults.enable_console_logging),
            api_host=config_data.get('api_host', defaults.api_host),
            api_port=config_data.get('api_port', defaults.api_port),
        )
        logger.info(f"Configuration loaded successfully from {self.config_path or 'defaults'}")
        return self._config_cache

    def _load_config_file(self) -> Dict[str, Any]:
        """Load configuration from file

        Returns:
            Dictionary with configuration data or empty dict if no usable file found
        """
        config_file = self._find_config_file()

        if not config_file or not os.path.exists(config_file):
            logger.info("No configuration file found, using defaults")
            return {}

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                if config_file.endswith('.json'):
                    data = json.load(f)
                elif config_file.endswith(('.yml', '.yaml')):
                    data = yaml.safe_load(f)
                else:
                    logger.warning(f"Unsupported config file format: {config_file}")
                    return {}
        except (OSError, ValueError, yaml.YAMLError) as e:
            logger.error(f"Error reading configuration file {config_file}: {e}")
            return {}

        try:
            self._validate_config_data(data)
        except ValueError as e:
            logger.warning(f"Invalid configuration in {config_file}: {e}. Using defaults.")
            return {}

        logger.info(f"Configuration loaded from {config_file}")
        return data

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in standard locations

        Returns:
            Path to configuration file or None if not found
        """
        if self.config_path:
            return self.config_path

        search_paths = [
            'payment_config.json',
            'payment_config.yml',
            'payment_config.yaml',
            'config/payment_config.json',
            'config/payment_config.yml',
            'config/payment_config.yaml',
            os.path.expanduser('~/.payment_instructions/config.json'),
            os.path.expanduser('~/.payment_instructions/config.yml'),
        ]

        for path in search_paths:
            if os.path.exists(path):
                return path

        return None

    def _validate_config_data(self, data: Dict[str, Any]) -> None:
        """Validate configuration data structure

        Args:
            data: Configuration data to validate

        Raises:
            ValueError: If configuration data is invalid
        """
        if not isinstance(data, dict):
            raise ValueError("Configuration must be a dictionary")

        if 'timezone' in data:
            validate_timezone(data['timezone'])

        if 'log_directory' in data and data['log_directory'] is not None:
            if not isinstance(data['log_directory'], str) or not data['log_directory'].strip():
                raise ValueError("log_directory must be a non-empty string or null")

        if 'log_level' in data:
            if not isinstance(data['log_level'], str) or data['log_level'].upper() not in VALID_LOG_LEVELS:
                raise ValueError(f"log_level must be one of {', '.join(VALID_LOG_LEVELS)}")

        if 'enable_console_logging' in data and not isinstance(data['enable_console_logging'], bool):
            raise ValueError("enable_console_logging must be a boolean")

        if 'api_host' in data:
            if not isinstance(data['api_host'], str) or not data['api_host'].strip():
                raise ValueError("api_host must be a non-empty string")

        if 'api_port' in data:
            port = data['api_port']
            if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
                raise ValueError("api_port must be an integer between 1 and 65535")

    def save_config_template(self, output_path: str) -> None:
        """Generate and save a configuration file template

        Args:
            output_path: Path where to save the template
        """
        template = {
            "timezone": "UTC",
            "log_directory": "logs",
            "log_level": "INFO",
            "enable_console_logging": True,
            "api_host": "127.0.0.1",
            "api_port": 8000
        }

        try:
            output_dir = os.path.dirname(output_path)
            if output_dir:
                os.makedirs(output_dir, exist_ok=True)

            with open(output_path, 'w', encoding='utf-8') as f:
                if output_path.endswith(('.yml', '.yaml')):
                    yaml.dump(template, f, default_flow_style=False, indent=2)
                else:
                    json.dump(template, f, indent=2)

            logger.info(f"Configuration template saved to {output_path}")

        except OSError as e:
            logger.error(f"Error saving configuration template: {e}")
            raise

