import json
from pathlib import Path
from typing import Dict, Any

from pydantic_settings import BaseSettings, SettingsConfigDict

from chain_ping.const import (
    CONFIG_FILE_NAME,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_PINGS,
    DEFAULT_TIMEOUT_SEC,
    DEFAULT_USER_AGENT,
    LIBRARY_LOG_LEVELS,
)


class Config(BaseSettings):
    """Global configuration settings for chain-ping."""

    pings: int = DEFAULT_PINGS
    timeout: float = DEFAULT_TIMEOUT_SEC
    output_format: str = DEFAULT_OUTPUT_FORMAT
    concurrent_pings: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    user_agent: str = DEFAULT_USER_AGENT
    library_log_levels: Dict[str, str] = dict(LIBRARY_LOG_LEVELS)

    model_config = SettingsConfigDict(
        env_prefix='CHAIN_PING_',
    )

    @classmethod
    def load_config_from_json(cls) -> Dict[str, Any]:
        """Load configuration from chain_ping.json in the working directory."""
        config_path = Path(CONFIG_FILE_NAME)
        if config_path.exists():
            with open(config_path, 'r') as f:
                return json.load(f)
        return {}

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        """
        Customise the sources for settings.

        Order of precedence (highest to lowest):
        1. Environment variables
        2. Init settings (kwargs passed to constructor)
        3. JSON config file
        4. Default values
        """
        def json_source():
            return cls.load_config_from_json()

        return (
            env_settings,
            init_settings,
            json_source,
        )
