"""Settings - runtime configuration read from the environment.

Values come from process environment variables, after any `.env` file in the
working directory has been loaded with python-dotenv. Existing environment
variables win over `.env` entries.

Variables:
    WALLET_LOG_DIR       Directory for terminal log files (default: logs/src)
    WALLET_LOG_LEVEL     Logging level name (default: INFO)
    WALLET_API_URL       Base URL used by WalletClient (default: http://localhost:8000)
    WALLET_HTTP_TIMEOUT  HTTP timeout in seconds (default: 30)
"""

import os
from typing import Mapping, Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    """Runtime settings.

    Attributes:
        log_dir (str): Directory the terminal writes its log files to
        log_level (str): Logging level name
        api_url (str): Base URL of a running wallet tracker API
        http_timeout (float): Timeout for HTTP requests, in seconds
    """

    log_dir: str = Field(default="logs/src", description="Log file directory")
    log_level: str = Field(default="INFO", description="Logging level name")
    api_url: str = Field(default="http://localhost:8000", description="API base URL")
    http_timeout: float = Field(default=30, gt=0, description="HTTP timeout in seconds")

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if value not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return value


_ENV_FIELDS = {
    "WALLET_LOG_DIR": "log_dir",
    "WALLET_LOG_LEVEL": "log_level",
    "WALLET_API_URL": "api_url",
    "WALLET_HTTP_TIMEOUT": "http_timeout",
}


def load_settings(environ: Optional[Mapping[str, str]] = None,
                  dotenv: bool = True) -> Settings:
    """Build Settings from the environment.

    Args:
        environ: Mapping to read instead of os.environ (tests pass a dict)
        dotenv: Load a `.env` file into os.environ first. Ignored when
            `environ` is given.

    Returns:
        Settings: Parsed settings

    Raises:
        pydantic.ValidationError: If a variable holds an invalid value
    """
    if environ is None:
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        environ = os.environ

    values = {
        field: environ[var]
        for var, field in _ENV_FIELDS.items()
        if environ.get(var)
    }
    return Settings(**values)
