"""Client settings with Pydantic validation and optional environment overrides"""
from pathlib import Path
from typing import Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .errors import ConfigError

DEFAULT_HOST = "localhost"
DEFAULT_PORT = 8191
DEFAULT_COMPRESSION_LEVEL = 5

# 200 microseconds; nothing is ever read from the socket
DEFAULT_RECEIVE_TIMEOUT = 0.0002

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ClientSettings(BaseSettings):
    """Immutable aggregator client settings"""

    model_config = SettingsConfigDict(
        env_prefix="AGGREGATOR_",
        case_sensitive=False,
        frozen=True,
    )

    # Aggregator endpoint
    host: str = Field(default=DEFAULT_HOST, description="Aggregator host name or address")
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535, description="Aggregator UDP port")

    # Payload settings
    compression_level: int = Field(
        default=DEFAULT_COMPRESSION_LEVEL, ge=0, le=9,
        description="Gzip level, 0 disables compression"
    )

    # Socket settings
    receive_timeout: float = Field(
        default=DEFAULT_RECEIVE_TIMEOUT, gt=0,
        description="Receive timeout in seconds set on every socket"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    log_file: Optional[Path] = Field(default=None, description="Optional log file")

    @field_validator('host')
    @classmethod
    def validate_host(cls, v):
        if not v or not v.strip():
            raise ValueError("Host is empty")
        return v.strip()

    @field_validator('port', mode='before')
    @classmethod
    def validate_port_present(cls, v):
        if v is None or v == "" or v == 0:
            raise ValueError("Port is empty")
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v):
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of {', '.join(LOG_LEVELS)}")
        return level

    @property
    def address(self):
        """Destination address tuple for sendto()"""
        return (self.host, self.port)


def load_settings(**overrides) -> ClientSettings:
    """Build settings, converting validation failures into ConfigError"""
    try:
        return ClientSettings(**overrides)
    except ValidationError as e:
        messages = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'settings'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigError(f"Invalid aggregator client settings: {messages}") from e
