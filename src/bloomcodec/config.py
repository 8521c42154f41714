"""Runtime configuration for bloomcodec tooling.

The codec itself is configuration-free; these settings cover logging and the
defaults used by the command line tool.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .models.status import MAX_CATALOG_LENGTH

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass
class CodecConfig:
    """Configuration for logging and CLI defaults.

    Attributes:
        log_level: Logging level name (default WARNING)
        log_json: Render log events as JSON lines instead of console text
        catalog_length: Catalog length assumed when inspecting a value without
            an explicit one (default None: use the encoded entry count)

    Examples:
        ```python
        from bloomcodec.config import CodecConfig

        config = CodecConfig(log_level="DEBUG", catalog_length=174)

        # Read BLOOMCODEC_* variables from the environment
        config = CodecConfig.from_env()
        ```
    """

    log_level: str = "WARNING"
    log_json: bool = False
    catalog_length: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        self.log_level = self.log_level.upper()
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}, got {self.log_level}")

        if self.catalog_length is not None and not 0 <= self.catalog_length <= MAX_CATALOG_LENGTH:
            raise ValueError(
                f"catalog_length must be 0-{MAX_CATALOG_LENGTH}, got {self.catalog_length}"
            )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> CodecConfig:
        """Build a configuration from BLOOMCODEC_* environment variables.

        Variables:
            BLOOMCODEC_LOG_LEVEL: Logging level name
            BLOOMCODEC_LOG_JSON: "1"/"true"/"yes"/"on" to enable JSON logs
            BLOOMCODEC_CATALOG_LENGTH: Default catalog length

        Raises:
            ValueError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ

        catalog_length: Optional[int] = None
        raw_length = env.get("BLOOMCODEC_CATALOG_LENGTH")
        if raw_length:
            try:
                catalog_length = int(raw_length)
            except ValueError as err:
                raise ValueError(
                    f"BLOOMCODEC_CATALOG_LENGTH must be an integer, got {raw_length!r}"
                ) from err

        return cls(
            log_level=env.get("BLOOMCODEC_LOG_LEVEL", "WARNING"),
            log_json=env.get("BLOOMCODEC_LOG_JSON", "").lower() in _TRUE_VALUES,
            catalog_length=catalog_length,
        )
