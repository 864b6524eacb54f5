from __future__ import annotations

import logging
import os
from dataclasses import dataclass

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_TRUE_VALUES = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class StyleboxConfig:
    viewport_width: float = 800.0
    recover_declarations: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> StyleboxConfig:
        """Build a config from ``STYLEBOX_*`` environment variables."""
        defaults = cls()
        width = os.environ.get("STYLEBOX_VIEWPORT_WIDTH")
        recover = os.environ.get("STYLEBOX_RECOVER")
        return cls(
            viewport_width=float(width) if width else defaults.viewport_width,
            recover_declarations=(
                recover.strip().lower() in _TRUE_VALUES
                if recover is not None
                else defaults.recover_declarations
            ),
            log_level=os.environ.get("STYLEBOX_LOG_LEVEL", defaults.log_level).upper(),
        )


def configure_logging(config: StyleboxConfig) -> None:
    """Send stylebox log records to stderr at the configured level."""
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.log_level!r}")
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("stylebox").setLevel(level)
