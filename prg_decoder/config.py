"""Configuration defaults, .env loading, and logging setup.

WHY: The decoder's only knob is log verbosity, but it should be
overridable without touching code, the same way in every program that
embeds the decoder.

HOW: python-dotenv loads the .env file on import. Defaults are plain
module-level values read from the environment. configure_logging()
installs a basicConfig handler for applications that want the decoder's
DEBUG trace without setting up logging themselves.

RULES:
- PRG_DECODER_LOG_LEVEL: logging level name (default "WARNING")
- PRG_DECODER_LOG_FORMAT: logging format string
- Library modules never call configure_logging() themselves
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------

LOG_LEVEL = os.getenv("PRG_DECODER_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = os.getenv(
    "PRG_DECODER_LOG_FORMAT",
    "%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Install a root logging handler using the configured level and format.

    RULES:
    - level=None uses LOG_LEVEL from the environment
    - Level names are case-insensitive ("debug" == "DEBUG")
    - Unknown level names raise ValueError
    """
    if level is None:
        level = LOG_LEVEL
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved
    logging.basicConfig(level=level, format=LOG_FORMAT)
