"""Environment-backed defaults for stream capture."""

import logging
import os

from dotenv import find_dotenv, load_dotenv

from .constants import (
    CAPTURE_CONTENT_ENV_VAR,
    CAPTURE_REASONING_ENV_VAR,
    CAPTURE_TOOLS_ENV_VAR,
    CAPTURE_USAGE_ENV_VAR,
    TRUTHY_VALUES,
)
from ..models.options import CaptureOptions

logger = logging.getLogger(__name__)


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in TRUTHY_VALUES


def load_capture_defaults(use_dotenv: bool = True) -> CaptureOptions:
    """
    Build CaptureOptions from the environment.

    Values from a local `.env` file are loaded first (existing process
    variables win), then each CHATSTREAM_CAPTURE_* flag is read.

    Args:
        use_dotenv: Whether to load a `.env` file before reading variables

    Returns:
        CaptureOptions with the configured flags
    """
    if use_dotenv:
        load_dotenv(find_dotenv(usecwd=True))

    options = CaptureOptions(
        capture_content=_env_flag(CAPTURE_CONTENT_ENV_VAR),
        capture_reasoning_content=_env_flag(CAPTURE_REASONING_ENV_VAR),
        capture_usage=_env_flag(CAPTURE_USAGE_ENV_VAR),
        capture_tools=_env_flag(CAPTURE_TOOLS_ENV_VAR),
    )
    logger.debug(f"Loaded capture defaults from environment: {options.to_dict()}")
    return options
