"""
Environment-driven configuration for procspec.

Values are read when the helpers are called so that a process can change
its environment (or a test can monkeypatch it) after import.
"""
import os
from typing import Optional, Union

DEFAULT_TIMEOUT_SECONDS = 60.0
DEFAULT_LOG_LEVEL = "INFO"


def get_default_timeout() -> Optional[Union[float, str]]:
    """
    Timeout given to freshly created builders.

    Reads `PROCSPEC_DEFAULT_TIMEOUT`. An empty value or "none" disables the
    default timeout. Other values are returned as given; the builder
    validates them like any other timeout.
    """
    raw = os.environ.get("PROCSPEC_DEFAULT_TIMEOUT")
    if raw is None:
        return DEFAULT_TIMEOUT_SECONDS
    if raw.strip().lower() in ("", "none"):
        return None
    return raw.strip()


def get_log_level() -> str:
    return os.environ.get("PROCSPEC_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_default_binary() -> Optional[str]:
    """Binary bound by `create_builder_factory()` when none is passed."""
    return os.environ.get("PROCSPEC_BINARY") or None
