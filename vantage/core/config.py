"""
Helper configuration.

The library URL, the injection wait budget and the polling cadence used to
be hardcoded. They now live in one dataclass with the old values as
defaults, overridable from the environment or the CLI.
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from selenium.webdriver.support.wait import POLL_FREQUENCY

DEFAULT_LIBRARY_URL = "https://ajax.googleapis.com/ajax/libs/jquery/1.7.2/jquery.min.js"
DEFAULT_INJECTION_TIMEOUT = 10.0

ENV_LIBRARY_URL = "VANTAGE_LIBRARY_URL"
ENV_INJECTION_TIMEOUT = "VANTAGE_INJECTION_TIMEOUT"
ENV_POLL_INTERVAL = "VANTAGE_POLL_INTERVAL"


@dataclass
class HelperConfig:
    """Settings shared by the injector and the centering action."""
    library_url: str = DEFAULT_LIBRARY_URL
    injection_timeout: float = DEFAULT_INJECTION_TIMEOUT  # seconds
    poll_interval: float = POLL_FREQUENCY  # seconds

    def __post_init__(self):
        if not self.library_url:
            raise ValueError("library_url must not be empty")
        if self.injection_timeout < 0:
            raise ValueError(f"injection_timeout must be >= 0, got {self.injection_timeout}")
        if self.poll_interval <= 0:
            raise ValueError(f"poll_interval must be > 0, got {self.poll_interval}")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "HelperConfig":
        """
        Build a config from VANTAGE_* environment variables.

        Unset variables keep their defaults.
        """
        env = os.environ if environ is None else environ
        return cls(
            library_url=env.get(ENV_LIBRARY_URL) or DEFAULT_LIBRARY_URL,
            injection_timeout=_float_from(env, ENV_INJECTION_TIMEOUT, DEFAULT_INJECTION_TIMEOUT),
            poll_interval=_float_from(env, ENV_POLL_INTERVAL, POLL_FREQUENCY),
        )

    def with_overrides(
        self,
        library_url: Optional[str] = None,
        injection_timeout: Optional[float] = None,
        poll_interval: Optional[float] = None,
    ) -> "HelperConfig":
        """Return a copy with any non-None values replaced."""
        return HelperConfig(
            library_url=library_url if library_url is not None else self.library_url,
            injection_timeout=injection_timeout if injection_timeout is not None else self.injection_timeout,
            poll_interval=poll_interval if poll_interval is not None else self.poll_interval,
        )


def _float_from(env: Mapping[str, str], key: str, default: float) -> float:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{key} must be a number, got {raw!r}")
