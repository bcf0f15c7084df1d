"""Client configuration.

ClientConfig is a frozen dataclass — immutable after creation, so a single
instance can be shared by every coroutine without locking.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from tasklane.errors import ConfigurationError

DEFAULT_BASE_URL = "http://localhost:8080/api"
DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """API client configuration. Immutable after creation.

    Override what you need::

        config = ClientConfig(base_url="http://todo.internal:9000/api", timeout=5.0)
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT

    # Sent on every request, between the JSON default and per-call overrides
    headers: tuple[tuple[str, str], ...] = ()

    def __post_init__(self) -> None:
        base = self.base_url.strip().rstrip("/")
        if not base:
            msg = "ClientConfig.base_url must not be empty."
            raise ConfigurationError(msg)
        # Frozen: bypass __setattr__ to store the normalized value
        object.__setattr__(self, "base_url", base)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ClientConfig":
        """Build a config from environment variables.

        Resolution order for the base URL:
            1. ``TASKLANE_API_URL``
            2. ``http://{TASKLANE_API_HOST}:{SERVER_PORT}/api``
               (defaults ``localhost`` and ``8080``)

        ``TASKLANE_TIMEOUT`` sets the request timeout in seconds.
        """
        env = os.environ if environ is None else environ

        base_url = env.get("TASKLANE_API_URL", "")
        if not base_url:
            host = env.get("TASKLANE_API_HOST") or "localhost"
            port = env.get("SERVER_PORT") or "8080"
            base_url = f"http://{host}:{port}/api"

        raw_timeout = env.get("TASKLANE_TIMEOUT")
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                msg = f"TASKLANE_TIMEOUT must be a number of seconds, got {raw_timeout!r}"
                raise ConfigurationError(msg) from None
        else:
            timeout = DEFAULT_TIMEOUT

        return cls(base_url=base_url, timeout=timeout)
