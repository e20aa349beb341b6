"""
Process-Wide Configuration

Two switches (plus the domain policy) are resolved once, before the first
interval is built, and are read-only afterwards:

- strict: validate every (lo, hi) pair at construction
- flavor: default flavor returned by interval()
- domain_policy: what a function does with an argument entirely outside
  its domain

Values come from the environment on first use, or from an explicit call
to configure() made before that.
"""

import logging
import os
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .errors import ConfigurationError
from .flavors import Flavor

logger = logging.getLogger(__name__)


ENV_STRICT = "VALIDATED_INTERVALS_STRICT"
ENV_FLAVOR = "VALIDATED_INTERVALS_FLAVOR"
ENV_DOMAIN_POLICY = "VALIDATED_INTERVALS_DOMAIN_POLICY"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


class DomainPolicy(Enum):
    """Handling of arguments entirely outside a function's domain."""
    EMPTY = "empty"  # Return the empty interval silently
    WARN = "warn"    # Return the empty interval and issue a DomainWarning
    RAISE = "raise"  # Raise DomainError


@dataclass(frozen=True)
class Config:
    """Immutable configuration for interval construction and evaluation."""
    strict: bool = True
    flavor: Flavor = Flavor.REAL
    domain_policy: DomainPolicy = DomainPolicy.EMPTY

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Config':
        """
        Build a configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Config with unset variables left at their defaults

        Raises:
            ConfigurationError: if a variable holds an unrecognised value
        """
        if environ is None:
            environ = os.environ

        kwargs = {}

        raw = environ.get(ENV_STRICT)
        if raw is not None:
            value = raw.strip().lower()
            if value in _TRUE_VALUES:
                kwargs['strict'] = True
            elif value in _FALSE_VALUES:
                kwargs['strict'] = False
            else:
                raise ConfigurationError(f"{ENV_STRICT}={raw!r} is not a boolean")

        raw = environ.get(ENV_FLAVOR)
        if raw is not None:
            try:
                kwargs['flavor'] = Flavor.from_name(raw)
            except ValueError as e:
                raise ConfigurationError(f"{ENV_FLAVOR}: {e}") from e

        raw = environ.get(ENV_DOMAIN_POLICY)
        if raw is not None:
            try:
                kwargs['domain_policy'] = DomainPolicy(raw.strip().lower())
            except ValueError as e:
                raise ConfigurationError(
                    f"{ENV_DOMAIN_POLICY}={raw!r} must be one of "
                    f"{', '.join(p.value for p in DomainPolicy)}"
                ) from e

        return cls(**kwargs)


_config: Optional[Config] = None
_lock = threading.Lock()


def get_config() -> Config:
    """Return the process configuration, resolving it from the environment once."""
    global _config
    config = _config
    if config is not None:
        return config
    with _lock:
        if _config is None:
            _config = Config.from_env()
            logger.debug("Resolved configuration from environment: %s", _config)
        return _config


def configure(config: Config) -> Config:
    """
    Install the process configuration.

    Must be called before any interval is built. Installing a configuration
    equal to the one already in force is a no-op.

    Raises:
        ConfigurationError: if a different configuration is already in force
    """
    global _config
    with _lock:
        if _config is not None and _config != config:
            raise ConfigurationError(
                f"Configuration already fixed to {_config}; cannot switch to {config}"
            )
        _config = config
        logger.debug("Installed configuration: %s", config)
        return config
