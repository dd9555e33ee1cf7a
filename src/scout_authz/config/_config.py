"""Layered configuration for scout-authz (global -> app -> call site)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from typing import Any

from scout_authz._types import OnUnknownOperation

__all__ = [
    "AuthzConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]

_UNKNOWN_OPERATION_MODES = ("deny", "warn")


@dataclass(frozen=True, slots=True)
class AuthzConfig:
    """Settings that shape logging around decisions.

    No setting can turn a deny into an allow.

    Attributes:
        on_unknown_operation: ``"deny"`` denies identifiers outside the
            catalog silently, ``"warn"`` also logs them on the
            ``scout_authz.unknown_operation`` logger.
        log_decisions: Audit-log every decision via the ``scout_authz`` logger.

    Example::

        config = AuthzConfig(on_unknown_operation="warn")
        verbose = config.merge(log_decisions=True)
    """

    on_unknown_operation: OnUnknownOperation = "deny"
    log_decisions: bool = False

    def __post_init__(self) -> None:
        if self.on_unknown_operation not in _UNKNOWN_OPERATION_MODES:
            raise ValueError(
                f"on_unknown_operation must be one of {_UNKNOWN_OPERATION_MODES}, "
                f"got {self.on_unknown_operation!r}"
            )
        if not isinstance(self.log_decisions, bool):
            raise ValueError(f"log_decisions must be a bool, got {self.log_decisions!r}")

    def merge(self, **overrides: Any) -> AuthzConfig:
        """Return a copy with every non-None override applied.

        Unknown setting names raise ``TypeError``.
        """
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def with_settings(
        self, settings: Mapping[str, Any], *, prefix: str = "SCOUT_AUTHZ_"
    ) -> AuthzConfig:
        """Return a copy overridden by upper-case prefixed keys, e.g. a Flask ``app.config``.

        Keys that are absent keep the receiver's values.

        Example::

            cfg = get_global_config().with_settings({"SCOUT_AUTHZ_LOG_DECISIONS": True})
        """
        values: dict[str, Any] = {}
        for f in fields(self):
            key = prefix + f.name.upper()
            if key in settings:
                values[f.name] = settings[key]
        return replace(self, **values)


_global_config = AuthzConfig()


def get_global_config() -> AuthzConfig:
    """Return the current global configuration."""
    return _global_config


def configure(
    *,
    on_unknown_operation: OnUnknownOperation | None = None,
    log_decisions: bool | None = None,
) -> AuthzConfig:
    """Merge the given settings into the global configuration and return it.

    Example::

        configure(log_decisions=True)
    """
    global _global_config
    _global_config = _global_config.merge(
        on_unknown_operation=on_unknown_operation,
        log_decisions=log_decisions,
    )
    return _global_config


def _set_global_config(cfg: AuthzConfig) -> None:
    """Install *cfg* as the global config. Test isolation only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    global _global_config
    _global_config = AuthzConfig()
