"""Layered configuration for query-authz."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

__all__ = [
    "DEFAULT_NESTING_DEPTH",
    "PolicyConfig",
    "configure",
    "get_global_config",
    "_reset_global_config",
    "_set_global_config",
]

logger = logging.getLogger("query_authz")

DEFAULT_NESTING_DEPTH = 2

# Code-generator style parameter names accepted by PolicyConfig.from_params.
_PARAM_DEPTH = "nested_field_depth_limit"
_PARAM_ALWAYS_NEST = "enable_nested_fields"

# Accepted spellings of true; anything else, "yes" and "on" included, is false.
_TRUE_STRINGS: frozenset[str] = frozenset({"1", "t", "T", "TRUE", "true", "True"})


@dataclass(frozen=True, slots=True)
class PolicyConfig:
    """Configuration consumed by the rule resolver.

    Attributes:
        default_nesting_depth: Nesting depth budget used when a message
            declares no override. Values below 1 are clamped to 1.
        always_allow_nesting: Permit recursion into every nested message
            field regardless of annotations.
        log_resolution_decisions: Log resolved tables via the
            ``query_authz`` logger.

    Example::

        config = PolicyConfig(default_nesting_depth=3)
        merged = config.merge(always_allow_nesting=True)
    """

    default_nesting_depth: int = DEFAULT_NESTING_DEPTH
    always_allow_nesting: bool = False
    log_resolution_decisions: bool = False

    def __post_init__(self) -> None:
        depth = self.default_nesting_depth
        if isinstance(depth, bool) or not isinstance(depth, int):
            raise ValueError(f"default_nesting_depth must be an integer, got {depth!r}")
        if depth < 1:
            # Use object.__setattr__ because the dataclass is frozen
            object.__setattr__(self, "default_nesting_depth", 1)

    def merge(
        self,
        *,
        default_nesting_depth: int | None = None,
        always_allow_nesting: bool | None = None,
        log_resolution_decisions: bool | None = None,
    ) -> PolicyConfig:
        """Return a new config with non-None overrides applied.

        Args:
            default_nesting_depth: Override for default_nesting_depth (ignored if None).
            always_allow_nesting: Override for always_allow_nesting (ignored if None).
            log_resolution_decisions: Override for log_resolution_decisions (ignored if None).

        Returns:
            A new ``PolicyConfig`` with overrides merged.
        """
        return PolicyConfig(
            default_nesting_depth=(
                default_nesting_depth
                if default_nesting_depth is not None
                else self.default_nesting_depth
            ),
            always_allow_nesting=(
                always_allow_nesting
                if always_allow_nesting is not None
                else self.always_allow_nesting
            ),
            log_resolution_decisions=(
                log_resolution_decisions
                if log_resolution_decisions is not None
                else self.log_resolution_decisions
            ),
        )

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> PolicyConfig:
        """Build a config from code-generator style string parameters.

        Recognized keys are ``nested_field_depth_limit`` (integer) and
        ``enable_nested_fields`` (boolean). An unparsable depth is logged
        and falls back to 1. The boolean accepts ``1``, ``t``, ``T``,
        ``TRUE``, ``true`` and ``True``; any other value counts as ``False``.

        Example::

            PolicyConfig.from_params({"nested_field_depth_limit": "3"})
        """
        depth = DEFAULT_NESTING_DEPTH
        raw_depth = params.get(_PARAM_DEPTH)
        if raw_depth is not None:
            try:
                depth = int(raw_depth, 10)
            except ValueError:
                logger.warning(
                    "Invalid parameter for %s, should be an integer: %r",
                    _PARAM_DEPTH,
                    raw_depth,
                )
                depth = 1

        always_nest = False
        raw_nest = params.get(_PARAM_ALWAYS_NEST)
        if raw_nest is not None:
            always_nest = raw_nest in _TRUE_STRINGS

        return cls(default_nesting_depth=depth, always_allow_nesting=always_nest)


# ---------------------------------------------------------------------------
# Global configuration singleton
# ---------------------------------------------------------------------------

_global_config = PolicyConfig()


def get_global_config() -> PolicyConfig:
    """Return the current global configuration.

    Example::

        config = get_global_config()
        print(config.default_nesting_depth)  # 2
    """
    return _global_config


def configure(
    *,
    default_nesting_depth: int | None = None,
    always_allow_nesting: bool | None = None,
    log_resolution_decisions: bool | None = None,
) -> PolicyConfig:
    """Update the global configuration by merging overrides.

    Only non-None values are applied. Returns the new global config.

    Example::

        configure(always_allow_nesting=True)
    """
    global _global_config
    _global_config = _global_config.merge(
        default_nesting_depth=default_nesting_depth,
        always_allow_nesting=always_allow_nesting,
        log_resolution_decisions=log_resolution_decisions,
    )
    return _global_config


def _set_global_config(cfg: PolicyConfig) -> None:
    """Replace global config with an exact snapshot. For testing only."""
    global _global_config
    _global_config = cfg


def _reset_global_config() -> None:
    """Reset global config to defaults. For testing only."""
    global _global_config
    _global_config = PolicyConfig()
