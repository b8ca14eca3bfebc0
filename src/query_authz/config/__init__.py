"""Configuration module for query-authz."""

from __future__ import annotations

from query_authz.config._config import (
    DEFAULT_NESTING_DEPTH,
    PolicyConfig,
    configure,
    get_global_config,
)

__all__ = ["DEFAULT_NESTING_DEPTH", "PolicyConfig", "configure", "get_global_config"]
