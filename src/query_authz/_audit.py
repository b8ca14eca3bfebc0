"""Audit logging for policy resolution decisions."""

from __future__ import annotations

import logging
from collections.abc import Sequence

from query_authz._types import Capability

__all__ = ["log_depth_exhausted", "log_missing_result", "log_resolution"]

logger = logging.getLogger("query_authz")


def log_resolution(
    *,
    endpoint: str,
    capability: Capability,
    message: str,
    paths: Sequence[str],
) -> None:
    """Log the table resolved for one endpoint capability.

    Logging levels:
    - INFO: Summary (endpoint, capability, entry count)
    - DEBUG: Detailed (resolved paths)

    Example::

        log_resolution(
            endpoint="/pkg.Users/List",
            capability=Capability.FILTERING,
            message=".pkg.User",
            paths=["name", "address.city"],
        )
    """
    logger.info(
        "Resolved %s for %s from %s: %d field(s)",
        capability.value,
        endpoint,
        message,
        len(paths),
    )

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Paths for %s %s: %s", endpoint, capability.value, list(paths))


def log_missing_result(*, endpoint: str, capabilities: Sequence[Capability]) -> None:
    """Warn that an endpoint requests capabilities but has no result message."""
    logger.warning(
        "Endpoint %s declares %s but its response has no 'result' or 'results' "
        "message field; no policy recorded",
        endpoint,
        ", ".join(c.value for c in capabilities),
    )


def log_depth_exhausted(*, message: str, field: str, capability: Capability) -> None:
    """Record a field omitted because the nesting depth budget ran out."""
    logger.debug(
        "Nesting depth exhausted at %s.%s; omitted from %s",
        message,
        field,
        capability.value,
    )
