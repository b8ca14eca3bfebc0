"""Nesting permission and depth budget for nested message traversal."""

from __future__ import annotations

from query_authz.config._config import PolicyConfig, get_global_config
from query_authz.schema._model import Annotation, MessageSchema

__all__ = ["allow_nested", "nesting_depth"]


def nesting_depth(message: MessageSchema, config: PolicyConfig | None = None) -> int:
    """Return the depth budget for a top-level resolution of *message*.

    The message's own override wins over the configured default. The
    result is never below 1.
    """
    cfg = config if config is not None else get_global_config()
    depth = cfg.default_nesting_depth
    if message.nesting_depth:
        depth = message.nesting_depth
    return max(depth, 1)


def allow_nested(
    message: MessageSchema,
    annotation: Annotation,
    config: PolicyConfig | None = None,
) -> bool:
    """Return ``True`` if a message field of *message* may be traversed.

    Any of the following grants permission: the global
    ``always_allow_nesting`` flag, the containing message enabling nested
    fields, the field's annotation enabling nested fields, or the
    annotation listing nested field names.
    """
    cfg = config if config is not None else get_global_config()
    return (
        cfg.always_allow_nesting
        or message.enable_nested_fields
        or annotation.enable_nested_fields
        or len(annotation.nested_fields) > 0
    )
