"""Annotation defaulting — resolve unset options at lookup time."""

from __future__ import annotations

from dataclasses import replace

from query_authz.schema._model import Annotation

__all__ = ["effective_annotation"]

_EMPTY = Annotation()


def effective_annotation(annotation: Annotation | None, *, synthetic: bool = False) -> Annotation:
    """Return a copy of *annotation* with every tri-state option resolved.

    A missing annotation behaves like an empty one. Synthetic fields and
    fields redirected to a target message are excluded from sorting and
    field selection unless they opt in explicitly. A synthetic field that
    lists nested field names enables nesting.

    Args:
        annotation: The annotation as declared, or ``None``.
        synthetic: Whether the annotation comes from a message-level
            synthetic field declaration.

    Returns:
        A new ``Annotation``. The input is never modified.

    Example::

        opts = effective_annotation(Annotation(target_message=".pkg.Ref"))
        assert opts.sorting_disabled is True
    """
    if annotation is None:
        annotation = _EMPTY

    hidden_by_default = synthetic or bool(annotation.target_message)
    sorting_disabled = annotation.sorting_disabled
    if sorting_disabled is None:
        sorting_disabled = hidden_by_default
    field_selection_disabled = annotation.field_selection_disabled
    if field_selection_disabled is None:
        field_selection_disabled = hidden_by_default

    enable_nested_fields = annotation.enable_nested_fields
    if synthetic and annotation.nested_fields:
        enable_nested_fields = True

    return replace(
        annotation,
        sorting_disabled=sorting_disabled,
        field_selection_disabled=field_selection_disabled,
        enable_nested_fields=enable_nested_fields,
    )
