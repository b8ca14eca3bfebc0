"""ResolvedFieldPolicy — one resolved entry of a policy table."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from query_authz._types import FilterOperator, OperatorLike, ValueType
from query_authz.rules._operators import eligible_operators

__all__ = ["ResolvedFieldPolicy"]


@dataclass(frozen=True, slots=True)
class ResolvedFieldPolicy:
    """The resolved policy for a single field path.

    Attributes:
        path: Dot-separated field path. JSON-value fields end in ``".*"``.
        value_type: Value category used for filtering.
        deny: Denied operators; ``(ALL,)`` denies every operator and an
            empty tuple means no restriction.
    """

    path: str
    value_type: ValueType = ValueType.DEFAULT
    deny: tuple[FilterOperator, ...] = ()

    @property
    def denies_all(self) -> bool:
        return FilterOperator.ALL in self.deny

    def allows(self, operator: OperatorLike) -> bool:
        """Return ``True`` if filtering this path with *operator* is permitted.

        Example::

            ResolvedFieldPolicy("status", ValueType.STRING, (FilterOperator.MATCH,)).allows("EQ")
            # True
        """
        op = FilterOperator(operator)
        if op is FilterOperator.ALL or self.denies_all or op in self.deny:
            return False
        if self.value_type is ValueType.DEFAULT:
            return True
        return op in eligible_operators(self.value_type)

    def reparent(self, prefix: str) -> ResolvedFieldPolicy:
        """Return a copy whose path is nested under *prefix*."""
        return ResolvedFieldPolicy(
            path=f"{prefix}.{self.path}",
            value_type=self.value_type,
            deny=self.deny,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "path": self.path,
            "value_type": self.value_type.value,
            "deny": [op.value for op in self.deny],
        }
