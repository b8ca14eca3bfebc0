"""EndpointPolicy and PolicyTables — resolved per-endpoint tables."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from query_authz._types import Capability
from query_authz.resolver._models import ResolvedFieldPolicy

__all__ = ["EndpointPolicy", "PolicyTables"]


def _frozen_paths(paths: Iterable[str] | None) -> tuple[str, ...] | None:
    if paths is None:
        return None
    return tuple(dict.fromkeys(paths))


@dataclass(frozen=True, slots=True)
class EndpointPolicy:
    """The three resolved tables of a single endpoint.

    A table that is ``None`` means the endpoint does not accept that
    capability. An empty table means the capability is accepted with no
    restrictions.

    Attributes:
        endpoint: Endpoint identifier (``"/pkg.Service/Method"``).
        filtering: Field path to resolved filtering policy.
        sortable: Paths that may be used for sorting.
        selectable: Paths that may be selected.
    """

    endpoint: str
    filtering: Mapping[str, ResolvedFieldPolicy] | None = None
    sortable: tuple[str, ...] | None = None
    selectable: tuple[str, ...] | None = None

    def __post_init__(self) -> None:
        if self.filtering is not None:
            object.__setattr__(self, "filtering", MappingProxyType(dict(self.filtering)))
        object.__setattr__(self, "sortable", _frozen_paths(self.sortable))
        object.__setattr__(self, "selectable", _frozen_paths(self.selectable))

    @classmethod
    def from_entries(
        cls,
        endpoint: str,
        *,
        filtering: Iterable[ResolvedFieldPolicy] | None = None,
        sorting: Iterable[ResolvedFieldPolicy] | None = None,
        field_selection: Iterable[ResolvedFieldPolicy] | None = None,
    ) -> EndpointPolicy:
        """Build a policy from resolver output.

        The first entry resolved for a path wins, so synthetic fields keep
        precedence over anything resolved later under the same path.
        """
        table: dict[str, ResolvedFieldPolicy] | None = None
        if filtering is not None:
            table = {}
            for entry in filtering:
                table.setdefault(entry.path, entry)
        return cls(
            endpoint=endpoint,
            filtering=table,
            sortable=None if sorting is None else [e.path for e in sorting],
            selectable=None if field_selection is None else [e.path for e in field_selection],
        )

    @property
    def is_empty(self) -> bool:
        """``True`` if no capability is accepted at all."""
        return self.filtering is None and self.sortable is None and self.selectable is None

    def has(self, capability: Capability) -> bool:
        """Return ``True`` if a table exists for *capability*."""
        if capability is Capability.FILTERING:
            return self.filtering is not None
        if capability is Capability.SORTING:
            return self.sortable is not None
        return self.selectable is not None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "endpoint": self.endpoint,
            "filtering": (
                None
                if self.filtering is None
                else {path: p.to_dict() for path, p in self.filtering.items()}
            ),
            "sortable": None if self.sortable is None else list(self.sortable),
            "selectable": None if self.selectable is None else list(self.selectable),
        }


@dataclass(frozen=True, slots=True)
class PolicyTables:
    """Resolved tables for every endpoint of a schema unit.

    Each table is keyed by endpoint identifier and only contains the
    endpoints that accept the capability.

    Example::

        tables = compile_policies(unit, schemas=registry)
        tables.filtering["/pkg.Users/List"]["name"].deny
    """

    filtering: Mapping[str, Mapping[str, ResolvedFieldPolicy]]
    sorting: Mapping[str, tuple[str, ...]]
    field_selection: Mapping[str, tuple[str, ...]]

    @classmethod
    def from_policies(cls, policies: Iterable[EndpointPolicy]) -> PolicyTables:
        filtering: dict[str, Mapping[str, ResolvedFieldPolicy]] = {}
        sorting: dict[str, tuple[str, ...]] = {}
        field_selection: dict[str, tuple[str, ...]] = {}
        for p in policies:
            if p.filtering is not None:
                filtering[p.endpoint] = p.filtering
            if p.sortable is not None:
                sorting[p.endpoint] = p.sortable
            if p.selectable is not None:
                field_selection[p.endpoint] = p.selectable
        return cls(
            filtering=MappingProxyType(filtering),
            sorting=MappingProxyType(sorting),
            field_selection=MappingProxyType(field_selection),
        )

    @property
    def endpoints(self) -> tuple[str, ...]:
        """Identifiers of all endpoints present in at least one table."""
        return tuple(dict.fromkeys([*self.filtering, *self.sorting, *self.field_selection]))

    def policy_for(self, endpoint: str) -> EndpointPolicy | None:
        """Return the ``EndpointPolicy`` of *endpoint*, or ``None`` if absent."""
        if endpoint not in self.endpoints:
            return None
        return EndpointPolicy(
            endpoint=endpoint,
            filtering=self.filtering.get(endpoint),
            sortable=self.sorting.get(endpoint),
            selectable=self.field_selection.get(endpoint),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "filtering": {
                endpoint: {path: p.to_dict() for path, p in table.items()}
                for endpoint, table in self.filtering.items()
            },
            "sorting": {endpoint: list(paths) for endpoint, paths in self.sorting.items()},
            "field_selection": {
                endpoint: list(paths) for endpoint, paths in self.field_selection.items()
            },
        }
