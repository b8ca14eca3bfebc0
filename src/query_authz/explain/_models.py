"""Data models for explain/dry-run output."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

__all__ = ["CapabilityExplanation", "EndpointExplanation"]


@dataclass(frozen=True, slots=True)
class CapabilityExplanation:
    """How one capability was resolved for an endpoint.

    Attributes:
        capability: Capability name (``"filtering"``, ``"sorting"``, ...).
        marker: Qualified marker type the request must declare.
        requested: Whether the request declares the marker.
        resolved: Whether a table was produced.
        entry_count: Number of entries in the table (0 if not resolved).
        paths: Resolved paths in table order.
    """

    capability: str
    marker: str
    requested: bool
    resolved: bool
    entry_count: int
    paths: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "capability": self.capability,
            "marker": self.marker,
            "requested": self.requested,
            "resolved": self.resolved,
            "entry_count": self.entry_count,
            "paths": list(self.paths),
        }


@dataclass(frozen=True, slots=True)
class EndpointExplanation:
    """Explanation of how an endpoint's policy tables were derived.

    Attributes:
        endpoint: Endpoint identifier.
        result_message: Qualified name of the result message, or ``None``.
        depth_budget: Depth budget the resolver started with (0 if no result).
        capabilities: Per-capability explanations.
    """

    endpoint: str
    result_message: str | None
    depth_budget: int
    capabilities: list[CapabilityExplanation]

    @property
    def missing_result(self) -> bool:
        """``True`` if capabilities were requested but no result message exists."""
        return self.result_message is None and any(c.requested for c in self.capabilities)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable dictionary."""
        return {
            "endpoint": self.endpoint,
            "result_message": self.result_message,
            "depth_budget": self.depth_budget,
            "capabilities": [c.to_dict() for c in self.capabilities],
            "missing_result": self.missing_result,
        }

    def __str__(self) -> str:
        """Return a human-readable multi-line explanation."""
        lines: list[str] = []
        lines.append(f"Query Policy Explanation for {self.endpoint}")
        if self.result_message is None:
            lines.append("  Result message: (none)")
        else:
            lines.append(f"  Result message: {self.result_message}")
            lines.append(f"  Depth budget: {self.depth_budget}")
        lines.append("")
        for c in self.capabilities:
            if not c.requested:
                lines.append(f"  {c.capability}: not requested ({c.marker} absent)")
            elif not c.resolved:
                lines.append(f"  {c.capability}: requested but not resolved")
            else:
                lines.append(f"  {c.capability}: {c.entry_count} field(s)")
                for path in c.paths:
                    lines.append(f"    - {path}")
        if self.missing_result:
            lines.append("")
            lines.append("  WARNING: capabilities requested but response has no result field")
        return "\n".join(lines)
