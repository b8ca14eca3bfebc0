"""Explain/dry-run mode — structured insight into policy resolution."""

from query_authz.explain._endpoint import explain_endpoint
from query_authz.explain._models import CapabilityExplanation, EndpointExplanation

__all__ = [
    "CapabilityExplanation",
    "EndpointExplanation",
    "explain_endpoint",
]
