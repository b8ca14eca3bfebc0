"""Import fixtures from query_authz.testing for test discovery."""

from query_authz.testing._fixtures import isolated_policy_config, policy_config, schema_registry

__all__ = ["isolated_policy_config", "policy_config", "schema_registry"]
