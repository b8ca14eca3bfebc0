"""Tests for query_authz.testing._plugin — pytest plugin registration."""

from __future__ import annotations

from query_authz.testing import _plugin


class TestPluginExports:
    """The plugin module re-exports fixture functions for auto-discovery."""

    def test_exports_schema_registry(self) -> None:
        assert hasattr(_plugin, "schema_registry")

    def test_exports_policy_config(self) -> None:
        assert hasattr(_plugin, "policy_config")

    def test_exports_isolated_policy_config(self) -> None:
        assert hasattr(_plugin, "isolated_policy_config")

    def test_reexports_are_the_fixture_functions(self) -> None:
        from query_authz.testing import _fixtures

        assert _plugin.schema_registry is _fixtures.schema_registry
        assert _plugin.isolated_policy_config is _fixtures.isolated_policy_config

