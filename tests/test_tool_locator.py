"""
Tests for generator discovery — ordered probe strategies and fallback.
"""

import pytest

from jsongen.adapters.base import ExecutionContext
from jsongen.adapters.mock import MockAdapter
from jsongen.adapters.registry import AdapterRegistry
from jsongen.core.models.action import Receipt
from jsongen.core.models.settings import GeneratorSettings
from jsongen.core.services.tool_locator import (
    Strategy,
    ToolLocator,
    ToolUnavailableError,
    presence_probe,
)


def _registry(shell: MockAdapter) -> AdapterRegistry:
    reg = AdapterRegistry()
    reg.register(shell)
    return reg


class _ExplodingShell(MockAdapter):
    """Raises for the listed action IDs instead of returning a receipt."""

    def __init__(self, explode: set[str]):
        super().__init__(adapter_name="shell")
        self._explode = explode

    def execute(self, context: ExecutionContext) -> Receipt:
        if context.action.id in self._explode:
            self.call_log.append(context)
            raise RuntimeError("probe crashed")
        return super().execute(context)


class TestPresenceProbe:
    def test_posix_uses_which(self):
        assert presence_probe("dart_json_gen", "linux") == "which dart_json_gen"
        assert presence_probe("dart_json_gen", "darwin") == "which dart_json_gen"

    def test_windows_uses_where(self):
        assert presence_probe("dart_json_gen", "win32") == "where dart_json_gen"


class TestToolLocator:
    def test_direct_probe_wins(self):
        shell = MockAdapter(adapter_name="shell")
        invocation = ToolLocator(_registry(shell), platform="linux").locate()

        assert invocation.command == "dart_json_gen"
        assert not invocation.via_package_manager
        assert invocation.strategy == "direct"
        # Short-circuits: the second strategy is never probed
        assert shell.called_ids == ["probe:direct"]
        assert shell.call_log[0].action.params["command"] == "which dart_json_gen"

    def test_windows_direct_probe(self):
        shell = MockAdapter(adapter_name="shell")
        ToolLocator(_registry(shell), platform="win32").locate()
        assert shell.call_log[0].action.params["command"] == "where dart_json_gen"

    def test_falls_back_to_package_manager(self):
        shell = MockAdapter(adapter_name="shell")
        shell.set_failure("probe:direct", error="exit 1")
        invocation = ToolLocator(_registry(shell), platform="linux").locate()

        assert invocation.via_package_manager
        assert invocation.strategy == "pub-global"
        assert invocation.command == "dart pub global run dart_json_annotations:dart_json_gen"
        assert shell.called_ids == ["probe:direct", "probe:pub-global"]
        assert shell.call_log[1].action.params["command"] == (
            "dart pub global run dart_json_annotations:dart_json_gen --help"
        )

    def test_all_strategies_fail(self):
        shell = MockAdapter(adapter_name="shell")
        shell.set_failure("probe:direct")
        shell.set_failure("probe:pub-global")

        with pytest.raises(ToolUnavailableError) as exc:
            ToolLocator(_registry(shell), platform="linux").locate()

        assert exc.value.install_command == "dart pub global activate dart_json_annotations"
        assert exc.value.tried == ["direct", "pub-global"]
        assert "dart_json_gen not found" in str(exc.value)

    def test_crashing_probe_counts_as_unavailable(self):
        shell = _ExplodingShell({"probe:direct"})
        invocation = ToolLocator(_registry(shell), platform="linux").locate()
        assert invocation.strategy == "pub-global"

    def test_no_shell_adapter(self):
        with pytest.raises(ToolUnavailableError):
            ToolLocator(AdapterRegistry(), platform="linux").locate()

    def test_probes_are_bounded(self):
        shell = MockAdapter(adapter_name="shell")
        settings = GeneratorSettings(probe_timeout=7)
        ToolLocator(_registry(shell), settings, platform="linux").locate()
        assert shell.call_log[0].action.params["timeout"] == 7

    def test_resolved_fresh_every_call(self):
        shell = MockAdapter(adapter_name="shell")
        locator = ToolLocator(_registry(shell), platform="linux")
        assert locator.locate().strategy == "direct"

        shell.set_failure("probe:direct")
        assert locator.locate().strategy == "pub-global"

    def test_custom_settings(self):
        shell = MockAdapter(adapter_name="shell")
        shell.set_failure("probe:direct")
        settings = GeneratorSettings(
            binary="gen",
            package_runner="dart run gen",
            install_command="dart pub add gen",
        )
        invocation = ToolLocator(_registry(shell), settings, platform="linux").locate()
        assert shell.call_log[0].action.params["command"] == "which gen"
        assert invocation.command == "dart run gen"

    def test_custom_strategies(self):
        shell = MockAdapter(adapter_name="shell")
        strategies = [Strategy("only", "true", "my-gen", via_package_manager=False)]
        invocation = ToolLocator(_registry(shell), strategies=strategies).locate()
        assert invocation.command == "my-gen"
        assert shell.called_ids == ["probe:only"]
