"""
Unit tests for the host integration shim.

Tests lifecycle (settings load/save), event dispatch and the generate
command's prompt handling.
"""

import json
from dataclasses import dataclass, fields
from pathlib import Path

import pytest

from hxmlgen.plugin.events import EventType, NodeKind, ProjectActivated, TreeSelection, TreeSelectionChanged
from hxmlgen.plugin.plugin_main import GenerateBuildFileCommand, PluginMain
from hxmlgen.project.haxe_project import ForeignProject, HaxePlatform, HaxeProject, MovieOptions, ProjectConfigurationError
from hxmlgen.settings import GlobalEnvironment

PROJECT_NODE = TreeSelection(NodeKind.PROJECT)


@pytest.fixture
def plugin(tmp_path) -> PluginMain:
    plugin = PluginMain(data_root=tmp_path / "data")
    plugin.initialize()
    return plugin


class TestLifecycle:
    """Tests for initialize() / dispose()"""

    def test_initialize_creates_settings_file(self, tmp_path):
        plugin = PluginMain(data_root=tmp_path / "data")
        plugin.initialize()

        settings_file = tmp_path / "data" / "HXMLGenerator" / "Settings.json"
        assert plugin.settings_file == settings_file
        assert settings_file.exists()
        assert plugin.settings.prompt_default == "build.hxml"

    def test_dispose_saves_settings(self, plugin):
        plugin.settings.prompt_default = "web.hxml"
        plugin.dispose()

        data = json.loads(plugin.settings_file.read_text(encoding="utf-8"))
        assert data["prompt_default"] == "web.hxml"

    def test_dispose_before_initialize_is_noop(self, tmp_path):
        PluginMain(data_root=tmp_path / "data").dispose()
        assert not (tmp_path / "data").exists()

    def test_environment_from_settings(self, tmp_path):
        settings_file = tmp_path / "data" / "HXMLGenerator" / "Settings.json"
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text('{"global_classpaths": ["/std"]}', encoding="utf-8")

        plugin = PluginMain(data_root=tmp_path / "data")
        plugin.initialize()

        assert plugin.environment.global_classpaths == ("/std",)

    def test_environment_override_is_kept(self, tmp_path):
        env = GlobalEnvironment(global_classpaths=("/override",))
        plugin = PluginMain(data_root=tmp_path / "data", environment=env)
        plugin.initialize()
        assert plugin.environment is env


class TestEvents:
    """Tests for handle_event() dispatch"""

    def test_event_types(self, flash_project):
        assert ProjectActivated(flash_project).type is EventType.PROJECT_ACTIVATED
        assert TreeSelectionChanged(PROJECT_NODE).type is EventType.TREE_SELECTION_CHANGED

    def test_dispatch_follows_event_type(self, plugin, flash_project):
        @dataclass(frozen=True)
        class HostActivation:
            project: HaxeProject
            type: EventType = EventType.PROJECT_ACTIVATED

        assert plugin.handle_event(HostActivation(flash_project)) is None
        assert plugin.current_project is flash_project

    def test_selection_carries_only_node_kind(self):
        assert [f.name for f in fields(TreeSelection)] == ["node_kind"]
        assert TreeSelection(NodeKind.PROJECT).is_project_node
        assert not TreeSelection(NodeKind.FILE).is_project_node

    def test_project_node_on_haxe_project_offers_command(self, plugin, flash_project):
        assert plugin.handle_event(ProjectActivated(flash_project)) is None

        command = plugin.handle_event(TreeSelectionChanged(PROJECT_NODE))

        assert isinstance(command, GenerateBuildFileCommand)
        assert command.project is flash_project
        assert command.label == "&Generate hxml build..."
        assert command.default_value == "build.hxml"

    @pytest.mark.parametrize("kind", [NodeKind.DIRECTORY, NodeKind.FILE, NodeKind.OTHER])
    def test_other_nodes_offer_nothing(self, plugin, flash_project, kind):
        plugin.handle_event(ProjectActivated(flash_project))
        assert plugin.handle_event(TreeSelectionChanged(TreeSelection(kind))) is None

    def test_no_selection_offers_nothing(self, plugin, flash_project):
        plugin.handle_event(ProjectActivated(flash_project))
        assert plugin.handle_event(TreeSelectionChanged(None)) is None

    def test_foreign_project_offers_nothing(self, plugin, tmp_path):
        plugin.handle_event(ProjectActivated(ForeignProject(name="Legacy", directory=tmp_path)))
        assert plugin.handle_event(TreeSelectionChanged(PROJECT_NODE)) is None

    def test_no_project_offers_nothing(self, plugin):
        assert plugin.handle_event(TreeSelectionChanged(PROJECT_NODE)) is None

    def test_closing_project_withdraws_command(self, plugin, flash_project):
        plugin.handle_event(ProjectActivated(flash_project))
        plugin.handle_event(ProjectActivated(None))
        assert plugin.handle_event(TreeSelectionChanged(PROJECT_NODE)) is None


class TestGenerateBuildFileCommand:
    """Tests for GenerateBuildFileCommand.execute()"""

    def _command(self, project: HaxeProject, *classpaths: str) -> GenerateBuildFileCommand:
        return GenerateBuildFileCommand(project=project, environment=GlobalEnvironment(classpaths), default_value="build.hxml")

    def test_cancel_writes_nothing(self, flash_project, tmp_path):
        assert self._command(flash_project).execute(None) is None
        assert not (tmp_path / "build.hxml").exists()

    def test_blank_input_writes_into_project_directory(self, flash_project, tmp_path):
        written = self._command(flash_project).execute("   ")

        assert written == tmp_path / "build.hxml"
        assert written.read_text(encoding="utf-8").splitlines()[0] == "## flash"

    def test_custom_output_uses_global_classpaths(self, flash_project, tmp_path):
        target = tmp_path / "web.hxml"

        written = self._command(flash_project, "/g").execute(f"  {target}  ")

        assert written == target
        assert "-cp /g" in target.read_text(encoding="utf-8").splitlines()

    def test_configuration_fault_propagates(self, tmp_path):
        project = HaxeProject(name="Broken", directory=tmp_path, platform=HaxePlatform.JAVASCRIPT, movie=MovieOptions())
        with pytest.raises(ProjectConfigurationError):
            self._command(project).execute("")

    def test_unwritable_output_propagates(self, flash_project, tmp_path):
        with pytest.raises(OSError):
            self._command(flash_project).execute(str(tmp_path / "missing" / "build.hxml"))


def test_plugin_metadata():
    assert PluginMain.name == "HXMLGenerator"
    assert PluginMain.guid == "59be851a-6030-4fd9-9422-50f2071c7446"
    assert isinstance(PluginMain(data_root=Path("/nonexistent")).environment, GlobalEnvironment)
