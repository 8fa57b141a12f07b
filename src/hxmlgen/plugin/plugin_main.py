"""
Host integration shim for the HXML generator.

PluginMain owns the plugin lifecycle (settings load at initialize, save at
dispose) and turns host events into a GenerateBuildFileCommand that the host
places in its project context menu. The host shows a single-line prompt and
hands the result (or None when cancelled) to GenerateBuildFileCommand.execute().

Usage:
    plugin = PluginMain()
    plugin.initialize()
    plugin.handle_event(ProjectActivated(project))
    command = plugin.handle_event(TreeSelectionChanged(TreeSelection(NodeKind.PROJECT)))
    if command is not None:
        command.execute(host_prompt(command.prompt_title, command.prompt_label, command.default_value))
    plugin.dispose()
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from ..build.hxml_builder import generate_hxml_build_file
from ..build.output_path import resolve_prompt_result
from ..paths import get_plugin_data_dir, get_settings_file
from ..project.haxe_project import HaxeProject, Project, is_supported_project
from ..settings import GlobalEnvironment, Settings, load_settings, save_settings
from .events import EventType, PluginEvent, TreeSelection

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerateBuildFileCommand:
    """Context-menu command that writes an HXML build file for one project.

    Attributes:
        project: Project the command was created for
        environment: Global environment snapshot (classpaths)
        default_value: Text pre-filled in the prompt
    """

    project: HaxeProject
    environment: GlobalEnvironment
    default_value: str

    label = "&Generate hxml build..."
    prompt_title = "Generate hxml build file..."
    prompt_label = "File name:"

    def execute(self, prompt_result: Optional[str]) -> Optional[Path]:
        """Run the command with the prompt's result.

        Args:
            prompt_result: Confirmed prompt text, or None if the user cancelled

        Returns:
            Path of the written file, or None when cancelled

        Raises:
            ProjectConfigurationError: If the project cannot derive its arguments
            OSError: If the destination cannot be written
        """
        output = resolve_prompt_result(prompt_result, self.project.directory)
        if output is None:
            logger.debug("Generate hxml build cancelled")
            return None
        return generate_hxml_build_file(self.project, self.environment.global_classpaths, output)


class PluginMain:
    """HXML generator plugin entry point."""

    name = "HXMLGenerator"
    guid = "59be851a-6030-4fd9-9422-50f2071c7446"
    description = "HXML build file generator for Haxe projects"
    help_url = "https://github.com/SlavaRa/fdplugin-hxml-generator"

    def __init__(self, data_root: Path | None = None, environment: GlobalEnvironment | None = None):
        """
        Initialize the plugin (no filesystem access until initialize()).

        Args:
            data_root: Data root directory (defaults to hxmlgen.paths.get_data_root())
            environment: Global environment override; built from settings and
                the process environment at initialize() when None
        """
        self._data_root = data_root
        self._environment_override = environment
        self.settings_file: Optional[Path] = None
        self.settings = Settings()
        self.environment = environment if environment is not None else GlobalEnvironment()
        self.current_project: Optional[Project] = None

    def initialize(self) -> None:
        """Create the data directory and load settings (writing defaults if absent)."""
        data_dir = get_plugin_data_dir(self._data_root)
        data_dir.mkdir(parents=True, exist_ok=True)
        self.settings_file = get_settings_file(self._data_root)
        self.settings = load_settings(self.settings_file)
        if self._environment_override is None:
            self.environment = GlobalEnvironment.from_environ(self.settings)
        logger.debug(f"{self.name} initialized with settings {self.settings_file}")

    def dispose(self) -> None:
        """Save settings."""
        if self.settings_file is None:
            return
        save_settings(self.settings_file, self.settings)

    def handle_event(self, event: PluginEvent) -> Optional[GenerateBuildFileCommand]:
        """Dispatch a host event.

        Returns:
            A command to insert into the context menu, if the event produced one
        """
        if event.type is EventType.PROJECT_ACTIVATED:
            self.on_project_activated(event.project)  # type: ignore[union-attr]
            return None
        if event.type is EventType.TREE_SELECTION_CHANGED:
            return self.on_selection_changed(event.selection)  # type: ignore[union-attr]
        return None

    def on_project_activated(self, project: Optional[Project]) -> None:
        self.current_project = project
        if project is not None:
            logger.debug(f"Active project: {project.name} (supported={is_supported_project(project)})")

    def on_selection_changed(self, selection: Optional[TreeSelection]) -> Optional[GenerateBuildFileCommand]:
        """Offer the generate command when a Haxe project node is selected."""
        project = self.current_project
        if not is_supported_project(project):
            return None
        if selection is None or not selection.is_project_node:
            return None
        return GenerateBuildFileCommand(
            project=project,
            environment=self.environment,
            default_value=self.settings.prompt_default,
        )
