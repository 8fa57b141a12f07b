"""Host integration: lifecycle, events and the generate command."""

from hxmlgen.plugin.events import EventType, NodeKind, ProjectActivated, TreeSelection, TreeSelectionChanged
from hxmlgen.plugin.plugin_main import GenerateBuildFileCommand, PluginMain

__all__ = [
    "EventType",
    "GenerateBuildFileCommand",
    "NodeKind",
    "PluginMain",
    "ProjectActivated",
    "TreeSelection",
    "TreeSelectionChanged",
]
