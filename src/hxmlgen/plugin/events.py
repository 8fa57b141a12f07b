"""
Host events delivered to the plugin.

The host shim translates its own notifications into these dataclasses and
passes them to PluginMain.handle_event(). The current tree selection travels
with the event instead of being cached by the plugin.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from ..project.haxe_project import Project


class EventType(Enum):
    """Notification kinds the plugin reacts to."""

    PROJECT_ACTIVATED = "project_activated"
    TREE_SELECTION_CHANGED = "tree_selection_changed"


class NodeKind(Enum):
    """Kind of node selected in the host's project tree."""

    PROJECT = "project"
    DIRECTORY = "directory"
    FILE = "file"
    OTHER = "other"


@dataclass(frozen=True)
class TreeSelection:
    """Current project-tree selection.

    Attributes:
        node_kind: Kind of the selected node
    """

    node_kind: NodeKind

    @property
    def is_project_node(self) -> bool:
        return self.node_kind is NodeKind.PROJECT


@dataclass(frozen=True)
class ProjectActivated:
    """The host opened or switched to a project (None when closed)."""

    project: Optional[Project]

    @property
    def type(self) -> EventType:
        return EventType.PROJECT_ACTIVATED


@dataclass(frozen=True)
class TreeSelectionChanged:
    """The selection in the host's project tree changed."""

    selection: Optional[TreeSelection]

    @property
    def type(self) -> EventType:
        return EventType.TREE_SELECTION_CHANGED


PluginEvent = Union[ProjectActivated, TreeSelectionChanged]
