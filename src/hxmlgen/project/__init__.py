"""Project models and project file loading."""

from hxmlgen.project.haxe_project import (
    ForeignProject,
    HaxePlatform,
    HaxeProject,
    MovieOptions,
    Project,
    ProjectConfigurationError,
    ProjectKind,
    is_supported_project,
)
from hxmlgen.project.hxproj_loader import load_project

__all__ = [
    "ForeignProject",
    "HaxePlatform",
    "HaxeProject",
    "MovieOptions",
    "Project",
    "ProjectConfigurationError",
    "ProjectKind",
    "is_supported_project",
    "load_project",
]
