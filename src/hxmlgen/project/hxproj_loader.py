"""
FlashDevelop project file loader.

Reads `.hxproj` XML files into HaxeProject instances. Project files of other
toolchains (e.g. `.as3proj`) are returned as ForeignProject so callers can
apply the supported-project check without parsing them.

Recognized layout:
    <project>
      <output><movie path="bin/Game.swf" /><movie platform="Flash Player" /> ...</output>
      <classpaths><class path="src" /></classpaths>
      <build><option directives="a&#xA;b" /><option mainClass="Main" /> ...</build>
      <haxelib><library name="actuate" /></haxelib>
      <library><asset path="lib/ui.swc" /></library>
      <options><option targetBuild="html5" /></options>
      <hxml>-cp src&#xA;-js bin/app.js</hxml>   (optional raw arguments)
    </project>
"""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Any, Dict, List

from .haxe_project import ForeignProject, HaxeProject, Project, ProjectConfigurationError

logger = logging.getLogger(__name__)

HAXE_PROJECT_SUFFIX = ".hxproj"


def _split_lines(value: str) -> List[str]:
    return [line.strip() for line in value.replace("\r\n", "\n").split("\n") if line.strip()]


def _parse_bool(value: str) -> bool:
    return value.strip().lower() == "true"


def _collect_options(parent: ET.Element | None, tag: str) -> Dict[str, str]:
    """Merge the attributes of all <tag> children of parent into one dictionary."""
    options: Dict[str, str] = {}
    if parent is None:
        return options
    for child in parent.findall(tag):
        options.update(child.attrib)
    return options


def parse_hxproj(root: ET.Element) -> Dict[str, Any]:
    """
    Convert a parsed .hxproj document into the dictionary accepted by HaxeProject.from_dict.

    Args:
        root: The <project> root element

    Returns:
        Project configuration dictionary (without "name")
    """
    movie = _collect_options(root.find("output"), "movie")
    build = _collect_options(root.find("build"), "option")
    options = _collect_options(root.find("options"), "option")

    version = movie.get("version", "11")
    minor = movie.get("minorVersion", "0")
    if minor and minor != "0":
        version = f"{version}.{minor}"

    classpaths_el = root.find("classpaths")
    classpaths = [el.get("path", "") for el in classpaths_el.findall("class")] if classpaths_el is not None else []

    haxelib_el = root.find("haxelib")
    libraries = [el.get("name", "") for el in haxelib_el.findall("library")] if haxelib_el is not None else []

    library_el = root.find("library")
    assets = [el.get("path", "") for el in library_el.findall("asset")] if library_el is not None else []
    swc_libraries = [a for a in assets if a.lower().endswith(".swc")]

    data: Dict[str, Any] = {
        "platform": movie.get("platform", "Flash Player"),
        "movie": {
            "output_path": movie.get("path", ""),
            "width": movie.get("width", 800),
            "height": movie.get("height", 600),
            "fps": movie.get("fps", 30),
            "background": movie.get("background", "#FFFFFF"),
            "version": version,
        },
        "classpaths": [cp for cp in classpaths if cp],
        "libraries": [lib for lib in libraries if lib],
        "directives": _split_lines(build.get("directives", "")),
        "additional": _split_lines(build.get("additional", "")),
        "swc_libraries": swc_libraries,
        "main_class": build.get("mainClass", ""),
        "enable_debug": _parse_bool(build.get("enabledebug", "False")),
        "flash_strict": _parse_bool(build.get("flashStrict", "False")),
        "target_build": options.get("targetBuild", ""),
    }

    hxml_el = root.find("hxml")
    if hxml_el is not None:
        data["raw_hxml"] = (hxml_el.text or "").replace("\r\n", "\n").split("\n")

    return data


def load_project(project_file: Path) -> Project:
    """
    Load a project file.

    Args:
        project_file: Path to a .hxproj (or other toolchain) project file

    Returns:
        HaxeProject for .hxproj files, ForeignProject otherwise

    Raises:
        FileNotFoundError: If the project file does not exist
        ProjectConfigurationError: If the .hxproj file is malformed
    """
    if not project_file.is_file():
        raise FileNotFoundError(f"Project file not found: {project_file}")

    directory = project_file.resolve().parent
    name = project_file.stem

    if project_file.suffix.lower() != HAXE_PROJECT_SUFFIX:
        logger.debug(f"{project_file} is not a Haxe project")
        return ForeignProject(name=name, directory=directory)

    try:
        root = ET.parse(project_file).getroot()
    except ET.ParseError as e:
        raise ProjectConfigurationError(f"Malformed project file {project_file}: {e}") from e

    if root.tag != "project":
        raise ProjectConfigurationError(f"Malformed project file {project_file}: root element is <{root.tag}>, expected <project>")

    data = parse_hxproj(root)
    data["name"] = name
    project = HaxeProject.from_dict(data, directory)
    logger.debug(f"Loaded project {name} ({project.platform}) from {project_file}")
    return project
