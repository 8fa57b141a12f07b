"""HXML build file generation.

This module turns a project's derived compiler arguments into an HXML file.

Design:
    1. Derive raw arguments from the project (global classpaths first, with the
       no-compilation placeholder requested)
    2. Drop blank entries and the placeholder defines used only for in-editor
       analysis (exact match after trimming, never substring or prefix)
    3. Write "## <target-build-label>" followed by one argument per line

The file is only opened once derivation has succeeded, so a configuration
fault never leaves a truncated file behind.
"""

import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from ..project.haxe_project import HaxeProject

logger = logging.getLogger(__name__)

# Arguments only meaningful to in-editor analysis, never written to a build file
PLACEHOLDER_ARGS: tuple[str, ...] = (
    "-D no-compilation",
    "-D display",
)


def filter_build_args(args: Iterable[str]) -> List[str]:
    """Remove blank entries and placeholder defines from raw arguments.

    Each entry is trimmed; it is dropped when the trimmed text is empty or
    equals one of PLACEHOLDER_ARGS exactly. Survivors keep their relative
    order and are returned trimmed.

    Args:
        args: Raw argument sequence

    Returns:
        Filtered argument list

    Examples:
        >>> filter_build_args(["", "-lib foo", "-D display", "-D displaytest"])
        ['-lib foo', '-D displaytest']
    """
    result: List[str] = []
    for arg in args:
        line = arg.strip()
        if not line or line in PLACEHOLDER_ARGS:
            continue
        result.append(line)
    return result


def render_hxml(target_build: str, args: Sequence[str]) -> str:
    """Render HXML file content.

    Lines are joined with "\\n"; text-mode writes translate them to the
    platform line separator.

    Args:
        target_build: Target-build label for the header line
        args: Filtered arguments

    Returns:
        File content, every line terminated
    """
    lines = [f"## {target_build}", *args]
    return "".join(f"{line}\n" for line in lines)


def generate_hxml_build_file(project: HaxeProject, global_classpaths: Sequence[str], output_path: str | Path) -> Path:
    """Generate an HXML build file for a project.

    Args:
        project: Haxe project to describe
        global_classpaths: Environment-level classpaths, placed before project classpaths
        output_path: Destination file, created or truncated

    Returns:
        Path of the written file

    Raises:
        ProjectConfigurationError: If the project cannot derive its arguments
        OSError: If the destination cannot be written
    """
    raw_args = project.build_hxml(list(global_classpaths), project.output_path, no_compilation=True)
    args = filter_build_args(raw_args)
    target_build = project.target_build_label
    content = render_hxml(target_build, args)

    logger.debug(f"Derived {len(raw_args)} arguments for {project.name}, {len(args)} kept after filtering")

    output = Path(output_path)
    with open(output, "w", encoding="utf-8") as f:
        f.write(content)

    logger.info(f"Wrote {output} ({target_build}, {len(args)} arguments)")
    return output
