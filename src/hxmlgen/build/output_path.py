"""Output path resolution for generated build files."""

import os
from pathlib import Path
from typing import Optional

DEFAULT_OUTPUT = "build.hxml"


def resolve_output_path(user_input: str, project_directory: str | Path) -> str:
    """Resolve the destination path for a generated build file.

    Args:
        user_input: Path typed by the user, possibly blank or padded
        project_directory: Project base directory

    Returns:
        The trimmed input, or project_directory/build.hxml when it is blank

    Examples:
        >>> resolve_output_path("", "/proj")
        '/proj/build.hxml'
        >>> resolve_output_path("  out/custom.hxml  ", "/proj")
        'out/custom.hxml'
    """
    output = user_input.strip()
    if not output:
        return os.path.join(os.fspath(project_directory), DEFAULT_OUTPUT)
    return output


def resolve_prompt_result(result: Optional[str], project_directory: str | Path) -> Optional[str]:
    """Map a prompt result to an output path.

    Args:
        result: Text confirmed by the user, or None if the prompt was cancelled
        project_directory: Project base directory

    Returns:
        Resolved output path, or None when cancelled
    """
    if result is None:
        return None
    return resolve_output_path(result, project_directory)
