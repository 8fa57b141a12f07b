"""
Command-line interface for hxmlgen.

This module provides the `hxmlgen` CLI tool for writing HXML build files
from FlashDevelop Haxe projects.
"""

import argparse
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from rich.console import Console

from hxmlgen import __version__
from hxmlgen.build.hxml_builder import generate_hxml_build_file
from hxmlgen.build.output_path import resolve_output_path
from hxmlgen.output import init_timer, log, log_detail, log_error, log_header, log_success, set_verbose
from hxmlgen.paths import get_settings_file
from hxmlgen.project.haxe_project import ProjectConfigurationError, is_supported_project
from hxmlgen.project.hxproj_loader import load_project
from hxmlgen.settings import GlobalEnvironment, Settings, SettingsError, load_settings

console = Console(highlight=False)


@dataclass
class GenerateArgs:
    """Arguments for the generate command."""

    project_file: Path
    output: str = ""
    classpaths: List[str] = field(default_factory=list)
    verbose: bool = False


def _load_settings_if_present() -> Settings:
    """Read the settings file without creating it.

    Raises:
        SettingsError: If the file is invalid or cannot be read
    """
    settings_file = get_settings_file()
    if not settings_file.exists():
        return Settings()
    try:
        return load_settings(settings_file)
    except OSError as e:
        raise SettingsError(f"Cannot read settings file {settings_file}: {type(e).__name__}: {e}") from e


def _fail(title: str, message: str) -> None:
    console.print()
    console.print(f"[bold red]✗ {title}[/bold red]")
    log_error(message)
    sys.exit(1)


def generate_command(args: GenerateArgs) -> None:
    """Generate an HXML build file for a project.

    Examples:
        hxmlgen game.hxproj                    # Write build.hxml next to the project
        hxmlgen game.hxproj -o out/web.hxml    # Custom output path
        hxmlgen game.hxproj --cp ../shared     # Extra global classpath
    """
    init_timer()
    log_header("hxmlgen", __version__)

    try:
        settings = _load_settings_if_present()
        set_verbose(args.verbose or settings.verbose)
        log(f"Loading project: {args.project_file}")
        project = load_project(args.project_file)

        if not is_supported_project(project):
            _fail("Unsupported project", f"{args.project_file} is not a Haxe project (.hxproj)")
            return

        environment = GlobalEnvironment.from_environ(settings, args.classpaths)
        output = resolve_output_path(args.output, project.directory)

        log_detail(f"Platform: {project.platform}", verbose_only=True)
        log_detail(f"Target: {project.target_build_label}", verbose_only=True)
        for cp in environment.global_classpaths:
            log_detail(f"Global classpath: {cp}", verbose_only=True)

        written = generate_hxml_build_file(project, environment.global_classpaths, output)

        console.print()
        console.print("[bold green]✓ HXML build file generated![/bold green]")
        log_success(f"Output: {written}")
        sys.exit(0)

    except FileNotFoundError as e:
        _fail("Error: File not found", str(e))

    except ProjectConfigurationError as e:
        _fail("Error: Invalid project configuration", str(e))

    except SettingsError as e:
        _fail("Error: Invalid settings", str(e))

    except PermissionError as e:
        _fail("Error: Permission denied", str(e))

    except OSError as e:
        _fail("Error: Cannot write build file", f"{type(e).__name__}: {e}")

    except KeyboardInterrupt:
        console.print()
        console.print("[bold yellow]✗ Interrupted[/bold yellow]")
        sys.exit(130)


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        prog="hxmlgen",
        description="Generate an HXML build file from a Haxe project",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"hxmlgen {__version__}",
    )
    parser.add_argument(
        "project_file",
        type=Path,
        help="Project file (.hxproj)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default="",
        help="Output file (default: build.hxml in the project directory)",
    )
    parser.add_argument(
        "--cp",
        dest="classpaths",
        action="append",
        default=[],
        metavar="PATH",
        help="Additional global classpath (repeatable)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show verbose output",
    )

    parsed_args = parser.parse_args(argv)

    if parsed_args.project_file.is_dir():
        console.print(f"[bold red]✗ Error: Path is a directory: {parsed_args.project_file}[/bold red]")
        sys.exit(2)

    args = GenerateArgs(
        project_file=parsed_args.project_file,
        output=parsed_args.output,
        classpaths=parsed_args.classpaths,
        verbose=parsed_args.verbose,
    )
    generate_command(args)


if __name__ == "__main__":
    main()
