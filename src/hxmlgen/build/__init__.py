"""HXML build file generation."""

from hxmlgen.build.hxml_builder import PLACEHOLDER_ARGS, filter_build_args, generate_hxml_build_file, render_hxml
from hxmlgen.build.output_path import DEFAULT_OUTPUT, resolve_output_path, resolve_prompt_result

__all__ = [
    "DEFAULT_OUTPUT",
    "PLACEHOLDER_ARGS",
    "filter_build_args",
    "generate_hxml_build_file",
    "render_hxml",
    "resolve_output_path",
    "resolve_prompt_result",
]
