"""Pytest configuration and fixtures for hxmlgen tests."""

import sys
from pathlib import Path
from typing import Callable

import pytest

from hxmlgen.project.haxe_project import HaxePlatform, HaxeProject, MovieOptions

SAMPLE_HXPROJ = """<?xml version="1.0" encoding="utf-8"?>
<project version="2">
  <output>
    <movie outputType="Application" />
    <movie input="" />
    <movie path="bin/Game.swf" />
    <movie fps="60" />
    <movie width="1024" />
    <movie height="768" />
    <movie version="11" />
    <movie minorVersion="4" />
    <movie platform="Flash Player" />
    <movie background="#336699" />
  </output>
  <classpaths>
    <class path="src" />
    <class path="lib\\shared src" />
  </classpaths>
  <build>
    <option directives="analytics&#xA;&#xA;level=3" />
    <option flashStrict="True" />
    <option mainClass="Main" />
    <option enabledebug="False" />
    <option additional="--macro keep('Main')&#xA;# disabled&#xA;-dce full" />
  </build>
  <haxelib>
    <library name="actuate" />
  </haxelib>
  <library>
    <asset path="lib/ui.swc" />
    <asset path="assets/logo.png" />
  </library>
  <options>
    <option targetBuild="" />
  </options>
</project>
"""


@pytest.fixture(autouse=True)
def isolate_output_globals():
    """Reset hxmlgen.output module state before/after each test."""
    from hxmlgen import output

    original_start_time = output._start_time
    original_output_stream = output._output_stream
    original_verbose = output._verbose

    output._start_time = None
    output._output_stream = sys.stdout
    output._verbose = True

    yield

    output._start_time = original_start_time
    output._output_stream = original_output_stream
    output._verbose = original_verbose


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch, tmp_path):
    """Keep tests away from the real data directory and global classpaths."""
    monkeypatch.delenv("HXMLGEN_GLOBAL_CLASSPATHS", raising=False)
    monkeypatch.delenv("HXMLGEN_DEV_MODE", raising=False)
    monkeypatch.setenv("HXMLGEN_DATA_DIR", str(tmp_path / "data"))


@pytest.fixture
def flash_project(tmp_path) -> HaxeProject:
    """Minimal Flash project: output bin/out.swf, main class Main."""
    return HaxeProject(
        name="Game",
        directory=tmp_path,
        platform=HaxePlatform.FLASH,
        movie=MovieOptions(output_path="out.swf"),
        main_class="Main",
    )


@pytest.fixture
def write_hxproj(tmp_path) -> Callable[..., Path]:
    """Write a .hxproj file into tmp_path and return its path."""

    def _write(content: str = SAMPLE_HXPROJ, name: str = "Game.hxproj") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
