"""Haxe project model and compiler argument derivation.

This module defines:
- ProjectKind: capability tag telling the Haxe toolchain apart from others
- HaxePlatform / PlatformInfo: target platform table (compiler mode, label)
- MovieOptions: output options (path, SWF header, SWF version)
- HaxeProject: project configuration consumed by the HXML builder
- ForeignProject: a project of another toolchain (never generated)

Design:
    HaxeProject.build_hxml() derives the raw, ordered compiler arguments.
    Raw output may contain placeholder defines only meaningful to in-editor
    analysis; callers that write build files filter them out.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, TypeGuard, Union


class ProjectConfigurationError(Exception):
    """Raised when a project cannot produce a build-argument derivation."""

    pass


class ProjectKind(Enum):
    """Toolchain a project belongs to."""

    HAXE = "haxe"
    OTHER = "other"


class HaxePlatform(Enum):
    """Target platforms, valued by their project-file display name."""

    FLASH = "Flash Player"
    AIR = "AIR"
    AIR_MOBILE = "AIR Mobile"
    JAVASCRIPT = "JavaScript"
    NEKO = "Neko"
    PHP = "PHP"
    CPP = "C++"
    CSHARP = "C#"
    JAVA = "Java"
    PYTHON = "Python"
    HASHLINK = "HashLink"
    LUA = "Lua"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_string(cls, value: str) -> "HaxePlatform":
        """Convert a platform name to HaxePlatform.

        Accepts the display name ("Flash Player") or the short label ("flash"),
        case-insensitively.

        Raises:
            ProjectConfigurationError: If the platform is unknown
        """
        wanted = value.strip().lower()
        for platform in cls:
            if platform.value.lower() == wanted or PLATFORMS[platform].label == wanted:
                return platform
        raise ProjectConfigurationError(f"Unknown Haxe target: {value!r}")


@dataclass(frozen=True)
class PlatformInfo:
    """Compiler facts for a target platform.

    Attributes:
        mode: Compiler output switch without the leading dash (e.g. "swf", "js")
        label: Short target-build label (e.g. "flash", "js")
        is_flash: Whether the target produces a SWF (enables -swf-* options)
    """

    mode: str
    label: str
    is_flash: bool = False


PLATFORMS: dict[HaxePlatform, PlatformInfo] = {
    HaxePlatform.FLASH: PlatformInfo(mode="swf", label="flash", is_flash=True),
    HaxePlatform.AIR: PlatformInfo(mode="swf", label="air", is_flash=True),
    HaxePlatform.AIR_MOBILE: PlatformInfo(mode="swf", label="air-mobile", is_flash=True),
    HaxePlatform.JAVASCRIPT: PlatformInfo(mode="js", label="js"),
    HaxePlatform.NEKO: PlatformInfo(mode="neko", label="neko"),
    HaxePlatform.PHP: PlatformInfo(mode="php", label="php"),
    HaxePlatform.CPP: PlatformInfo(mode="cpp", label="cpp"),
    HaxePlatform.CSHARP: PlatformInfo(mode="cs", label="cs"),
    HaxePlatform.JAVA: PlatformInfo(mode="java", label="java"),
    HaxePlatform.PYTHON: PlatformInfo(mode="python", label="python"),
    HaxePlatform.HASHLINK: PlatformInfo(mode="hl", label="hl"),
    HaxePlatform.LUA: PlatformInfo(mode="lua", label="lua"),
}

NO_COMPILATION_DEFINE = "-D no-compilation"


def quote_path(path: str) -> str:
    """Normalize separators to '/' and double-quote paths containing spaces."""
    normalized = "/".join(path.split("\\"))
    if " " in normalized and not (normalized.startswith('"') and normalized.endswith('"')):
        return f'"{normalized}"'
    return normalized


@dataclass(frozen=True)
class MovieOptions:
    """Output options of a project.

    Attributes:
        output_path: Compiled output file or directory, relative to the project
        width: SWF stage width
        height: SWF stage height
        fps: SWF frame rate
        background: SWF background color as RRGGBB hex
        version: SWF player version (e.g. "11.4")
    """

    output_path: str = ""
    width: int = 800
    height: int = 600
    fps: int = 30
    background: str = "FFFFFF"
    version: str = "11"

    @property
    def swf_header(self) -> str:
        return f"{self.width}:{self.height}:{self.fps}:{self.background.lstrip('#')}"


@dataclass(frozen=True)
class HaxeProject:
    """Read-only Haxe project configuration.

    Attributes:
        name: Project name
        directory: Project base directory
        platform: Target platform
        movie: Output options
        classpaths: Project source paths
        libraries: haxelib library names (or full "-lib name" entries)
        directives: Conditional compilation defines, without "-D"
        additional: Extra compiler option lines
        swc_libraries: SWC files linked into Flash targets
        main_class: Entry point class name
        enable_debug: Emit -debug
        flash_strict: Emit --flash-strict for Flash targets
        target_build: Explicit target-build identifier (e.g. "html5"), empty for default
        raw_hxml: Pre-computed arguments from an external display tool, used verbatim
    """

    name: str
    directory: Path
    platform: HaxePlatform
    movie: MovieOptions = field(default_factory=MovieOptions)
    classpaths: tuple[str, ...] = ()
    libraries: tuple[str, ...] = ()
    directives: tuple[str, ...] = ()
    additional: tuple[str, ...] = ()
    swc_libraries: tuple[str, ...] = ()
    main_class: str = ""
    enable_debug: bool = False
    flash_strict: bool = False
    target_build: str = ""
    raw_hxml: Optional[tuple[str, ...]] = None

    @property
    def kind(self) -> ProjectKind:
        return ProjectKind.HAXE

    @property
    def platform_info(self) -> PlatformInfo:
        return PLATFORMS[self.platform]

    @property
    def output_path(self) -> str:
        return self.movie.output_path

    @property
    def target_build_label(self) -> str:
        """Active target-build identifier, defaulting to the platform label."""
        target = self.target_build.strip()
        return target if target else self.platform_info.label

    def build_hxml(self, paths: Iterable[str], outfile: str, no_compilation: bool) -> List[str]:
        """Derive the ordered compiler arguments for this project.

        Args:
            paths: Extra classpaths placed before the project's own classpaths
            outfile: Compiled output path for the platform switch
            no_compilation: Add the no-compilation placeholder define

        Returns:
            Raw argument list (may contain placeholder defines)

        Raises:
            ProjectConfigurationError: If the project is missing required settings
        """
        if self.raw_hxml is not None:
            return list(self.raw_hxml)

        info = self.platform_info
        if not outfile.strip():
            raise ProjectConfigurationError(f"Project {self.name!r} has no output path for target {self.platform}")

        args: List[str] = []

        if self.enable_debug:
            args.append("-debug")

        if info.is_flash:
            for swc in self.swc_libraries:
                args.append(f"-swf-lib {quote_path(swc)}")

        for lib in self.libraries:
            lib = lib.strip()
            if not lib:
                continue
            args.append(lib if lib.startswith("-lib") else f"-lib {lib}")

        for cp in [*paths, *self.classpaths]:
            args.append(f"-cp {quote_path(cp)}")

        args.append(f"-{info.mode} {quote_path(outfile)}")

        if info.is_flash:
            args.append(f"-swf-header {self.movie.swf_header}")
            args.append(f"-swf-version {self.movie.version}")
            if self.flash_strict:
                args.append("--flash-strict")

        for define in self.directives:
            define = define.strip()
            if define:
                args.append(f"-D {define}")

        if no_compilation:
            args.append(NO_COMPILATION_DEFINE)

        if self.main_class.strip():
            args.append(f"-main {self.main_class.strip()}")

        for option in self.additional:
            option = option.strip()
            if not option or option.startswith("#"):
                continue
            args.append(option)

        return args

    @classmethod
    def from_dict(cls, data: Dict[str, Any], directory: Path) -> "HaxeProject":
        """
        Parse a project from a dictionary.

        Args:
            data: Raw project configuration
            directory: Project base directory

        Returns:
            HaxeProject instance

        Raises:
            ProjectConfigurationError: If required fields are missing or invalid
        """
        try:
            name = data["name"]
            platform_name = data["platform"]
        except KeyError as e:
            raise ProjectConfigurationError(f"Missing required field in project config: {e}")

        movie_data = data.get("movie", {})
        try:
            movie = MovieOptions(
                output_path=movie_data.get("output_path", ""),
                width=int(movie_data.get("width", 800)),
                height=int(movie_data.get("height", 600)),
                fps=int(movie_data.get("fps", 30)),
                background=movie_data.get("background", "FFFFFF"),
                version=str(movie_data.get("version", "11")),
            )
        except (TypeError, ValueError) as e:
            raise ProjectConfigurationError(f"Invalid movie options in project {name!r}: {e}")

        raw_hxml = data.get("raw_hxml")

        return cls(
            name=name,
            directory=directory,
            platform=HaxePlatform.from_string(platform_name),
            movie=movie,
            classpaths=tuple(data.get("classpaths", [])),
            libraries=tuple(data.get("libraries", [])),
            directives=tuple(data.get("directives", [])),
            additional=tuple(data.get("additional", [])),
            swc_libraries=tuple(data.get("swc_libraries", [])),
            main_class=data.get("main_class", ""),
            enable_debug=bool(data.get("enable_debug", False)),
            flash_strict=bool(data.get("flash_strict", False)),
            target_build=data.get("target_build", ""),
            raw_hxml=tuple(raw_hxml) if raw_hxml is not None else None,
        )


@dataclass(frozen=True)
class ForeignProject:
    """A project of a toolchain this generator does not handle."""

    name: str
    directory: Path

    @property
    def kind(self) -> ProjectKind:
        return ProjectKind.OTHER


Project = Union[HaxeProject, ForeignProject]


def is_supported_project(project: Optional[Project]) -> TypeGuard[HaxeProject]:
    """Return True if the project belongs to the Haxe toolchain."""
    return project is not None and project.kind is ProjectKind.HAXE
