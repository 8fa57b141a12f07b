"""hxmlgen - HXML build file generator for Haxe projects."""

__version__ = "1.0.0"

__all__ = ["__version__"]
