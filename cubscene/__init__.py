"""Reading and validating the texture and colour header of .cub scene files."""

__version__ = "0.1.0"
__all__ = ["colors", "elements", "errors", "parser"]