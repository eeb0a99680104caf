"""updir - navigate up the directory tree and list where you land."""

__version__ = "0.1.0"
