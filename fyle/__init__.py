"""Interactive console file manager: index a directory tree, show it, search names, export and import JSON."""

__version__ = "0.1.0"