"""A small tile-based role-playing world with procedural generation and a pygame front end."""

__version__ = "0.1.0"