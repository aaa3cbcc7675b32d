"""A small IRC server with channels, channel modes and server operators."""

__version__ = "1.0.0"