"""Audit a directory against a recorded file listing."""

__version__ = "1.0.0"
