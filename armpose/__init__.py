# armpose/__init__.py
"""Read-only HTTP access to the latest recorded robot-arm pose."""
__version__ = "0.1.0"
