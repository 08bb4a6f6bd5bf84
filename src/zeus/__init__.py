"""Zeus package root."""

from zeus.exceptions import ErrorKind, ZeusError

__all__ = ["__version__", "ErrorKind", "ZeusError"]

__version__ = "0.3.0"
