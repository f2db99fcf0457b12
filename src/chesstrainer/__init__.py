"""Chess trainer: a tiny board engine plus guided lessons on top of it."""

__version__ = "0.1.0"
