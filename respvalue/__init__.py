"""Redis protocol reply values and encoding of Python values as command arguments."""

__version__ = "0.1.0"
__all__ = ["args", "value"]