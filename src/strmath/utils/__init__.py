from . import jsonio

__all__ = ["jsonio"]
