"""Arduino-style runtime primitives for simulated boards: core helpers, String and device storage."""

__version__ = "0.1.0"
__all__ = ["arduino", "wstring", "device"]