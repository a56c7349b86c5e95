"""Full-screen terminal program and building blocks for talking to serial ports."""

__version__ = "0.1.0"
__all__ = ["__version__"]