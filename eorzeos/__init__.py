"""A playful command shell on a simulated text-mode character screen."""

__version__ = "0.1.0"
__all__ = ["numeric", "screen", "shell"]