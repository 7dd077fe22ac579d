"""Solutions to short competitive-programming exercises, with a command-line front end."""

__version__ = "0.1.0"
__all__ = ["cli", "numbers", "sequences"]