"""Two-stack sorting: produce operation lists and check them."""

__version__ = "1.0.0"
__all__ = ["stacks", "parsing", "sorting", "cli", "checker"]