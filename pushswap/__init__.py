"""Sort integers with two stacks and a fixed set of operations, printing the moves."""

__version__ = "1.0.0"
__all__ = ["cli", "parsing", "search", "sorting", "stacks"]