"""Two-stack integer sorting with character, string, formatting and line-reading helpers."""

__version__ = "0.1.0"
__all__ = ["algo", "chars", "cli", "next_line", "parsing", "printf", "stacks", "strings"]