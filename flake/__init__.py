"""flake - fold-and-snip paper snowflake cutting engine."""

__version__ = "0.1.0"
