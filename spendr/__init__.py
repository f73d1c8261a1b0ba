"""spendr - a personal expense tracker for the terminal."""

__version__ = "0.1.0"
