"""shortlink: maps long URLs to short codes and redirects back."""

__version__ = "1.0.0"
