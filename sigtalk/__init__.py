"""Text messaging between processes over SIGUSR1 and SIGUSR2, with C-style helper utilities."""

__version__ = "0.1.0"