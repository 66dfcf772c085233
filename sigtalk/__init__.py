"""Send text between processes bit by bit using SIGUSR1 and SIGUSR2, with small text helpers."""

__version__ = "0.1.0"