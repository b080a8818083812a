"""Utility functions for the KWD decoder."""
from .logging import setup_logging, log_exception
from .diagnostics import Diagnostics, DiagnosticEvent, DiagnosticKind

__all__ = [
    'setup_logging',
    'log_exception',
    'Diagnostics',
    'DiagnosticEvent',
    'DiagnosticKind',
]
