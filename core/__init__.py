# fileops - Core Module
"""
Core infrastructure for fileops.
Configuration, console formatting, the audit trail and project exceptions.
"""

from .config import Settings, load_settings, save_settings
from .console import info, error, displayable, make_console
from .exceptions import FileOpsError, InvalidRequestError, ConfigurationError
from .logger import AuditLogger, AuditEntry, ActionType, ActionStatus

__all__ = [
    "Settings",
    "load_settings",
    "save_settings",
    "info",
    "error",
    "displayable",
    "make_console",
    "FileOpsError",
    "InvalidRequestError",
    "ConfigurationError",
    "AuditLogger",
    "AuditEntry",
    "ActionType",
    "ActionStatus",
]

__version__ = "0.1.0"
