"""
File operator module for fileops.

Provides the list, search, copy, move and delete operations and the
interactive menu that drives them.
"""

from .file_ops import FileOperator, ActionResult
from .menu import Menu
from .requests import (
    Operation,
    ListRequest,
    SearchRequest,
    CopyRequest,
    MoveRequest,
    DeleteRequest,
)

__all__ = [
    'FileOperator',
    'ActionResult',
    'Menu',
    'Operation',
    'ListRequest',
    'SearchRequest',
    'CopyRequest',
    'MoveRequest',
    'DeleteRequest',
]
