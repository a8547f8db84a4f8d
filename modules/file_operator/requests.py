"""
Request values for the five file operations.

Each request is an immutable bundle of the parameters read from the user
for one menu iteration. Requests are built from whatever was typed;
``validate`` rejects empty paths when the request is executed. Together
they form the closed ``Operation`` variant that FileOperator dispatches on.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from core.exceptions import InvalidRequestError
from core.logger import ActionType


def _require_path(value: str, field_name: str) -> None:
    if not value:
        raise InvalidRequestError(f"{field_name} must not be empty")


@dataclass(frozen=True)
class ListRequest:
    """List every entry under a path."""
    path: str
    recursive: bool = False

    action_type: ClassVar[ActionType] = ActionType.LIST

    def validate(self) -> None:
        """Raise InvalidRequestError if a required path is empty."""
        _require_path(self.path, "path")

    def describe(self) -> str:
        return f"List {self.path}"


@dataclass(frozen=True)
class SearchRequest:
    """Find non-directory entries whose name or extension contains a query."""
    path: str
    query: str = ""
    recursive: bool = False

    action_type: ClassVar[ActionType] = ActionType.SEARCH

    def validate(self) -> None:
        _require_path(self.path, "path")

    def describe(self) -> str:
        return f"Search {self.path} for '{self.query}'"


@dataclass(frozen=True)
class CopyRequest:
    """Copy a single file."""
    source: str
    destination: str
    recursive: bool = False  # collected from the user, not used by copy

    action_type: ClassVar[ActionType] = ActionType.COPY

    def validate(self) -> None:
        _require_path(self.source, "source")
        _require_path(self.destination, "destination")

    def describe(self) -> str:
        return f"Copy {self.source} to {self.destination}"


@dataclass(frozen=True)
class MoveRequest:
    """Rename a file or directory."""
    source: str
    destination: str
    recursive: bool = False  # collected from the user, not used by move

    action_type: ClassVar[ActionType] = ActionType.MOVE

    def validate(self) -> None:
        _require_path(self.source, "source")
        _require_path(self.destination, "destination")

    def describe(self) -> str:
        return f"Move {self.source} to {self.destination}"


@dataclass(frozen=True)
class DeleteRequest:
    """Remove a path; recursive removes directory trees and tolerates absence."""
    path: str
    recursive: bool = False

    action_type: ClassVar[ActionType] = ActionType.DELETE

    def validate(self) -> None:
        _require_path(self.path, "path")

    def describe(self) -> str:
        mode = "recursively " if self.recursive else ""
        return f"Delete {mode}{self.path}"


Operation = Union[ListRequest, SearchRequest, CopyRequest, MoveRequest, DeleteRequest]
