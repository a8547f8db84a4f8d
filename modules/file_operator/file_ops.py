"""
File operations module for fileops.

Executes list, search, copy, move and delete requests against the local
filesystem, printing progress to the console and recording each outcome
in the audit log when one is configured.
"""

import errno
import os
import shutil
import stat
from dataclasses import dataclass, asdict
from typing import Any, Callable, Iterator, List, Optional, Tuple

from rich.console import Console

from core.console import info, error, displayable
from core.exceptions import InvalidRequestError
from core.logger import AuditLogger, ActionStatus

from .requests import (
    Operation,
    ListRequest,
    SearchRequest,
    CopyRequest,
    MoveRequest,
    DeleteRequest,
)


@dataclass
class ActionResult:
    """Result of an operation execution."""
    success: bool
    status: str
    message: Optional[str] = None
    data: Optional[Any] = None


def walk(root: str, on_error: Callable[[OSError], None]) -> Iterator[Tuple[str, bool]]:
    """
    Walk the tree rooted at ``root`` depth-first.

    Yields ``(path, is_dir)`` for the root and then every descendant, in
    lexical order within each directory. Symlinks are reported but not
    followed.

    Errors on individual entries are passed to ``on_error`` and the walk
    carries on without that entry's subtree. An error on the root itself
    is raised.

    Args:
        root: Path to start from
        on_error: Called with each per-entry OSError
    """
    root_stat = os.lstat(root)
    stack = [(root, stat.S_ISDIR(root_stat.st_mode))]

    while stack:
        path, is_dir = stack.pop()
        yield path, is_dir
        if not is_dir:
            continue

        try:
            names = sorted(os.listdir(path))
        except OSError as e:
            on_error(e)
            continue

        children = []
        for name in names:
            child = os.path.join(path, name)
            try:
                child_is_dir = stat.S_ISDIR(os.lstat(child).st_mode)
            except OSError as e:
                on_error(e)
                continue
            children.append((child, child_is_dir))

        # Reversed so the first name comes off the stack next
        stack.extend(reversed(children))


def extension(name: str) -> str:
    """Return the suffix of ``name`` starting at its last dot, or ''."""
    dot = name.rfind(".")
    return name[dot:] if dot >= 0 else ""


def matches_query(name: str, query: str) -> bool:
    """
    Case-insensitive match of a query against a file's base name or extension.

    An empty query matches everything.
    """
    if not query:
        return True
    needle = query.lower()
    return needle in name.lower() or needle in extension(name).lower()


def copy_bytes(src: str, dst: str) -> int:
    """
    Stream the bytes of ``src`` into ``dst``, creating or truncating it.

    A partially written destination is left in place if the copy fails.

    Returns:
        Number of bytes copied
    """
    with open(src, "rb") as source:
        with open(dst, "wb") as destination:
            shutil.copyfileobj(source, destination)
            return destination.tell()


def rename_path(src: str, dst: str) -> None:
    """Rename ``src`` to ``dst``; fails across filesystems."""
    os.rename(src, dst)


def _ends_with_dot(path: str) -> bool:
    separators = os.sep + (os.altsep or "")
    stripped = path.rstrip(separators) or path
    return os.path.basename(stripped) in (".", "..")


def delete_path(path: str, recursive: bool) -> None:
    """
    Remove ``path``.

    With ``recursive`` a directory is removed along with its contents and a
    missing path is not an error. Without it exactly one entry is removed:
    missing paths and non-empty directories fail.

    A recursive delete of a path ending in "." or ".." is refused before
    anything is removed.
    """
    if recursive:
        if _ends_with_dot(path):
            raise OSError(errno.EINVAL, os.strerror(errno.EINVAL), path)
        if os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        elif os.path.lexists(path):
            os.remove(path)
        return

    if os.path.isdir(path) and not os.path.islink(path):
        os.rmdir(path)
    else:
        os.remove(path)


class FileOperator:
    """Executes operation requests and reports their outcome."""

    def __init__(self, console: Optional[Console] = None, logger: Optional[AuditLogger] = None):
        """
        Initialize FileOperator.

        Args:
            console: Console for status, entry and error output
            logger: Audit logger; None disables auditing
        """
        self.console = console or Console(highlight=False, emoji=False)
        self.logger = logger
        self._handlers = {
            ListRequest: self.list_files,
            SearchRequest: self.search_files,
            CopyRequest: self.copy_file,
            MoveRequest: self.move_file,
            DeleteRequest: self.delete_file,
        }

    def execute(self, request: Operation) -> ActionResult:
        """
        Run a single request.

        Filesystem errors and requests with an empty path are printed and
        returned as a failed result; they never propagate to the caller.
        """
        handler = self._handlers.get(type(request))
        if handler is None:
            raise TypeError(f"Unsupported operation: {type(request).__name__}")

        try:
            result = handler(request)
        except (OSError, InvalidRequestError) as e:
            self.log_error(e)
            result = ActionResult(
                success=False,
                status=ActionStatus.FAILED.value,
                message=str(e),
            )

        self._audit(request, result)
        return result

    def log_error(self, err: Exception) -> None:
        """Print an error message on its own line."""
        self.console.print(error(str(err)), soft_wrap=True)

    def _print_path(self, path: str) -> None:
        self.console.print(displayable(path), markup=False, emoji=False, soft_wrap=True)

    def _audit(self, request: Operation, result: ActionResult) -> None:
        if self.logger is None:
            return
        self.logger.log_action(
            action_type=request.action_type,
            description=request.describe(),
            status=ActionStatus(result.status),
            result=result.message,
            metadata=asdict(request),
        )

    def list_files(self, request: ListRequest) -> ActionResult:
        """
        Print every file and directory under the request path.

        The walk always descends fully; ``recursive`` does not limit it.
        """
        self.console.print(f"Listing files and directories in: {info(request.path)}", soft_wrap=True)
        request.validate()

        visited: List[str] = []
        for path, _ in walk(request.path, self.log_error):
            self._print_path(path)
            visited.append(path)

        return ActionResult(
            success=True,
            status=ActionStatus.EXECUTED.value,
            message=f"Listed {len(visited)} entries",
            data=visited,
        )

    def search_files(self, request: SearchRequest) -> ActionResult:
        """Print every non-directory entry whose name or extension matches the query."""
        self.console.print(
            f"Searching for files matching '{info(request.query)}' in: {info(request.path)}",
            soft_wrap=True,
        )
        request.validate()

        found: List[str] = []
        for path, is_dir in walk(request.path, self.log_error):
            if is_dir:
                continue
            if matches_query(os.path.basename(path), request.query):
                self._print_path(path)
                found.append(path)

        return ActionResult(
            success=True,
            status=ActionStatus.EXECUTED.value,
            message=f"Found {len(found)} matching files",
            data=found,
        )

    def copy_file(self, request: CopyRequest) -> ActionResult:
        """Copy one file's bytes to the destination."""
        self.console.print(
            f"Copying file from {info(request.source)} to {info(request.destination)}",
            soft_wrap=True,
        )
        request.validate()

        size = copy_bytes(request.source, request.destination)

        return ActionResult(
            success=True,
            status=ActionStatus.EXECUTED.value,
            message=f"File copied ({size} bytes)",
        )

    def move_file(self, request: MoveRequest) -> ActionResult:
        self.console.print(
            f"Moving file from {info(request.source)} to {info(request.destination)}",
            soft_wrap=True,
        )
        request.validate()

        rename_path(request.source, request.destination)

        return ActionResult(
            success=True,
            status=ActionStatus.EXECUTED.value,
            message="File moved",
        )

    def delete_file(self, request: DeleteRequest) -> ActionResult:
        self.console.print(f"Deleting file or directory: {info(request.path)}", soft_wrap=True)
        request.validate()

        delete_path(request.path, request.recursive)

        return ActionResult(
            success=True,
            status=ActionStatus.EXECUTED.value,
            message="Deleted",
        )
