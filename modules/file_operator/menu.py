"""
Interactive menu for fileops.

Reads an operation number and its parameters from the user, builds the
matching request and hands it to a FileOperator, until the user exits.
"""

from typing import Callable, Optional

from rich.console import Console

from .file_ops import FileOperator
from .requests import (
    Operation,
    ListRequest,
    SearchRequest,
    CopyRequest,
    MoveRequest,
    DeleteRequest,
)


SOURCE_PATH = "Enter the source path: "
DESTINATION_PATH = "Enter the destination path: "
SEARCH_QUERY = "Enter the search query: "
RECURSIVE_BOOL = "Enter true/false for recursive: "

MENU_LINES = [
    "Select an operation:",
    "1. List files",
    "2. Search files",
    "3. Copy file",
    "4. Move file",
    "5. Delete file",
    "6. Exit",
]

EXIT_CHOICE = 6

TRUE_STRINGS = {"1", "t", "true"}
FALSE_STRINGS = {"0", "f", "false"}


def parse_bool(text: str) -> Optional[bool]:
    """Parse a boolean literal, case-insensitively; None if unrecognized."""
    value = text.strip().lower()
    if value in TRUE_STRINGS:
        return True
    if value in FALSE_STRINGS:
        return False
    return None


def parse_choice(text: str) -> Optional[int]:
    """Parse a menu selection; None unless it is an integer from 1 to 6."""
    try:
        choice = int(text.strip())
    except ValueError:
        return None
    if 1 <= choice <= EXIT_CHOICE:
        return choice
    return None


class Menu:
    """
    The prompt loop.

    Input is read through ``read``, a callable taking the prompt text and
    returning one line. It defaults to ``console.input``; tests substitute a
    scripted reader.
    """

    def __init__(
        self,
        operator: FileOperator,
        console: Optional[Console] = None,
        read: Optional[Callable[[str], str]] = None
    ):
        self.operator = operator
        self.console = console or operator.console
        self.read = read or self.console.input

    def run(self) -> None:
        """Show the menu until the user picks Exit or input ends."""
        try:
            while True:
                self._show_menu()
                choice = parse_choice(self.prompt("Enter the operation number: "))
                if choice is None:
                    self.console.print("Invalid operation number. Please enter a number between 1 and 6.")
                    continue

                if choice == EXIT_CHOICE:
                    self.console.print("Exiting program...")
                    return

                self._run_choice(choice)
        except (EOFError, KeyboardInterrupt):
            self.console.print("\nGoodbye!")

    def _show_menu(self) -> None:
        for line in MENU_LINES:
            self.console.print(line)

    def _run_choice(self, choice: int) -> None:
        self.operator.execute(self.build_request(choice))

    def prompt(self, text: str) -> str:
        return self.read(text).strip()

    def prompt_bool(self, text: str) -> bool:
        """Ask until the answer parses as a boolean."""
        while True:
            value = parse_bool(self.prompt(text))
            if value is not None:
                return value
            self.console.print("Invalid input. Please enter true or false.")

    def build_request(self, choice: int) -> Operation:
        """Prompt for the parameters of operation ``choice`` and build its request."""
        if choice == 1:
            path = self.prompt(SOURCE_PATH)
            return ListRequest(path=path, recursive=self.prompt_bool(RECURSIVE_BOOL))

        if choice == 2:
            path = self.prompt(SOURCE_PATH)
            query = self.prompt(SEARCH_QUERY)
            return SearchRequest(path=path, query=query, recursive=self.prompt_bool(RECURSIVE_BOOL))

        if choice in (3, 4):
            source = self.prompt(SOURCE_PATH)
            destination = self.prompt(DESTINATION_PATH)
            recursive = self.prompt_bool(RECURSIVE_BOOL)
            request_type = CopyRequest if choice == 3 else MoveRequest
            return request_type(source=source, destination=destination, recursive=recursive)

        if choice == 5:
            path = self.prompt(SOURCE_PATH)
            return DeleteRequest(path=path, recursive=self.prompt_bool(RECURSIVE_BOOL))

        raise ValueError(f"No operation for choice {choice}")
