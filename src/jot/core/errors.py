"""Errors raised by jot operations."""

from __future__ import annotations


class JotError(Exception):
    """Base class for failures reported to the user."""


class MissingHomeError(JotError):
    def __init__(self) -> None:
        super().__init__("HOME env var not set")


class ConfigError(JotError):
    pass


class InvalidTableNameError(JotError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"Invalid table name: {name!r}. Use letters, digits and underscores, "
            "starting with a letter or underscore"
        )
        self.name = name


class TableNotFoundError(JotError):
    def __init__(self, name: str) -> None:
        super().__init__(
            f"Table {name} does not exist. Make sure it exists before "
            "performing show or clear operations"
        )
        self.name = name


class ConflictingViewError(JotError):
    def __init__(self) -> None:
        super().__init__("Cannot use both --oldest and --recent. Pass one of them")


class InvalidDateError(JotError):
    pass


class NoteDecodeError(JotError):
    pass


class EmptyNoteError(JotError):
    def __init__(self) -> None:
        super().__init__("Nothing to jot: pass some text or pipe content in")


class InvalidNumberError(JotError):
    pass
