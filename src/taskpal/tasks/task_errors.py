# src/taskpal/tasks/task_errors.py

"""
Exception taxonomy for the task subsystem.

Input errors (EmptyDescriptionError, InvalidDateFormatError, ...) are
user-correctable: the chat core turns their message into a reply.
Storage errors are operational and handled by the bootstrap / engine.
"""

from __future__ import annotations


class TaskError(Exception):
    """Base class for every error raised by taskpal."""


class EmptyDescriptionError(TaskError):
    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Hold up! The {field} can't be empty. What exactly should I track?")


class InvalidDateFormatError(TaskError):
    def __init__(self, raw: str, expected: str = "yyyy-mm-dd or yyyy-mm-dd HHmm") -> None:
        self.raw = raw
        super().__init__(
            f"That date '{raw}' needs work! Try {expected} (like 2019-12-02 or 2019-12-02 1800)."
        )


class TimeRequiredError(TaskError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(
            f"Events need specific times, '{raw}' has none! Try yyyy-mm-dd HHmm (like 2019-12-02 1400)."
        )


class InvalidIndexError(TaskError):
    def __init__(self, index: int | None = None, count: int | None = None) -> None:
        self.index = index
        self.count = count
        super().__init__("Uh-oh! That task number doesn't exist in my universe. Try again?")


class IndexOutOfRangeError(InvalidIndexError, IndexError):
    """Raised by read-only accessors (get_task) for positions outside the list."""


class InvalidSortCriterionError(TaskError):
    def __init__(self, keyword: str, options: str = "") -> None:
        self.keyword = keyword
        msg = f"Sort error: '{keyword}' is not a sort option."
        if options:
            msg = f"{msg}\n{options}"
        super().__init__(msg)


class InvalidFormatError(TaskError):
    def __init__(self, usage: str) -> None:
        self.usage = usage
        super().__init__(f"Oops! Format mixup detected. Try this instead: {usage}")


class SeparatorInDescriptionError(InvalidFormatError):
    """The description holds the save-file field separator and could not be stored."""

    def __init__(self, field: str, separator: str) -> None:
        self.field = field
        super().__init__(f"a {field} description without '{separator.strip()}' between spaces")


class InvalidCommandError(TaskError):
    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(
            f"Hmm, '{command}' isn't in my vocabulary yet. Use 'help' to see what I understand."
        )


# ---- codec ----


class CodecError(TaskError):
    """A stored line could not be decoded into a task."""


class CorruptRecordError(CodecError):
    pass


class UnknownTaskTypeError(CodecError):
    def __init__(self, tag: str) -> None:
        self.tag = tag
        super().__init__(f"Unknown task type in save file: {tag!r}")


class CorruptTimestampError(CodecError):
    def __init__(self, raw: str) -> None:
        self.raw = raw
        super().__init__(f"Corrupted date/time in save file: {raw!r}")


# ---- storage ----


class StorageError(TaskError):
    pass


class LoadCorruptedError(StorageError):
    def __init__(self, path: object, reason: str, line_no: int | None = None) -> None:
        self.path = path
        self.line_no = line_no
        where = f"{path}:{line_no}" if line_no is not None else str(path)
        super().__init__(f"Could not load saved tasks from {where}: {reason}")


class SaveFailedError(StorageError):
    def __init__(self, path: object, reason: str) -> None:
        self.path = path
        super().__init__(f"Could not save tasks to {path}: {reason}")
