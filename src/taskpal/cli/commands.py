# src/taskpal/cli/commands.py

from __future__ import annotations

import logging
from collections.abc import Callable

from ..core import persona
from ..core.state import AppState
from ..tasks.task_list import SortCriterion
from . import parser

CommandHandler = Callable[[AppState, str], str]

logger = logging.getLogger(__name__)


class CommandRegistry:
    """Chat command registry used by the chat core (todo, list, mark, ...)."""

    def __init__(self) -> None:
        self._handlers: dict[str, CommandHandler] = {}
        self._help: dict[str, str] = {}
        self._exits: set[str] = set()

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        aliases: list[str] | None = None,
        *,
        ends_session: bool = False,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._handlers[key] = handler
        self._help[key] = help_text
        for alias in aliases:
            self._handlers[alias.lower()] = handler
        if ends_session:
            self._exits.add(key)
            self._exits.update(a.lower() for a in aliases)

    def is_exit(self, line: str) -> bool:
        word, _ = parser.split_command(line)
        return word in self._exits

    def handle(self, state: AppState, line: str) -> str | None:
        """
        Handle a string like "command args".
        Returns a reply string, or None if the command word is unknown.
        TaskError raised by handlers propagates to the caller.
        """
        word, args = parser.split_command(line)
        handler = self._handlers.get(word)
        if handler is None:
            return None
        logger.debug("Command %s args=%r", word, args)
        return handler(state, args)

    def build_help(self) -> str:
        lines = ["Available commands:"]
        for name, help_text in self._help.items():
            lines.append(f"  {name} - {help_text}")
        return "\n".join(lines)


registry = CommandRegistry()


def cmd_help(state: AppState, args: str) -> str:
    return registry.build_help()


def cmd_bye(state: AppState, args: str) -> str:
    # Every mutation has already been saved; nothing to flush here.
    return persona.FAREWELL


def cmd_list(state: AppState, args: str) -> str:
    return persona.list_text(state.task_list.tasks)


def cmd_todo(state: AppState, args: str) -> str:
    description = parser.parse_todo(args)
    result = state.task_list.add_todo(description)
    return persona.added_text(result.task, state.task_list.count)


def cmd_deadline(state: AppState, args: str) -> str:
    description, by_text = parser.parse_deadline(args)
    result = state.task_list.add_deadline(description, by_text)
    return persona.added_text(result.task, state.task_list.count)


def cmd_event(state: AppState, args: str) -> str:
    description, start, end = parser.parse_event(args)
    result = state.task_list.add_event(description, start, end)
    return persona.added_text(result.task, state.task_list.count)


def cmd_mark(state: AppState, args: str) -> str:
    result = state.task_list.mark_task(parser.parse_task_number(args))
    return persona.marked_text(result.task)


def cmd_unmark(state: AppState, args: str) -> str:
    result = state.task_list.unmark_task(parser.parse_task_number(args))
    return persona.unmarked_text(result.task)


def cmd_delete(state: AppState, args: str) -> str:
    result = state.task_list.delete_task(parser.parse_task_number(args))
    return persona.deleted_text(result.task, state.task_list.count)


def cmd_find(state: AppState, args: str) -> str:
    keyword = parser.parse_find(args)
    return persona.find_text(state.task_list.find_tasks(keyword), keyword)


def cmd_sort(state: AppState, args: str) -> str:
    criterion = SortCriterion.from_keyword(parser.parse_sort(args))
    state.task_list.sort_tasks(criterion)
    return persona.sorted_text(criterion.value, state.task_list.tasks)


registry.register("todo", cmd_todo, help_text="Add a to-do: todo <description>.")
registry.register(
    "deadline", cmd_deadline, help_text="Add a deadline: deadline <description> /by <yyyy-mm-dd [HHmm]>."
)
registry.register(
    "event",
    cmd_event,
    help_text="Add an event: event <description> /from <yyyy-mm-dd HHmm> /to <yyyy-mm-dd HHmm>.",
)
registry.register("list", cmd_list, help_text="Show all tasks.", aliases=["ls"])
registry.register("mark", cmd_mark, help_text="Mark task N as done: mark <N>.")
registry.register("unmark", cmd_unmark, help_text="Mark task N as not done: unmark <N>.")
registry.register("delete", cmd_delete, help_text="Delete task N: delete <N>.")
registry.register("find", cmd_find, help_text="Find tasks by keyword: find <keyword>.")
registry.register(
    "sort", cmd_sort, help_text="Sort tasks: sort creation | type | status | deadline | alpha."
)
registry.register("help", cmd_help, help_text="Show available commands.", aliases=["h", "?"])
registry.register("bye", cmd_bye, help_text="End the session.", aliases=["exit", "quit"], ends_session=True)
