# src/taskpal/core/chat.py

"""
Core chat orchestration.

Transport-agnostic: a front end (console REPL, a GUI dialog, ...) hands over
one line of user text and renders the returned Reply. Errors never escape:
input errors become the reply text and the session continues.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..cli.commands import registry as command_registry
from ..tasks.task_errors import InvalidCommandError, TaskError
from . import persona
from .state import AppState

logger = logging.getLogger(__name__)

INTERNAL_ERROR = "Something went wrong on my side while handling that. Your tasks are safe, try again?"


@dataclass(slots=True, frozen=True)
class Reply:
    text: str
    is_exit: bool = False


def welcome_message(state: AppState) -> str:
    app_name = str(getattr(state.settings, "app_name", "taskpal"))
    return persona.welcome_text(app_name, state.load_warning)


def get_response(state: AppState, user_text: str) -> Reply:
    text = (user_text or "").strip()
    try:
        reply = command_registry.handle(state, text)
        if reply is None:
            raise InvalidCommandError(text)
    except TaskError as e:
        logger.info("Rejected input %r: %s", text, e)
        return Reply(str(e))
    except Exception:
        logger.exception("Command handler crashed on input %r", text)
        return Reply(INTERNAL_ERROR)

    return Reply(reply, is_exit=command_registry.is_exit(text))
