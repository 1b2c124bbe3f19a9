# src/taskpal/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime

from ..core.chat import get_response, welcome_message
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    Best-effort: if not a TTY, just print a new line.
    """
    if sys.stdout.isatty():
        sys.stdout.write("\033[1A\033[2K\r")
        sys.stdout.write(line + "\n")
        sys.stdout.flush()
    else:
        print(line)


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(state: AppState, *, read_line: Callable[[str], str] = input) -> None:
    """
    Chat with the task list until 'bye', EOF or Ctrl+C.

    Every mutation is saved as it happens, so leaving never needs a final save.
    """
    app_name = str(getattr(state.settings, "app_name", "taskpal"))
    logger.info("Console connector started (tasks=%d).", state.task_list.count)
    _print_ts(f"<<< {app_name}: {welcome_message(state)}\n")

    while True:
        try:
            user_input = read_line(">>> You: ").strip()
            _rewrite_prev_line(f"[{_ts_local()}] >>> You: {user_input}")
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        reply = get_response(state, user_input)
        _print_ts(f"<<< {app_name}: {reply.text}\n")

        if reply.is_exit:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
