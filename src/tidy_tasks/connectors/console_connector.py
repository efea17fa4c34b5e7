# src/tidy_tasks/connectors/console_connector.py

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime

from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)

EXIT_COMMANDS = frozenset({"/exit", "/quit", "exit", "quit"})


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def handle_line(state: AppState, line: str) -> str:
    """Route one input line; plain text (no slash) is treated as a quick /add."""
    reply = command_registry.handle(state, line)
    if reply is not None:
        return reply
    return command_registry.handle(state, f"/add {line}") or ""


def run_console_loop(state: AppState, *, read_line: Callable[[str], str] = input) -> None:
    logger.info("Console connector started (remote=%s).", state.categorizer.is_available())
    _print_ts("[CONSOLE] Type /help for commands, /exit to quit. Plain text: <title> | <description>\n")

    while True:
        try:
            user_input = read_line(">>> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            logger.info("Console input closed.")
            break

        if not user_input:
            continue

        if user_input.lower() in EXIT_COMMANDS:
            logger.info("Exit requested from console.")
            break

        _print_ts(handle_line(state, user_input))
