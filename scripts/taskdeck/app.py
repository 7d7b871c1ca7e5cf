"""
Taskdeck TUI Application.

Main entry point for the terminal user interface.
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from textual.app import App
from textual.binding import Binding

from taskdeck.config import Settings, load_settings
from taskdeck.logging_setup import setup_logging
from taskdeck.providers import TodoStore
from taskdeck.rest_store import RestTodoStore
from taskdeck.todo_list import TodoList
from taskdeck.views.dashboard import DashboardScreen

logger = logging.getLogger(__name__)

DARK_THEME = "textual-dark"
LIGHT_THEME = "textual-light"


class TaskDeckApp(App):
    """Main taskdeck TUI application."""

    TITLE = "Taskdeck"
    SUB_TITLE = "To-Do List"

    CSS = """
    Screen {
        background: $surface;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("d", "toggle_theme", "Dark/Light", show=True),
    ]

    def __init__(
        self,
        settings: Settings | None = None,
        store: TodoStore | None = None,
        **kwargs,
    ) -> None:
        super().__init__(**kwargs)
        self._settings = settings or load_settings()
        if store is None:
            if not self._settings.store_configured:
                logger.warning(
                    "Remote store is not configured; SUPABASE_URL or SUPABASE_KEY missing."
                )
            store = RestTodoStore(
                self._settings.store_url,
                self._settings.store_key,
                table=self._settings.table,
            )
        self.todos = TodoList(store)

    @property
    def is_dark(self) -> bool:
        return self.theme != LIGHT_THEME

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.theme = DARK_THEME if self._settings.dark else LIGHT_THEME
        self.push_screen(DashboardScreen(self.todos, dark=self.is_dark))

    def action_toggle_theme(self) -> None:
        """Switch between the dark and light themes."""
        self.theme = LIGHT_THEME if self.is_dark else DARK_THEME
        if isinstance(self.screen, DashboardScreen):
            self.screen.show_theme(self.is_dark)


def run(settings: Settings | None = None) -> None:
    """Run the TUI application."""
    app = TaskDeckApp(settings=settings)
    app.run()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="taskdeck",
        description="To-do list backed by a Supabase table, with a clock and a stopwatch",
    )
    parser.add_argument("--table", help="Store table name (default: todos)")
    parser.add_argument(
        "--light", action="store_true", help="Start with the light theme"
    )
    parser.add_argument("--log-dir", help="Directory for taskdeck.log")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log file level",
    )
    args = parser.parse_args(argv)

    settings = load_settings().with_overrides(
        table=args.table,
        log_dir=Path(args.log_dir) if args.log_dir else None,
        log_level=args.log_level,
        dark=False if args.light else None,
    )
    log_file = setup_logging(log_dir=settings.log_dir, level=settings.log_level)
    logger.info("Starting taskdeck (log file: %s)", log_file)

    run(settings)


if __name__ == "__main__":
    main()
