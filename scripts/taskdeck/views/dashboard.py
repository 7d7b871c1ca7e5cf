"""Main dashboard view combining all panels."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Label

from taskdeck.todo_list import TodoList
from taskdeck.views.widgets import (
    ClockPanel,
    StopwatchPanel,
    TaskFormPanel,
    TodoListPanel,
    TodoRow,
)


class DashboardScreen(Screen):
    """Clock, entry form and stopwatch above the task list.

    Store calls run as workers; the list is re-rendered from the
    TodoList after each one completes.
    """

    BINDINGS = [
        ("r", "reload", "Reload"),
    ]

    DEFAULT_CSS = """
    DashboardScreen {
        layout: grid;
        grid-size: 3 3;
        grid-columns: 1fr 1fr 1fr;
        grid-rows: 3 auto 1fr;
        grid-gutter: 0 1;
        padding: 0 1;
    }

    #title-row {
        column-span: 3;
        height: 3;
        align: left middle;
    }

    #title-row .app-title {
        width: 1fr;
        text-style: bold;
    }

    #todo-list {
        column-span: 3;
    }
    """

    def __init__(self, todos: TodoList, dark: bool = True, **kwargs) -> None:
        super().__init__(**kwargs)
        self._todos = todos
        self._dark = dark

    def compose(self) -> ComposeResult:
        yield Header()

        with Horizontal(id="title-row"):
            yield Label("To-Do App", classes="app-title")
            yield Button(theme_button_label(self._dark), id="theme-toggle")

        yield ClockPanel(id="clock")
        yield TaskFormPanel(id="task-form")
        yield StopwatchPanel(id="stopwatch")

        yield TodoListPanel(id="todo-list")

        yield Footer()

    def on_mount(self) -> None:
        self.run_worker(self._load(), group="store")

    def show_theme(self, dark: bool) -> None:
        """Relabel the theme button after the app switched themes."""
        self._dark = dark
        self.query_one("#theme-toggle", Button).label = theme_button_label(dark)

    def _render_list(self) -> None:
        self.query_one(TodoListPanel).records = self._todos.records

    async def _load(self) -> None:
        await self._todos.load()
        self._render_list()

    async def _create(self, title: str, description: str) -> None:
        if await self._todos.create(title, description):
            self.query_one(TaskFormPanel).clear()
            self._render_list()

    async def _toggle(self, todo_id: int) -> None:
        # Resolve the position only now; earlier workers may have reshaped the list
        index = self._todos.index_of(todo_id)
        if index is None:
            return
        if await self._todos.toggle(index):
            self._render_list()

    async def _delete(self, todo_id: int) -> None:
        index = self._todos.index_of(todo_id)
        if index is None:
            return
        if await self._todos.delete(index):
            self._render_list()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "theme-toggle":
            self.app.action_toggle_theme()

    def on_task_form_panel_submitted(self, event: TaskFormPanel.Submitted) -> None:
        self.run_worker(self._create(event.title, event.description), group="store")

    def on_todo_row_toggle_requested(self, event: TodoRow.ToggleRequested) -> None:
        self.run_worker(self._toggle(event.todo_id), group="store")

    def on_todo_row_delete_requested(self, event: TodoRow.DeleteRequested) -> None:
        self.run_worker(self._delete(event.todo_id), group="store")

    def action_reload(self) -> None:
        """Reload the task list from the store."""
        self.run_worker(self._load(), group="store")


def theme_button_label(dark: bool) -> str:
    """Label names the theme the button switches to."""
    return "Light Mode" if dark else "Dark Mode"
