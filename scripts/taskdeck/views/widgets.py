"""Reusable widgets for the taskdeck dashboard."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.reactive import reactive
from textual.timer import Timer
from textual.widgets import Button, Input, Label, Static

from taskdeck.providers import TodoRecord
from taskdeck.timers import TICK_INTERVAL, Stopwatch, format_clock


class ClockPanel(Static):
    """Panel showing the current wall-clock time."""

    DEFAULT_CSS = """
    ClockPanel {
        height: auto;
        border: solid $primary;
        padding: 1;
    }

    ClockPanel .title {
        text-style: bold;
        width: 100%;
        content-align: center middle;
        margin-bottom: 1;
    }

    ClockPanel #clock-display {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        color: $accent;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield Label("🕒 Current Time", classes="title")
        yield Static(format_clock(), id="clock-display")

    def on_mount(self) -> None:
        self._timer = self.set_interval(TICK_INTERVAL, self._tick)

    def on_unmount(self) -> None:
        if self._timer:
            self._timer.stop()
            self._timer = None

    def _tick(self) -> None:
        self.query_one("#clock-display", Static).update(format_clock())


class TaskFormPanel(Static):
    """Title/description entry form for new tasks."""

    DEFAULT_CSS = """
    TaskFormPanel {
        height: auto;
        border: solid $primary;
        padding: 1;
    }

    TaskFormPanel .title {
        text-style: bold;
        margin-bottom: 1;
    }

    TaskFormPanel Input {
        margin-bottom: 1;
    }
    """

    class Submitted(Message):
        """User asked to add a task."""

        def __init__(self, title: str, description: str) -> None:
            super().__init__()
            self.title = title
            self.description = description

    def compose(self) -> ComposeResult:
        yield Label("Details..", classes="title")
        yield Input(placeholder="Enter task title", id="title-input")
        yield Input(
            placeholder="Enter task description (optional)", id="description-input"
        )
        yield Button("Add Task", id="add-task", variant="primary")

    def _submit(self) -> None:
        title = self.query_one("#title-input", Input).value
        description = self.query_one("#description-input", Input).value
        self.post_message(self.Submitted(title, description))

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add-task":
            event.stop()
            self._submit()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def clear(self) -> None:
        """Empty both inputs and put the cursor back on the title."""
        title = self.query_one("#title-input", Input)
        title.value = ""
        self.query_one("#description-input", Input).value = ""
        title.focus()


class StopwatchPanel(Static):
    """Start/pause/reset stopwatch.

    The one-second interval exists only while the stopwatch runs: it is
    created on start and stopped on pause, reset and unmount.
    """

    DEFAULT_CSS = """
    StopwatchPanel {
        height: auto;
        border: solid $primary;
        padding: 1;
    }

    StopwatchPanel .title {
        text-style: bold;
        width: 100%;
        content-align: center middle;
        margin-bottom: 1;
    }

    StopwatchPanel #stopwatch-display {
        width: 100%;
        content-align: center middle;
        text-style: bold;
        margin-bottom: 1;
    }

    StopwatchPanel Horizontal {
        height: auto;
        align: center middle;
    }

    StopwatchPanel Button {
        min-width: 9;
        margin: 0 1;
    }
    """

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.stopwatch = Stopwatch()
        self._timer: Timer | None = None

    def compose(self) -> ComposeResult:
        yield Label("⏱️ Stopwatch", classes="title")
        yield Static(self.stopwatch.display, id="stopwatch-display")
        with Horizontal():
            yield Button("Start", id="start", variant="success")
            yield Button("Pause", id="pause", variant="warning")
            yield Button("Reset", id="reset", variant="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        actions = {"start": self.start, "pause": self.pause, "reset": self.reset}
        action = actions.get(event.button.id or "")
        if action:
            event.stop()
            action()

    def start(self) -> None:
        if self.stopwatch.start():
            self._timer = self.set_interval(TICK_INTERVAL, self._tick)

    def pause(self) -> None:
        if self.stopwatch.pause():
            self._cancel_timer()

    def reset(self) -> None:
        self.stopwatch.reset()
        self._cancel_timer()
        self._show()

    def on_unmount(self) -> None:
        self._cancel_timer()

    def _cancel_timer(self) -> None:
        if self._timer:
            self._timer.stop()
            self._timer = None

    def _tick(self) -> None:
        self.stopwatch.tick()
        self._show()

    def _show(self) -> None:
        self.query_one("#stopwatch-display", Static).update(self.stopwatch.display)


class TodoTitle(Label):
    """Clickable task title; a click asks to toggle completion."""

    def __init__(self, record: TodoRecord, **kwargs) -> None:
        classes = "todo-title completed" if record.completed else "todo-title"
        super().__init__(record.text, classes=classes, **kwargs)
        self._record = record

    def on_click(self, event: Click) -> None:
        event.stop()
        self.post_message(TodoRow.ToggleRequested(self._record.id))


class TodoRow(Static):
    """Single task in the list."""

    DEFAULT_CSS = """
    TodoRow {
        height: auto;
        border: solid $secondary;
        padding: 0 1;
        margin-bottom: 1;
    }

    TodoRow Horizontal {
        height: auto;
    }

    TodoRow Vertical {
        width: 1fr;
        height: auto;
    }

    TodoRow .todo-title {
        text-style: bold;
    }

    TodoRow .todo-title.completed {
        text-style: strike;
        color: $text-muted;
    }

    TodoRow .description {
        color: $text-muted;
    }

    TodoRow .assigned {
        color: $text-muted;
        text-style: italic;
    }

    TodoRow Button {
        min-width: 10;
    }
    """

    class ToggleRequested(Message):
        """Completion toggle for the task with ``todo_id``."""

        def __init__(self, todo_id: int) -> None:
            super().__init__()
            self.todo_id = todo_id

    class DeleteRequested(Message):
        """Deletion of the task with ``todo_id``."""

        def __init__(self, todo_id: int) -> None:
            super().__init__()
            self.todo_id = todo_id

    def __init__(self, record: TodoRecord, **kwargs) -> None:
        super().__init__(**kwargs)
        self.record = record

    def compose(self) -> ComposeResult:
        with Horizontal():
            with Vertical():
                yield TodoTitle(self.record)
                if self.record.description:
                    yield Label(self.record.description, classes="description")
                yield Label(f"Assigned: {self.record.time}", classes="assigned")
            yield Button("Delete", classes="delete", variant="error")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.post_message(self.DeleteRequested(self.record.id))


class TodoListPanel(VerticalScroll):
    """Scrollable list of tasks, rebuilt whenever ``records`` changes."""

    DEFAULT_CSS = """
    TodoListPanel {
        height: 1fr;
        border: solid $primary;
        padding: 1;
    }

    TodoListPanel .empty {
        width: 100%;
        content-align: center middle;
        color: $text-muted;
    }
    """

    records: reactive[tuple[TodoRecord, ...]] = reactive((), recompose=True)

    def compose(self) -> ComposeResult:
        if not self.records:
            yield Label("No tasks yet", classes="empty")
            return
        for record in self.records:
            yield TodoRow(record)
