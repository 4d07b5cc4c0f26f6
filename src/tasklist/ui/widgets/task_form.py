"""Modal forms for creating and editing tasks."""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Center, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Select

from ...models import Priority, Status
from ...services import CreateTaskForm, EditTaskForm

STATUS_OPTIONS = [(status.value, status) for status in Status]
PRIORITY_OPTIONS = [(priority.value, priority) for priority in Priority]

FORM_CSS = """
{cls} {{
    align: center middle;
}}

{cls} > Vertical {{
    width: 60;
    height: auto;
    padding: 1 2;
    background: $surface;
    border: solid $primary;
}}

{cls} .form-title {{
    width: 100%;
    text-align: center;
    text-style: bold;
    margin-bottom: 1;
}}

{cls} Select, {cls} Input {{
    margin-bottom: 1;
}}

{cls} .buttons {{
    width: 100%;
    height: auto;
}}

{cls} Button {{
    margin: 0 1;
}}
"""


class CreateTaskModal(ModalScreen[CreateTaskForm | None]):
    """Collects title, status and priority for a new task.

    Dismisses with the filled-in form on Add, or None on cancel. The
    caller commits the form to the store.
    """

    DEFAULT_CSS = FORM_CSS.format(cls="CreateTaskModal")

    BINDINGS = [
        Binding("escape", "cancel", "Cancel"),
    ]

    def __init__(self) -> None:
        super().__init__()
        self.form = CreateTaskForm()

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("New task", classes="form-title")
            yield Input(placeholder="Task title", id="title-input")
            yield Select(STATUS_OPTIONS, value=self.form.status, allow_blank=False, id="status-select")
            yield Select(
                PRIORITY_OPTIONS, value=self.form.priority, allow_blank=False, id="priority-select"
            )
            with Center(classes="buttons"):
                yield Button("Add", id="add", variant="primary")
                yield Button("Cancel", id="cancel")

    def on_mount(self) -> None:
        self.query_one("#title-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        self.form.title = event.value

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.action_add()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "status-select":
            self.form.status = Status(event.value)
        elif event.select.id == "priority-select":
            self.form.priority = Priority(event.value)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "add":
            self.action_add()
        else:
            self.action_cancel()

    def action_add(self) -> None:
        self.dismiss(self.form)

    def action_cancel(self) -> None:
        self.form.cancel()
        self.dismiss(None)


class EditTaskModal(ModalScreen[bool]):
    """Edits one task through an EditTaskForm.

    Status and priority pickers apply immediately. The title is committed
    on Enter, on Save, and when the modal is closed.
    """

    DEFAULT_CSS = FORM_CSS.format(cls="EditTaskModal")

    BINDINGS = [
        Binding("escape", "close", "Close"),
    ]

    def __init__(self, form: EditTaskForm) -> None:
        super().__init__()
        self.form = form

    def compose(self) -> ComposeResult:
        with Vertical():
            yield Label("Edit task", classes="form-title")
            yield Input(value=self.form.title, placeholder="Task title", id="title-input")
            yield Select(STATUS_OPTIONS, value=self.form.status, allow_blank=False, id="status-select")
            yield Select(
                PRIORITY_OPTIONS, value=self.form.priority, allow_blank=False, id="priority-select"
            )
            with Center(classes="buttons"):
                yield Button("Save", id="save", variant="primary")

    def on_mount(self) -> None:
        self.query_one("#title-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        self.form.title = event.value

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self.form.save()

    def on_select_changed(self, event: Select.Changed) -> None:
        if event.select.id == "status-select":
            status = Status(event.value)
            if status != self.form.status:
                self.form.set_status(status)
        elif event.select.id == "priority-select":
            priority = Priority(event.value)
            if priority != self.form.priority:
                self.form.set_priority(priority)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.action_close()

    def action_close(self) -> None:
        self.form.dismiss()
        self.dismiss(True)
