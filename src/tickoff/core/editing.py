"""Edit draft state machine - pure, no repository access."""

from dataclasses import dataclass

from .tasks import Task


@dataclass(frozen=True)
class EditDraft:
    """Edit-in-progress copy of a task's id and text."""

    task_id: str
    text: str


@dataclass(frozen=True)
class Idle:
    """No edit in progress."""

    @property
    def draft(self) -> None:
        return None


@dataclass(frozen=True)
class Editing:
    """One task's draft is held."""

    draft: EditDraft


EditorState = Idle | Editing

IDLE = Idle()


def open_edit(state: EditorState, task: Task) -> Editing:
    """Start editing a task. An existing draft is replaced (last open wins)."""
    return Editing(EditDraft(task_id=task.id, text=task.text))


def update_draft_text(state: EditorState, text: str) -> EditorState:
    """Replace the draft text. Idle stays idle."""
    if isinstance(state, Editing):
        return Editing(EditDraft(task_id=state.draft.task_id, text=text))
    return state


def close(state: EditorState) -> tuple[Idle, EditDraft | None]:
    """Leave editing; returns the draft that was open, if any."""
    return IDLE, state.draft
