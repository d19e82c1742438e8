"""Presentation bridge - what a UI layer reads from and calls into."""

import logging
from typing import Callable

from .core import editing
from .core.editing import EditDraft, EditorState
from .core.tasks import Task
from .repository import Listener, TaskRepository

logger = logging.getLogger(__name__)


class TaskListBridge:
    """
    Task list screen state for a presentation layer.

    Holds the single edit draft slot (Idle or Editing) and remembers which
    tasks have already played their entry animation. Everything else is
    delegated to the repository.
    """

    def __init__(self, repository: TaskRepository):
        self.repository = repository
        self._state: EditorState = editing.IDLE
        # Tasks that existed at startup are already on screen.
        self._animated: set[str] = {t.id for t in repository.list()}

    # ============== Task list ==============

    @property
    def tasks(self) -> list[Task]:
        return self.repository.list()

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        return self.repository.subscribe(listener)

    def create(self, text: str) -> Task | None:
        return self.repository.create(text)

    def toggle(self, task_id: str) -> Task | None:
        return self.repository.toggle(task_id)

    def delete(self, task_id: str) -> bool:
        self._animated.discard(task_id)
        return self.repository.delete(task_id)

    # ============== Edit draft ==============

    @property
    def state(self) -> EditorState:
        return self._state

    @property
    def draft(self) -> EditDraft | None:
        """The draft being edited, or None when idle."""
        return self._state.draft

    @property
    def is_editing(self) -> bool:
        return isinstance(self._state, editing.Editing)

    def open_edit(self, task: Task) -> EditDraft:
        """Start editing task, replacing any draft already open."""
        if self.is_editing:
            logger.debug(f"Discarding draft for {self.draft.task_id}")
        self._state = editing.open_edit(self._state, task)
        return self._state.draft

    def update_draft_text(self, text: str) -> None:
        if not self.is_editing:
            logger.debug("No draft open; ignoring text update")
        self._state = editing.update_draft_text(self._state, text)

    def save(self) -> Task | None:
        """Write the draft text back to its task and close the draft."""
        self._state, draft = editing.close(self._state)
        if draft is None:
            logger.debug("No draft open; nothing to save")
            return None
        return self.repository.save_edit(draft.task_id, draft.text)

    def cancel(self) -> None:
        """Discard the draft without touching the repository."""
        self._state, _ = editing.close(self._state)

    # ============== Entry animation ==============

    def needs_entry_animation(self, task_id: str) -> bool:
        """True until the UI reports the task's entry animation has played."""
        return task_id not in self._animated

    def mark_animated(self, task_id: str) -> None:
        self._animated.add(task_id)
