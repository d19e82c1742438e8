"""Task repository - owns the in-session task collection."""

import logging
from concurrent.futures import Future, ThreadPoolExecutor, wait
from dataclasses import replace
from typing import Callable

from .core.tasks import (
    Task,
    TaskIdGenerator,
    find_index,
    is_valid_text,
    snapshot,
)
from .ports.task_store import TaskStore

logger = logging.getLogger(__name__)

Listener = Callable[[list[Task]], None]


class TaskRepository:
    """
    Canonical, ordered task collection for one session.

    Every mutation updates memory first, then hands a snapshot to a single
    background writer. Callers never wait for the write; failures are logged
    and not retried. Writes land in the order the mutations happened.
    """

    def __init__(
        self,
        store: TaskStore,
        tasks: list[Task] | None = None,
        id_generator: TaskIdGenerator | None = None,
    ):
        self.store = store
        self._tasks: list[Task] = snapshot(tasks or [])
        self._ids = id_generator or TaskIdGenerator.seeded_from(self._tasks)
        self._listeners: list[Listener] = []
        self._last_save: Future | None = None
        self._writer = ThreadPoolExecutor(max_workers=1, thread_name_prefix="tickoff-save")
        self._closed = False

    @classmethod
    def open(cls, store: TaskStore, id_generator: TaskIdGenerator | None = None) -> "TaskRepository":
        """Load the saved collection and return a repository ready for mutations."""
        tasks = store.load()
        logger.info(f"Task repository opened with {len(tasks)} tasks")
        return cls(store, tasks, id_generator=id_generator)

    # ============== Reads ==============

    def list(self) -> list[Task]:
        """Current collection in display order, as a detached copy."""
        return snapshot(self._tasks)

    def get(self, task_id: str) -> Task | None:
        index = find_index(self._tasks, task_id)
        return replace(self._tasks[index]) if index is not None else None

    def __len__(self) -> int:
        return len(self._tasks)

    # ============== Mutations ==============

    def create(self, text: str) -> Task | None:
        """Append a new unchecked task. Blank text is ignored."""
        if not is_valid_text(text):
            logger.debug("Ignoring blank task text")
            return None
        task = Task(id=self._ids.next_id(), text=text, checked=False)
        self._tasks.append(task)
        logger.debug(f"Created task {task.id}")
        self._changed()
        return replace(task)

    def toggle(self, task_id: str) -> Task | None:
        """Flip a task's checked flag. Unknown ids are a no-op."""
        index = find_index(self._tasks, task_id)
        if index is not None:
            task = self._tasks[index]
            task.checked = not task.checked
            logger.debug(f"Toggled task {task_id} -> checked={task.checked}")
        self._changed()
        return self.get(task_id)

    def delete(self, task_id: str) -> bool:
        """Remove a task. Unknown ids are a no-op. Returns True if one was removed."""
        index = find_index(self._tasks, task_id)
        if index is not None:
            del self._tasks[index]
            logger.debug(f"Deleted task {task_id}")
        self._changed()
        return index is not None

    def save_edit(self, task_id: str, new_text: str) -> Task | None:
        """Replace a task's text verbatim; checked and id are untouched."""
        index = find_index(self._tasks, task_id)
        if index is not None:
            self._tasks[index].text = new_text
            logger.debug(f"Edited task {task_id}")
        self._changed()
        return self.get(task_id)

    # ============== Subscriptions ==============

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call listener with a fresh snapshot after every mutation. Returns an unsubscribe function."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self.list())
            except Exception:
                logger.exception("Task listener failed")

    # ============== Persistence ==============

    def _changed(self) -> None:
        self._schedule_save()
        self._notify()

    def _schedule_save(self) -> Future | None:
        """Spawn a detached write of the current collection."""
        if self._closed:
            logger.warning("Repository is closed; change will not be saved")
            return None
        tasks = self.list()
        future = self._writer.submit(self.store.save, tasks)
        self._last_save = future
        future.add_done_callback(self._save_done)
        return future

    def _save_done(self, future: Future) -> None:
        if future.cancelled():
            return
        error = future.exception()
        if error is not None:
            logger.error(f"Failed to save tasks: {error}")

    def flush(self, timeout: float | None = None) -> None:
        """Block until every scheduled write has finished."""
        last = self._last_save
        if last is not None:
            wait([last], timeout=timeout)

    def close(self) -> None:
        """Finish outstanding writes and stop the writer."""
        if self._closed:
            return
        self._closed = True
        self._writer.shutdown(wait=True)
        logger.debug("Task repository closed")

    def __enter__(self) -> "TaskRepository":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
