"""Compensation stack for undoing partial provisioning work.

Each forward step that leaves something behind pushes the action that
removes it. On a fatal error the pipeline unwinds the stack so that no
half-built project is left on disk.
"""

from __future__ import annotations

import shutil
from collections.abc import Callable
from pathlib import Path


class CompensationStack:
    """LIFO record of (description, undo action) pairs."""

    def __init__(self) -> None:
        self._actions: list[tuple[str, Callable[[], None]]] = []

    def __len__(self) -> int:
        return len(self._actions)

    def push(self, description: str, action: Callable[[], None]) -> None:
        """Record an undo action to run if the run is later aborted."""
        self._actions.append((description, action))

    def discard(self) -> None:
        """Forget all pending actions without running them."""
        self._actions.clear()

    def unwind(self) -> list[str]:
        """Run all pending actions, most recent first, then empty the stack.

        A failing action does not stop the remaining ones.

        Returns:
            One entry per failed action: "<description>: <error>".
        """
        failures: list[str] = []
        while self._actions:
            description, action = self._actions.pop()
            try:
                action()
            except OSError as exc:
                failures.append(f"{description}: {exc}")
        return failures


def remove_tree(path: Path) -> Callable[[], None]:
    """Return an undo action that deletes path recursively if it exists."""

    def _remove() -> None:
        if path.exists():
            shutil.rmtree(path)

    return _remove
