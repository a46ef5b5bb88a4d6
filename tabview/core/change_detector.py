from __future__ import annotations

from typing import Any, List, Optional, Sequence


class ChangeDetector:
    """
    Detects structural changes of a dataset between evaluation ticks.

    Structural means the sequence of element references: an element added,
    removed, replaced or moved. Records are compared by identity only, so
    building a new list holding the same records is not a change.

    Mutating a field inside an existing record is not detected. Callers that
    do so must hand the engine a new dataset via set_dataset.
    """

    def __init__(self) -> None:
        self._snapshot: Optional[List[Any]] = None

    def reset(self, dataset: Optional[Sequence[Any]]) -> None:
        """Take dataset as the new baseline without reporting a change."""
        self._snapshot = list(dataset) if dataset is not None else []

    def check(self, dataset: Optional[Sequence[Any]]) -> bool:
        """
        Compare dataset against the previous baseline and rebaseline.

        :return: True if the element sequence differs from the last check
        """
        current = list(dataset) if dataset is not None else []
        previous = self._snapshot
        self._snapshot = current

        if previous is None:
            return True
        if len(previous) != len(current):
            return True
        return any(a is not b for a, b in zip(previous, current))
