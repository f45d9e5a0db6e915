"""Translation of view-local drag gestures into canonical reorders."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..errors import IndexOutOfRange
from .filter_service import ViewEntry

if TYPE_CHECKING:
    from .task_store import TaskStore

logger = logging.getLogger(__name__)


class ReorderTranslator:
    """
    Apply reorder gestures made on a filtered view to the canonical list.

    A gesture names the dragged item and the drop target by their positions
    in the view the user was looking at. Those positions are mapped through
    the view entries' canonical indices; splicing the filtered sequence
    itself would lose the hidden tasks in between.
    """

    def __init__(self, store: TaskStore) -> None:
        self.store = store

    def translate(
        self, view: Sequence[ViewEntry], from_view: int, to_view: int
    ) -> tuple[int, int] | None:
        """Map view positions to canonical (from, to), or None for a failed gesture."""
        if from_view == to_view:
            return None
        if not (0 <= from_view < len(view) and 0 <= to_view < len(view)):
            logger.debug(
                "Reorder gesture out of range: %d -> %d (view size %d)",
                from_view,
                to_view,
                len(view),
            )
            return None
        return view[from_view].canonical_index, view[to_view].canonical_index

    def apply(self, view: Sequence[ViewEntry], from_view: int, to_view: int) -> bool:
        """
        Translate a gesture and reorder the store.

        Args:
            view: The view snapshot the gesture was made on
            from_view: View position of the dragged task
            to_view: View position of the drop target

        Returns:
            True if the canonical list changed.
        """
        canonical = self.translate(view, from_view, to_view)
        if canonical is None:
            return False

        from_index, to_index = canonical
        try:
            return self.store.reorder(from_index, to_index)
        except IndexOutOfRange as e:
            # Snapshot is older than the list
            logger.debug("Reorder gesture dropped: %s", e)
            return False
