"""
Choose which of an application's windows to activate next
"""
from typing import Sequence

from .window import StackingSnapshot

class WindowCycler:
    """
    Select the next window among the matched ones

    When the active window is not one of the matched windows, the most
    recently raised match wins (the least recently raised one in reverse
    mode). When it is, selection moves one position along the matched
    list and wraps around at either end.
    """

    def __init__(self, reverse: bool = False):
        self.reverse = reverse

    def select(self, matched_ids: Sequence[int], snapshot: StackingSnapshot) -> int:
        """
        Args:
            matched_ids: Matched window ids in enumeration order
            snapshot: Active window and stacking order

        Returns:
            Window id to activate

        Raises:
            ValueError: If matched_ids is empty
        """
        if not matched_ids:
            raise ValueError("no windows to cycle through")

        if len(matched_ids) == 1:
            return matched_ids[0]

        if snapshot.active_id in matched_ids:
            return self.step(matched_ids, snapshot.active_id)
        return self.most_recent(matched_ids, snapshot)

    def step(self, matched_ids: Sequence[int], active_id: int) -> int:
        """Neighbour of the active window, wrapping at the ends"""
        position = list(matched_ids).index(active_id)
        offset = -1 if self.reverse else 1
        return matched_ids[(position + offset) % len(matched_ids)]

    def most_recent(self, matched_ids: Sequence[int], snapshot: StackingSnapshot) -> int:
        """
        Pick by stacking order

        Forward scans from the top of the stack down, reverse scans from
        the bottom up. Stale ids in the stack never match.
        """
        if not snapshot.has_order:
            return matched_ids[0]

        wanted = set(matched_ids)
        order = snapshot.stack if self.reverse else reversed(snapshot.stack)
        for window_id in order:
            if window_id in wanted:
                return window_id
        return matched_ids[0]
