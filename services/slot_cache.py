"""
Memoizes slot grids per (day, lunch setting, ordered participant ids)
"""
import logging
from datetime import date
from typing import Dict, Optional, Sequence, Tuple

from models import Slot

logger = logging.getLogger(__name__)

CacheKey = Tuple[int, bool, Tuple[str, ...]]


class SlotCache:
    """Unbounded grid cache; callers clear() after editing participants.

    Grids are stored as tuples of frozen slots, so a hit can be shared safely.
    """

    def __init__(self):
        self._entries: Dict[CacheKey, Tuple[Slot, ...]] = {}
        self.hits = 0
        self.misses = 0

    @staticmethod
    def make_key(day: date, participant_ids: Sequence[str], exclude_lunch: bool = False) -> CacheKey:
        return (day.toordinal(), bool(exclude_lunch), tuple(participant_ids))

    def get(self, day: date, participant_ids: Sequence[str], exclude_lunch: bool = False) -> Optional[Tuple[Slot, ...]]:
        slots = self._entries.get(self.make_key(day, participant_ids, exclude_lunch))
        if slots is None:
            self.misses += 1
        else:
            self.hits += 1
        return slots

    def put(self, day: date, participant_ids: Sequence[str], slots: Sequence[Slot], exclude_lunch: bool = False):
        self._entries[self.make_key(day, participant_ids, exclude_lunch)] = tuple(slots)

    def clear(self) -> int:
        """Drop every entry; returns how many were removed"""
        removed = len(self._entries)
        self._entries.clear()
        logger.debug("Slot cache cleared (%d entries)", removed)
        return removed

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key: CacheKey):
        return key in self._entries
