"""
Builds the 48-slot UTC availability grid for one calendar day
"""
import logging
from datetime import date
from typing import List, Sequence

from config import SCHEDULER_CONFIG
from exceptions import InvalidFormat, UnknownTimezone
from models import Participant, Slot, SlotParticipant
from utils.time_utils import parse_local_time, is_within_window
from utils.timezone_projector import local_clock_at, slot_instant

logger = logging.getLogger(__name__)


def is_inconvenient_hour(hour: int) -> bool:
    return hour < SCHEDULER_CONFIG['early_hour'] or hour >= SCHEDULER_CONFIG['late_hour']


def is_lunch_minute(minute: int) -> bool:
    return SCHEDULER_CONFIG['lunch_start_minute'] <= minute < SCHEDULER_CONFIG['lunch_end_minute']


def build_slot_grid(day: date, participants: Sequence[Participant], exclude_lunch: bool = False) -> List[Slot]:
    """Count, for every half hour of the UTC day, which participants are inside their window.

    A participant whose timezone or window cannot be resolved is logged and
    treated as unavailable; the rest of the grid is still built.
    """
    starts = [slot_instant(day, i) for i in range(SCHEDULER_CONFIG['slots_per_day'])]
    present = [[] for _ in starts]

    for participant in participants:
        try:
            start_min = parse_local_time(participant.start)
            end_min = parse_local_time(participant.end)
        except InvalidFormat as e:
            logger.warning("Skipping %s: %s", participant.name, e)
            continue

        for index, instant in enumerate(starts):
            try:
                clock = local_clock_at(instant, participant.timezone)
            except UnknownTimezone as e:
                logger.warning("Skipping %s for %s: %s", participant.name, day.isoformat(), e)
                break

            local_minutes = clock.hour * 60 + clock.minute

            if exclude_lunch and is_lunch_minute(local_minutes):
                continue

            if not is_within_window(local_minutes, start_min, end_min):
                continue

            present[index].append(SlotParticipant(
                name=participant.name,
                color=participant.color,
                is_conflict=is_inconvenient_hour(clock.hour),
            ))

    slots = [
        Slot(
            index=index,
            start=instant,
            count=len(present[index]),
            participants=tuple(present[index]),
            has_conflict=any(p.is_conflict for p in present[index]),
        )
        for index, instant in enumerate(starts)
    ]

    logger.debug("Built slot grid for %s with %d participants", day.isoformat(), len(participants))
    return slots


def get_slot_grid(day: date, participants: Sequence[Participant], exclude_lunch: bool = False, cache=None) -> Sequence[Slot]:
    """Fetch a grid from the cache, building and storing it on a miss"""
    if cache is None:
        return build_slot_grid(day, participants, exclude_lunch)

    participant_ids = [p.id for p in participants]
    slots = cache.get(day, participant_ids, exclude_lunch)
    if slots is None:
        slots = tuple(build_slot_grid(day, participants, exclude_lunch))
        cache.put(day, participant_ids, slots, exclude_lunch)
    return slots
