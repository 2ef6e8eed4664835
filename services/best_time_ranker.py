"""
Slides a meeting-length window over each day's slot grid and ranks start times
"""
import logging
import math
from datetime import timedelta
from typing import List, Sequence

from config import SCHEDULER_CONFIG
from exceptions import UnknownTimezone
from models import LocalTime, Participant, SchedulingContext, Suggestion
from services.slot_grid import get_slot_grid, is_inconvenient_hour
from utils.timezone_projector import format_local_time, local_clock_at

logger = logging.getLogger(__name__)


def slots_needed_for(duration: int) -> int:
    """Whole slots required to hold a meeting of `duration` minutes"""
    return math.ceil(duration / SCHEDULER_CONFIG['slot_minutes'])


def _local_times(start, participants: Sequence[Participant], available: set, time_format: str) -> List[LocalTime]:
    local_times = []
    for p in participants:
        try:
            label = format_local_time(start, p.timezone, time_format)
            is_available = p.name in available
        except UnknownTimezone as e:
            logger.warning("Cannot format local time for %s: %s", p.name, e)
            label = 'Error'
            is_available = False

        local_times.append(LocalTime(
            name=p.name,
            time=label,
            available=is_available,
            color=p.color,
            priority=p.priority,
        ))
    return local_times


def rank_best_times(context: SchedulingContext, cache=None) -> List[Suggestion]:
    """Score every candidate start across the scanned days and return the best ones.

    The score of a window is the sum of its slot counts plus a bonus for each
    required participant available for the whole window. Windows scoring 0
    are dropped; ties keep generation order (day, then start index).
    """
    participants = context.participants
    settings = context.settings
    slots_per_day = SCHEDULER_CONFIG['slots_per_day']
    slots_needed = slots_needed_for(settings.duration)

    if not participants or settings.duration <= 0:
        return []
    if slots_needed > slots_per_day:
        logger.info("Duration %d min does not fit in a single day", settings.duration)
        return []

    meeting_length = timedelta(minutes=slots_needed * SCHEDULER_CONFIG['slot_minutes'])
    required = [p for p in participants if p.is_required]
    results = []

    for day_offset in range(settings.days):
        day = context.day(day_offset)
        slots = get_slot_grid(day, participants, settings.exclude_lunch, cache)
        names_per_slot = [{sp.name for sp in slot.participants} for slot in slots]

        for i in range(slots_per_day - slots_needed + 1):
            window = slots[i:i + slots_needed]
            score = sum(slot.count for slot in window)
            available_set = set.intersection(*names_per_slot[i:i + slots_needed])

            required_available = [p.name for p in required if p.name in available_set]
            score += SCHEDULER_CONFIG['required_bonus'] * len(required_available)

            if score <= 0:
                continue

            available = [sp.name for sp in window[0].participants if sp.name in available_set]
            start = window[0].start
            results.append(Suggestion(
                start=start,
                end=start + meeting_length,
                day=day_offset,
                score=score,
                available=available,
                required_available=required_available,
                optional_available=[p.name for p in participants if not p.is_required and p.name in available_set],
                local_times=_local_times(start, participants, available_set, settings.time_format),
            ))

    results.sort(key=lambda s: s.score, reverse=True)
    logger.debug("Ranked %d candidate windows", len(results))
    return results[:settings.max_suggestions]


def etiquette_notes(suggestion: Suggestion, participants: Sequence[Participant]) -> List[str]:
    """Flag early/late local start times for available participants"""
    notes = []
    by_name = {p.name: p for p in participants}

    for name in suggestion.available:
        participant = by_name.get(name)
        if participant is None:
            continue
        try:
            hour = local_clock_at(suggestion.start, participant.timezone).hour
        except UnknownTimezone:
            continue

        if not is_inconvenient_hour(hour):
            continue
        if hour < SCHEDULER_CONFIG['early_hour']:
            notes.append(f"Early for {name} ({hour % 12 or 12}AM)")
        else:
            notes.append(f"Late for {name} ({hour - 12}PM)")

    if not notes and len(suggestion.available) == len(participants):
        notes.append("Respectful for all")

    return notes
