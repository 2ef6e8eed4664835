"""
Timezone compatibility analytics for a participant set
"""
import logging
import math
from datetime import date, datetime
from itertools import combinations
from typing import List, Optional, Sequence

from config import SCHEDULER_CONFIG
from exceptions import InvalidFormat, UnknownTimezone
from models import CompatibilityReport, Participant, SchedulingContext, WorstPair
from services.slot_grid import get_slot_grid
from utils.time_utils import parse_local_time, is_within_window
from utils.timezone_projector import current_offset_minutes, local_minute_of_day, slot_instant

logger = logging.getLogger(__name__)


def compatibility_score(context: SchedulingContext, cache=None) -> int:
    """0-100 blend of average slot availability (60%) and golden slots (40%) for the reference day"""
    participant_count = len(context.participants)
    if participant_count < 2:
        return 0

    slots = get_slot_grid(context.reference_date, context.participants, context.settings.exclude_lunch, cache)
    slots_per_day = SCHEDULER_CONFIG['slots_per_day']

    avg_availability = sum(slot.count for slot in slots) / len(slots)
    avg_score = (avg_availability / participant_count) * 60

    golden_threshold = math.ceil(participant_count * SCHEDULER_CONFIG['golden_ratio'])
    golden_slots = sum(1 for slot in slots if slot.count >= golden_threshold)
    golden_score = (golden_slots / slots_per_day) * 40

    return int(math.floor(avg_score + golden_score + 0.5))


def pair_overlap_hours(p1: Participant, p2: Participant, day: date) -> float:
    """Hours of the UTC day where both participants are inside their raw windows.

    Lunch exclusion is not applied here, unlike the slot grid.
    """
    try:
        start1, end1 = parse_local_time(p1.start), parse_local_time(p1.end)
        start2, end2 = parse_local_time(p2.start), parse_local_time(p2.end)
    except InvalidFormat as e:
        logger.warning("Pair overlap %s/%s skipped: %s", p1.name, p2.name, e)
        return 0.0

    overlap_slots = 0
    for i in range(SCHEDULER_CONFIG['slots_per_day']):
        instant = slot_instant(day, i)
        try:
            local1 = local_minute_of_day(instant, p1.timezone)
            local2 = local_minute_of_day(instant, p2.timezone)
        except UnknownTimezone as e:
            logger.warning("Pair overlap %s/%s skipped: %s", p1.name, p2.name, e)
            return 0.0

        if is_within_window(local1, start1, end1) and is_within_window(local2, start2, end2):
            overlap_slots += 1

    hours = overlap_slots * SCHEDULER_CONFIG['slot_minutes'] / 60
    return round(hours, 1)


def worst_pairs(context: SchedulingContext) -> List[WorstPair]:
    """Up to three pairs with the least window overlap (under three hours)"""
    if len(context.participants) < 2:
        return []

    pairs = []
    for p1, p2 in combinations(context.participants, 2):
        overlap = pair_overlap_hours(p1, p2, context.reference_date)
        if overlap < SCHEDULER_CONFIG['worst_pair_threshold_hours']:
            pairs.append(WorstPair(p1=p1.name, p2=p2.name, overlap_hours=overlap))

    pairs.sort(key=lambda pair: pair.overlap_hours)
    return pairs[:SCHEDULER_CONFIG['worst_pair_limit']]


def timezone_spread_hours(participants: Sequence[Participant], now: Optional[datetime] = None) -> float:
    """Distance in hours between the furthest-apart current UTC offsets"""
    offsets = []
    for p in participants:
        try:
            offsets.append(current_offset_minutes(p.timezone, now))
        except UnknownTimezone as e:
            logger.warning("Offset unavailable for %s: %s", p.name, e)

    if not offsets:
        return 0.0
    return round((max(offsets) - min(offsets)) / 60, 1)


def analyze(context: SchedulingContext, cache=None, now: Optional[datetime] = None) -> CompatibilityReport:
    return CompatibilityReport(
        score=compatibility_score(context, cache),
        worst_pairs=worst_pairs(context),
        timezone_spread_hours=timezone_spread_hours(context.participants, now),
        participant_count=len(context.participants),
    )
