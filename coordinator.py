import logging
from datetime import datetime
from typing import Dict, List, Optional, Sequence
import pytz

from models import CompatibilityReport, SchedulingContext, Slot, Suggestion
from services.best_time_ranker import rank_best_times
from services.compatibility import analyze
from services.slot_cache import SlotCache
from services.slot_grid import get_slot_grid

logger = logging.getLogger(__name__)


class SchedulingCoordinator:
    """Entry point for the scheduling core; owns the slot cache and nothing else"""

    def __init__(self, cache: Optional[SlotCache] = None):
        self.cache = cache if cache is not None else SlotCache()

    def best_times(self, context: SchedulingContext) -> List[Suggestion]:
        """Ranked meeting suggestions for the snapshot"""
        suggestions = rank_best_times(context, self.cache)
        logger.info(
            "Found %d suggestions for %d participants over %d day(s)",
            len(suggestions), len(context.participants), context.settings.days,
        )
        return suggestions

    def slot_grid(self, context: SchedulingContext, day_offset: int = 0) -> Sequence[Slot]:
        """The 48-slot grid for reference_date + day_offset"""
        return get_slot_grid(
            context.day(day_offset),
            context.participants,
            context.settings.exclude_lunch,
            self.cache,
        )

    def compatibility(self, context: SchedulingContext, now: Optional[datetime] = None) -> CompatibilityReport:
        return analyze(context, self.cache, now)

    def invalidate(self) -> int:
        """Clear cached grids after participants or settings change"""
        removed = self.cache.clear()
        logger.info("Invalidated %d cached grid(s)", removed)
        return removed

    def health_check(self) -> Dict:
        """Get system status for health checks"""
        try:
            pytz.timezone('UTC')
            return {
                'status': 'healthy',
                'timestamp': datetime.now(pytz.utc).isoformat(),
                'components': {
                    'timezone_database': {'status': 'healthy', 'zones': len(pytz.all_timezones)},
                    'slot_cache': {'status': 'healthy', 'entries': len(self.cache),
                                   'hits': self.cache.hits, 'misses': self.cache.misses},
                },
            }
        except pytz.UnknownTimeZoneError as e:
            return {
                'status': 'unhealthy',
                'error': str(e),
                'timestamp': datetime.now(pytz.utc).isoformat(),
            }
