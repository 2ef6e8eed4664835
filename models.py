import uuid
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Literal, Tuple
from datetime import date, datetime, timedelta
import pytz

from config import DEFAULT_SETTINGS, VALIDATION_RULES

Priority = Literal['required', 'optional']
TimeFormat = Literal['12h', '24h']


def _new_participant_id() -> str:
    return uuid.uuid4().hex


def _utc_today() -> date:
    return datetime.now(pytz.utc).date()


class Participant(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_participant_id, description="Opaque unique identifier")
    name: str = Field(min_length=1, max_length=50, description="Display name")
    timezone: str = Field(description="IANA timezone identifier, e.g. 'America/New_York'")
    start: str = Field(description="Window start in local HH:MM")
    end: str = Field(description="Window end in local HH:MM; earlier than start means the window wraps past midnight")
    # Absent priority means required
    priority: Priority = Field(default='required', description="Priority tier")
    color: Optional[str] = Field(default=None, description="Display colour, passed through unchanged")

    @property
    def is_required(self) -> bool:
        return self.priority == 'required'


class SlotParticipant(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    color: Optional[str] = None
    is_conflict: bool = Field(default=False, description="Local time is before 07:00 or from 22:00")


class Slot(BaseModel):
    model_config = ConfigDict(frozen=True)

    index: int = Field(ge=0, le=47, description="Half-hour index within the UTC day")
    start: datetime = Field(description="Slot start instant in UTC")
    count: int = Field(default=0, description="Participants available in this slot")
    participants: Tuple[SlotParticipant, ...] = Field(default=())
    has_conflict: bool = Field(default=False, description="Any available participant is at an inconvenient hour")


class LocalTime(BaseModel):
    name: str
    time: str = Field(description="Window start rendered in the participant's timezone")
    available: bool
    color: Optional[str] = None
    priority: Priority = 'required'


class Suggestion(BaseModel):
    start: datetime = Field(description="Meeting start instant in UTC")
    end: datetime = Field(description="Meeting end instant in UTC")
    day: int = Field(description="Day offset from the reference date")
    score: int
    available: List[str] = Field(default_factory=list, description="Participants available for the whole window")
    required_available: List[str] = Field(default_factory=list)
    optional_available: List[str] = Field(default_factory=list)
    local_times: List[LocalTime] = Field(default_factory=list)


class SchedulingSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    duration: int = Field(default=DEFAULT_SETTINGS['duration'], le=VALIDATION_RULES['max_meeting_duration'],
                          description="Meeting duration in minutes")
    days: int = Field(default=DEFAULT_SETTINGS['days'], ge=0, le=VALIDATION_RULES['max_date_range_days'],
                      description="Consecutive days to scan, starting at the reference date")
    max_suggestions: int = Field(default=DEFAULT_SETTINGS['max_suggestions'], ge=0, le=VALIDATION_RULES['max_suggestions'])
    exclude_lunch: bool = Field(default=DEFAULT_SETTINGS['exclude_lunch'], description="Skip local 12:00-13:00")
    time_format: TimeFormat = Field(default=DEFAULT_SETTINGS['time_format'])


class SchedulingContext(BaseModel):
    """Immutable snapshot handed to every core operation"""
    model_config = ConfigDict(frozen=True)

    participants: Tuple[Participant, ...] = Field(default=())
    settings: SchedulingSettings = Field(default_factory=SchedulingSettings)
    reference_date: date = Field(default_factory=_utc_today, description="UTC calendar date treated as today")

    def day(self, offset: int) -> date:
        return self.reference_date + timedelta(days=offset)


class GridRequest(SchedulingContext):
    day_offset: int = Field(default=0, ge=0, le=VALIDATION_RULES['max_date_range_days'],
                            description="Days after the reference date")


class WorstPair(BaseModel):
    p1: str
    p2: str
    overlap_hours: float


class CompatibilityReport(BaseModel):
    score: int = Field(ge=0, le=100)
    worst_pairs: List[WorstPair] = Field(default_factory=list)
    timezone_spread_hours: float = 0.0
    participant_count: int = 0
