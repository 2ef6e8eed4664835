"""
Error kinds raised by the scheduling core
"""


class SchedulerError(Exception):
    """Base class for scheduling core errors"""


class InvalidFormat(SchedulerError, ValueError):
    """A local time string is not a valid "HH:MM" value"""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid time format: {value!r} (expected HH:MM)")


class UnknownTimezone(SchedulerError):
    """The timezone database does not recognize a zone identifier"""

    def __init__(self, timezone):
        self.timezone = timezone
        super().__init__(f"Unknown timezone: {timezone!r}")
