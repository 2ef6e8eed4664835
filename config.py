import os
import logging
from typing import Dict, Any

# Slot grid and scoring configuration
SCHEDULER_CONFIG = {
    'slot_minutes': 30,
    'slots_per_day': 48,
    'lunch_start_minute': int(os.getenv('LUNCH_START_MINUTE', '720')),  # 12:00
    'lunch_end_minute': int(os.getenv('LUNCH_END_MINUTE', '780')),  # 13:00
    'early_hour': int(os.getenv('INCONVENIENT_EARLY_HOUR', '7')),
    'late_hour': int(os.getenv('INCONVENIENT_LATE_HOUR', '22')),
    'golden_ratio': float(os.getenv('GOLDEN_RATIO', '0.8')),
    'required_bonus': int(os.getenv('REQUIRED_BONUS', '2')),
    'worst_pair_threshold_hours': float(os.getenv('WORST_PAIR_THRESHOLD_HOURS', '3')),
    'worst_pair_limit': int(os.getenv('WORST_PAIR_LIMIT', '3')),
}

# Default meeting settings
DEFAULT_SETTINGS = {
    'duration': int(os.getenv('DEFAULT_MEETING_DURATION', '60')),
    'days': int(os.getenv('DEFAULT_DAYS', '1')),
    'max_suggestions': int(os.getenv('DEFAULT_MAX_SUGGESTIONS', '5')),
    'exclude_lunch': os.getenv('DEFAULT_EXCLUDE_LUNCH', 'False').lower() == 'true',
    'time_format': os.getenv('DEFAULT_TIME_FORMAT', '12h'),
}

# Request limits
VALIDATION_RULES = {
    'max_meeting_duration': int(os.getenv('MAX_MEETING_DURATION', '2880')),  # minutes
    'max_date_range_days': int(os.getenv('MAX_DATE_RANGE_DAYS', '30')),
    'max_suggestions': int(os.getenv('MAX_SUGGESTIONS', '100')),
}

# API Configuration
API_CONFIG = {
    'host': os.getenv('API_HOST', '0.0.0.0'),
    'port': int(os.getenv('API_PORT', '5000')),
    'debug': os.getenv('API_DEBUG', 'False').lower() == 'true',
}

# Logging Configuration
LOGGING_CONFIG = {
    'level': os.getenv('LOG_LEVEL', 'INFO'),
    'format': os.getenv('LOG_FORMAT', '%(asctime)s - %(name)s - %(levelname)s - %(message)s'),
}

# Zones offered to users when adding participants
SUPPORTED_TIMEZONES = [
    "UTC", "Africa/Cairo", "Africa/Johannesburg", "Africa/Lagos", "Africa/Nairobi",
    "America/Anchorage", "America/Chicago", "America/Denver", "America/Los_Angeles",
    "America/Mexico_City", "America/New_York", "America/Phoenix", "America/Sao_Paulo",
    "America/Toronto", "Asia/Colombo", "Asia/Dubai", "Asia/Hong_Kong", "Asia/Jakarta",
    "Asia/Karachi", "Asia/Kolkata", "Asia/Seoul", "Asia/Shanghai", "Asia/Singapore",
    "Asia/Tokyo", "Australia/Sydney", "Europe/Amsterdam", "Europe/Berlin", "Europe/London",
    "Europe/Madrid", "Europe/Moscow", "Europe/Paris", "Europe/Rome", "Europe/Istanbul",
    "Pacific/Auckland", "Pacific/Fiji",
]


def get_config() -> Dict[str, Any]:
    """Get complete configuration dictionary"""
    return {
        'scheduler': SCHEDULER_CONFIG,
        'defaults': DEFAULT_SETTINGS,
        'validation': VALIDATION_RULES,
        'api': API_CONFIG,
        'logging': LOGGING_CONFIG,
        'timezones': SUPPORTED_TIMEZONES,
    }


def configure_logging(config: Dict = None):
    """Configure root logging from LOGGING_CONFIG"""
    config = config or LOGGING_CONFIG
    logging.basicConfig(level=config['level'].upper(), format=config['format'])


def validate_config() -> bool:
    """Validate configuration settings"""
    import pytz

    errors = []

    if SCHEDULER_CONFIG['slots_per_day'] * SCHEDULER_CONFIG['slot_minutes'] != 24 * 60:
        errors.append("Slot grid must cover exactly one day")

    if SCHEDULER_CONFIG['lunch_start_minute'] >= SCHEDULER_CONFIG['lunch_end_minute']:
        errors.append("Invalid lunch band configuration")

    if not 0 < SCHEDULER_CONFIG['golden_ratio'] <= 1:
        errors.append("Golden ratio must be in (0, 1]")

    if DEFAULT_SETTINGS['days'] > VALIDATION_RULES['max_date_range_days']:
        errors.append("Default day range exceeds max_date_range_days")

    if DEFAULT_SETTINGS['time_format'] not in ('12h', '24h'):
        errors.append(f"Invalid time format: {DEFAULT_SETTINGS['time_format']}")

    for tz in SUPPORTED_TIMEZONES:
        try:
            pytz.timezone(tz)
        except pytz.UnknownTimeZoneError:
            errors.append(f"Invalid timezone: {tz}")

    if errors:
        logger = logging.getLogger(__name__)
        logger.error("Configuration errors found:")
        for error in errors:
            logger.error("  - %s", error)
        return False

    return True
