# Demo participants and scenarios
from typing import List

from models import Participant

DEMO_PARTICIPANTS = [
    {
        "name": "Alice (NYC)",
        "timezone": "America/New_York",
        "start": "09:00",
        "end": "17:00",
        "priority": "required",
        "color": "#14b8a6"
    },
    {
        "name": "Bob (London)",
        "timezone": "Europe/London",
        "start": "08:30",
        "end": "16:30",
        "priority": "required",
        "color": "#06b6d4"
    },
    {
        "name": "Chen (Beijing)",
        "timezone": "Asia/Shanghai",
        "start": "09:00",
        "end": "18:00",
        "priority": "optional",
        "color": "#8b5cf6"
    },
    {
        "name": "Diana (Sydney)",
        "timezone": "Australia/Sydney",
        "start": "09:00",
        "end": "17:00",
        "priority": "optional",
        "color": "#ec4899"
    },
    {
        "name": "Erik (Berlin)",
        "timezone": "Europe/Berlin",
        "start": "08:00",
        "end": "16:00",
        "priority": "required",
        "color": "#f59e0b"
    }
]

# Test scenarios for demo
TEST_SCENARIOS = {
    "scenario_1_transatlantic": {
        "participants": DEMO_PARTICIPANTS[:2],
        "settings": {"duration": 30, "days": 1, "max_suggestions": 5}
    },

    "scenario_2_night_shift": {
        "participants": [
            DEMO_PARTICIPANTS[0],
            {
                "name": "Priya (Night Ops)",
                "timezone": "Asia/Kolkata",
                "start": "22:00",
                "end": "06:00",
                "priority": "required",
                "color": "#10b981"
            }
        ],
        "settings": {"duration": 60, "days": 2, "max_suggestions": 3}
    },

    "scenario_3_global_team": {
        "participants": DEMO_PARTICIPANTS,
        "settings": {"duration": 90, "days": 3, "max_suggestions": 5, "exclude_lunch": True}
    }
}


def load_demo_participants() -> List[Participant]:
    """Demo participants with freshly generated ids"""
    return [Participant(**record) for record in DEMO_PARTICIPANTS]
