"""
Tests for the Flask JSON API
"""
import pytest

import main
from main import app

TRANSATLANTIC = [
    {"id": "alice", "name": "Alice", "timezone": "America/New_York", "start": "09:00", "end": "17:00",
     "priority": "required", "color": "#14b8a6"},
    {"id": "bob", "name": "Bob", "timezone": "Europe/London", "start": "08:30", "end": "16:30",
     "priority": "required", "color": "#06b6d4"},
]


@pytest.fixture
def client():
    app.config['TESTING'] = True
    with app.test_client() as client:
        yield client


def test_health(client):
    response = client.get('/health')

    assert response.status_code == 200
    body = response.get_json()
    assert body['status'] == 'healthy'
    assert 'slot_cache' in body['components']


def test_demo_participants(client):
    response = client.get('/demo')

    participants = response.get_json()['participants']
    assert len(participants) == 5
    assert all(p['id'] for p in participants)
    assert len({p['id'] for p in participants}) == 5
    assert participants[0]['offset'].startswith('UTC-')


def test_best_times(client):
    response = client.post('/best-times', json={
        "participants": TRANSATLANTIC,
        "settings": {"duration": 30, "days": 1, "max_suggestions": 3},
        "reference_date": "2025-01-15",
    })

    assert response.status_code == 200
    body = response.get_json()
    assert body['reference_date'] == '2025-01-15'
    suggestions = body['suggestions']
    assert len(suggestions) == 3
    assert suggestions[0]['start'].startswith('2025-01-15T14:00:00')
    assert suggestions[0]['score'] == 6
    assert sorted(suggestions[0]['available']) == ['Alice', 'Bob']
    assert suggestions[0]['etiquette'] == ['Respectful for all']
    assert [lt['time'] for lt in suggestions[0]['local_times']] == ['09:00 AM', '02:00 PM']


def test_best_times_without_participants(client):
    response = client.post('/best-times', json={"reference_date": "2025-01-15"})

    assert response.status_code == 200
    assert response.get_json()['suggestions'] == []


def test_grid(client):
    response = client.post('/grid', json={
        "participants": TRANSATLANTIC,
        "reference_date": "2025-01-15",
        "day_offset": 1,
    })

    body = response.get_json()
    assert body['day'] == '2025-01-16'
    assert len(body['slots']) == 48
    assert body['slots'][28]['count'] == 2
    assert [p['name'] for p in body['slots'][28]['participants']] == ['Alice', 'Bob']


def test_compatibility(client):
    response = client.post('/compatibility', json={
        "participants": TRANSATLANTIC,
        "reference_date": "2025-01-15",
    })

    body = response.get_json()
    assert 0 <= body['score'] <= 100
    assert body['participant_count'] == 2
    assert body['worst_pairs'] == [{"p1": "Alice", "p2": "Bob", "overlap_hours": 2.5}]


def test_invalid_settings_rejected(client):
    response = client.post('/best-times', json={
        "participants": TRANSATLANTIC,
        "settings": {"time_format": "36h"},
    })

    assert response.status_code == 400
    body = response.get_json()
    assert body['error'] == 'Invalid scheduling request'
    assert body['details']


def test_invalid_participant_rejected(client):
    response = client.post('/compatibility', json={
        "participants": [{"name": "", "timezone": "UTC", "start": "09:00", "end": "17:00"}],
    })

    assert response.status_code == 400


def test_unknown_route_is_not_a_server_error(client):
    assert client.get('/nope').status_code == 404


def test_edited_participant_with_same_id_gets_fresh_grid(client):
    team = [
        {"id": "a", "name": "A", "timezone": "UTC", "start": "09:00", "end": "17:00"},
        {"id": "b", "name": "B", "timezone": "UTC", "start": "09:00", "end": "17:00"},
    ]
    first = client.post('/grid', json={"participants": team, "reference_date": "2025-01-15"})
    assert first.get_json()['slots'][18]['count'] == 2

    team[0] = dict(team[0], start="20:00", end="22:00")
    second = client.post('/grid', json={"participants": team, "reference_date": "2025-01-15"})

    slots = second.get_json()['slots']
    assert slots[18]['count'] == 1
    assert [p['name'] for p in slots[18]['participants']] == ['B']
    assert slots[40]['count'] == 1


def test_requests_do_not_share_a_cache(client, monkeypatch):
    created = []
    original = main._coordinator

    def recording_coordinator():
        coordinator = original()
        created.append(coordinator)
        return coordinator

    monkeypatch.setattr(main, '_coordinator', recording_coordinator)
    id_less = [{k: v for k, v in p.items() if k != 'id'} for p in TRANSATLANTIC]

    for _ in range(10):
        response = client.post('/best-times', json={
            "participants": id_less,
            "settings": {"duration": 30, "days": 3},
            "reference_date": "2025-01-15",
        })
        assert response.status_code == 200

    assert len(created) == 10
    assert len({id(c.cache) for c in created}) == 10
    assert all(len(c.cache) == 3 for c in created)


def test_non_integer_day_offset_rejected(client):
    response = client.post('/grid', json={
        "participants": TRANSATLANTIC,
        "reference_date": "2025-01-15",
        "day_offset": "abc",
    })

    assert response.status_code == 400
    assert response.get_json()['details'][0]['loc'] == ['day_offset']


@pytest.mark.parametrize("day_offset", [-1, 31])
def test_out_of_range_day_offset_rejected(client, day_offset):
    response = client.post('/grid', json={"participants": TRANSATLANTIC, "day_offset": day_offset})

    assert response.status_code == 400


@pytest.mark.parametrize("settings", [
    {"days": 1000},
    {"duration": 10 ** 9},
    {"max_suggestions": 10 ** 6},
])
def test_oversized_settings_rejected(client, settings):
    response = client.post('/best-times', json={"participants": TRANSATLANTIC, "settings": settings})

    assert response.status_code == 400
    assert response.get_json()['details'][0]['loc'][0] == 'settings'
