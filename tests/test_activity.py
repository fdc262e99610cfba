"""
Tests for the activity feed.
"""

from whaleopoly.activity import ActivityLog, EventType, Severity


def test_newest_first_and_capped():
    log = ActivityLog(limit=25, clock=lambda: "12:00")
    for i in range(30):
        log.log(Severity.INFO, f"event {i}")

    assert len(log) == 25
    assert log.total_logged == 30
    assert log.entries[0].title == "event 29"
    assert log.entries[-1].title == "event 5"


def test_entry_fields():
    log = ActivityLog(clock=lambda: "09:15")
    entry = log.log(Severity.GOOD, "Bought", "Reef Row $60", event_type=EventType.PURCHASE, player_id="P1", position=1)

    assert entry.as_tuple() == ("good", "Bought", "Reef Row $60", "09:15")
    assert entry.details == {"position": 1}
    assert log.get_recent_entries(1) == [entry]


def test_get_entries_is_a_copy():
    log = ActivityLog()
    log.log(Severity.WARN, "Need funds")
    entries = log.get_entries()
    entries.clear()
    assert len(log) == 1


def test_game_log_respects_config_limit(game):
    for _ in range(40):
        game.end_turn()
    assert len(game.activity) == 25
    assert game.activity.entries[0].event_type == EventType.END_TURN
