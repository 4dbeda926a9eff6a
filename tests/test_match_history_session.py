import asyncio
from datetime import datetime, timedelta, timezone

from application import MatchHistoryService, MatchHistorySession
from domain.entities import Account, MatchSummary, PlayerContext
from domain.enums import QueueKind, Region

PUUID = "puuid-target"
_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _summary(match_id: str, age: int, win: bool, champion: str) -> MatchSummary:
    return MatchSummary(
        match_id=match_id,
        puuid=PUUID,
        champion_name=champion,
        kills=2,
        deaths=1,
        assists=3,
        is_win=win,
        queue_id=420,
        queue_kind=QueueKind.RANKED_SOLO,
        created_at=_EPOCH - timedelta(hours=age),
        duration_seconds=1500,
    )


class StubService(MatchHistoryService):
    """Serves pages from a fixed, newest-first history."""

    def __init__(self, history):
        self.history = history
        self.calls = []

    async def load_page(self, puuid, region, start=0, count=None):
        self.calls.append((start, count))
        return list(self.history[start:start + count])


def _context() -> PlayerContext:
    return PlayerContext(Account(PUUID, "Tester", "EUW"), Region.EUW1)


def _history(n: int):
    return [_summary(f"m{i}", i, win=i % 2 == 0, champion="Ahri" if i < 3 else "Zed") for i in range(n)]


def test_load_replaces_matches():
    service = StubService(_history(20))
    session = MatchHistorySession(service, _context(), page_size=10)

    asyncio.run(session.load())
    asyncio.run(session.load())

    assert len(session.matches) == 10
    assert service.calls == [(0, 10), (0, 10)]
    assert session.games == 10


def test_load_more_continues_from_current_length():
    service = StubService(_history(20))
    session = MatchHistorySession(service, _context(), page_size=10)

    asyncio.run(session.load())
    new = asyncio.run(session.load_more(5))

    assert service.calls[-1] == (10, 5)
    assert [m.match_id for m in new] == ["m10", "m11", "m12", "m13", "m14"]
    assert len(session.matches) == 15
    assert session.games == 15


def test_load_more_offset_follows_dropped_matches():
    service = StubService(_history(20))
    session = MatchHistorySession(service, _context(), page_size=10)
    session.matches = _history(8)

    asyncio.run(session.load_more(5))

    # Start is the held count, not the number of ids requested so far.
    assert service.calls[-1] == (8, 5)


def test_load_more_does_not_deduplicate():
    history = _history(10)
    service = StubService(history + history)
    session = MatchHistorySession(service, _context(), page_size=10)

    asyncio.run(session.load())
    asyncio.run(session.load_more(3))

    ids = [m.match_id for m in session.matches]
    assert ids.count("m0") == 2


def test_stats_follow_held_matches():
    service = StubService(_history(20))
    session = MatchHistorySession(service, _context(), page_size=4)

    asyncio.run(session.load())
    stats = session.stats
    assert stats.matches_played == 4
    assert stats.win_rate == 50.0
    assert stats.most_winning_champion == ("Ahri", 2)

    asyncio.run(session.load_more(2))
    assert session.stats.matches_played == 6


def test_empty_session_stats():
    session = MatchHistorySession(StubService([]), _context(), page_size=10)

    asyncio.run(session.load())
    assert session.matches == []
    assert session.stats.win_rate is None


def test_load_more_with_zero_increment_requests_nothing_extra():
    service = StubService(_history(20))
    session = MatchHistorySession(service, _context(), page_size=10)

    asyncio.run(session.load())
    new = asyncio.run(session.load_more(0))

    assert service.calls[-1] == (10, 0)
    assert new == []
    assert session.games == 10
