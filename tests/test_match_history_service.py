import asyncio
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import httpx
import pytest

from application import MatchHistoryService
from domain.entities import MatchSummary
from domain.enums import QueueKind, RoutingRegion
from domain.errors import HttpStatusError, NetworkError, ParticipantNotFound
from domain.interfaces import IMatchRepository
from infrastructure.repositories import MatchRepository

PUUID = "puuid-target"
_EPOCH = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _summary(match_id: str, hours: int, win: bool = True, champion: str = "Ahri") -> MatchSummary:
    return MatchSummary(
        match_id=match_id,
        puuid=PUUID,
        champion_name=champion,
        kills=1,
        deaths=1,
        assists=1,
        is_win=win,
        queue_id=420,
        queue_kind=QueueKind.RANKED_SOLO,
        created_at=_EPOCH + timedelta(hours=hours),
        duration_seconds=1500,
    )


class FakeMatchRepository(IMatchRepository):
    """In-memory repository; records concurrency and calls."""

    def __init__(self, outcomes: Dict[str, object], ids: Optional[List[str]] = None, delay: float = 0.0):
        self.outcomes = outcomes
        self.ids = ids or list(outcomes)
        self.delay = delay
        self.in_flight = 0
        self.peak = 0
        self.fetched: List[str] = []
        self.list_calls: List[tuple] = []

    async def list_match_ids(self, puuid, region, start=0, count=10):
        self.list_calls.append((start, count))
        return self.ids[start:start + count]

    async def fetch_match(self, match_id, region, puuid):
        self.in_flight += 1
        self.peak = max(self.peak, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            self.fetched.append(match_id)
            outcome = self.outcomes[match_id]
            if isinstance(outcome, BaseException):
                raise outcome
            return outcome
        finally:
            self.in_flight -= 1

    async def fetch_match_detail(self, match_id, region):
        raise NotImplementedError


def test_empty_id_list_issues_no_requests():
    repo = FakeMatchRepository({})
    service = MatchHistoryService(repo)

    assert asyncio.run(service.fetch_history(PUUID, "Europe West", [])) == []
    assert repo.fetched == []


def test_results_are_sorted_newest_first():
    repo = FakeMatchRepository({"a": _summary("a", 1), "b": _summary("b", 3), "c": _summary("c", 2)})
    service = MatchHistoryService(repo)

    matches = asyncio.run(service.fetch_history(PUUID, RoutingRegion.EUROPE, ["a", "b", "c"]))
    assert [m.match_id for m in matches] == ["b", "c", "a"]


def test_failures_are_dropped():
    repo = FakeMatchRepository(
        {
            "ok1": _summary("ok1", 1),
            "net": NetworkError("reset"),
            "404": HttpStatusError(404),
            "gone": ParticipantNotFound("gone", PUUID),
            "ok2": _summary("ok2", 2),
        }
    )
    service = MatchHistoryService(repo)
    ids = list(repo.outcomes)

    matches = asyncio.run(service.fetch_history(PUUID, "euw1", ids))

    assert [m.match_id for m in matches] == ["ok2", "ok1"]
    assert len(matches) <= len(ids)
    # Every request ran to completion before the join returned.
    assert sorted(repo.fetched) == sorted(ids)


def test_all_failures_give_empty_page():
    repo = FakeMatchRepository({"a": NetworkError("x"), "b": HttpStatusError(500)})
    service = MatchHistoryService(repo)

    assert asyncio.run(service.fetch_history(PUUID, "euw1", ["a", "b"])) == []


def test_programming_errors_are_not_swallowed():
    repo = FakeMatchRepository({"a": _summary("a", 1), "b": KeyError("bug")})
    service = MatchHistoryService(repo)

    with pytest.raises(KeyError):
        asyncio.run(service.fetch_history(PUUID, "euw1", ["a", "b"]))


def test_concurrency_is_bounded():
    outcomes = {f"m{i}": _summary(f"m{i}", i) for i in range(12)}
    repo = FakeMatchRepository(outcomes, delay=0.01)
    service = MatchHistoryService(repo, max_concurrency=3)

    matches = asyncio.run(service.fetch_history(PUUID, "euw1", list(outcomes)))

    assert len(matches) == 12
    assert repo.peak <= 3


def test_load_page_lists_then_fetches():
    outcomes = {f"m{i}": _summary(f"m{i}", -i) for i in range(8)}
    repo = FakeMatchRepository(outcomes)
    service = MatchHistoryService(repo)

    matches = asyncio.run(service.load_page(PUUID, "euw1", start=2, count=3))

    assert repo.list_calls == [(2, 3)]
    assert [m.match_id for m in matches] == ["m2", "m3", "m4"]


def test_end_to_end_with_http(riot_client_factory, make_match):
    documents = {
        "EUW1_1": make_match("EUW1_1", game_creation=1_000),
        "EUW1_2": make_match("EUW1_2", game_creation=3_000),
        "EUW1_3": make_match("EUW1_3", game_creation=2_000),
    }

    def handler(request):
        path = request.url.path
        if path.endswith("/ids"):
            return httpx.Response(200, json=["EUW1_1", "EUW1_2", "EUW1_3", "EUW1_4"])
        match_id = path.rsplit("/", 1)[-1]
        if match_id in documents:
            return httpx.Response(200, json=documents[match_id])
        return httpx.Response(404)

    async def scenario():
        async with riot_client_factory(handler) as api:
            service = MatchHistoryService(MatchRepository(api))
            return await service.load_page(PUUID, "Europe West", count=4)

    matches = asyncio.run(scenario())
    assert [m.match_id for m in matches] == ["EUW1_2", "EUW1_3", "EUW1_1"]


def test_out_of_range_creation_time_drops_only_that_match(riot_client_factory, make_match):
    documents = {
        "GOOD": make_match("GOOD"),
        "BAD": make_match("BAD", game_creation=10**20),
    }

    def handler(request):
        return httpx.Response(200, json=documents[request.url.path.rsplit("/", 1)[-1]])

    async def scenario():
        async with riot_client_factory(handler) as api:
            service = MatchHistoryService(MatchRepository(api))
            return await service.fetch_history(PUUID, "euw1", ["GOOD", "BAD"])

    matches = asyncio.run(scenario())
    assert [m.match_id for m in matches] == ["GOOD"]
