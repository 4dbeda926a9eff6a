import copy
from typing import Any, Callable, Dict, List

import httpx
import pytest

from infrastructure.api import HostRateLimiter, RiotAPIClient

PUUID = "puuid-target"


def participant(puuid: str = PUUID, **overrides: Any) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "puuid": puuid,
        "championName": "Ahri",
        "riotIdGameName": "Tester",
        "summonerName": "",
        "kills": 3,
        "deaths": 0,
        "assists": 2,
        "win": True,
        "item0": 3089,
        "item1": 0,
        "item2": 3020,
        "item3": 3340,
        "item4": 0,
        "item5": 0,
        "item6": 3363,
        "summoner1Id": 4,
        "summoner2Id": 14,
        "individualPosition": "MIDDLE",
        "teamPosition": "MIDDLE",
        "teamId": 100,
        "champLevel": 14,
        "totalDamageDealtToChampions": 20000,
        "totalMinionsKilled": 180,
        "neutralMinionsKilled": 20,
        "visionScore": 25,
        "goldEarned": 11000,
        "perks": {
            "styles": [
                {"style": 8100, "selections": [{"perk": 8112}, {"perk": 8126}, {"perk": 8139}]},
                {"style": 8200, "selections": [{"perk": 8226}, {"perk": 8210}]},
            ]
        },
    }
    data.update(overrides)
    return data


def match_document(
    match_id: str = "EUW1_1",
    *,
    queue_id: int = 420,
    game_creation: int = 1_700_000_000_000,
    game_duration: int = 1800,
    participants: List[Dict[str, Any]] | None = None,
    teams: List[Dict[str, Any]] | None = None,
) -> Dict[str, Any]:
    if participants is None:
        participants = [participant(), participant("someone-else", championName="Zed", win=False, teamId=200)]
    if teams is None:
        teams = [
            {"teamId": 100, "win": True, "objectives": {"baron": {"kills": 1}, "tower": {"kills": 8}, "dragon": {"kills": 3}}},
            {"teamId": 200, "win": False, "objectives": {"baron": {"kills": 0}, "tower": {"kills": 2}, "dragon": {"kills": 1}}},
        ]
    return {
        "metadata": {"matchId": match_id, "participants": [p.get("puuid") for p in participants]},
        "info": {
            "queueId": queue_id,
            "gameCreation": game_creation,
            "gameDuration": game_duration,
            "participants": copy.deepcopy(participants),
            "teams": copy.deepcopy(teams),
        },
    }


@pytest.fixture
def make_participant() -> Callable[..., Dict[str, Any]]:
    return participant


@pytest.fixture
def make_match() -> Callable[..., Dict[str, Any]]:
    return match_document


@pytest.fixture
def riot_client_factory():
    """Builds a RiotAPIClient whose requests go to ``handler`` instead of the network."""

    def _factory(handler: Callable[[httpx.Request], httpx.Response]) -> RiotAPIClient:
        return RiotAPIClient(
            "RGAPI-test",
            timeout=5.0,
            transport=httpx.MockTransport(handler),
            rate_limiter=HostRateLimiter(requests_per_1_sec=1000, requests_per_2_min=1000),
        )

    return _factory
