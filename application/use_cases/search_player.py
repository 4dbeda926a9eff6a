"""Use case: turn ``name#tag`` and a region into a player context."""
from __future__ import annotations

from typing import Tuple

from core.logging.logger import get_logger
from domain.entities import PlayerContext
from domain.enums import Region
from domain.errors import InvalidRiotIdError
from domain.interfaces import IAccountRepository

logger = get_logger(__name__, service="search")


def parse_riot_id(query: str) -> Tuple[str, str]:
    """Split ``name#tag``; exactly one '#' with text on both sides."""
    parts = (query or "").strip().split("#")
    if len(parts) != 2:
        raise InvalidRiotIdError(query)
    name, tag = parts[0].strip(), parts[1].strip()
    if not name or not tag:
        raise InvalidRiotIdError(query)
    return name, tag


class SearchPlayerUseCase:
    """Resolves a Riot ID to a ``PlayerContext`` for the history screen.

    Errors (bad format, unsupported region, failed lookup) propagate so the
    caller can show them to the user.
    """

    def __init__(self, account_repo: IAccountRepository):
        self.account_repo = account_repo

    async def execute(self, query: str, region: str | Region) -> PlayerContext:
        name, tag = parse_riot_id(query)
        platform = region if isinstance(region, Region) else Region.parse(region)
        account = await self.account_repo.resolve_riot_id(name, tag, platform)
        logger.info(f"player-resolved {account.riot_id} region={platform.value}")
        return PlayerContext(account=account, region=platform)
