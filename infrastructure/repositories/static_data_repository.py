"""Champion and item reference data from Data Dragon."""
import logging
from typing import List

from pydantic import ValidationError

from domain.entities import ChampionInfo, ItemInfo
from domain.errors import DecodeError
from infrastructure.api import DataDragonClient
from infrastructure.api.schemas import ChampionListDto, ItemListDto

logger = logging.getLogger(__name__)


class StaticDataRepository:
    """Decodes Data Dragon documents into sorted reference lists."""

    def __init__(self, client: DataDragonClient):
        self.client = client

    async def champions(self) -> List[ChampionInfo]:
        data = await self.client.get_champions()
        try:
            doc = ChampionListDto.model_validate(data)
        except ValidationError as exc:
            raise DecodeError("malformed champion.json", cause=exc) from exc

        champions = []
        for dto in doc.data.values():
            try:
                key = int(dto.key)
            except ValueError:
                logger.warning(f"Champion {dto.id} has non-numeric key {dto.key!r}")
                continue
            champions.append(ChampionInfo(id=dto.id, key=key, name=dto.name, title=dto.title, tags=tuple(dto.tags)))
        return sorted(champions, key=lambda c: c.name)

    async def items(self) -> List[ItemInfo]:
        data = await self.client.get_items()
        try:
            doc = ItemListDto.model_validate(data)
        except ValidationError as exc:
            raise DecodeError("malformed item.json", cause=exc) from exc

        items = []
        for item_id, dto in doc.data.items():
            if not item_id.isdigit():
                continue
            items.append(ItemInfo(id=int(item_id), name=dto.name, gold_total=dto.gold.total, tags=tuple(dto.tags)))
        return sorted(items, key=lambda i: (i.name, i.id))
