"""Decoding of raw match-v5 documents into domain entities."""
import logging
from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional, Tuple

from pydantic import ValidationError

from domain.entities import MatchDetail, MatchParticipant, MatchSummary, TeamSummary
from domain.enums import QueueKind, Rune, make_rune, queue_label, summoner_spell_name
from domain.errors import DecodeError, ParticipantNotFound
from infrastructure.api.schemas import MatchDto, ParticipantDto, PerksDto, TeamDto

logger = logging.getLogger(__name__)

# Wards, trinkets and support quest items shown apart from the build.
VISION_ITEM_IDS = frozenset({3340, 3363, 3364, 2055, 4642})


def _validate_match(document: Any) -> MatchDto:
    try:
        return MatchDto.model_validate(document)
    except ValidationError as exc:
        raise DecodeError(f"malformed match document: {exc.error_count()} error(s)", cause=exc) from exc


def _created_at(game_creation_ms: int) -> datetime:
    try:
        return datetime.fromtimestamp(game_creation_ms / 1000, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise DecodeError(f"gameCreation out of range: {game_creation_ms}", cause=exc) from exc


def split_items(item_ids: Iterable[int]) -> Tuple[List[int], List[int]]:
    """Split slot values into (build items, vision items); 0 is an empty slot."""
    items: List[int] = []
    vision: List[int] = []
    for item_id in item_ids:
        if item_id in VISION_ITEM_IDS:
            vision.append(item_id)
        elif item_id > 0:
            items.append(item_id)
    return items, vision


def parse_runes(perks: Any) -> Tuple[Optional[Rune], List[Rune]]:
    """(keystone, secondary runes) from a participant's ``perks`` block.

    The keystone is the first selection of the first style; every selection
    of the second style is a secondary rune. Anything short of two
    well-formed styles yields ``(None, [])``.
    """
    if perks is None:
        return None, []
    try:
        styles = PerksDto.model_validate(perks).styles
    except ValidationError as exc:
        logger.debug(f"Ignoring malformed perks block: {exc.error_count()} error(s)")
        return None, []
    if len(styles) < 2:
        return None, []

    primary, secondary = styles[0], styles[1]
    keystone = make_rune(primary.selections[0].perk) if primary.selections else None
    return keystone, [make_rune(s.perk) for s in secondary.selections]


def find_participant(participants: List[Any], puuid: str) -> Optional[Any]:
    """Linear scan for the entry whose ``puuid`` matches."""
    for entry in participants:
        if isinstance(entry, dict) and entry.get("puuid") == puuid:
            return entry
    return None


def parse_match_summary(document: Any, puuid: str) -> MatchSummary:
    """Reduce a match document to ``puuid``'s line.

    Raises ParticipantNotFound when the player is absent and DecodeError when
    the envelope or the player's entry is missing a required field.
    """
    match = _validate_match(document)
    info = match.info
    match_id = match.metadata.matchId

    raw = find_participant(info.participants, puuid)
    if raw is None:
        raise ParticipantNotFound(match_id, puuid)

    try:
        p = ParticipantDto.model_validate(raw)
    except ValidationError as exc:
        raise DecodeError(
            f"malformed participant in {match_id}: {exc.error_count()} error(s)", cause=exc
        ) from exc

    queue_kind = QueueKind.from_queue_id(info.queueId)
    items, vision_items = split_items(p.item_ids)
    keystone, secondary = parse_runes(p.perks)

    return MatchSummary(
        match_id=match_id,
        puuid=p.puuid,
        champion_name=p.championName,
        kills=p.kills,
        deaths=p.deaths,
        assists=p.assists,
        is_win=p.win,
        queue_id=info.queueId,
        queue_kind=queue_kind,
        created_at=_created_at(info.gameCreation),
        duration_seconds=info.gameDuration,
        items=items,
        vision_items=vision_items,
        summoner_spells=[summoner_spell_name(p.summoner1Id), summoner_spell_name(p.summoner2Id)],
        keystone=keystone,
        secondary_runes=secondary,
        damage_to_champions=p.totalDamageDealtToChampions,
        vision_score=p.visionScore if queue_kind.has_vision_score else None,
        creep_score=p.creep_score,
        gold_earned=p.goldEarned,
        lane=p.individualPosition,
    )


def _parse_participant(raw: Any) -> Optional[MatchParticipant]:
    try:
        p = ParticipantDto.model_validate(raw)
    except ValidationError as exc:
        logger.debug(f"Skipping malformed participant: {exc.error_count()} error(s)")
        return None
    items, _ = split_items(p.item_ids)
    return MatchParticipant(
        summoner_name=p.display_name,
        champion_name=p.championName,
        team_id=p.teamId,
        team_position=p.teamPosition,
        kills=p.kills,
        deaths=p.deaths,
        assists=p.assists,
        champ_level=p.champLevel,
        damage_to_champions=p.totalDamageDealtToChampions,
        vision_score=p.visionScore,
        gold_earned=p.goldEarned,
        creep_score=p.creep_score,
        items=items,
        puuid=p.puuid,
    )


def _parse_team(raw: Any) -> Optional[TeamSummary]:
    try:
        t = TeamDto.model_validate(raw)
    except ValidationError:
        return None
    return TeamSummary(
        team_id=t.teamId,
        win=t.win,
        baron_kills=t.objectives.baron.kills,
        tower_kills=t.objectives.tower.kills,
        dragon_kills=t.objectives.dragon.kills,
    )


def parse_match_detail(document: Any) -> MatchDetail:
    """Every participant and team of a match.

    Malformed participant or team entries are skipped; only a broken
    envelope is a DecodeError.
    """
    match = _validate_match(document)
    info = match.info
    participants = [p for p in map(_parse_participant, info.participants) if p is not None]
    teams = [t for t in map(_parse_team, info.teams) if t is not None]
    return MatchDetail(
        match_id=match.metadata.matchId,
        queue_id=info.queueId,
        queue_label=queue_label(info.queueId),
        created_at=_created_at(info.gameCreation),
        duration_seconds=info.gameDuration,
        participants=participants,
        teams=teams,
    )
