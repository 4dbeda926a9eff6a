from datetime import datetime, timezone

import pytest

from domain.enums import QueueKind, Rune
from domain.errors import DecodeError, FetchError, ParticipantNotFound
from infrastructure.repositories.match_parser import (
    parse_match_detail,
    parse_match_summary,
    parse_runes,
    split_items,
)

PUUID = "puuid-target"


def test_summary_basic_fields(make_match):
    summary = parse_match_summary(make_match("EUW1_42"), PUUID)

    assert summary.match_id == "EUW1_42"
    assert summary.puuid == PUUID
    assert summary.champion_name == "Ahri"
    assert (summary.kills, summary.deaths, summary.assists) == (3, 0, 2)
    assert summary.is_win is True
    assert summary.queue_kind is QueueKind.RANKED_SOLO
    assert summary.created_at == datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)
    assert summary.duration_seconds == 1800
    assert summary.kda == 5.0
    assert summary.creep_score == 200
    assert summary.cs_per_minute == pytest.approx(200 / 30)
    assert summary.lane == "MIDDLE"
    assert summary.summoner_spells == ["Flash", "Ignite"]


def test_summary_keystone_and_secondary_runes(make_match):
    summary = parse_match_summary(make_match(), PUUID)

    assert summary.keystone == Rune(8112, "Electrocute")
    assert summary.secondary_runes == [Rune(8226, "Manaflow Band"), Rune(8210, "Transcendence")]


def test_summary_splits_vision_items_out_of_the_build(make_match):
    summary = parse_match_summary(make_match(), PUUID)

    assert summary.items == [3089, 3020]
    assert summary.vision_items == [3340, 3363]


def test_split_items_drops_empty_slots():
    assert split_items([0, 0, 1055, 0, 2055, 0, 3364]) == ([1055], [2055, 3364])


def test_participant_missing_raises(make_match):
    with pytest.raises(ParticipantNotFound) as excinfo:
        parse_match_summary(make_match("EUW1_7"), "nobody")

    assert excinfo.value.match_id == "EUW1_7"
    assert isinstance(excinfo.value, DecodeError)
    assert isinstance(excinfo.value, FetchError)


def test_participant_missing_required_field(make_match, make_participant):
    broken = make_participant()
    del broken["championName"]
    document = make_match(participants=[broken])

    with pytest.raises(DecodeError) as excinfo:
        parse_match_summary(document, PUUID)
    assert not isinstance(excinfo.value, ParticipantNotFound)


def test_participant_wrong_type_is_not_coerced(make_match, make_participant):
    document = make_match(participants=[make_participant(kills="3")])

    with pytest.raises(DecodeError):
        parse_match_summary(document, PUUID)


def test_other_participants_may_be_malformed(make_match, make_participant):
    document = make_match(participants=[make_participant(), {"puuid": "other"}])

    summary = parse_match_summary(document, PUUID)
    assert summary.champion_name == "Ahri"


def test_missing_envelope_field(make_match):
    document = make_match()
    del document["info"]["gameDuration"]

    with pytest.raises(DecodeError):
        parse_match_summary(document, PUUID)


def test_non_object_document():
    with pytest.raises(DecodeError):
        parse_match_summary(["not", "a", "match"], PUUID)


def test_aram_has_no_vision_score(make_match):
    summary = parse_match_summary(make_match(queue_id=450), PUUID)

    assert summary.queue_kind is QueueKind.ARAM
    assert summary.vision_score is None


def test_missing_vision_score_is_none(make_match, make_participant):
    raw = make_participant()
    del raw["visionScore"]

    summary = parse_match_summary(make_match(participants=[raw]), PUUID)
    assert summary.vision_score is None


def test_unknown_queue_is_other(make_match):
    assert parse_match_summary(make_match(queue_id=1700), PUUID).queue_kind is QueueKind.OTHER


def test_unknown_summoner_spell_is_empty(make_match, make_participant):
    document = make_match(participants=[make_participant(summoner1Id=9999)])

    summary = parse_match_summary(document, PUUID)
    assert summary.summoner_spells == ["", "Ignite"]


@pytest.mark.parametrize(
    "perks",
    [
        None,
        {},
        {"styles": []},
        {"styles": [{"selections": [{"perk": 8112}]}]},
        {"styles": "nope"},
        {"styles": [{"selections": [{"perk": "x"}]}, {"selections": []}]},
    ],
)
def test_malformed_perks_give_no_runes(perks):
    assert parse_runes(perks) == (None, [])


def test_malformed_perks_do_not_fail_the_summary(make_match, make_participant):
    document = make_match(participants=[make_participant(perks={"styles": 5})])

    summary = parse_match_summary(document, PUUID)
    assert summary.keystone is None
    assert summary.secondary_runes == []


def test_unmapped_rune_keeps_its_slot():
    keystone, secondary = parse_runes(
        {"styles": [{"selections": [{"perk": 1}]}, {"selections": [{"perk": 8226}, {"perk": 2}]}]}
    )
    assert keystone == Rune(1, "")
    assert [r.name for r in secondary] == ["Manaflow Band", ""]


def test_match_detail(make_match):
    detail = parse_match_detail(make_match("EUW1_9", queue_id=440))

    assert detail.match_id == "EUW1_9"
    assert detail.queue_label == "Ranked Flex"
    assert detail.formatted_duration == "30:00"
    assert len(detail.participants) == 2
    assert detail.winning_team.team_id == 100
    assert detail.team(100).tower_kills == 8
    assert detail.team(200).dragon_kills == 1
    assert [p.champion_name for p in detail.participants_for(200)] == ["Zed"]


def test_match_detail_carry_score(make_match, make_participant):
    document = make_match(
        participants=[
            make_participant("a", kills=10, deaths=0, assists=0, totalDamageDealtToChampions=0, goldEarned=0, visionScore=0),
            make_participant("b", kills=10, deaths=0, assists=0, totalDamageDealtToChampions=0, goldEarned=0, visionScore=0),
        ]
    )
    detail = parse_match_detail(document)

    assert [detail.carry_score(p) for p in detail.participants] == [50.0, 50.0]


def test_match_detail_skips_malformed_entries(make_match, make_participant):
    document = make_match(participants=[make_participant(), {"puuid": 5}], teams=[{"win": True}])

    detail = parse_match_detail(document)
    assert len(detail.participants) == 1
    assert detail.teams == []
    assert detail.winning_team is None


def test_runes_from_two_styles_without_style_ids():
    keystone, secondary = parse_runes(
        {"styles": [{"selections": [{"perk": 8112}]}, {"selections": [{"perk": 8126}, {"perk": 8139}]}]}
    )
    assert keystone.name == "Electrocute"
    assert [r.name for r in secondary] == ["Cheap Shot", "Taste of Blood"]


def test_out_of_range_creation_time_is_a_decode_error(make_match):
    with pytest.raises(DecodeError):
        parse_match_summary(make_match(game_creation=10**20), PUUID)


def test_null_participant_entry_does_not_hide_the_player(make_match):
    document = make_match()
    document["info"]["participants"].append(None)

    summary = parse_match_summary(document, PUUID)
    assert summary.champion_name == "Ahri"


def test_match_detail_skips_null_entries(make_match):
    document = make_match()
    document["info"]["participants"].append(None)
    document["info"]["teams"].append(None)

    detail = parse_match_detail(document)
    assert len(detail.participants) == 2
    assert len(detail.teams) == 2
