from __future__ import annotations

from typing import Callable, List, Optional

from application import MatchHistoryService, MatchHistorySession, SearchPlayerUseCase
from config import settings
from core.logging.logger import get_logger
from domain.entities import MatchDetail, MatchSummary, PlayerContext, SummonerProfile
from domain.enums import Region
from domain.errors import RiftError
from infrastructure import AccountRepository, MatchRepository, RiotAPIClient

_GREEN = "\033[92m"
_RED = "\033[91m"
_YELLOW = "\033[93m"
_ORANGE = "\033[33m"
_CYAN = "\033[96m"
_RESET = "\033[0m"


def _win_rate_color(wr: float) -> str:
    if wr >= 50:
        return _GREEN
    if wr >= 40:
        return _YELLOW
    if wr >= 30:
        return _ORANGE
    return _RED


class HistoryCommand:
    """Console match-history screen: search, list, load more, open a match."""

    def __init__(self, input_fn: Callable[[str], str] = input) -> None:
        self._input = input_fn
        self._log = get_logger(__name__, service="history-cli")

    # ------------------------------------------------------------------ #
    # Rendering
    # ------------------------------------------------------------------ #

    def _print_header(self, context: PlayerContext, profile: Optional[SummonerProfile]) -> None:
        print("\n" + "=" * 57)
        print(f"{context.account.riot_id}  [{context.region.display_name}]")
        if profile:
            print(f"Level {profile.level}  |  {profile.rank_display}")
        print("=" * 57)

    def _print_stats(self, session: MatchHistorySession) -> None:
        stats = session.stats
        if stats.win_rate is not None:
            color = _win_rate_color(stats.win_rate)
            print(f"{color}{stats.win_rate:.1f}% Win Rate | Last {session.games} games{_RESET}")
        if stats.most_winning_champion:
            champ, wins = stats.most_winning_champion
            print(f"Most wins: {champ} ({wins})")

    @staticmethod
    def _format_match(idx: int, m: MatchSummary) -> str:
        result = f"{_GREEN}WIN {_RESET}" if m.is_win else f"{_RED}LOSS{_RESET}"
        runes = m.keystone.name if m.keystone and m.keystone.name else "-"
        vision = f" | Vision: {m.vision_score}" if m.vision_score is not None else ""
        spells = "/".join(s for s in m.summoner_spells if s) or "-"
        return (
            f"{idx:2d}) {result} {m.champion_name:<13} {m.score_line:<9} "
            f"KDA {m.kda:4.2f} | {m.queue_kind.label:<15} | {m.formatted_duration} | "
            f"CS {m.creep_score} ({m.cs_per_minute:.1f}/min){vision} | {runes} | {spells} | "
            f"{m.created_at:%Y-%m-%d}"
        )

    def _print_matches(self, matches: List[MatchSummary]) -> None:
        if not matches:
            print("No matches to show.")
            return
        for idx, m in enumerate(matches, start=1):
            print(self._format_match(idx, m))

    @staticmethod
    def _print_detail(detail: MatchDetail) -> None:
        print(f"\n{_CYAN}{detail.queue_label} - {detail.formatted_duration}{_RESET}")
        for team_id, title in ((100, "Team 1"), (200, "Team 2")):
            team = detail.team(team_id)
            outcome = ""
            if team:
                outcome = "Victory" if team.win else "Defeat"
                print(
                    f"\n{title} {outcome}  Baron {team.baron_kills}  "
                    f"Towers {team.tower_kills}  Dragons {team.dragon_kills}"
                )
            else:
                print(f"\n{title}")
            for p in detail.ranked_by_performance(team_id):
                print(
                    f"  {p.summoner_name or '?':<16} {p.champion_name:<13} {p.display_position:<8} "
                    f"{p.kills}/{p.deaths}/{p.assists} (KDA {p.kda:.2f})  "
                    f"Gold: {p.gold_earned}  Carry: {int(detail.carry_score(p))}%"
                )

    # ------------------------------------------------------------------ #
    # Flow
    # ------------------------------------------------------------------ #

    def _choose_region(self) -> Region:
        regions = Region.all_regions()
        print("\nRegions:")
        for i, region in enumerate(regions, start=1):
            print(f"{i:2d}) {region.display_name}")
        sel = self._input("Region [1]: ").strip()
        if not sel:
            return regions[0]
        if sel.isdigit() and 1 <= int(sel) <= len(regions):
            return regions[int(sel) - 1]
        return Region.parse(sel)

    async def run(self) -> None:
        settings.validate()
        self._log.info("start")

        async with RiotAPIClient(settings.RIOT_API_KEY) as api:
            account_repo = AccountRepository(api)
            service = MatchHistoryService(MatchRepository(api))

            while True:
                query = self._input("\nRiot ID (name#tag, empty to go back): ").strip()
                if not query:
                    return
                try:
                    region = self._choose_region()
                    context = await SearchPlayerUseCase(account_repo).execute(query, region)
                except RiftError as exc:
                    print(f"{_RED}Error: {exc}{_RESET}")
                    continue

                await self._history_screen(context, account_repo, service)

    async def _history_screen(
        self,
        context: PlayerContext,
        account_repo: AccountRepository,
        service: MatchHistoryService,
    ) -> None:
        profile = None
        try:
            profile = await account_repo.get_profile(context.puuid, context.region)
        except RiftError as exc:
            print(f"{_RED}Error fetching summoner data: {exc}{_RESET}")

        session = MatchHistorySession(service, context)
        try:
            await session.load()
        except RiftError as exc:
            print(f"{_RED}Error fetching match history: {exc}{_RESET}")

        while True:
            self._print_header(context, profile)
            self._print_stats(session)
            self._print_matches(session.matches)

            choice = self._input("\n[m] load more  [#] open match  [q] back: ").strip().lower()
            if choice == "q":
                return
            if choice == "m":
                try:
                    await session.load_more()
                except RiftError as exc:
                    print(f"{_RED}Error fetching additional matches: {exc}{_RESET}")
                continue
            if choice.isdigit() and 1 <= int(choice) <= len(session.matches):
                match = session.matches[int(choice) - 1]
                try:
                    detail = await service.match_detail(match.match_id, session.routing)
                except RiftError as exc:
                    print(f"{_RED}Error fetching match data: {exc}{_RESET}")
                    continue
                self._print_detail(detail)
                self._input("\nPress Enter to go back...")
                continue
            print(f"{_YELLOW}Invalid option.{_RESET}")
