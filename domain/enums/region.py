"""Region enumerations for League of Legends servers."""
from enum import Enum

from ..errors import UnsupportedRegionError


class RoutingRegion(Enum):
    """Macro-region used by the match-v5 and account-v1 APIs."""

    AMERICAS = "americas"
    EUROPE = "europe"
    ASIA = "asia"
    SEA = "sea"

    @property
    def host(self) -> str:
        return f"{self.value}.api.riotgames.com"


class Region(Enum):
    """League of Legends platform servers.

    Provides:
    - platform_route: platform host used by summoner/league endpoints (e.g. euw1)
    - routing_region: macro-region for match/account endpoints (e.g. europe)
    - display_name: label shown in the region picker (e.g. Europe West)
    """

    # Americas
    NA1 = "na1"    # North America
    BR1 = "br1"    # Brazil
    LA1 = "la1"    # Latin America North
    LA2 = "la2"    # Latin America South

    # Europe
    EUW1 = "euw1"  # Europe West
    EUN1 = "eun1"  # Europe Nordic & East
    TR1 = "tr1"    # Turkey
    RU = "ru"      # Russia
    ME1 = "me1"    # Middle East

    # Asia
    KR = "kr"      # Korea
    JP1 = "jp1"    # Japan

    # SEA & Oceania
    OC1 = "oc1"    # Oceania
    PH2 = "ph2"    # Philippines
    SG2 = "sg2"    # Singapore
    TH2 = "th2"    # Thailand
    TW2 = "tw2"    # Taiwan
    VN2 = "vn2"    # Vietnam

    @property
    def platform_route(self) -> str:
        return self.value

    @property
    def platform_host(self) -> str:
        return f"{self.value}.api.riotgames.com"

    @property
    def routing_region(self) -> RoutingRegion:
        return _PLATFORM_TO_ROUTING[self.value]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self.value]

    @classmethod
    def all_regions(cls) -> list['Region']:
        return list(cls)

    @classmethod
    def parse(cls, value: str) -> 'Region':
        """Resolve a platform code ("euw1") or display name ("Europe West")."""
        key = (value or "").strip().lower()
        for region in cls:
            if key in (region.value, region.display_name.lower()):
                return region
        raise UnsupportedRegionError(value)


_PLATFORM_TO_ROUTING = {
    "na1": RoutingRegion.AMERICAS,
    "br1": RoutingRegion.AMERICAS,
    "la1": RoutingRegion.AMERICAS,
    "la2": RoutingRegion.AMERICAS,

    "euw1": RoutingRegion.EUROPE,
    "eun1": RoutingRegion.EUROPE,
    "tr1": RoutingRegion.EUROPE,
    "ru": RoutingRegion.EUROPE,
    "me1": RoutingRegion.EUROPE,

    "kr": RoutingRegion.ASIA,
    "jp1": RoutingRegion.ASIA,

    "oc1": RoutingRegion.SEA,
    "ph2": RoutingRegion.SEA,
    "sg2": RoutingRegion.SEA,
    "th2": RoutingRegion.SEA,
    "tw2": RoutingRegion.SEA,
    "vn2": RoutingRegion.SEA,
}

_DISPLAY_NAMES = {
    "na1": "North America",
    "br1": "Brazil",
    "la1": "Latin America North",
    "la2": "Latin America South",
    "euw1": "Europe West",
    "eun1": "Europe Nordic & East",
    "tr1": "Turkey",
    "ru": "Russia",
    "me1": "Middle East",
    "kr": "Korea",
    "jp1": "Japan",
    "oc1": "Oceania",
    "ph2": "Philippines",
    "sg2": "Singapore",
    "th2": "Thailand",
    "tw2": "Taiwan",
    "vn2": "Vietnam",
}


def to_routing_region(value: 'str | Region | RoutingRegion') -> RoutingRegion:
    """Map a display region, platform code or routing name to a routing region.

    Raises UnsupportedRegionError for anything else (e.g. "China", which has
    no Riot platform), so no request is ever built against a made-up host.
    """
    if isinstance(value, RoutingRegion):
        return value
    if isinstance(value, Region):
        return value.routing_region
    key = (value or "").strip().lower()
    for routing in RoutingRegion:
        if key == routing.value:
            return routing
    return Region.parse(value).routing_region
