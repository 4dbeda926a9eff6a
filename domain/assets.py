"""Data Dragon asset URLs."""

DDRAGON_CDN = "https://ddragon.leagueoflegends.com/cdn"


def champion_icon_url(champion_name: str, version: str) -> str:
    return f"{DDRAGON_CDN}/{version}/img/champion/{champion_name}.png"


def item_icon_url(item_id: int, version: str) -> str:
    return f"{DDRAGON_CDN}/{version}/img/item/{item_id}.png"


def profile_icon_url(icon_id: int, version: str) -> str:
    return f"{DDRAGON_CDN}/{version}/img/profileicon/{icon_id}.png"
