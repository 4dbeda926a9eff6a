"""Application settings and configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


class Settings:
    """
    Runtime configuration, read once from the environment (and config/.env).

    The match-history screen issues one request per match id, so the fan-out
    width and the rate-limit windows below are what keep a page load inside
    a personal API key's quota (20 req/s, 100 req/120s).
    """

    RIOT_API_KEY: str = os.getenv('RIOT_API_KEY', '')

    # ── Rate limits (per 1 second / per 2 minutes) ─────────────────────────
    RATE_LIMIT_PER_1_SEC: int = int(os.getenv('RATE_LIMIT_PER_1_SEC', '18'))
    RATE_LIMIT_PER_2_MIN: int = int(os.getenv('RATE_LIMIT_PER_2_MIN', '90'))

    # ── Data Dragon (static champion / item data) ──────────────────────────
    DDRAGON_VERSION:  str = os.getenv('DDRAGON_VERSION', '14.23.1')
    DDRAGON_BASE_URL: str = os.getenv('DDRAGON_BASE_URL', 'https://ddragon.leagueoflegends.com')

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    LOG_DIR:  Path = Path(os.getenv('LOG_DIR', str(BASE_DIR / 'data' / 'logs')))

    # ── HTTP ───────────────────────────────────────────────────────────────
    REQUEST_TIMEOUT: float = float(os.getenv('REQUEST_TIMEOUT', '30'))

    # ── Concurrency ────────────────────────────────────────────────────────
    # Upper bound on simultaneous match-detail requests in one page load.
    MAX_CONCURRENT_REQUESTS: int = int(os.getenv('MAX_CONCURRENT_REQUESTS', '5'))

    # ── Match history paging ───────────────────────────────────────────────
    HISTORY_PAGE_SIZE:   int = int(os.getenv('HISTORY_PAGE_SIZE', '10'))
    LOAD_MORE_INCREMENT: int = int(os.getenv('LOAD_MORE_INCREMENT', '5'))

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if not cls.RIOT_API_KEY:
            raise ValueError("RIOT_API_KEY must be set in config/.env")

    @classmethod
    def create_directories(cls) -> None:
        cls.LOG_DIR.mkdir(parents=True, exist_ok=True)


settings = Settings()
