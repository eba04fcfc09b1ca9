"""Application settings and configuration."""
import os
from pathlib import Path
from typing import Optional
from dotenv import load_dotenv

ENV_PATH = Path(__file__).resolve().parent / '.env'
load_dotenv(dotenv_path=ENV_PATH)


class Settings:
    """
    Everything is read once at import time from the environment
    (config/.env is loaded first). Tests override attributes directly.
    """

    # ── Backend ────────────────────────────────────────────────────────────
    API_BASE_URL: str = os.getenv('API_BASE_URL', 'http://localhost:8080/api/v0')
    API_TOKEN:    str = os.getenv('API_TOKEN', '')

    # ── Asset catalog ──────────────────────────────────────────────────────
    DDRAGON_CDN_URL:  str = os.getenv('DDRAGON_CDN_URL', 'https://ddragon.leagueoflegends.com/cdn')
    PLACEHOLDER_ICON: str = os.getenv('PLACEHOLDER_ICON', '/placeholder.svg')

    # ── HTTP ───────────────────────────────────────────────────────────────
    # Seconds. Split into connect/read/total by TimeoutConfig.
    REQUEST_TIMEOUT:  float = float(os.getenv('REQUEST_TIMEOUT', '15'))
    MAX_RETRIES:      int   = int(os.getenv('MAX_RETRIES', '3'))
    RETRY_BACKOFF_MS: int   = int(os.getenv('RETRY_BACKOFF_MS', '250'))
    RETRY_FACTOR:     float = float(os.getenv('RETRY_FACTOR', '2.0'))
    # Needs the h2 package: pip install .[http2]
    HTTP2:            bool  = os.getenv('HTTP2', 'false').strip().lower() == 'true'

    # ── Aggregation ────────────────────────────────────────────────────────
    DEFAULT_PAGE_SIZE:   int = int(os.getenv('DEFAULT_PAGE_SIZE', '20'))
    # Each account is asked for limit * factor matches so duplicates across
    # accounts sharing a lobby never under-fill the merged page.
    DEDUP_BUFFER_FACTOR: int = int(os.getenv('DEDUP_BUFFER_FACTOR', '2'))

    # ── Transform ──────────────────────────────────────────────────────────
    DEFAULT_QUEUE_ID:          int = int(os.getenv('DEFAULT_QUEUE_ID', '420'))
    MAX_CONCURRENT_TRANSFORMS: int = int(os.getenv('MAX_CONCURRENT_TRANSFORMS', '8'))

    # ── Paths ──────────────────────────────────────────────────────────────
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    LOG_DIR:  Optional[Path] = (
        Path(os.environ['LOG_DIR']) if os.getenv('LOG_DIR') else BASE_DIR / 'data' / 'logs'
    )

    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')

    @classmethod
    def validate(cls) -> None:
        if not cls.API_BASE_URL:
            raise ValueError("API_BASE_URL must be set in config/.env")
        if cls.DEDUP_BUFFER_FACTOR < 1:
            raise ValueError("DEDUP_BUFFER_FACTOR must be at least 1")
        if cls.MAX_CONCURRENT_TRANSFORMS < 1:
            raise ValueError("MAX_CONCURRENT_TRANSFORMS must be at least 1")


settings = Settings()
