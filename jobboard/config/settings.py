from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent.parent

class Settings(BaseSettings):
    """
    Configuration settings for the job board pipeline.
    """

    model_config = SettingsConfigDict(
        env_file=BASE_DIR / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Gateway selection: "proxy" (CORS proxy worker) or "direct" (portal itself)
    GATEWAY: str = "proxy"
    PROXY_URL: str = "https://get-job-board.fannk987.workers.dev/"

    # HTTP client settings
    # The portal rejects default client agents, so a browser-like UA is required.
    USER_AGENT: str = "Mozilla/5.0"
    RANDOM_USER_AGENT: bool = False
    IGNORE_HTTPS_ERRORS: bool = False
    REQUEST_TIMEOUT: int = 30000  # ms

    # Batching & Concurrency
    DETAIL_BATCH_SIZE: int = 40  # ids per proxy request
    MAX_CONCURRENT_PAGES: int = 10  # direct gateway only

    # Detail parsing
    NORMALIZE_CITY: bool = True
    DECODE_EMAILS: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

settings = Settings()
