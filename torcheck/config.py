import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Settings:
    TORCHECK_PAGE_URL: str = os.getenv(
        "TORCHECK_PAGE_URL", "https://check.torproject.org/?TorButton=True"
    )
    TORCHECK_API_URL: str = os.getenv(
        "TORCHECK_API_URL", "https://check.torproject.org/api/ip"
    )
    TORCHECK_LOG_PAGE_LINES: bool = _env_flag("TORCHECK_LOG_PAGE_LINES")


settings = Settings()
