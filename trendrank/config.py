import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent
load_dotenv(ROOT_DIR / ".env")


def _as_bool(value: str, default: bool = False) -> bool:
    if value is None:
        return default
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    storage_dir: str = os.getenv("STORAGE_DIR", ".trendrank")
    interaction_log_key: str = os.getenv("INTERACTION_LOG_KEY", "interaction_log")
    query_log_key: str = os.getenv("QUERY_LOG_KEY", "query_log")
    interaction_log_max: int = int(os.getenv("INTERACTION_LOG_MAX", "10000"))
    query_log_max: int = int(os.getenv("QUERY_LOG_MAX", "1000"))
    search_threshold: float = float(os.getenv("SEARCH_THRESHOLD", "0.3"))
    autocomplete_limit: int = int(os.getenv("AUTOCOMPLETE_LIMIT", "8"))
    debug_log: bool = _as_bool(os.getenv("DEBUG_LOG", "0"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    gradio_server_name: str = os.getenv("GRADIO_SERVER_NAME", "0.0.0.0")
    gradio_server_port: int = int(os.getenv("GRADIO_SERVER_PORT", "7860"))


settings = Settings()
