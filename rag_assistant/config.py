import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


BASE_DIR = Path(__file__).resolve().parent.parent
PROJECT_ENV = BASE_DIR / ".env"
CWD_ENV = Path.cwd() / ".env"

# Values already exported in the shell take precedence over .env files.
for env_file in (PROJECT_ENV, CWD_ENV):
    if env_file.exists():
        load_dotenv(env_file)


@dataclass
class Settings:
    openai_api_key: Optional[str] = None
    pinecone_api_key: Optional[str] = None
    pinecone_index_name: Optional[str] = None
    embed_model: str = "text-embedding-3-large"
    embed_dim: int = 3072
    chat_model: str = "gpt-4-turbo-preview"
    max_tokens: int = 2000
    temperature: float = 0.7
    top_k: int = 5
    history_size: int = 20  # turns kept per session, 0 keeps everything
    session_id: str = "1"
    stream: bool = False
    pinecone_cloud: str = "aws"
    pinecone_region: str = "us-east-1"
    log_level: str = "WARNING"


def load_settings(
    openai_api_key: Optional[str] = None,
    pinecone_api_key: Optional[str] = None,
    pinecone_index_name: Optional[str] = None,
) -> Settings:
    """
    Load settings from environment, with optional explicit overrides.

    Credentials are not validated here: a missing key reaches the client as
    None and the client reports it on first use.
    """
    defaults = Settings()
    return Settings(
        openai_api_key=openai_api_key or _env("OPENAI_API_KEY", fallback=_env("OPEN_AI_KEY")),
        pinecone_api_key=pinecone_api_key or _env("PINECONE_API_KEY"),
        pinecone_index_name=pinecone_index_name or _env("PINECONE_INDEX_NAME"),
        embed_model=_env("EMBED_MODEL", fallback=defaults.embed_model),
        embed_dim=_int_env("EMBED_DIM", defaults.embed_dim),
        chat_model=_env("CHAT_MODEL", fallback=defaults.chat_model),
        top_k=_int_env("RETRIEVAL_TOP_K", defaults.top_k),
        history_size=_int_env("HISTORY_MAX_TURNS", defaults.history_size),
        session_id=_env("SESSION_ID", fallback=defaults.session_id),
        stream=_bool_env("STREAM_RESPONSES", defaults.stream),
        pinecone_cloud=_env("PINECONE_CLOUD", fallback=defaults.pinecone_cloud),
        pinecone_region=_env("PINECONE_REGION", fallback=defaults.pinecone_region),
        log_level=_env("LOG_LEVEL", fallback=defaults.log_level).upper(),
    )


def _env(name: str, fallback: Optional[str] = None) -> Optional[str]:
    if name in os.environ and os.environ[name]:
        return os.environ[name]
    return fallback


def _int_env(name: str, default: int) -> int:
    raw = _env(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError as err:
        raise ValueError(f"Environment variable {name} must be an integer, got {raw!r}") from err
    if value < 0:
        raise ValueError(f"Environment variable {name} must not be negative, got {value}")
    return value


def _bool_env(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    lowered = raw.strip().lower()
    if lowered in {"1", "true", "yes", "on"}:
        return True
    if lowered in {"0", "false", "no", "off"}:
        return False
    raise ValueError(f"Environment variable {name} must be a boolean, got {raw!r}")
