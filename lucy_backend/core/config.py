"""
Configuration management via environment variables.

This module loads configuration from .env file using python-dotenv.
All configuration values are accessed through the Settings class.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv


PROJECT_ROOT = Path(__file__).parent.parent.parent

# Load .env file from project root
# This must happen before accessing os.environ
load_dotenv(PROJECT_ROOT / ".env")


DEFAULT_CORS_ORIGINS = (
    "http://localhost:5173",
    "http://localhost:3000",
    "https://sentimobilewalletapp.vercel.app",
    "https://app.senti.finance",
)


@dataclass(frozen=True)
class Settings:
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Service identifier reported by health checks and logs
        app_env: Environment name (development, staging, production)
        log_level: Console logging verbosity
        log_dir: Directory for daily log files
        host: Listen address
        port: Listen port
        groq_api_key: API key for the Groq LLM service
        llm_model_chat: Model used for streamed chat replies
        llm_model_suggestions: Model used for follow-up suggestions
        llm_model_actions: Model used for action detection
        shutdown_timeout_seconds: Grace period before open connections are dropped
    """
    # Application settings
    app_name: str
    app_env: str
    log_level: str
    log_dir: Path

    # Server settings
    host: str
    port: int
    shutdown_timeout_seconds: int

    # LLM settings
    groq_api_key: str
    llm_model_chat: str
    llm_model_suggestions: str
    llm_model_actions: str
    llm_temperature: float
    chat_max_tokens: int
    suggestions_max_tokens: int
    actions_max_tokens: int
    llm_timeout_seconds: float

    # HTTP settings
    cors_origins: Tuple[str, ...]
    cors_origin_regex: Optional[str]
    enable_audit_logging: bool

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env.lower() == "development"


def _get_env(key: str, default: Optional[str] = None) -> str:
    """
    Get environment variable with optional default.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value

    Raises:
        ValueError: If required variable is not set and no default provided
    """
    value = os.environ.get(key, default)
    if value is None:
        raise ValueError(
            f"Required environment variable '{key}' is not set. "
            f"Please check your .env file."
        )
    return value


def _get_int(key: str, default: str) -> int:
    raw = _get_env(key, default)
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"Environment variable '{key}' must be an integer, got {raw!r}")


def _get_float(key: str, default: str) -> float:
    raw = _get_env(key, default)
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"Environment variable '{key}' must be a number, got {raw!r}")


def _get_list(key: str, default: Tuple[str, ...]) -> Tuple[str, ...]:
    raw = os.environ.get(key)
    if raw is None:
        return default
    return tuple(item.strip() for item in raw.split(",") if item.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings instance with all configuration values

    Raises:
        ValueError: If required environment variables are missing or malformed
    """
    api_key = _get_env("GROQ_API_KEY", "").strip()
    if not api_key:
        raise ValueError("GROQ_API_KEY is not set!")

    log_dir = os.environ.get("LOG_DIR")
    cors_origin_regex = _get_env("CORS_ORIGIN_REGEX", r"https://.*\.vercel\.app").strip()

    return Settings(
        # Application
        app_name=_get_env("APP_NAME", "lucy-ai-backend"),
        app_env=_get_env("APP_ENV", "development"),
        log_level=_get_env("LOG_LEVEL", "INFO"),
        log_dir=Path(log_dir) if log_dir else PROJECT_ROOT / "logs",

        # Server
        host=_get_env("HOST", "0.0.0.0"),
        port=_get_int("PORT", "3001"),
        shutdown_timeout_seconds=_get_int("SHUTDOWN_TIMEOUT_SECONDS", "10"),

        # LLM
        groq_api_key=api_key,
        llm_model_chat=_get_env("LLM_MODEL_CHAT", "llama-3.3-70b-versatile"),
        llm_model_suggestions=_get_env("LLM_MODEL_SUGGESTIONS", "llama-3.1-8b-instant"),
        llm_model_actions=_get_env("LLM_MODEL_ACTIONS", "llama-3.1-8b-instant"),
        llm_temperature=_get_float("LLM_TEMPERATURE", "0.7"),
        chat_max_tokens=_get_int("CHAT_MAX_TOKENS", "512"),
        suggestions_max_tokens=_get_int("SUGGESTIONS_MAX_TOKENS", "150"),
        actions_max_tokens=_get_int("ACTIONS_MAX_TOKENS", "100"),
        llm_timeout_seconds=_get_float("LLM_TIMEOUT_SECONDS", "60"),

        # HTTP
        cors_origins=_get_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
        cors_origin_regex=cors_origin_regex or None,
        enable_audit_logging=_get_env("ENABLE_AUDIT_LOGGING", "true").lower() == "true",
    )
