import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

Provider = Literal["google", "openai"]

PROVIDER_ENV = "ENHANCER_PROVIDER"
MODEL_ENV = "ENHANCER_MODEL"

DEFAULT_PROVIDER: Provider = "google"
DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"

_CREDENTIAL_ENV: dict[str, str] = {
    "google": "GOOGLE_API_KEY",
    "openai": "OPENAI_API_KEY",
}
_DEFAULT_MODELS: dict[str, str] = {
    "google": "gemini-1.5-flash",
    "openai": "gpt-4o-mini",
}


class ConfigurationError(RuntimeError):
    """Raised at startup when the environment cannot produce valid settings."""


def find_project_root(start: Path) -> Path:
    for parent in [start, *start.parents]:
        if (parent / "pyproject.toml").exists():
            return parent
    return Path.cwd()


PROJECT_ROOT = find_project_root(Path(__file__).resolve())

ENV_PATH = PROJECT_ROOT / ".env"


def load_env() -> None:
    if ENV_PATH.exists():
        loaded = load_dotenv(ENV_PATH)
        if not loaded:
            raise ConfigurationError(f"Failed to load env file from {ENV_PATH}")


class Settings(BaseModel):
    """
    Process-wide service configuration, resolved once at startup.
    """

    model_config = ConfigDict(frozen=True)

    provider: Provider = DEFAULT_PROVIDER
    api_key: str
    model: str
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = "INFO"


def load_settings() -> Settings:
    """
    Build Settings from the environment (after loading `.env` when present).

    Fails fast with ConfigurationError instead of letting a missing credential
    surface as an upstream failure on the first request.
    """

    load_env()

    provider = os.getenv(PROVIDER_ENV, DEFAULT_PROVIDER).strip().lower() or DEFAULT_PROVIDER
    if provider not in _CREDENTIAL_ENV:
        raise ConfigurationError(
            f"Unsupported {PROVIDER_ENV} '{provider}'. Expected one of: {', '.join(sorted(_CREDENTIAL_ENV))}."
        )

    credential_var = _CREDENTIAL_ENV[provider]
    api_key = os.getenv(credential_var, "").strip()
    if not api_key:
        raise ConfigurationError(f"{credential_var} is not set; the {provider} provider needs a credential.")

    raw_port = os.getenv("PORT", "").strip()
    try:
        port = int(raw_port) if raw_port else DEFAULT_PORT
    except ValueError as exc:
        raise ConfigurationError(f"PORT must be an integer, got '{raw_port}'") from exc

    return Settings(
        provider=provider,
        api_key=api_key,
        model=os.getenv(MODEL_ENV) or _DEFAULT_MODELS[provider],
        host=os.getenv("HOST") or DEFAULT_HOST,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
    )


if __name__ == "__main__":
    print(f"Project root: {PROJECT_ROOT}")
    print(f"Env path: {ENV_PATH}")
    print(load_settings().model_dump(exclude={"api_key"}))
