import os
from dataclasses import dataclass, field

from dotenv import load_dotenv


load_dotenv()

RPC_URL_PREFIX = "RPC_URL_"


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _rpc_overrides() -> dict[str, str]:
    # RPC_URL_ETHEREUM=https://... overrides the chain named "ethereum"
    return {
        key[len(RPC_URL_PREFIX):].lower(): value
        for key, value in os.environ.items()
        if key.startswith(RPC_URL_PREFIX) and value
    }


@dataclass(frozen=True)
class Settings:
    DATABASE_URL: str
    RPC_TIMEOUT: float
    RPC_URLS: dict[str, str] = field(default_factory=dict)


def get_settings() -> Settings:
    return Settings(
        DATABASE_URL=_env("DATABASE_URL", "sqlite+aiosqlite:///tokens.db"),
        RPC_TIMEOUT=float(_env("RPC_TIMEOUT", "10")),
        RPC_URLS=_rpc_overrides(),
    )


settings = get_settings()
