"""Configuration loaded from the environment (.env supported)."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

SUPPORTED_HANDLERS = ("echo", "clock")


def _read_tokens() -> List[str]:
    """Tokens from SLACK_API_TOKENS (comma-separated) and SLACK_API_TOKEN."""
    tokens = [t.strip() for t in os.getenv("SLACK_API_TOKENS", "").split(",") if t.strip()]
    single = os.getenv("SLACK_API_TOKEN", "")
    if single and single not in tokens:
        tokens.append(single)
    return tokens


HANDLER = os.getenv("SLASHGATE_HANDLER", "echo").strip().lower()
if HANDLER not in SUPPORTED_HANDLERS:
    _stderr_print(f"Unsupported SLASHGATE_HANDLER={HANDLER!r}, falling back to 'echo'")
    HANDLER = "echo"

CONFIG = {
    "host": os.getenv("SLASHGATE_HOST", "0.0.0.0"),
    "port": int(os.getenv("PORT", "3000")),
    "path": os.getenv("SLASHGATE_PATH", "/"),
    "tokens": _read_tokens(),
    "handler": HANDLER,
}

if not CONFIG["tokens"]:
    _stderr_print("No SLACK_API_TOKEN configured; every command will be rejected")


# ── Typed config ────────────────────────────────────────────


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 3000
    path: str = "/"


@dataclass
class AppConfig:
    """Typed view of CONFIG."""

    server: ServerConfig = field(default_factory=ServerConfig)
    tokens: List[str] = field(default_factory=list)
    handler: str = "echo"

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            server=ServerConfig(
                host=CONFIG["host"],
                port=CONFIG["port"],
                path=CONFIG["path"],
            ),
            tokens=list(CONFIG["tokens"]),
            handler=CONFIG["handler"],
        )
