from __future__ import annotations
import logging
import os
from pathlib import Path
from typing import Any, Dict

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_HTTP_TIMEOUT = 60.0
DEFAULT_MAX_BODY_BYTES = 10 * 1024 * 1024
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


# Load .env from repo root (dev convenience)
def load_env_file(path: Path | None = None) -> None:
    env_path = path or Path(__file__).resolve().parents[1] / ".env"
    if not env_path.exists():
        return
    for line in env_path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        k, v = line.split("=", 1)
        k = k.strip(); v = v.strip().strip('"').strip("'")
        # real environment wins
        if k and v and k not in os.environ:
            os.environ[k] = v


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw)
    except ValueError:
        return default


def get_settings() -> Dict[str, Any]:
    return {
        "PORT": _env_number("PORT", DEFAULT_PORT, int),
        "HOST": os.getenv("HOST", DEFAULT_HOST),
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
        "HTTP_TIMEOUT": _env_number("HTTP_TIMEOUT", DEFAULT_HTTP_TIMEOUT, float),
        "MAX_BODY_BYTES": _env_number("MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES, int),
    }


def configure_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    if not any(getattr(h, "_goldphin", False) for h in root.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._goldphin = True  # type: ignore[attr-defined]
        root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
