from __future__ import annotations
import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import List

from goldphin_backend.dispatch import handle
from goldphin_backend.schemas import ChatRequest
from goldphin_backend.settings import configure_logging, get_settings, load_env_file
from goldphin_backend.transport import HttpxSender


def cmd_serve(host: str, port: int) -> int:
    import uvicorn
    uvicorn.run("goldphin_backend.app:app", host=host, port=port)
    return 0


def cmd_chat(path: Path, timeout: float) -> int:
    try:
        raw = sys.stdin.read() if str(path) == "-" else path.read_text(encoding="utf-8")
        body = json.loads(raw)
    except FileNotFoundError:
        print(f"Request file not found: {path}", file=sys.stderr)
        return 2
    except json.JSONDecodeError as e:
        print(f"Invalid JSON: {e}", file=sys.stderr)
        return 2
    if not isinstance(body, dict):
        print("Request must be a JSON object", file=sys.stderr)
        return 2
    result = asyncio.run(handle(ChatRequest.model_validate(body), HttpxSender(timeout=timeout)))
    print(json.dumps(result.to_payload(), indent=2, ensure_ascii=False))
    return 0 if result.success else 1


def build_parser() -> argparse.ArgumentParser:
    s = get_settings()
    p = argparse.ArgumentParser(prog="goldphin-backend", description="Goldphin AI chat proxy")
    p.add_argument("command", choices=["serve", "chat"], help="CLI command")
    # serve
    p.add_argument("--host", dest="host", default=s["HOST"], help="Bind address (default: $HOST or 0.0.0.0)")
    p.add_argument("--port", dest="port", type=int, default=s["PORT"], help="Listening port (default: $PORT or 3000)")
    # chat
    p.add_argument("--file", dest="file", default=None, help="Chat request JSON file, '-' for stdin (for chat)")
    p.add_argument("--timeout", dest="timeout", type=float, default=s["HTTP_TIMEOUT"], help="Outbound timeout in seconds")
    return p


def main(argv: List[str] | None = None) -> int:
    load_env_file()
    argv = list(sys.argv[1:] if argv is None else argv)
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(get_settings()["LOG_LEVEL"])
    if args.command == "serve":
        return cmd_serve(args.host, args.port)
    if args.command == "chat":
        if not args.file:
            print("--file is required for chat", file=sys.stderr)
            return 2
        return cmd_chat(Path(args.file), args.timeout)
    parser.print_help()
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
