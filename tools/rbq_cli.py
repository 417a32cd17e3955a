from __future__ import annotations
import argparse, json, sys
from dataclasses import replace
from typing import Optional, Sequence

import requests

DEFAULT_URL = "http://localhost:8080"

def _call(method: str, url: str, body: Optional[dict] = None, timeout: float = 5.0) -> int:
    """Issue one request and print the reply. Returns the process exit code."""
    try:
        resp = requests.request(method, url, json=body, timeout=timeout)
    except requests.RequestException as e:
        print(f"request failed: {e}", file=sys.stderr)
        return 1

    if resp.status_code >= 300:
        print(f"{resp.status_code}: {resp.text.rstrip()}", file=sys.stderr)
        return 2

    try:
        print(json.dumps(resp.json(), indent=2))
    except ValueError:
        print(resp.text.rstrip())
    return 0

def main(argv: Optional[Sequence[str]] = None) -> int:
    ap = argparse.ArgumentParser(prog="rbq", description="Ring buffer queue server + client")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p_serve = sub.add_parser("serve", help="Run the HTTP server (flags override env)")
    p_serve.add_argument("--capacity", type=int)
    p_serve.add_argument("--port", type=int)
    p_serve.add_argument("--host")
    p_serve.add_argument("-v", "--verbose", action="store_true")
    p_serve.add_argument("--console-logs", action="store_true", help="Human-readable logs instead of JSON")

    p_push = sub.add_parser("push", help="Enqueue one event")
    p_push.add_argument("event")
    p_pop = sub.add_parser("pop", help="Dequeue the oldest event")
    p_status = sub.add_parser("status", help="Show occupancy")
    for p in (p_push, p_pop, p_status):
        p.add_argument("--url", default=DEFAULT_URL)
        p.add_argument("--timeout", type=float, default=5.0)

    args = ap.parse_args(argv)

    if args.cmd == "serve":
        from app.config import ConfigError, ServerConfig
        from app.gateway.server import setup_server, serve
        from app.logging_config import configure_logging

        try:
            cfg = ServerConfig.from_env()
            overrides = {k: v for k, v in (("capacity", args.capacity), ("port", args.port), ("host", args.host)) if v is not None}
            cfg = replace(cfg, debug=cfg.debug or args.verbose, **overrides)
        except ConfigError as e:
            print(f"invalid configuration: {e}", file=sys.stderr)
            return 1
        configure_logging(debug=cfg.debug, json_logs=not args.console_logs)
        app, cfg = setup_server(cfg)
        serve(app, cfg)
        return 0

    base = args.url.rstrip("/")
    if args.cmd == "push":
        return _call("POST", f"{base}/enqueue", {"event": args.event}, args.timeout)
    if args.cmd == "pop":
        return _call("GET", f"{base}/dequeue", timeout=args.timeout)
    if args.cmd == "status":
        return _call("GET", f"{base}/status", timeout=args.timeout)
    return 1

if __name__ == "__main__":
    sys.exit(main())
