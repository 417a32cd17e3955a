# main.py
from __future__ import annotations
import structlog
from app.config import ConfigError, ServerConfig
from app.gateway.server import setup_server, serve
from app.logging_config import configure_logging

def main() -> None:
    try:
        cfg = ServerConfig.from_env()
    except ConfigError as e:
        configure_logging()
        structlog.get_logger().critical("config.invalid", err=str(e))
        raise SystemExit(1) from e

    configure_logging(debug=cfg.debug)
    app, cfg = setup_server(cfg)
    serve(app, cfg)

if __name__ == "__main__":
    main()
