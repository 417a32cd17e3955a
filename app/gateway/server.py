# app/gateway/server.py
from __future__ import annotations
import functools
from typing import Callable, Optional, Tuple
import structlog
from flask import Flask, Response, request

from app.config import ServerConfig
from app.controller.shared_buffer import SharedBuffer
from app.gateway.errors import HANDLED_ERRORS, MethodNotAllowed, error_text, status_for
from core.wire.codec import decode_enqueue, encode
from core.wire.messages import (
    BaseResponse, EnqueueResponse, DequeueResponse, StatusResponse,
    SizeResponse, CapacityResponse, IsEmptyResponse, IsFullResponse,
)

log = structlog.get_logger()

# Every route accepts every verb so the handler's own method check answers with 405;
# automatic HEAD/OPTIONS must never reach a handler that mutates the buffer.
ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE"]


def _json(resp: BaseResponse, status: int = 200) -> Response:
    return Response(encode(resp), status=status, mimetype="application/json")


def _text(message: str, status: int) -> Response:
    r = Response(f"{message}\n", status=status, mimetype="text/plain")
    r.headers["X-Content-Type-Options"] = "nosniff"
    return r


def create_app(buffer: SharedBuffer) -> Flask:
    """Build the gateway around one shared, lock-protected buffer handle."""
    app = Flask(__name__)

    def route(path: str, method: str) -> Callable:
        def decorator(fn: Callable[[], Response]) -> Callable[[], Response]:
            @functools.wraps(fn)
            def view() -> Response:
                if request.method != method:
                    raise MethodNotAllowed(request.method, request.path)
                return fn()
            app.add_url_rule(path, fn.__name__, view, methods=ALL_METHODS, provide_automatic_options=False)
            return fn
        return decorator

    @route("/enqueue", "POST")
    def enqueue() -> Response:
        req = decode_enqueue(request.get_data())
        buffer.enqueue(req.event)
        log.debug("gateway.enqueue.ok", event_len=len(req.event))
        return _json(EnqueueResponse(event=req.event), 201)

    @route("/dequeue", "GET")
    def dequeue() -> Response:
        event = buffer.dequeue()
        log.debug("gateway.dequeue.ok", event_len=len(event))
        return _json(DequeueResponse(event=event))

    @route("/status", "GET")
    def status() -> Response:
        st = buffer.status()
        return _json(StatusResponse(
            size=st.size,
            capacity=st.capacity,
            is_empty=st.is_empty,
            is_full=st.is_full,
        ))

    @route("/size", "GET")
    def size() -> Response:
        return _json(SizeResponse(size=buffer.size()))

    @route("/capacity", "GET")
    def capacity() -> Response:
        return _json(CapacityResponse(capacity=buffer.capacity()))

    @route("/isEmpty", "GET")
    def is_empty() -> Response:
        return _json(IsEmptyResponse(is_empty=buffer.is_empty()))

    @route("/isFull", "GET")
    def is_full() -> Response:
        return _json(IsFullResponse(is_full=buffer.is_full()))

    _register_error_handlers(app)
    return app


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(MethodNotAllowed)
    def _method_not_allowed(e: MethodNotAllowed) -> Response:
        log.warning("gateway.method.rejected", method=e.method, path=e.path)
        return _text(error_text(e), status_for(e))

    for kind in HANDLED_ERRORS:
        if kind is MethodNotAllowed:
            continue

        @app.errorhandler(kind)
        def _failed(e: Exception) -> Response:
            op = request.endpoint or "unknown"
            log.warning(f"gateway.{op}.failed", err=str(e), kind=type(e).__name__)
            return _text(error_text(e), status_for(e))

    # verbs outside ALL_METHODS are refused by the router before reaching a view
    @app.errorhandler(405)
    def _routing_405(_e) -> Response:
        log.warning("gateway.method.rejected", method=request.method, path=request.path)
        return _text("Method not allowed", 405)

    @app.errorhandler(404)
    def _not_found(_e) -> Response:
        return _text("404 page not found", 404)


def setup_server(config: Optional[ServerConfig] = None) -> Tuple[Flask, ServerConfig]:
    """Read config, build the single buffer and the app wired to it."""
    cfg = config or ServerConfig.from_env()
    log.info("server.setup", capacity=cfg.capacity, port=cfg.port)
    app = create_app(SharedBuffer(cfg.capacity))
    return app, cfg


def serve(app: Flask, cfg: ServerConfig) -> None:
    log.info("server.start", url=f"http://localhost:{cfg.port}", host=cfg.host)
    app.run(host=cfg.host, port=cfg.port, threaded=True, debug=False, use_reloader=False)
    log.info("server.stop")
