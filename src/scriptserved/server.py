from __future__ import annotations

import logging
import socket

from .config import Config
from .http_utils import send_not_found, serve_file
from .request import parse_request_path
from .resolver import TargetKind, resolve_target
from .script import serve_script

logger = logging.getLogger(__name__)

LISTEN_BACKLOG = 10


def run_server(config: Config) -> None:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((config.bind, config.port))
        server.listen(LISTEN_BACKLOG)
        logger.info("scriptserved listening on %s:%s", config.bind, config.port)
        logger.info("Serving files from %s", config.document_root)
        serve_forever(server, config)


def serve_forever(server: socket.socket, config: Config) -> None:
    # One connection at a time: the next accept waits for the current
    # request to be fully answered and closed.
    while True:
        try:
            conn, addr = server.accept()
        except OSError as exc:
            logger.warning("Accept failed: %s", exc)
            continue
        logger.info("Client connected: %s:%s", addr[0], addr[1])
        handle_client(conn, addr, config)


def handle_client(conn: socket.socket, addr: tuple[str, int], config: Config) -> None:
    with conn:
        try:
            try:
                raw = conn.recv(config.buffer_size)
            except OSError as exc:
                logger.debug("Read from %s:%s failed: %s", addr[0], addr[1], exc)
                return
            if not raw:
                return
            logger.debug("Received request:\n%s", raw.decode("iso-8859-1"))
            _dispatch(conn, raw, config)
        except Exception:
            logger.exception("Client handling failed for %s:%s", addr[0], addr[1])


def _dispatch(conn: socket.socket, raw: bytes, config: Config) -> None:
    request_path = parse_request_path(raw, config.max_path_length)
    logger.debug("Requested path: %s", request_path)

    target = resolve_target(request_path, config.document_root, config.script_extension)
    if target.kind is TargetKind.STATIC:
        serve_file(conn, target.path, config.buffer_size)
    elif target.kind is TargetKind.SCRIPT:
        serve_script(conn, target.path, config.interpreter, config.buffer_size)
    else:
        logger.info("Not found: %s", request_path)
        send_not_found(conn)
