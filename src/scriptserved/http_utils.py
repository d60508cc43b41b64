from __future__ import annotations

import logging
import os

from .resolver import file_extension

logger = logging.getLogger(__name__)

CHUNK_SIZE = 4096

HTTP_REASONS = {
    200: "OK",
    404: "Not Found",
    500: "Internal Server Error",
}

CONTENT_TYPES = {
    "html": "text/html",
    "htm": "text/html",
    "css": "text/css",
    "js": "application/javascript",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "png": "image/png",
    "gif": "image/gif",
    "txt": "text/plain",
    "php": "text/html",
}
DEFAULT_CONTENT_TYPE = "application/octet-stream"

NOT_FOUND_BODY = (
    b"<html><body>"
    b"<h1>404 Not Found</h1>"
    b"<p>The requested resource could not be found on this server.</p>"
    b"</body></html>"
)
SERVER_ERROR_BODY = (
    b"<html><body>"
    b"<h1>500 Internal Server Error</h1>"
    b"<p>The server encountered an error while processing your request.</p>"
    b"</body></html>"
)


def content_type_for(path: str) -> str:
    return CONTENT_TYPES.get(file_extension(path), DEFAULT_CONTENT_TYPE)


def build_head(status: int, headers: dict[str, str] | None = None) -> bytes:
    reason = HTTP_REASONS.get(status, "")
    lines = [f"HTTP/1.1 {status} {reason}"]
    if headers:
        for name, value in headers.items():
            lines.append(f"{name}: {value}")
    lines.append("Connection: close")
    lines.append("")
    lines.append("")
    return "\r\n".join(lines).encode("ascii")


def send_head(conn, status: int, headers: dict[str, str] | None = None) -> None:
    conn.sendall(build_head(status, headers))


def send_response(conn, status: int, headers: dict[str, str] | None, body: bytes) -> None:
    conn.sendall(build_head(status, headers) + body)


def send_not_found(conn) -> None:
    send_response(conn, 404, {"Content-Type": "text/html"}, NOT_FOUND_BODY)


def send_server_error(conn) -> None:
    send_response(conn, 500, {"Content-Type": "text/html"}, SERVER_ERROR_BODY)


def serve_file(conn, file_path: str, chunk_size: int = CHUNK_SIZE) -> None:
    logger.info("Serving file: %s", file_path)
    try:
        handle = open(file_path, "rb", buffering=0)
    except OSError as exc:
        logger.warning("Failed to open %s: %s", file_path, exc)
        send_not_found(conn)
        return

    with handle:
        try:
            size = os.fstat(handle.fileno()).st_size
        except OSError as exc:
            logger.warning("Failed to stat %s: %s", file_path, exc)
            send_server_error(conn)
            return

        send_head(
            conn,
            200,
            {
                "Content-Type": content_type_for(file_path),
                "Content-Length": str(size),
            },
        )
        while True:
            chunk = handle.read(chunk_size)
            if not chunk:
                break
            conn.sendall(chunk)
