from __future__ import annotations

import logging
import os
import subprocess
from contextlib import contextmanager
from dataclasses import dataclass
from typing import BinaryIO, Iterator

from .http_utils import CHUNK_SIZE, send_head, send_server_error

logger = logging.getLogger(__name__)


class ScriptError(Exception):
    def __init__(self, stage: str, message: str) -> None:
        super().__init__(f"{stage}: {message}")
        self.stage = stage


@dataclass
class ChildProcess:
    process: subprocess.Popen
    stdout: BinaryIO

    @property
    def pid(self) -> int:
        return self.process.pid


@contextmanager
def spawn_script(interpreter: str, script_path: str) -> Iterator[ChildProcess]:
    try:
        read_fd, write_fd = os.pipe()
    except OSError as exc:
        raise ScriptError("pipe", str(exc)) from exc

    try:
        process = subprocess.Popen(
            [interpreter, script_path],
            stdin=subprocess.DEVNULL,
            stdout=write_fd,
        )
    except (OSError, ValueError, subprocess.SubprocessError) as exc:
        os.close(read_fd)
        os.close(write_fd)
        raise ScriptError("spawn", str(exc)) from exc
    os.close(write_fd)

    stdout = os.fdopen(read_fd, "rb", buffering=0)
    try:
        yield ChildProcess(process=process, stdout=stdout)
    finally:
        # Closing the read end first lets a still-writing child fail with
        # EPIPE instead of blocking on a full pipe.
        stdout.close()
        process.wait()


def relay_output(child: ChildProcess, conn, chunk_size: int = CHUNK_SIZE) -> int:
    sent = 0
    while True:
        chunk = child.stdout.read(chunk_size)
        if not chunk:
            break
        conn.sendall(chunk)
        sent += len(chunk)
    return sent


def serve_script(
    conn,
    script_path: str,
    interpreter: str,
    chunk_size: int = CHUNK_SIZE,
) -> int | None:
    logger.info("Executing script: %s", script_path)
    try:
        with spawn_script(interpreter, script_path) as child:
            # Once the head is out the status is fixed; a dropped client only
            # ends the relay.
            try:
                send_head(conn, 200, {"Content-Type": "text/html"})
                sent = relay_output(child, conn, chunk_size)
            except OSError as exc:
                logger.info("Client went away while relaying %s: %s", script_path, exc)
                sent = None
    except ScriptError as exc:
        logger.error("Failed to start %s for %s: %s", interpreter, script_path, exc)
        send_server_error(conn)
        return None

    returncode = child.process.returncode
    logger.debug("Script %s (pid %s) sent %s bytes", script_path, child.pid, sent)
    if returncode != 0:
        logger.warning("Script %s exited with status %s", script_path, returncode)
    return returncode
