from __future__ import annotations

"""
Simple TCP REPL server for simple-lisp.

Protocol: JSON per line over TCP.
- Request: {"cmd": "eval", "code": "(defun sq (x) (* x x)) (sq 5)"}
- Response: {"ok": true, "result": "25", "output": "25"} or {"ok": false, "error": <message>}
- Request: {"cmd": "reset"} starts a fresh session; response {"ok": true}

One Interpreter is shared by all clients so that definitions persist across
evaluations; requests are serialised with a lock.
"""

import json
import logging
import socket
import threading
from typing import Any, Tuple

from simple_lisp.config import get_repl_host, get_repl_port
from simple_lisp.errors import LispError
from simple_lisp.interpreter import Interpreter


logger = logging.getLogger(__name__)

MAX_LINE_BYTES = 1 << 20


class LineBuffer:
    """Splits a byte stream into newline-terminated lines of bounded length.

    A line longer than `limit` is reported once as None and the rest of it,
    up to the next newline, is dropped.
    """

    def __init__(self, limit: int = MAX_LINE_BYTES):
        self.limit = limit
        self.buf = b""
        self.discarding = False

    def feed(self, data: bytes) -> list[bytes | None]:
        self.buf += data
        lines: list[bytes | None] = []
        while b"\n" in self.buf:
            line, self.buf = self.buf.split(b"\n", 1)
            if self.discarding:
                self.discarding = False
            elif len(line) > self.limit:
                lines.append(None)
            else:
                lines.append(line)
        if len(self.buf) > self.limit:
            self.buf = b""
            if not self.discarding:
                self.discarding = True
                lines.append(None)
        return lines


class ReplServer:
    def __init__(
        self,
        host: str | None = None,
        port: int | None = None,
        max_line_bytes: int = MAX_LINE_BYTES,
    ):
        self.host = host or get_repl_host()
        self.port = port if port is not None else get_repl_port()
        self.interp = Interpreter()
        self.max_line_bytes = max_line_bytes
        self._lock = threading.Lock()

    def handle_request(self, req: Any) -> dict[str, Any]:
        if not isinstance(req, dict):
            return {"ok": False, "error": "Invalid request: expected a JSON object"}
        cmd = req.get("cmd")
        if cmd == "eval":
            code = req.get("code", "")
            if not isinstance(code, str):
                return {"ok": False, "error": "Invalid request: code must be a string"}
            with self._lock:
                try:
                    res = self.interp.evaluate(code)
                except LispError as ex:
                    return {"ok": False, "error": str(ex)}
                except RecursionError:
                    return {"ok": False, "error": "Maximum recursion depth exceeded"}
            return {"ok": True, "result": res.result, "output": res.output}
        if cmd == "reset":
            with self._lock:
                self.interp = Interpreter()
            return {"ok": True}
        return {"ok": False, "error": f"Unknown cmd: {cmd}"}

    def handle_line(self, line: bytes) -> dict[str, Any]:
        try:
            req = json.loads(line.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as ex:
            return {"ok": False, "error": f"Invalid request: {ex}"}
        return self.handle_request(req)

    def serve_forever(self):
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            s.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            s.bind((self.host, self.port))
            s.listen(5)
            logger.info("REPL server listening on %s:%d", self.host, self.port)
            while True:
                conn, addr = s.accept()
                threading.Thread(target=self._handle_client, args=(conn, addr), daemon=True).start()

    def _handle_client(self, conn: socket.socket, addr: Tuple[str, int]):
        logger.debug("client connected: %s:%d", *addr)
        with conn:
            lines = LineBuffer(self.max_line_bytes)
            while True:
                try:
                    data = conn.recv(4096)
                except OSError:
                    logger.exception("error reading from %s:%d", *addr)
                    break
                if not data:
                    break
                for line in lines.feed(data):
                    if line is None:
                        logger.warning("request line from %s:%d exceeds %d bytes", *addr, self.max_line_bytes)
                        resp = {"ok": False, "error": "Invalid request: line too long"}
                    else:
                        line = line.strip()
                        if not line:
                            continue
                        resp = self.handle_line(line)
                    conn.sendall((json.dumps(resp) + "\n").encode("utf-8"))
        logger.debug("client disconnected: %s:%d", *addr)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    ReplServer().serve_forever()
