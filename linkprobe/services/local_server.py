import functools
import logging
import os
import threading
from http.server import SimpleHTTPRequestHandler, ThreadingHTTPServer
from typing import Optional

from linkprobe.exceptions import LocalServerError

logger = logging.getLogger(__name__)


class _QuietStaticHandler(SimpleHTTPRequestHandler):
    def log_message(self, format, *args):
        logger.debug("local server: " + format, *args)


class LocalStaticServer:
    """Serve a directory over HTTP on localhost for the duration of a check.

    Binds an OS-assigned ephemeral port when `port` is None so unrelated
    runs can coexist. `stop()` is safe to call more than once.
    """

    def __init__(self, root: str, port: Optional[int] = None, host: str = "localhost"):
        self.root = root
        self.requested_port = port
        self.host = host
        self._server: Optional[ThreadingHTTPServer] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def port(self) -> Optional[int]:
        if self._server is None:
            return None
        return self._server.server_address[1]

    @property
    def url(self) -> str:
        if self._server is None:
            raise RuntimeError("local server is not running")
        return f"http://{self.host}:{self.port}"

    @property
    def running(self) -> bool:
        return self._server is not None

    def start(self) -> "LocalStaticServer":
        if self._server is not None:
            return self
        if not os.path.isdir(self.root):
            raise LocalServerError(self.root, self.requested_port, NotADirectoryError(self.root))

        handler = functools.partial(_QuietStaticHandler, directory=os.path.abspath(self.root))
        try:
            server = ThreadingHTTPServer((self.host, self.requested_port or 0), handler)
        except (OSError, OverflowError) as e:
            raise LocalServerError(self.root, self.requested_port, e) from e
        server.daemon_threads = True

        self._server = server
        self._thread = threading.Thread(target=server.serve_forever, name="linkprobe-local-server", daemon=True)
        self._thread.start()
        logger.info("Serving %s at %s", self.root, self.url)
        return self

    def stop(self) -> None:
        server, thread = self._server, self._thread
        if server is None:
            return
        self._server = None
        self._thread = None
        server.shutdown()
        server.server_close()
        if thread is not None:
            thread.join()
        logger.info("Stopped local server for %s", self.root)

    def __enter__(self) -> "LocalStaticServer":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
