"""TCP link between two simulator instances: one listens, the other connects."""

from __future__ import annotations

import socket
import threading
from collections.abc import Callable

SERVER_START_FAILED = "Nie można uruchomić serwera"


class NetworkError(Exception):
    """Raised when a connection fails and no failure handler is set."""


class NetworkManager:
    """Starts a listening server or connects to a peer, reporting via callbacks.

    ``on_client_connected`` runs on the accept thread whenever a peer
    connects to the server. ``on_connected`` runs after a successful
    outgoing connection. ``on_connection_failed`` receives a reason; when
    it is not given, failures raise :class:`NetworkError` instead.
    """

    def __init__(
        self,
        on_connected: Callable[[], None] | None = None,
        on_client_connected: Callable[[], None] | None = None,
        on_connection_failed: Callable[[str], None] | None = None,
        timeout: float = 5.0,
    ) -> None:
        self.on_connected = on_connected
        self.on_client_connected = on_client_connected
        self.on_connection_failed = on_connection_failed
        self.timeout = timeout
        self._server: socket.socket | None = None
        self._socket: socket.socket | None = None
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._accept_thread: threading.Thread | None = None

    def __enter__(self) -> NetworkManager:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def server_port(self) -> int | None:
        """Port the server listens on, or None when not listening."""
        if self._server is None:
            return None
        return self._server.getsockname()[1]

    @property
    def is_connected(self) -> bool:
        """Whether a peer connection is held."""
        with self._lock:
            return self._socket is not None

    def _fail(self, reason: str) -> None:
        if self.on_connection_failed is None:
            raise NetworkError(reason)
        self.on_connection_failed(reason)

    def start_server(self, port: int) -> bool:
        """Listen on all interfaces at ``port``; return whether it succeeded."""
        try:
            server = socket.create_server(("", port))
        except (OSError, OverflowError):
            self._fail(SERVER_START_FAILED)
            return False
        server.settimeout(0.1)
        self._server = server
        self._stop.clear()
        self._accept_thread = threading.Thread(
            target=self._accept_loop, args=(server,), daemon=True
        )
        self._accept_thread.start()
        return True

    def _accept_loop(self, server: socket.socket) -> None:
        while not self._stop.is_set():
            try:
                conn, _ = server.accept()
            except socket.timeout:
                continue
            except OSError:
                break
            conn.settimeout(None)
            with self._lock:
                previous, self._socket = self._socket, conn
            if previous is not None and previous is not conn:
                previous.close()
            if self.on_client_connected is not None:
                self.on_client_connected()

    def connect_to_server(self, host: str, port: int) -> None:
        """Connect to a peer server at ``host``:``port``."""
        try:
            conn = socket.create_connection((host, port), timeout=self.timeout)
        except (OSError, OverflowError) as exc:
            self._fail(str(exc) or exc.__class__.__name__)
            return
        conn.settimeout(None)
        with self._lock:
            previous, self._socket = self._socket, conn
        if previous is not None:
            previous.close()
        if self.on_connected is not None:
            self.on_connected()

    def close(self) -> None:
        """Stop the server and close the peer connection."""
        self._stop.set()
        if self._accept_thread is not None:
            self._accept_thread.join()
            self._accept_thread = None
        if self._server is not None:
            self._server.close()
            self._server = None
        with self._lock:
            conn, self._socket = self._socket, None
        if conn is not None:
            conn.close()