from __future__ import annotations

import logging
import threading
from http import HTTPStatus
from typing import Any, Optional

import aiohttp
from moto.moto_server.werkzeug_app import DomainDispatcherApplication, create_backend_app
from werkzeug.serving import make_server

from minikine.services.config import EmulatorKind, Settings


logger = logging.getLogger(__name__)


class EmulatorError(RuntimeError):
    pass


class EmulatorStartError(EmulatorError):
    pass


class EmulatorServer:
    """In-process emulator for one AWS service, served over local HTTP.

    The moto backend app is hosted by a threaded werkzeug server and routes each
    request to `dynamodb` or `kinesis` from its SigV4 signature. `start()` binds in
    the calling thread, so a busy or malformed port surfaces as `EmulatorStartError`
    before any request is served; serving then continues on a daemon thread.
    """

    def __init__(self, *, kind: EmulatorKind, host: str, port: str) -> None:
        self._kind = kind
        self._host = host
        self._port = port
        self._server: Optional[Any] = None
        self._thread: Optional[threading.Thread] = None

    @staticmethod
    def from_settings(settings: Settings) -> "EmulatorServer":
        return EmulatorServer(kind=settings.kind, host=settings.host, port=settings.port)

    @property
    def kind(self) -> EmulatorKind:
        return self._kind

    @property
    def endpoint_url(self) -> str:
        return f"http://127.0.0.1:{self._port}"

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._server is not None:
            raise EmulatorError("Emulator already started")

        try:
            port = int(self._port)
        except ValueError as exc:
            raise EmulatorStartError(f"Invalid emulator port: {self._port!r}") from exc
        # Port 0 or an out-of-range value would bind somewhere other than endpoint_url.
        if not 1 <= port <= 65535:
            raise EmulatorStartError(f"Emulator port out of range 1-65535: {self._port!r}")

        app = DomainDispatcherApplication(create_backend_app)
        try:
            server = make_server(self._host, port, app, threaded=True)
        except (OSError, OverflowError, SystemExit) as exc:
            # werkzeug reports bind failures by exiting rather than raising.
            raise EmulatorStartError(f"Emulator failed to listen on {self._host}:{port}") from exc

        self._server = server
        self._thread = threading.Thread(
            target=server.serve_forever,
            name=f"minikine-{self._kind.value}",
            daemon=True,
        )
        self._thread.start()
        logger.info("Emulator (%s) started on port %s", self._kind.service_name, port)

    def stop(self) -> None:
        if self._server is None:
            return

        self._server.shutdown()
        self._server.server_close()
        if self._thread is not None:
            self._thread.join()

        self._server = None
        self._thread = None
        logger.info("Emulator (%s) stopped", self._kind.service_name)

    async def reset(self, *, session: Optional[aiohttp.ClientSession] = None) -> None:
        """Drop every resource held by the emulator backends."""

        url = f"{self.endpoint_url}/moto-api/reset"
        try:
            if session is None:
                async with aiohttp.ClientSession() as own_session:
                    status = await self._post(own_session, url)
            else:
                status = await self._post(session, url)
        except aiohttp.ClientError as exc:
            raise EmulatorError("Emulator reset request failed") from exc

        if status != HTTPStatus.OK:
            raise EmulatorError(f"Unexpected emulator response resetting state: HTTP {status}")

    @staticmethod
    async def _post(session: aiohttp.ClientSession, url: str) -> int:
        async with session.post(url) as resp:
            await resp.read()
            return resp.status
