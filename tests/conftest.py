"""PyTest configuration and shared fixtures.

The emulator fixtures run a real in-process emulator on a free local port. Emulator
state lives in module-level backends shared by every server in the process, so
`clean_*` fixtures reset it before each test.
"""

import os
import socket
from collections.abc import AsyncGenerator, Generator

import pytest
import pytest_asyncio

from minikine.services.config import EmulatorKind, Settings, StreamSpec, TableSpec
from minikine.services.emulator import EmulatorServer


def free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


def make_settings(
    kind: EmulatorKind,
    port: int,
    resources: tuple,
) -> Settings:
    return Settings(
        kind=kind,
        port=str(port),
        region_name="eu-west-2",
        host="127.0.0.1",
        resources=resources,
    )


@pytest.fixture(autouse=True)
def clear_minikine_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Make every test start from an environment without MINIKINE_* overrides."""
    for name in list(os.environ):
        if name.startswith("MINIKINE_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def tables_emulator() -> Generator[EmulatorServer, None, None]:
    """Start a DynamoDB emulator for the test session."""
    server = EmulatorServer(kind=EmulatorKind.TABLES, host="127.0.0.1", port=str(free_port()))
    server.start()
    yield server
    server.stop()


@pytest.fixture(scope="session")
def streams_emulator() -> Generator[EmulatorServer, None, None]:
    """Start a Kinesis emulator for the test session."""
    server = EmulatorServer(kind=EmulatorKind.STREAMS, host="127.0.0.1", port=str(free_port()))
    server.start()
    yield server
    server.stop()


@pytest_asyncio.fixture
async def clean_tables_emulator(tables_emulator: EmulatorServer) -> AsyncGenerator[EmulatorServer, None]:
    await tables_emulator.reset()
    yield tables_emulator


@pytest_asyncio.fixture
async def clean_streams_emulator(streams_emulator: EmulatorServer) -> AsyncGenerator[EmulatorServer, None]:
    await streams_emulator.reset()
    yield streams_emulator


def emulator_port(server: EmulatorServer) -> int:
    return int(server.endpoint_url.rsplit(":", 1)[1])


@pytest.fixture
def table_specs() -> tuple[TableSpec, ...]:
    return (
        TableSpec(name="rdss_am_clients", key="ID"),
        TableSpec(name="consumer_storage", key="objectUUID"),
    )


@pytest.fixture
def stream_specs() -> tuple[StreamSpec, ...]:
    return (
        StreamSpec(name="input", shard_count="1"),
        StreamSpec(name="output", shard_count="1"),
    )
