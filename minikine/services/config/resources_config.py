from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar


def _env(name: str, default: str) -> str:
    # Empty values count as unset.
    return os.getenv(name) or default


@dataclass(frozen=True)
class TableSpec:
    """One table to create: a name and its single string hash key."""

    name: str
    key: str

    DEFAULT_TABLES: ClassVar[tuple[tuple[str, str], ...]] = (
        ("rdss_am_checkpoints", "Shard"),
        ("rdss_am_clients", "ID"),
        ("rdss_am_metadata", "Key"),
        ("rdss_am_messages", "ID"),
        ("consumer_storage", "objectUUID"),
    )

    @staticmethod
    def parse_list(raw: str) -> tuple["TableSpec", ...]:
        """Parse ``name:key,name:key``. A bare ``name`` uses ``ID`` as its key."""

        specs = []
        for item in raw.split(","):
            item = item.strip()
            if not item:
                continue
            name, _, key = item.partition(":")
            specs.append(TableSpec(name=name.strip(), key=key.strip() or "ID"))
        return tuple(specs)

    @staticmethod
    def from_env() -> tuple["TableSpec", ...]:
        raw = os.getenv("MINIKINE_TABLES")
        if raw:
            return TableSpec.parse_list(raw)
        return tuple(TableSpec(name=name, key=key) for name, key in TableSpec.DEFAULT_TABLES)


@dataclass(frozen=True)
class StreamSpec:
    """One stream to create.

    `shard_count` is kept as given; the stream client converts it when the request
    is built, so a malformed value only fails that stream.
    """

    name: str
    shard_count: str

    DEFAULT_SHARDS: ClassVar[str] = "4"

    # Streams defined by the RDSS Messaging API, keyed by their override variable.
    ROLE_STREAMS: ClassVar[tuple[tuple[str, str], ...]] = (
        ("MINIKINE_STREAM_ERROR", "error"),
        ("MINIKINE_STREAM_INPUT", "input"),
        ("MINIKINE_STREAM_INVALID", "invalid"),
        ("MINIKINE_STREAM_OUTPUT", "output"),
    )

    @staticmethod
    def from_env() -> tuple["StreamSpec", ...]:
        shard_count = _env("MINIKINE_STREAM_SHARDS", StreamSpec.DEFAULT_SHARDS)

        raw = os.getenv("MINIKINE_STREAMS")
        if raw:
            names = [n.strip() for n in raw.split(",") if n.strip()]
        else:
            names = [_env(var, default) for var, default in StreamSpec.ROLE_STREAMS]

        return tuple(StreamSpec(name=name, shard_count=shard_count) for name in names)
