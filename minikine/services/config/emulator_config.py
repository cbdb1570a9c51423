from __future__ import annotations

from enum import Enum


class EmulatorKind(str, Enum):
    """Which managed service the local emulator stands in for."""

    TABLES = "tables"
    STREAMS = "streams"

    @property
    def service_name(self) -> str:
        # Same id for the moto backend and the boto client.
        return "dynamodb" if self is EmulatorKind.TABLES else "kinesis"

    @staticmethod
    def parse(value: str) -> "EmulatorKind":
        aliases = {
            "tables": EmulatorKind.TABLES,
            "dynamodb": EmulatorKind.TABLES,
            "dynalite": EmulatorKind.TABLES,
            "streams": EmulatorKind.STREAMS,
            "kinesis": EmulatorKind.STREAMS,
            "kinesalite": EmulatorKind.STREAMS,
        }
        kind = aliases.get(value.strip().lower())
        if kind is None:
            raise ValueError(f"Unknown emulator kind: {value!r} (expected one of {sorted(aliases)})")
        return kind
