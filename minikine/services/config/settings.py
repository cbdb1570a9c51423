from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from minikine.services.config.emulator_config import EmulatorKind
from minikine.services.config.resources_config import StreamSpec, TableSpec

ResourceSpec = Union[TableSpec, StreamSpec]


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration snapshot, resolved once at startup.

    `port` is kept as the raw string from the environment. It is only interpreted
    when the emulator binds, so a malformed value fails there.
    """

    kind: EmulatorKind
    port: str
    region_name: str
    host: str
    resources: tuple[ResourceSpec, ...]
    status_port: Optional[int] = None

    DEFAULT_PORT: ClassVar[str] = "4567"
    DEFAULT_REGION: ClassVar[str] = "eu-west-2"
    DEFAULT_HOST: ClassVar[str] = "0.0.0.0"

    # The emulator does not check credentials but the SDK refuses to sign without them.
    AWS_ACCESS_KEY_ID: ClassVar[str] = "XXXXXXXXXXXXXXXXXXX"
    AWS_SECRET_ACCESS_KEY: ClassVar[str] = "XXXXXXXXXXXXXXXXXXXXXXXXXX"

    @property
    def endpoint_url(self) -> str:
        return f"http://127.0.0.1:{self.port}"

    @property
    def resource_names(self) -> list[str]:
        return [spec.name for spec in self.resources]

    @staticmethod
    def from_env(kind: EmulatorKind) -> "Settings":
        if kind is EmulatorKind.TABLES:
            resources: tuple[ResourceSpec, ...] = TableSpec.from_env()
        else:
            resources = StreamSpec.from_env()

        status_raw = os.getenv("MINIKINE_STATUS_PORT")
        status_port = None
        if status_raw:
            try:
                status_port = int(status_raw)
            except ValueError as exc:
                raise ValueError("Invalid MINIKINE_STATUS_PORT; must be a number") from exc

        return Settings(
            kind=kind,
            port=os.getenv("MINIKINE_PORT") or Settings.DEFAULT_PORT,
            region_name=os.getenv("MINIKINE_REGION") or Settings.DEFAULT_REGION,
            host=os.getenv("MINIKINE_HOST") or Settings.DEFAULT_HOST,
            resources=resources,
            status_port=status_port,
        )
