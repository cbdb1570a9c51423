from __future__ import annotations

from typing import Any

import aioboto3

from minikine.services.config import Settings


class ProvisioningError(RuntimeError):
    pass


class ResourceClientFactory:
    """Builds SDK clients bound to the local emulator instead of a real region."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self._session = aioboto3.Session(
            aws_access_key_id=Settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=Settings.AWS_SECRET_ACCESS_KEY,
            region_name=settings.region_name,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    def client(self) -> Any:
        return self._session.client(
            self._settings.kind.service_name,
            region_name=self._settings.region_name,
            endpoint_url=self._settings.endpoint_url,
        )
