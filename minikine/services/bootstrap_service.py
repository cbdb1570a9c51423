from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from tqdm import tqdm

from minikine.services.config import EmulatorKind, Settings
from minikine.services.config.settings import ResourceSpec
from minikine.services.provisioning_service import ProvisioningError, ResourceClientFactory
from minikine.services.setup.stream_setup_service import StreamSetupService
from minikine.services.setup.table_setup_service import TableSetupService

logger = logging.getLogger(__name__)

SetupService = Union[TableSetupService, StreamSetupService]


@dataclass(frozen=True)
class ProvisionResult:
    """Outcome of one creation request."""

    name: str
    ok: bool
    error: Optional[str] = None


class BootstrapService:
    def __init__(self, *, clients: ResourceClientFactory, setup: SetupService) -> None:
        self._clients = clients
        self._setup = setup
        self._last_results: Optional[list[ProvisionResult]] = None

    @staticmethod
    def from_settings(settings: Settings) -> "BootstrapService":
        setup: SetupService
        if settings.kind is EmulatorKind.TABLES:
            setup = TableSetupService()
        else:
            setup = StreamSetupService()
        return BootstrapService(clients=ResourceClientFactory(settings), setup=setup)

    @property
    def settings(self) -> Settings:
        return self._clients.settings

    @property
    def last_results(self) -> Optional[list[ProvisionResult]]:
        return self._last_results

    async def provision(self) -> list[ProvisionResult]:
        """Create every configured resource and wait for all outcomes.

        Steps:
        1) Dispatch one creation task per resource, all at once.
        2) Observe each outcome independently as it completes; a failure is logged
           with its detail and never cancels, retries, or raises.
        3) Return once every task has finished, in completion order.
        """

        resources = self.settings.resources
        kind = self.settings.kind.service_name
        if not resources:
            logger.info("Bootstrap (%s): no resources configured", kind)
            self._last_results = []
            return []

        client_cm: Any = self._clients.client()
        async with client_cm as client:

            async def _create_one(spec: ResourceSpec) -> ProvisionResult:
                try:
                    await self._setup.create(client=client, spec=spec)  # type: ignore[arg-type]
                    return ProvisionResult(name=spec.name, ok=True)
                except ProvisioningError as exc:
                    return ProvisionResult(name=spec.name, ok=False, error=str(exc))
                except Exception as exc:  # pragma: no cover
                    return ProvisionResult(name=spec.name, ok=False, error=repr(exc))

            tasks = [asyncio.create_task(_create_one(spec)) for spec in resources]

            results: list[ProvisionResult] = []
            for fut in tqdm(
                asyncio.as_completed(tasks),
                total=len(tasks),
                desc=f"Provisioning {kind}",
                unit="resource",
            ):
                result = await fut
                results.append(result)
                if result.ok:
                    logger.info("Created %s resource: %s", kind, result.name)
                else:
                    logger.error("Error creating %s resource (name=%s): %s", kind, result.name, result.error)

        self._last_results = results
        return results

    async def list_resources(self) -> list[dict[str, Any]]:
        client_cm: Any = self._clients.client()
        async with client_cm as client:
            return await self._setup.describe_all(client=client)
