from __future__ import annotations

from fastapi import APIRouter, Depends

from minikine.models.resources import (
    BootstrapResponse,
    ProvisionResultItem,
    ResourceItem,
    ResourceListResponse,
)
from minikine.services.bootstrap_service import BootstrapService
from minikine.services.dependencies import get_bootstrap_service

router = APIRouter(tags=["resources"])


@router.get("/resources", response_model=ResourceListResponse)
async def list_resources(
    svc: BootstrapService = Depends(get_bootstrap_service),
) -> ResourceListResponse:
    items = [ResourceItem.from_description(d) for d in await svc.list_resources()]
    return ResourceListResponse(kind=svc.settings.kind.value, count=len(items), resources=items)


@router.get("/bootstrap", response_model=BootstrapResponse)
async def bootstrap_status(
    svc: BootstrapService = Depends(get_bootstrap_service),
) -> BootstrapResponse:
    results = svc.last_results
    if results is None:
        return BootstrapResponse(finished=False)

    items = [ProvisionResultItem(name=r.name, ok=r.ok, error=r.error) for r in results]
    created = sum(1 for r in results if r.ok)
    return BootstrapResponse(finished=True, created=created, failed=len(results) - created, results=items)
