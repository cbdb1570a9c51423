from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, Field


class ResourceItem(BaseModel):
    name: str = Field(..., description="Table or stream name")
    status: Optional[str] = None
    key: Optional[str] = Field(default=None, description="Hash key attribute (tables only)")
    shard_count: Optional[int] = Field(default=None, description="Open shard count (streams only)")

    @staticmethod
    def from_description(item: dict[str, Any]) -> "ResourceItem":
        return ResourceItem(
            name=str(item.get("name")),
            status=item.get("status"),
            key=item.get("key"),
            shard_count=item.get("shard_count"),
        )


class ResourceListResponse(BaseModel):
    kind: str
    count: int
    resources: list[ResourceItem]


class ProvisionResultItem(BaseModel):
    name: str
    ok: bool
    error: Optional[str] = None


class BootstrapResponse(BaseModel):
    finished: bool
    created: int = 0
    failed: int = 0
    results: list[ProvisionResultItem] = Field(default_factory=list)
