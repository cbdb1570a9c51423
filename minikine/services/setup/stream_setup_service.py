from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from minikine.services.config import StreamSpec
from minikine.services.provisioning_service import ProvisioningError


logger = logging.getLogger(__name__)


class StreamSetupService:
    """Creates and describes Kinesis streams on the emulator."""

    _WAITER_CONFIG: dict[str, int] = {"Delay": 1, "MaxAttempts": 30}

    @staticmethod
    def create_stream_params(spec: StreamSpec) -> dict[str, Any]:
        try:
            shard_count = int(spec.shard_count)
        except ValueError as exc:
            raise ProvisioningError(
                f"Unable to create stream {spec.name}: invalid shard count {spec.shard_count!r}"
            ) from exc
        return {"StreamName": spec.name, "ShardCount": shard_count}

    async def create(self, *, client: Any, spec: StreamSpec) -> None:
        params = self.create_stream_params(spec)
        try:
            await client.create_stream(**params)
        except (ClientError, BotoCoreError) as exc:
            raise ProvisioningError(f"Unable to create stream {spec.name}: {exc}") from exc

        try:
            waiter = client.get_waiter("stream_exists")
            await waiter.wait(StreamName=spec.name, WaiterConfig=self._WAITER_CONFIG)
        except (ClientError, BotoCoreError) as exc:
            raise ProvisioningError(f"Stream {spec.name} created but not ACTIVE: {exc}") from exc

    async def describe_all(self, *, client: Any) -> list[dict[str, Any]]:
        try:
            names: list[str] = []
            paginator = client.get_paginator("list_streams")
            async for page in paginator.paginate():
                names.extend(page.get("StreamNames", []))

            described = []
            for name in names:
                resp = await client.describe_stream_summary(StreamName=name)
                summary = resp.get("StreamDescriptionSummary", {})
                described.append(
                    {
                        "name": name,
                        "shard_count": summary.get("OpenShardCount"),
                        "status": summary.get("StreamStatus"),
                    }
                )
            return described
        except (ClientError, BotoCoreError) as exc:
            logger.exception("Kinesis describe failed")
            raise ProvisioningError("Failed to describe streams") from exc
