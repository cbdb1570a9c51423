from __future__ import annotations

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from minikine.services.config import TableSpec
from minikine.services.provisioning_service import ProvisioningError


logger = logging.getLogger(__name__)


class TableSetupService:
    """Creates and describes DynamoDB tables on the emulator.

    Every table gets a single string hash key. The emulator ignores throughput but
    the API requires the field, so a nominal allocation is sent.
    """

    _READ_CAPACITY_UNITS: int = 10
    _WRITE_CAPACITY_UNITS: int = 10
    _WAITER_CONFIG: dict[str, int] = {"Delay": 1, "MaxAttempts": 30}

    @staticmethod
    def create_table_params(spec: TableSpec) -> dict[str, Any]:
        return {
            "TableName": spec.name,
            "KeySchema": [{"AttributeName": spec.key, "KeyType": "HASH"}],
            "AttributeDefinitions": [{"AttributeName": spec.key, "AttributeType": "S"}],
            "ProvisionedThroughput": {
                "ReadCapacityUnits": TableSetupService._READ_CAPACITY_UNITS,
                "WriteCapacityUnits": TableSetupService._WRITE_CAPACITY_UNITS,
            },
        }

    async def create(self, *, client: Any, spec: TableSpec) -> None:
        try:
            await client.create_table(**self.create_table_params(spec))
        except (ClientError, BotoCoreError) as exc:
            raise ProvisioningError(f"Unable to create table {spec.name}: {exc}") from exc

        try:
            waiter = client.get_waiter("table_exists")
            await waiter.wait(TableName=spec.name, WaiterConfig=self._WAITER_CONFIG)
        except (ClientError, BotoCoreError) as exc:
            raise ProvisioningError(f"Table {spec.name} created but not ACTIVE: {exc}") from exc

    async def describe_all(self, *, client: Any) -> list[dict[str, Any]]:
        try:
            names: list[str] = []
            paginator = client.get_paginator("list_tables")
            async for page in paginator.paginate():
                names.extend(page.get("TableNames", []))

            described = []
            for name in names:
                resp = await client.describe_table(TableName=name)
                table = resp.get("Table", {})
                key = next(
                    (k["AttributeName"] for k in table.get("KeySchema", []) if k.get("KeyType") == "HASH"),
                    None,
                )
                described.append({"name": name, "key": key, "status": table.get("TableStatus")})
            return described
        except (ClientError, BotoCoreError) as exc:
            logger.exception("DynamoDB describe failed")
            raise ProvisioningError("Failed to describe tables") from exc
