"""Command-line entry point.

Starts the local emulator, provisions the configured resources against it, then
keeps serving until interrupted.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional

import uvicorn

from minikine.main import _ensure_logging, create_app
from minikine.services.bootstrap_service import BootstrapService, ProvisionResult
from minikine.services.config import EmulatorKind, Settings
from minikine.services.emulator import EmulatorError, EmulatorServer, EmulatorStartError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minikine",
        description="Run a local DynamoDB or Kinesis emulator and create the configured resources.",
    )
    parser.add_argument(
        "kind",
        help="Emulator to run: 'tables' (DynamoDB) or 'streams' (Kinesis). "
        "'dynalite' and 'kinesalite' are accepted as aliases.",
    )
    parser.add_argument(
        "--reset",
        action="store_true",
        help="Clear emulator state before provisioning.",
    )
    return parser


def summarize(results: list[ProvisionResult]) -> tuple[int, int]:
    created = sum(1 for r in results if r.ok)
    return created, len(results) - created


async def serve(settings: Settings, bootstrap: BootstrapService) -> None:
    if settings.status_port is None:
        await asyncio.Event().wait()
        return

    config = uvicorn.Config(
        create_app(bootstrap),
        host=settings.host,
        port=settings.status_port,
        log_level="info",
    )
    logger.info("Status API listening on %s:%d", settings.host, settings.status_port)
    await uvicorn.Server(config).serve()


async def run(settings: Settings, *, reset: bool = False, keep_serving: bool = True) -> list[ProvisionResult]:
    emulator = EmulatorServer.from_settings(settings)
    emulator.start()
    try:
        if reset:
            await emulator.reset()
            logger.info("Emulator state cleared")

        bootstrap = BootstrapService.from_settings(settings)
        results = await bootstrap.provision()
        created, failed = summarize(results)
        logger.info("Bootstrap finished! (created=%d, failed=%d)", created, failed)

        if keep_serving:
            await serve(settings, bootstrap)
        return results
    finally:
        emulator.stop()


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    _ensure_logging()

    try:
        kind = EmulatorKind.parse(args.kind)
    except ValueError as exc:
        logger.error("%s", exc)
        return 2

    try:
        settings = Settings.from_env(kind)
    except ValueError as exc:
        logger.error("Invalid configuration: %s", exc)
        return 2
    logger.info(
        "Starting %s emulator (port=%s, region=%s, resources=%s)",
        kind.service_name,
        settings.port,
        settings.region_name,
        ", ".join(settings.resource_names),
    )

    try:
        asyncio.run(run(settings, reset=args.reset))
    except EmulatorStartError:
        logger.exception("Emulator failed to start")
        return 1
    except EmulatorError:
        logger.exception("Emulator reset failed")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
