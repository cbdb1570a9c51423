from __future__ import annotations

from fastapi import FastAPI, Request

from minikine.services.bootstrap_service import BootstrapService


def get_bootstrap_service_from_app(app: FastAPI) -> BootstrapService:
    svc = getattr(app.state, "bootstrap_service", None)
    if svc is None:
        raise RuntimeError("Bootstrap service not initialized (app.state.bootstrap_service)")
    if not isinstance(svc, BootstrapService):
        raise RuntimeError("Unexpected bootstrap_service type")
    return svc


def get_bootstrap_service(request: Request) -> BootstrapService:
    """FastAPI dependency provider for the process-wide BootstrapService."""

    return get_bootstrap_service_from_app(request.app)
