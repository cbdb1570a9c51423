import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette import status

from minikine.routes.resources import router as resources_router
from minikine.services.bootstrap_service import BootstrapService
from minikine.services.provisioning_service import ProvisioningError


def _ensure_logging() -> None:
    formatter = logging.Formatter("%(levelname)s: %(message)s")
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    else:
        root.setLevel(logging.INFO)
        for handler in root.handlers:
            handler.setFormatter(formatter)


def create_app(bootstrap_service: BootstrapService) -> FastAPI:
    """Build the status API for a running emulator."""

    app = FastAPI(title="minikine")
    app.state.bootstrap_service = bootstrap_service
    app.include_router(resources_router)

    @app.exception_handler(ProvisioningError)
    async def provisioning_error_handler(request: Request, exc: ProvisioningError) -> JSONResponse:
        """Map emulator/SDK failures to a consistent HTTP response.

        Returns:
            502 Bad Gateway with a JSON body: {"detail": "..."}
        """
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": str(exc)},
        )

    @app.get("/")
    async def root():
        kind = bootstrap_service.settings.kind.service_name
        return {"message": f"minikine is running ({kind} emulator)."}

    return app
