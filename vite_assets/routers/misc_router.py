import logging

from dependency_injector.wiring import inject, Provide
from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from starlette.responses import JSONResponse

from vite_assets.dependency_injection.config import RouterConfig
from vite_assets.exceptions.vite_exceptions import ViteBaseException
from vite_assets.services.dev_mode_probe import DevModeProbe
from vite_assets.services.template_service import TemplateService
from vite_assets.services.vite_manifest_service import ViteManifestService

misc_router = APIRouter()

logger = logging.getLogger(__name__)


@misc_router.get(RouterConfig.health_endpoint)
@inject
async def health(
    dev_mode_probe: DevModeProbe = Depends(Provide["services.dev_mode_probe"]),
    vite_manifest_service: ViteManifestService = Depends(
        Provide["services.vite_manifest_service"]
    ),
) -> JSONResponse:
    is_dev = dev_mode_probe.is_dev()
    manifest_entries = 0
    manifest_healthy = True
    if not is_dev:
        try:
            manifest_entries = len(vite_manifest_service.get_manifest())
        except ViteBaseException as exception:
            logger.exception(
                "Vite manifest is not available: %s",
                exception.log_message or exception.error_description,
                exc_info=exception,
            )
            manifest_healthy = False

    response = {
        "healthy": manifest_healthy,
        "mode": "dev" if is_dev else "production",
        "results": [
            {
                "healthy": manifest_healthy,
                "service": "manifest",
                "entries": manifest_entries,
            }
        ],
    }

    return JSONResponse(
        content=jsonable_encoder(response), status_code=200 if manifest_healthy else 500
    )


@misc_router.get(RouterConfig.index_endpoint)
@inject
async def index(
    request: Request,
    template_service: TemplateService = Depends(Provide["services.template_service"]),
    main_entry: str = Depends(Provide["services.main_entry"]),
):
    return template_service.render_layout(
        request=request,
        template_name="index.html",
        page_title="Vite assets",
        page_context={"main_entry": main_entry},
    )
