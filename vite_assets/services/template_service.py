from typing import Callable, Optional

from fastapi.templating import Jinja2Templates
from starlette.requests import Request
from starlette.templating import _TemplateResponse

from vite_assets.services.vite_asset_resolver import ViteAssetResolver


class TemplateService:
    def __init__(
        self,
        jinja_template_directory: str,
        asset_resolver_factory: Optional[Callable[[], ViteAssetResolver]] = None,
        header_template: Optional[str] = None,
    ):
        self.asset_resolver_factory = asset_resolver_factory

        self._templates = Jinja2Templates(directory=jinja_template_directory)

        if header_template is not None and len(header_template) > 0:
            self._templates.env.globals["header"] = header_template

    @property
    def templates(self) -> Jinja2Templates:
        return self._templates

    def render_layout(
        self,
        request: Request,
        template_name: str,
        page_title: str,
        page_context: dict,
        status_code: int = 200,
    ) -> _TemplateResponse:
        default_context = {
            "request": request,
            "layout": "layout.html",
            "page_title": page_title,
        }

        # every rendered page gets its own resolver, so the vite client and
        # legacy polyfills are included once per page
        if self.asset_resolver_factory is not None:
            default_context["vite"] = self.asset_resolver_factory()

        context = {**default_context, **page_context}
        return self.templates.TemplateResponse(
            request, template_name, context, status_code=status_code
        )
