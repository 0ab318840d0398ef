from contextlib import asynccontextmanager
from typing import Any
from typing import AsyncContextManager
from typing import AsyncGenerator
from typing import Callable
from typing import Optional

from fastapi import FastAPI
from fastapi import Request
from starlette.responses import Response

from restful.config import RESTConfig
from restful.log_config import configure_logging
from restful.log_config import logger
from restful.renderers.base import ResponseRenderer
from restful.renderers.registry import RendererRegistry
from restful.request import ParserRegistry


def lifespan_manager(
    parsers: ParserRegistry,
    renderers: RendererRegistry,
    config: Optional[RESTConfig] = None,
) -> Callable[[FastAPI], AsyncContextManager[None]]:
    """
    Returns a FastAPI lifespan function that:
      1) Applies the logging settings from the config
      2) Stores the registries and config on app.state
      3) Freezes the parser registry if the config asks for it
    """
    cfg = config or RESTConfig()

    @asynccontextmanager
    async def _lifespan(app: FastAPI) -> AsyncGenerator[None, Any]:
        configure_logging(cfg.json_logging)
        app.state.parsers = parsers
        app.state.renderers = renderers
        app.state.rest_config = cfg
        if cfg.freeze_registries:
            parsers.freeze()
        logger.info(
            "RESTful registries ready: %d parsers, %d renderers",
            len(parsers.supported_types()),
            len(renderers.supported_types()),
        )
        yield

    return _lifespan


def get_parser_registry(request: Request) -> ParserRegistry:
    return request.app.state.parsers


def get_renderer_registry(request: Request) -> RendererRegistry:
    return request.app.state.renderers


def get_response_renderer(request: Request) -> ResponseRenderer:
    """
    Renderer registered for the Accept header as sent, or the one for
    the configured default content type.
    """
    renderers: RendererRegistry = request.app.state.renderers
    default_type = request.app.state.rest_config.default_content_type
    accept = request.headers.get("accept")
    renderer = renderers.get(accept) if accept else None
    if renderer is None:
        renderer = renderers.get(default_type)
    if renderer is None:
        raise LookupError(f"No renderer registered for '{default_type}'")
    return renderer


class RenderedResponse(Response):
    """
    Response whose body is produced by a ResponseRenderer.
    """

    def __init__(
        self,
        content: Any,
        renderer: ResponseRenderer,
        status_code: int = 200,
        **kwargs: Any,
    ) -> None:
        self.renderer = renderer
        super().__init__(
            content,
            status_code=status_code,
            media_type=renderer.content_type,
            **kwargs,
        )

    def render(self, content: Any) -> bytes:
        return self.renderer.render(content).encode(self.charset)
