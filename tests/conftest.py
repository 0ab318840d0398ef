import json

import pytest
from fastapi import Depends
from fastapi import FastAPI
from fastapi import Request

from restful.config import RESTConfig
from restful.fastapi_utils import RenderedResponse
from restful.fastapi_utils import get_parser_registry
from restful.fastapi_utils import get_renderer_registry
from restful.fastapi_utils import get_response_renderer
from restful.fastapi_utils import lifespan_manager
from restful.renderers.base import ResponseRenderer
from restful.renderers.registry import RendererRegistry
from restful.renderers.registry import default_registry
from restful.request import ParserRegistry
from restful.request import parsers as default_parsers


@pytest.fixture(autouse=True)
def reset_default_parsers():
    # The process-wide registry must not leak between tests
    default_parsers._map.clear()
    default_parsers._frozen = False
    yield
    default_parsers._map.clear()
    default_parsers._frozen = False


@pytest.fixture
def parser_registry():
    return ParserRegistry()


@pytest.fixture
def renderer_registry():
    return default_registry()


@pytest.fixture
def json_parser():
    def _parse(raw):
        return json.loads(raw)

    return _parse


@pytest.fixture
def text_parser():
    def _parse(raw):
        return raw.decode("utf-8") if isinstance(raw, bytes) else str(raw)

    return _parse


@pytest.fixture
def rest_config():
    return RESTConfig(freeze_registries=True)


@pytest.fixture
def fastapi_app(parser_registry, renderer_registry, rest_config, json_parser):
    parser_registry.register_parser("application/json", json_parser)
    app = FastAPI(
        lifespan=lifespan_manager(parser_registry, renderer_registry, rest_config)
    )

    @app.post("/echo")
    async def echo(
        request: Request,
        parsers: ParserRegistry = Depends(get_parser_registry),
        renderers: RendererRegistry = Depends(get_renderer_registry),
        renderer: ResponseRenderer = Depends(get_response_renderer),
    ):
        parser = parsers.get_parser(request.headers.get("content-type", ""))
        if parser is None:
            return RenderedResponse(
                {"error": "Unsupported Media Type"},
                renderers.get("application/json"),
                status_code=415,
            )
        data = parser(await request.body())
        return RenderedResponse(data, renderer)

    return app
