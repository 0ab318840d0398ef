from .base import ResponseRenderer
from .json_renderer import JSONRenderer
from .php_array import ArrayRenderer
from .php_object import ObjectRenderer
from .registry import RendererRegistry
from .registry import renderers

__all__ = [
    "ResponseRenderer",
    "ObjectRenderer",
    "ArrayRenderer",
    "JSONRenderer",
    "RendererRegistry",
    "renderers",
]
