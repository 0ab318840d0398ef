from .config import RESTConfig
from .errors import EncodingError
from .errors import InvalidArgumentError
from .errors import RegistryFrozenError
from .errors import RESTfulError
from .interfaces import Parser
from .renderers import ArrayRenderer
from .renderers import JSONRenderer
from .renderers import ObjectRenderer
from .renderers import RendererRegistry
from .renderers import ResponseRenderer
from .request import ParserRegistry
from .request import get_parser
from .request import register_parser

__all__ = [
    "RESTConfig",
    "RESTfulError",
    "InvalidArgumentError",
    "RegistryFrozenError",
    "EncodingError",
    "Parser",
    "ParserRegistry",
    "get_parser",
    "register_parser",
    "ResponseRenderer",
    "RendererRegistry",
    "ObjectRenderer",
    "ArrayRenderer",
    "JSONRenderer",
]
