import threading
from typing import Dict
from typing import List
from typing import Optional
from typing import Union

from restful.content_type import media_type
from restful.content_type import validate_content_type
from restful.errors import InvalidArgumentError
from restful.errors import RegistryFrozenError
from restful.interfaces import Parser
from restful.interfaces import Parsers
from restful.log_config import logger


class ParserRegistry:
    """
    A registry of request body parsers, keyed by MIME content type.

    A miss is a normal outcome: lookups return ``None`` instead of raising.
    Writes are serialized with a lock; once ``freeze()`` is called the
    registry is read-only for the rest of its life.
    """

    def __init__(self) -> None:
        self._map: Dict[str, Parser] = {}
        self._lock = threading.Lock()
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        with self._lock:
            self._frozen = True
        logger.info("Parser registry frozen with %d types", len(self._map))

    def supported_types(self) -> List[str]:
        return list(self._map)

    def is_registered(self, content_type: str) -> bool:
        return self._lookup(content_type) is not None

    def get_parser(
        self, content_type: Optional[str] = None
    ) -> Union[Parsers, Parser, None]:
        """
        Return every registered parser when ``content_type`` is omitted,
        otherwise the parser for that type or ``None``.
        """
        if content_type is None:
            return dict(self._map)
        parser = self._lookup(content_type)
        if parser is None:
            logger.debug("No parser registered for '%s'", content_type)
        return parser

    def register_parser(
        self, content_type: str, callback: Parser
    ) -> Optional[Parser]:
        """
        Register ``callback`` under ``content_type``.
        Returns the parser it replaced, or ``None`` if the type was new.
        """
        validate_content_type(content_type)
        if not callable(callback):
            raise InvalidArgumentError(
                f"Parser for '{content_type}' must be callable, "
                f"got {type(callback).__name__}"
            )
        with self._lock:
            self._check_frozen(content_type)
            previous = self._map.get(content_type)
            self._map[content_type] = callback
        if previous is None:
            logger.info("Registered parser for '%s'", content_type)
        else:
            logger.info("Replaced parser for '%s'", content_type)
        return previous

    def unregister_parser(self, content_type: str) -> Optional[Parser]:
        with self._lock:
            self._check_frozen(content_type)
            removed = self._map.pop(content_type, None)
        if removed is not None:
            logger.info("Unregistered parser for '%s'", content_type)
        return removed

    def _check_frozen(self, content_type: str) -> None:
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot change parser for '{content_type}': registry is frozen"
            )

    def _lookup(self, content_type: str) -> Optional[Parser]:
        parser = self._map.get(content_type)
        if parser is None:
            # MIME types are case-insensitive and headers often carry a charset
            parser = self._map.get(media_type(content_type))
        return parser


# Process-wide default registry
parsers = ParserRegistry()


def get_parser(
    content_type: Optional[str] = None,
) -> Union[Parsers, Parser, None]:
    """
    Lookup a parser on the default registry; see ParserRegistry.get_parser.
    """
    return parsers.get_parser(content_type)


def register_parser(content_type: str, callback: Parser) -> Optional[Parser]:
    """
    Register a parser on the default registry; returns the replaced parser.
    """
    return parsers.register_parser(content_type, callback)
