import threading
from typing import Dict
from typing import List
from typing import Optional

from restful.content_type import media_type
from restful.content_type import validate_content_type
from restful.errors import InvalidArgumentError
from restful.log_config import logger
from restful.renderers.base import ResponseRenderer
from restful.renderers.json_renderer import JSONRenderer
from restful.renderers.php_array import ArrayRenderer
from restful.renderers.php_object import ObjectRenderer


class RendererRegistry:
    """
    A registry of response renderers, keyed by content-type.
    Unknown types return None; picking a fallback is up to the caller.
    """

    def __init__(self) -> None:
        self._map: Dict[str, ResponseRenderer] = {}
        self._lock = threading.Lock()

    def supported_types(self) -> List[str]:
        return list(self._map)

    def is_registered(self, content_type: str) -> bool:
        return self.get(content_type) is not None

    def register(
        self,
        renderer: ResponseRenderer,
        content_type: Optional[str] = None,
    ) -> Optional[ResponseRenderer]:
        key = validate_content_type(
            content_type or getattr(renderer, "content_type", None)
        )
        if not callable(getattr(renderer, "render", None)):
            raise InvalidArgumentError(
                f"Renderer for '{key}' must provide a callable render()"
            )
        with self._lock:
            previous = self._map.get(key)
            self._map[key] = renderer
        logger.info(
            "%s renderer for '%s'",
            "Registered" if previous is None else "Replaced",
            key,
        )
        return previous

    def get(self, content_type: str) -> Optional[ResponseRenderer]:
        renderer = self._map.get(content_type)
        if renderer is None:
            # strip any charset params etc.
            renderer = self._map.get(media_type(content_type))
        return renderer


def default_registry() -> RendererRegistry:
    registry = RendererRegistry()
    registry.register(ObjectRenderer())
    registry.register(ArrayRenderer())
    registry.register(JSONRenderer())
    return registry


renderers = default_registry()
