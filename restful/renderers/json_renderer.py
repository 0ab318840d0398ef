import json
from typing import Any

from pydantic import BaseModel

from restful.config import JSON_TYPE
from restful.errors import EncodingError
from restful.log_config import logger
from restful.renderers.base import ResponseRenderer


def _default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json")
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


class JSONRenderer(ResponseRenderer):
    """
    Simple JSON renderer.
    """

    content_type = JSON_TYPE

    @staticmethod
    def render(data: Any) -> str:
        try:
            return json.dumps(data, default=_default)
        except (TypeError, ValueError, RecursionError) as e:
            logger.error("JSON rendering failed: %s", e)
            raise EncodingError(f"Cannot render value as JSON: {e}") from e
