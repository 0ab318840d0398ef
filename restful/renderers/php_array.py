from typing import Any

from restful.config import PHP_ARRAY_TYPE
from restful.renderers.base import ResponseRenderer
from restful.renderers.php import php_serialize
from restful.renderers.php import to_php_array


class ArrayRenderer(ResponseRenderer):
    """
    PHP ``serialize()`` renderer producing an array instead of an object.
    """

    content_type = PHP_ARRAY_TYPE
    charset = "utf-8"

    @staticmethod
    def render(data: Any) -> str:
        return php_serialize(to_php_array(data), ArrayRenderer.charset)
