from typing import Any

from restful.config import PHP_OBJECT_TYPE
from restful.renderers.base import ResponseRenderer
from restful.renderers.php import php_serialize
from restful.renderers.php import to_php_object


class ObjectRenderer(ResponseRenderer):
    """
    PHP ``serialize()`` renderer for application/php-serialized.
    Whatever comes in goes out as a ``stdClass`` object.
    """

    content_type = PHP_OBJECT_TYPE
    charset = "utf-8"

    @staticmethod
    def render(data: Any) -> str:
        return php_serialize(to_php_object(data), ObjectRenderer.charset)
