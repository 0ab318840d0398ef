"""
Coercions and encoding shared by the PHP ``serialize()`` renderers.

The coercions follow PHP's ``(object)`` and ``(array)`` casts so that the
consumer on the other end sees the same shape a PHP producer would send.
"""

from typing import Any
from typing import Dict
from typing import Mapping

from phpserialize import dumps
from phpserialize import phpobject
from pydantic import BaseModel

from restful.errors import EncodingError
from restful.log_config import logger

STD_CLASS = "stdClass"

SCALAR_TYPES = (str, bytes, int, float, bool)


def _property_name(key: Any) -> str:
    # PHP casts bool and float keys to int before they become property names
    if isinstance(key, (bool, float)):
        return str(int(key))
    if key is None:
        return ""
    return str(key)


def _array_key(key: Any) -> Any:
    # PHP array keys are int or string: bool and float truncate, None is ""
    if isinstance(key, (bool, float)):
        return int(key)
    if key is None:
        return ""
    return key


def _properties(items: Mapping[Any, Any]) -> Dict[str, Any]:
    return {_property_name(k): v for k, v in items.items()}


def to_php_object(data: Any) -> phpobject:
    """
    Coerce ``data`` into a ``stdClass`` the way PHP's ``(object)`` cast does:

    - ``phpobject`` instances are returned unchanged
    - ``None`` becomes an object without properties
    - mappings keep their keys as property names
    - lists and tuples are keyed by position (``"0"``, ``"1"``, ...)
    - scalars end up in a single ``scalar`` property
    - pydantic models contribute their JSON-mode ``model_dump()``
    """
    if isinstance(data, phpobject):
        return data
    if data is None:
        return phpobject(STD_CLASS, {})
    if isinstance(data, BaseModel):
        return phpobject(STD_CLASS, _properties(data.model_dump(mode="json")))
    if isinstance(data, Mapping):
        return phpobject(STD_CLASS, _properties(data))
    if isinstance(data, (list, tuple)):
        return phpobject(STD_CLASS, {str(i): v for i, v in enumerate(data)})
    if isinstance(data, SCALAR_TYPES):
        return phpobject(STD_CLASS, {"scalar": data})
    raise EncodingError(f"Cannot render {type(data).__name__} as a PHP object")


def to_php_array(data: Any) -> Any:
    """
    Coerce ``data`` the way PHP's ``(array)`` cast does: objects expose
    their properties, scalars are wrapped at index 0, ``None`` is empty.
    """
    if data is None:
        return []
    if isinstance(data, phpobject):
        return data._asdict()
    if isinstance(data, BaseModel):
        return data.model_dump(mode="json")
    if isinstance(data, Mapping):
        return {_array_key(k): v for k, v in data.items()}
    if isinstance(data, (list, tuple)):
        return list(data)
    if isinstance(data, SCALAR_TYPES):
        return [data]
    raise EncodingError(f"Cannot render {type(data).__name__} as a PHP array")


def _nested(obj: Any) -> Any:
    # dumps() only calls this for values it cannot encode itself
    if isinstance(obj, BaseModel):
        return to_php_object(obj)
    raise TypeError(f"can't serialize {type(obj).__name__!r}")


def php_serialize(value: Any, charset: str = "utf-8") -> str:
    """
    Encode ``value`` with PHP ``serialize()`` rules.
    Raises EncodingError instead of returning partial output.
    """
    try:
        return dumps(value, charset=charset, object_hook=_nested).decode(charset)
    except (TypeError, ValueError, RecursionError) as e:
        logger.error("PHP serialization failed: %s", e)
        raise EncodingError(f"Cannot serialize value: {e}") from e
