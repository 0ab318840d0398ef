from typing import Any
from typing import Protocol
from typing import runtime_checkable


@runtime_checkable
class ResponseRenderer(Protocol):
    """
    Renderer protocol: a MIME type and a stateless render().
    """

    content_type: str

    def render(self, data: Any) -> str:
        """
        Convert a Python value into a response body.
        """
        ...
