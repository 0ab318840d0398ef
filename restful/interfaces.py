from typing import Any
from typing import Callable
from typing import Dict

# A parser decodes a raw request body into a structured value
Parser = Callable[[Any], Any]

Parsers = Dict[str, Parser]
