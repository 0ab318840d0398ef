class RESTfulError(Exception):
    """Base class for all errors raised by this package."""


class InvalidArgumentError(RESTfulError, ValueError):
    """A registry was given an empty content type or a non-callable."""


class RegistryFrozenError(RESTfulError, RuntimeError):
    """A frozen registry was asked to change."""


class EncodingError(RESTfulError, ValueError):
    """
    A renderer could not encode its input.
    The original exception is chained as ``__cause__``.
    """
