"""
mp_optional – Optional[T] container for the platform.

Import path convention::

    from mp_optional import Optional
    from mp_optional.errors import NoValuePresentError
    from mp_optional.observability import configure_logging
    from mp_optional.testing.strategies import optionals
"""

from mp_optional.errors import (
    BaseError,
    IllegalArgumentError,
    NoValuePresentError,
    OptionalError,
)
from mp_optional.types import Empty, Optional, Present

__version__ = "0.1.0"
__all__ = [
    "BaseError",
    "Empty",
    "IllegalArgumentError",
    "NoValuePresentError",
    "Optional",
    "OptionalError",
    "Present",
    "__version__",
]
