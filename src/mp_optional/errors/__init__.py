"""Error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── OptionalError            (optional.py)
    │   ├── IllegalArgumentError
    │   └── NoValuePresentError
    └── ConfigError              (mp_optional.config.errors)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from mp_optional.errors.base import BaseError
from mp_optional.errors.optional import (
    IllegalArgumentError,
    NoValuePresentError,
    OptionalError,
)

__all__ = [
    "BaseError",
    "IllegalArgumentError",
    "NoValuePresentError",
    "OptionalError",
]
