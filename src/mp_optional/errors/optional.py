"""Optional errors — misuse of the Optional container."""

from __future__ import annotations

from typing import Any

from mp_optional.errors.base import BaseError


class OptionalError(BaseError):
    """Raised when an Optional is used against its contract."""

    default_code = "optional_error"


class IllegalArgumentError(OptionalError, ValueError):
    """A value that must be present was ``None``."""

    default_code = "illegal_argument"

    def __init__(self, message: str = "Value cannot be None", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class NoValuePresentError(OptionalError, LookupError):
    """``get()`` was called on an empty Optional."""

    default_code = "no_value_present"

    def __init__(self, message: str = "No value present", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = ["IllegalArgumentError", "NoValuePresentError", "OptionalError"]
