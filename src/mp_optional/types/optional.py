"""Optional[T] — a value that may or may not be present.

An ``Optional`` is either :class:`Present` (holding exactly one non-``None``
value) or :class:`Empty` (holding nothing). Instances are immutable; every
transformation returns a new instance or the receiver itself.

Create instances through the three factories::

    Optional.of(5)              # Present(5); None raises IllegalArgumentError
    Optional.of_nullable(None)  # Empty
    Optional.empty()            # Empty (shared instance)

Both variants support structural pattern matching::

    match Optional.of_nullable(user):
        case Present(u):
            greet(u)
        case Empty():
            ask_for_login()
"""

from __future__ import annotations

import abc
from typing import Any, Callable, Generic, NoReturn, TypeVar

from mp_optional.errors import IllegalArgumentError, NoValuePresentError
from mp_optional.observability.logging import get_logger

T = TypeVar("T")
U = TypeVar("U")

logger = get_logger(__name__)


class Optional(abc.ABC, Generic[T]):
    """Container holding one present value or nothing."""

    __slots__ = ()

    # -- construction -------------------------------------------------------

    @staticmethod
    def of(value: T) -> Optional[T]:
        """Wrap *value*, which must not be ``None``.

        Raises:
            IllegalArgumentError: if *value* is ``None``.
        """
        return Present(value)

    @staticmethod
    def of_nullable(value: T | None) -> Optional[T]:
        """Wrap *value* if it is not ``None``, otherwise return the empty Optional."""
        if value is None:
            return Optional.empty()
        return Present(value)

    @staticmethod
    def empty() -> Optional[Any]:
        """Return the shared empty Optional."""
        return _EMPTY

    # -- immutability -------------------------------------------------------

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -- inspection ---------------------------------------------------------

    @abc.abstractmethod
    def is_present(self) -> bool:
        """Return ``True`` if a value is present."""

    def is_empty(self) -> bool:
        """Return ``True`` if no value is present."""
        return not self.is_present()

    # -- extraction ---------------------------------------------------------

    @abc.abstractmethod
    def get(self) -> T:
        """Return the value.

        Raises:
            NoValuePresentError: if the Optional is empty.
        """

    @abc.abstractmethod
    def or_else(self, other: T) -> T:
        """Return the value if present, otherwise *other*.

        *other* is an ordinary argument, so it is evaluated before the call
        whether or not a value is present. Use :meth:`or_else_get` to defer it.
        """

    @abc.abstractmethod
    def or_else_get(self, supplier: Callable[[], T]) -> T:
        """Return the value if present, otherwise the result of ``supplier()``."""

    @abc.abstractmethod
    def or_else_throw(self, error_supplier: Callable[[], BaseException]) -> T:
        """Return the value if present, otherwise raise ``error_supplier()``.

        The produced exception is raised as is.
        """

    # -- conditional side effects ---------------------------------------------

    @abc.abstractmethod
    def if_present(self, action: Callable[[T], Any]) -> Optional[T]:
        """Call ``action(value)`` if a value is present. Returns ``self``."""

    @abc.abstractmethod
    def if_empty(self, action: Callable[[], Any]) -> Optional[T]:
        """Call ``action()`` if no value is present. Returns ``self``."""

    # -- transformation -------------------------------------------------------

    @abc.abstractmethod
    def map(self, mapper: Callable[[T], U | None]) -> Optional[U]:
        """Apply *mapper* to the value and wrap the result with :meth:`of_nullable`.

        An empty Optional is returned unchanged and *mapper* is not called.
        """

    @abc.abstractmethod
    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Keep the value only if ``predicate(value)`` is true."""


class Present(Optional[T]):
    """Optional with a value."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        if value is None:
            logger.debug("optional.of_rejected_none")
            raise IllegalArgumentError()
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        return self._value

    def is_present(self) -> bool:
        return True

    def get(self) -> T:
        return self._value

    def or_else(self, other: T) -> T:  # noqa: ARG002
        return self._value

    def or_else_get(self, supplier: Callable[[], T]) -> T:  # noqa: ARG002
        return self._value

    def or_else_throw(self, error_supplier: Callable[[], BaseException]) -> T:  # noqa: ARG002
        return self._value

    def if_present(self, action: Callable[[T], Any]) -> Present[T]:
        action(self._value)
        return self

    def if_empty(self, action: Callable[[], Any]) -> Present[T]:  # noqa: ARG002
        return self

    def map(self, mapper: Callable[[T], U | None]) -> Optional[U]:
        return Optional.of_nullable(mapper(self._value))

    def filter(self, predicate: Callable[[T], bool]) -> Optional[T]:
        if predicate(self._value):
            return self
        return Optional.empty()

    def __repr__(self) -> str:
        return f"Present({self._value!r})"


class Empty(Optional[T]):
    """Empty optional."""

    __slots__ = ()

    def is_present(self) -> bool:
        return False

    def get(self) -> NoReturn:
        logger.debug("optional.get_on_empty")
        raise NoValuePresentError()

    def or_else(self, other: T) -> T:
        return other

    def or_else_get(self, supplier: Callable[[], T]) -> T:
        return supplier()

    def or_else_throw(self, error_supplier: Callable[[], BaseException]) -> NoReturn:
        raise error_supplier()

    def if_present(self, action: Callable[[T], Any]) -> Empty[T]:  # noqa: ARG002
        return self

    def if_empty(self, action: Callable[[], Any]) -> Empty[T]:
        action()
        return self

    def map(self, mapper: Callable[[T], U | None]) -> Optional[U]:  # noqa: ARG002
        return Optional.empty()

    def filter(self, predicate: Callable[[T], bool]) -> Empty[T]:  # noqa: ARG002
        return self

    def __repr__(self) -> str:
        return "Empty"


_EMPTY: Empty[Any] = Empty()

__all__ = ["Empty", "Optional", "Present"]
