"""An ``Either`` type for representing the outcome of an operation that might fail.

``Left`` holds the error (or alternative) value and ``Right`` holds the
success value. All combinators are right-biased: they operate on the
``Right`` payload and pass a ``Left`` through untouched.

Example::

    from thelabeither import Either, left, right

    def parse_port(raw: str) -> Either[str, int]:
        if not raw.isdigit():
            return left(f"not a number: {raw!r}")
        return right(int(raw))

    parse_port("8080").map(lambda p: p + 1).or_else(80)  # 8081
    parse_port("http").map(lambda p: p + 1).or_else(80)  # 80
"""

from collections.abc import Callable, Iterable, Iterator
from typing import Any, ClassVar, Literal, Never, NoReturn, Self
import logging
import warnings

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .exceptions import AbsentValueError
from .pydantic import variant_schema

logger = logging.getLogger(__name__)


class _Either[_LT, _RT]:
    __slots__ = ("value",)
    __match_args__ = ("value",)

    _tag: ClassVar[str]
    left: _LT
    right: _RT

    def __init__(self, value: Any) -> None:
        object.__setattr__(self, "value", value)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return bool(self.value == other.value)  # type:ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((self._tag, self.value))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __reduce__(self) -> tuple[type[Self], tuple[Any]]:
        return (type(self), (self.value,))

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source: Any,
        handler: GetCoreSchemaHandler,
    ) -> core_schema.CoreSchema:
        return variant_schema(cls, cls._tag, source, handler)

    @property
    def is_left(self) -> bool:
        return False

    @property
    def is_right(self) -> bool:
        return False

    def get_left(self) -> _LT:
        """
        Deprecated alias of ``.left``.

        Older releases returned ``None`` when called on a ``Right``. It now
        raises ``AbsentValueError``, exactly like ``.left``.
        """
        warnings.warn(
            "Either.get_left() is deprecated, use the .left property instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.left

    def get_right(self) -> _RT:
        """
        Deprecated alias of ``.right``.

        Older releases returned ``None`` when called on a ``Left``. It now
        raises ``AbsentValueError``, exactly like ``.right``.
        """
        warnings.warn(
            "Either.get_right() is deprecated, use the .right property instead",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.right


class Left[_LT](_Either[_LT, Never]):
    __slots__ = ()
    _tag = "left"

    value: _LT

    def __init__(self, value: _LT) -> None:
        super().__init__(value)

    @property
    def is_left(self) -> Literal[True]:
        return True

    @property
    def is_right(self) -> Literal[False]:
        return False

    @property  # type:ignore[override]
    def left(self) -> _LT:
        return self.value

    @property  # type:ignore[override]
    def right(self) -> Never:
        raise AbsentValueError("No right value present")

    def fold[X](
        self,
        on_left: Callable[[_LT], X],
        on_right: Callable[[Any], X],
    ) -> X:
        return on_left(self.value)

    def map(self, mapper: Callable[[Any], Any]) -> Self:
        return self

    def flat_map(self, mapper: Callable[[Any], Any]) -> Self:
        return self

    and_then = flat_map

    def accept(
        self,
        on_left: Callable[[_LT], Any],
        on_right: Callable[[Any], Any],
    ) -> None:
        on_left(self.value)

    def accept_right(self, on_right: Callable[[Any], Any]) -> None:
        pass

    def or_else[T](self, other: T) -> T:
        return other

    def or_else_either[E](self, supplier: Callable[[], E]) -> E:
        return supplier()

    def or_else_get[T](self, supplier: Callable[[], T]) -> T:
        return supplier()

    def or_else_raise(self, error_supplier: Callable[[], BaseException]) -> Never:
        raise error_supplier()

    def to_optional(self) -> None:
        return None

    def values(self) -> Iterator[Never]:
        return iter(())


class Right[_RT](_Either[Never, _RT]):
    __slots__ = ()
    _tag = "right"

    value: _RT

    def __init__(self, value: _RT) -> None:
        super().__init__(value)

    @property
    def is_left(self) -> Literal[False]:
        return False

    @property
    def is_right(self) -> Literal[True]:
        return True

    @property  # type:ignore[override]
    def left(self) -> Never:
        raise AbsentValueError("No left value present")

    @property  # type:ignore[override]
    def right(self) -> _RT:
        return self.value

    def fold[X](
        self,
        on_left: Callable[[Any], X],
        on_right: Callable[[_RT], X],
    ) -> X:
        return on_right(self.value)

    def map[T](self, mapper: Callable[[_RT], T]) -> "Right[T]":
        return Right(mapper(self.value))

    def flat_map[E](self, mapper: Callable[[_RT], E]) -> E:
        """
        Apply ``mapper`` to the payload and return the ``Either`` it produces,
        flattening what ``map`` would have nested.
        """
        return mapper(self.value)

    and_then = flat_map

    def accept(
        self,
        on_left: Callable[[Any], Any],
        on_right: Callable[[_RT], Any],
    ) -> None:
        on_right(self.value)

    def accept_right(self, on_right: Callable[[_RT], Any]) -> None:
        on_right(self.value)

    def or_else(self, other: object) -> _RT:
        return self.value

    def or_else_either(self, supplier: Callable[[], Any]) -> Self:
        return self

    def or_else_get(self, supplier: Callable[[], Any]) -> _RT:
        return self.value

    def or_else_raise(self, error_supplier: Callable[[], BaseException]) -> _RT:
        return self.value

    def to_optional(self) -> _RT:
        return self.value

    def values(self) -> Iterator[_RT]:
        return iter((self.value,))


type Either[_LT, _RT] = Left[_LT] | Right[_RT]


def left[L, R](value: L) -> Either[L, R]:
    return Left(value)


def right[L, R](value: R) -> Either[L, R]:
    return Right(value)


def either[L, R](
    left_supplier: Callable[[], L],
    right_supplier: Callable[[], R | None],
) -> Either[L, R]:
    """
    Build an ``Either`` from two suppliers, preferring the right side.

    ``right_supplier`` is always called first. If it returns anything other
    than ``None`` the result is wrapped in a ``Right`` and ``left_supplier``
    is never called. Otherwise ``left_supplier`` is called and its result is
    wrapped in a ``Left``.
    """
    value = right_supplier()
    if value is not None:
        return Right(value)
    logger.debug("Right supplier returned None, falling back to left supplier")
    return Left(left_supplier())


def from_optional[R](value: R | None) -> Either[None, R]:
    """
    Convert an optional value into an ``Either``.

    A present value becomes a ``Right``. ``None`` becomes ``Left(None)``, a
    left side that carries no information. Prefer
    :func:`from_optional_or_else` when the caller can describe the absence.
    """
    if value is not None:
        return Right(value)
    logger.debug("Converting an empty optional into Left(None)")
    return Left(None)


def from_optional_or_else[L, R](
    value: R | None,
    left_supplier: Callable[[], L],
) -> Either[L, R]:
    if value is not None:
        return Right(value)
    return Left(left_supplier())


def values[R](eithers: Iterable[Either[Any, R]]) -> Iterator[R]:
    """
    Lazily yield the payload of every ``Right`` in ``eithers``, in order,
    skipping every ``Left``.
    """
    for item in eithers:
        yield from item.values()


__all__ = [
    "Either",
    "Left",
    "Right",
    "either",
    "from_optional",
    "from_optional_or_else",
    "left",
    "right",
    "values",
]
