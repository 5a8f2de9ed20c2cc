from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from . import extensions

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Option(Generic[T]):
    """
    `T | None` を包む不変のラッパー。

    メソッドチェーンで extensions の関数を呼び出せるようにする。
    値として別の Option を保持できるため、入れ子の Optional も表現できる。
    """

    _value: T | None = None

    @classmethod
    def none(cls) -> "Option[T]":
        return cls(None)

    def is_some(self) -> bool:
        return extensions.is_some(self._value)

    def is_none(self) -> bool:
        return extensions.is_none(self._value)

    def unwrap(self) -> T:
        if self._value is None:
            raise ValueError("Called unwrap on None")
        return self._value

    def unwrap_or(self, default: T) -> T:
        return extensions.replace_none(self._value, default)

    def to_nullable(self) -> T | None:
        return self._value

    def filter(self, predicate: Callable[[T], bool]) -> "Option[T]":
        if extensions.filter_value(self._value, predicate) is None:
            return Option[T].none()
        return self

    def map(self, transform: Callable[[T], U]) -> "Option[U]":
        if self._value is None:
            return Option[U].none()
        return Option[U](transform(self._value))

    def map_none(self, producer: Callable[[], T | None]) -> "Option[T]":
        if self.is_some():
            return self
        return Option[T](extensions.map_none(self._value, producer))

    def flat_map_none(self, producer: Callable[[], "Option[T]"]) -> "Option[T]":
        """値がない場合のみ producer を呼び出し、その結果の Option をそのまま返す。"""
        if self.is_some():
            return self
        return producer()

    def replace_none(self, replacement: T) -> "Option[T]":
        if self.is_some():
            return self
        return Option[T](replacement)

    def then(self, action: Callable[[T], object]) -> None:
        extensions.then(self._value, action)

    def maybe(self, default: U, transform: Callable[[T], U]) -> U:
        return extensions.maybe(self._value, default, transform)

    def on_some(self, action: Callable[[T], object]) -> "Option[T]":
        extensions.on_some(self._value, action)
        return self

    def on_none(self, action: Callable[[], object]) -> "Option[T]":
        extensions.on_none(self._value, action)
        return self


def as_option(value: T | None) -> Option[T]:
    return Option[T](value)


def flatten(option: Option[Option[T]]) -> Option[T]:
    if option.is_none():
        return Option[T].none()
    return option.unwrap()
