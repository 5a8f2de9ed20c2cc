"""
`T | None` に対する拡張関数のモジュール。

値の有無で分岐する小さなコンビネータを関数として提供する。
None を「値なし」として扱い、例外は発生させない。
"""

from typing import Callable, TypeVar

T = TypeVar("T")
U = TypeVar("U")


def is_some(value: T | None) -> bool:
    return value is not None


def is_none(value: T | None) -> bool:
    return not is_some(value)


def filter_value(value: T | None, predicate: Callable[[T], bool]) -> T | None:
    """値があり predicate を満たす場合のみ値をそのまま返す。"""
    if value is not None and predicate(value):
        return value
    return None


def map_none(value: T | None, producer: Callable[[], T | None]) -> T | None:
    """
    値がない場合のみ producer を呼び出して代わりの値を返す。

    producer の戻り値はそのまま返すため、None を返せば結果も None になる。
    """
    if value is not None:
        return value
    return producer()


def replace_none(value: T | None, replacement: T) -> T:
    return value if value is not None else replacement


def then(value: T | None, action: Callable[[T], object]) -> None:
    if value is not None:
        action(value)


def maybe(value: T | None, default: U, transform: Callable[[T], U]) -> U:
    """
    値があれば transform の結果を、なければ default を返す。

    default は呼び出し側で評価済みの値であり、map_none の producer とは異なり遅延評価されない。
    """
    if value is None:
        return default
    return transform(value)


def on_some(value: T | None, action: Callable[[T], object]) -> T | None:
    if value is not None:
        action(value)
    return value


def on_none(value: T | None, action: Callable[[], object]) -> T | None:
    if value is None:
        action()
    return value
