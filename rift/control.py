from __future__ import annotations

import logging
import typing
from typing import Any, Callable, Optional

from rift import typealiases

log = logging.getLogger(__name__)


class NoMatchError(LookupError):
    pass


class _Lazy:
    """A deferred arm result, only called if its arm is selected"""

    def __init__(self, producer: Callable[[], Any]):
        self.producer = producer

    def __call__(self):
        return self.producer()

    def __repr__(self):
        return f'lazy({self.producer!r})'


def lazy(producer: Callable[[], Any]) -> _Lazy:
    return _Lazy(producer)


def _producer_for(result) -> Callable[[], Any]:
    if isinstance(result, _Lazy):
        return result.producer
    # eager results are returned as-is, even callables
    return lambda: result


class Arm:
    def __init__(self, pattern: Callable[[Any], bool], value: Callable[[], Any]):
        self.pattern = pattern
        self.value = value

    @staticmethod
    def when(predicate: Callable[[Any], bool], result) -> Arm:
        return Arm(predicate, _producer_for(result))

    @staticmethod
    def equals(literal, result) -> Arm:
        return Arm(lambda x: literal == x, _producer_for(result))

    @staticmethod
    def otherwise(result) -> Arm:
        return Arm(lambda x: True, _producer_for(result))

    def __repr__(self):
        return f'Arm({self.pattern!r}, {self.value!r})'


def arm(pattern, result) -> Arm:
    if callable(pattern):
        return Arm.when(pattern, result)
    return Arm.equals(pattern, result)


class Outcome:
    matched = False

    def unwrap(self):
        raise NoMatchError('no arm matched')

    def get(self, default=None):
        return default


class Matched(Outcome):
    matched = True

    def __init__(self, value):
        self.value = value

    def unwrap(self):
        return self.value

    def get(self, default=None):
        return self.value

    def __eq__(self, other):
        return isinstance(other, Matched) and self.value == other.value

    def __hash__(self):
        return hash(('Matched', self.value))

    def __repr__(self):
        return f'Matched({self.value!r})'


class _NotMatched(Outcome):
    def __repr__(self):
        return 'NOT_MATCHED'


NOT_MATCHED = _NotMatched()


def _scan(value, arms: typing.Sequence[Arm], debug=False) -> Outcome:
    for i, a in enumerate(arms):
        accepted = a.pattern(value)
        if debug:
            log.debug('arm %d of %d: %r(%r) -> %s', i, len(arms), a.pattern, value, accepted)
        if accepted:
            log.debug('arm %d matched %r', i, value)
            return Matched(a.value())
    log.debug('no arm matched %r', value)
    return NOT_MATCHED


def match_outcome(value, *arms: Arm) -> Outcome:
    return _scan(value, arms)


def match(value, *arms: Arm) -> Optional[Any]:
    """
    Return the result of the first arm whose pattern accepts value, or None.

    Arms are consulted in order. Only the selected arm's result is produced,
    and no pattern after the selected one is called::

        match(25,
              arm(18, 'hi'),
              arm(25, 'oh well hello'),
              arm(37, 'see ya'))  # 'oh well hello'

    A None return is ambiguous when an arm itself produces None; use
    match_outcome() to tell the two apart.
    """
    return _scan(value, arms).get()


def evaluate(value, arms: typing.Iterable[Arm]) -> Optional[Any]:
    return match(value, *arms)


class Match:
    def __init__(self, context: Context, value):
        self.context = context
        self.value = value
        # arms in the order they were added; nothing runs until outcome()
        self.arms = []

    def arm(self, pattern, result) -> Match:
        self.arms.append(arm(pattern, result))
        return self

    def case(self, pattern):
        def foo(func):
            self.arms.append(arm(pattern, lazy(func)))
            return func

        return foo

    def default(self):
        def foo(func):
            self.arms.append(Arm.otherwise(lazy(func)))
            return func

        return foo

    def outcome(self) -> Outcome:
        return _scan(self.value, tuple(self.arms), debug=self.context.debug)

    def evaluate(self) -> Optional[Any]:
        return self.outcome().get()

    def get_result(self):
        return self.outcome().unwrap()


class Context:
    def __init__(self, debug=False):
        self.debug = debug

    def match(self, value) -> Match:
        return Match(self, value)

    @staticmethod
    def literal(x, type):
        t = typealiases.normalize_to_type_info(type)
        return t.np_type(x)

    @staticmethod
    def cast(x, type):
        return Context.literal(x, type)


default_context = Context()


if __name__ == '__main__':
    # self test
    def foo(x: int) -> int:
        c = default_context.match(x)

        @c.case(lambda x: x < 4)
        def d():
            return x * 8

        @c.case(lambda x: 4 <= x < 8)
        def d():
            return x * 3 - 4

        @c.case(lambda x: x >= 8)
        def d():
            return x - 3

        return c.get_result()


    for x in range(10):
        expected = -1
        if x < 4:
            expected = x * 8
        elif 4 <= x < 8:
            expected = x * 3 - 4
        elif x >= 8:
            expected = x - 3
        actual = foo(x)
        if expected != actual:
            print(x, expected, actual)
            break
    else:
        print("success")
