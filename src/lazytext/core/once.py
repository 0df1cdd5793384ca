"""Single-use rendering.

Most renderables can be rendered any number of times with identical output.
Some producers cannot: a generator can only be walked once, and a stateful
callable may return something different (or misbehave) when called again.
``Once`` lets such a producer live inside a renderable anyway. The first
render takes the producer out of the slot and drives it to completion; every
later render finds the slot empty and writes nothing.

The slot is a two-state machine, PENDING(payload) -> CONSUMED, and
``Once.take()`` is its only transition. The payload is detached and the state
flipped before control returns to the caller, so when driving the payload
leads back into rendering the same slot (for example a generator holding a
weak reference to a container that holds this renderable) the nested render
sees CONSUMED and writes nothing.

Thread safety:
    Single-threaded use only, re-entrant use included. A slot belongs to
    the thread that created it, and ``take()`` from any other thread raises
    ``CrossThreadRenderError`` instead of racing.
"""

import threading
from collections.abc import Callable, Iterable, Iterator
from enum import Enum
from typing import Any, Generic, TypeVar

from lazytext.core.base import Renderable, is_duplicable, render_value
from lazytext.core.sinks import LazyTextError, Sink
from lazytext.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


class CrossThreadRenderError(LazyTextError, RuntimeError):
    """Raised when a single-use slot is used from a thread that does not own it."""

    def __init__(self, owner: int, current: int) -> None:
        self.owner = owner
        self.current = current
        super().__init__(
            f"Single-use value owned by thread {owner} was rendered from thread {current}; "
            "single-use values are not safe to share between threads"
        )


class SlotState(Enum):
    """State of a single-use slot."""

    PENDING = "pending"
    CONSUMED = "consumed"


class Once(Generic[T]):
    """Holds a payload that may be taken out exactly once.

    Attributes:
        owner_thread: Identifier of the thread allowed to take the payload
    """

    def __init__(self, payload: T) -> None:
        if payload is None:
            raise ValueError("Single-use payload cannot be None")
        self._payload: T | None = payload
        self._state = SlotState.PENDING
        self.owner_thread = threading.get_ident()

    @property
    def state(self) -> SlotState:
        return self._state

    @property
    def consumed(self) -> bool:
        return self._state is SlotState.CONSUMED

    def take(self) -> T | None:
        """Remove and return the payload, or None if already taken.

        Raises:
            CrossThreadRenderError: If called from a thread other than the owner
        """
        current = threading.get_ident()
        if current != self.owner_thread:
            raise CrossThreadRenderError(self.owner_thread, current)

        if self._state is SlotState.CONSUMED:
            return None

        payload = self._payload
        self._payload = None
        self._state = SlotState.CONSUMED
        return payload

    def __copy__(self) -> "Once[T]":
        raise TypeError("Single-use values cannot be copied")

    def __deepcopy__(self, memo: dict[int, Any]) -> "Once[T]":
        raise TypeError("Single-use values cannot be copied")

    def __repr__(self) -> str:
        return f"Once(state={self._state.value})"


class Ownership(Enum):
    """How a combinator holds the items it renders.

    SHARED items are re-iterated on every render. SINGLE_USE items sit in a
    ``Once`` slot and are walked by the first render only.
    """

    SHARED = "shared"
    SINGLE_USE = "single_use"


def until_saturated(items: Iterator[Any], sink: Sink) -> Iterator[Any]:
    """Yield items until the sink can no longer accept output.

    Stops pulling from ``items`` as soon as ``sink.saturated`` is set, which
    is what lets an infinite single-use producer be truncated.
    """
    while not sink.saturated:
        try:
            item = next(items)
        except StopIteration:
            return
        yield item


class SharedSource:
    """Re-iterable items for a duplicable combinator."""

    ownership = Ownership.SHARED

    def __init__(self, items: Iterable[Any]) -> None:
        if isinstance(items, Iterator):
            raise TypeError(
                "A one-shot iterator cannot be rendered repeatedly; "
                "use the *_once variant of this combinator instead"
            )
        if not isinstance(items, Iterable):
            raise TypeError(f"Expected an iterable, got {type(items).__name__}")
        self.items = items

    @property
    def duplicable(self) -> bool:
        return all(is_duplicable(item) for item in self.items)

    def open(self, sink: Sink) -> Iterator[Any]:
        return iter(self.items)


class SingleUseSource:
    """Items from a one-shot producer, walked by the first render only."""

    ownership = Ownership.SINGLE_USE
    duplicable = False

    def __init__(self, items: Iterable[Any]) -> None:
        self.slot: Once[Iterator[Any]] = Once(iter(items))

    def open(self, sink: Sink) -> Iterator[Any] | None:
        items = self.slot.take()
        if items is None:
            logger.debug("Single-use items already consumed; rendering nothing")
            return None
        return until_saturated(items, sink)


ItemSource = SharedSource | SingleUseSource


def make_source(items: Iterable[Any], ownership: Ownership) -> ItemSource:
    if ownership is Ownership.SINGLE_USE:
        return SingleUseSource(items)
    return SharedSource(items)


class SingleUse(Renderable):
    """Renders a one-shot producer on the first render and nothing after.

    The producer is either an iterable (walked once, each item rendered in
    order) or a zero-argument callable (called once, its result rendered).

    Examples:
        >>> value = SingleUse(iter(["hola", "mundo"]))
        >>> str(value), str(value)
        ('holamundo', '')
    """

    def __init__(self, producer: Iterable[Any] | Callable[[], Any]) -> None:
        if isinstance(producer, Iterator):
            self._call = False
        elif callable(producer):
            self._call = True
        elif isinstance(producer, Iterable):
            producer = iter(producer)
            self._call = False
        else:
            raise TypeError(
                f"Single-use producer must be an iterable or a callable, "
                f"not {type(producer).__name__}"
            )
        self.slot: Once[Any] = Once(producer)

    @property
    def consumed(self) -> bool:
        return self.slot.consumed

    @property
    def duplicable(self) -> bool:
        return False

    def render(self, sink: Sink) -> None:
        producer = self.slot.take()
        if producer is None:
            logger.debug("Single-use value already rendered; rendering nothing")
            return

        if self._call:
            render_value(producer(), sink)
            return

        for item in until_saturated(producer, sink):
            render_value(item, sink)

    def __repr__(self) -> str:
        return f"SingleUse({self.slot!r})"


def once(producer: Iterable[Any]) -> SingleUse:
    """Render the items of a one-shot iterable on first render only."""
    if callable(producer) and not isinstance(producer, Iterable):
        raise TypeError("once() takes an iterable; use once_with() for callables")
    return SingleUse(producer)


def once_with(fn: Callable[[], Any]) -> SingleUse:
    """Call ``fn`` on first render and render its result; later renders are empty.

    Examples:
        >>> value = once_with(lambda: "hola")
        >>> str(value), str(value)
        ('hola', '')
    """
    if not callable(fn):
        raise TypeError(f"once_with() takes a callable, not {type(fn).__name__}")
    return SingleUse(fn)
