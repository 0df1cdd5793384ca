"""Sinks: incremental text destinations for rendering.

A sink receives fragments one write at a time. Fragments are normally
``str``, but encoded ``bytes`` are accepted too; those go through an
incremental decoder whose state survives between writes, so a character
whose encoded form is split across two writes is delivered once, whole,
when its last byte arrives.

Subclasses only implement ``write_text()``. Failures are reported by raising
``SinkWriteError``; the render machinery never catches it.
"""

import codecs
import io
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import IO, Any

from lazytext.config import get_config
from lazytext.utils.logging import get_logger

logger = get_logger(__name__)

Fragment = str | bytes | bytearray | memoryview


class LazyTextError(Exception):
    """Base class for lazytext errors."""


class SinkWriteError(LazyTextError):
    """Raised when a sink cannot accept a fragment.

    This is the only error a render call produces. The underlying cause, if
    any, is chained as ``__cause__`` and is not interpreted further.
    """

    def __init__(self, message: str = "sink write failed", sink: "Sink | None" = None) -> None:
        self.sink = sink
        super().__init__(message)


class Sink(ABC):
    """Destination for rendered fragments.

    Attributes:
        encoding: Codec used to decode bytes fragments
        errors: Codec error handler used when decoding
    """

    def __init__(self, encoding: str | None = None, errors: str | None = None) -> None:
        config = get_config().encoding
        self.encoding = encoding or config.encoding
        self.errors = errors or config.errors
        self._decoder: codecs.IncrementalDecoder | None = None

    @abstractmethod
    def write_text(self, text: str) -> None:
        """Accept one non-empty decoded text fragment.

        Raises:
            SinkWriteError: If the destination rejects the fragment
        """

    @property
    def saturated(self) -> bool:
        """True when nothing written from now on can reach the destination."""
        return False

    def write(self, fragment: Fragment) -> None:
        """Write a text or encoded fragment.

        Args:
            fragment: ``str``, or bytes-like data in ``self.encoding``

        Raises:
            SinkWriteError: If the destination rejects the fragment or the
                bytes cannot be decoded under a strict error policy
            TypeError: If the fragment is neither text nor bytes
        """
        if isinstance(fragment, str):
            if self.has_pending_bytes():
                # A text write ends any incomplete encoded character.
                self.finish()
            if fragment:
                self.write_text(fragment)
            return

        if isinstance(fragment, (bytes, bytearray, memoryview)):
            text = self._decode(bytes(fragment), final=False)
            if text:
                self.write_text(text)
            return

        raise TypeError(f"Sink fragments must be str or bytes, not {type(fragment).__name__}")

    def has_pending_bytes(self) -> bool:
        """Return True if an encoded character is partially received."""
        if self._decoder is None:
            return False
        buffered, _ = self._decoder.getstate()
        return bool(buffered)

    def finish(self) -> None:
        """Flush any partially received encoded character.

        Incomplete trailing bytes are handled by the ``errors`` policy
        (one U+FFFD under ``replace``).
        """
        if self._decoder is None:
            return
        text = self._decode(b"", final=True)
        if text:
            self.write_text(text)

    def _decode(self, data: bytes, final: bool) -> str:
        if self._decoder is None:
            self._decoder = codecs.getincrementaldecoder(self.encoding)(errors=self.errors)
        try:
            return self._decoder.decode(data, final=final)
        except UnicodeDecodeError as e:
            self._decoder.reset()
            raise SinkWriteError(f"Cannot decode fragment as {self.encoding}: {e}", self) from e


class ForwardingSink(Sink):
    """Sink that passes decoded text on to another sink.

    Used by renderables that filter or transform output; the wrapped sink's
    decoding settings are inherited so byte fragments behave identically.
    """

    def __init__(self, inner: Sink) -> None:
        super().__init__(encoding=inner.encoding, errors=inner.errors)
        self.inner = inner

    @property
    def saturated(self) -> bool:
        return self.inner.saturated

    def write_text(self, text: str) -> None:
        self.inner.write(text)


class StringSink(Sink):
    """Collects fragments in memory and joins them once on demand.

    Usage:
        sink = StringSink()
        value.render(sink)
        sink.finish()
        text = sink.getvalue()
    """

    def __init__(self, encoding: str | None = None, errors: str | None = None) -> None:
        super().__init__(encoding=encoding, errors=errors)
        self._parts: list[str] = []

    def write_text(self, text: str) -> None:
        self._parts.append(text)

    @property
    def fragments(self) -> list[str]:
        """Fragments received so far, in order."""
        return list(self._parts)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)

    def clear(self) -> None:
        self._parts.clear()

    def __len__(self) -> int:
        """Return number of fragments (not total length)."""
        return len(self._parts)


class StreamSink(Sink):
    """Writes fragments to a file-like object.

    Text streams receive ``str``; binary streams receive text encoded with
    ``output_encoding`` (defaulting to the decoding encoding). Errors raised
    by the stream are wrapped in ``SinkWriteError``.
    """

    def __init__(
        self,
        stream: IO[Any],
        binary: bool | None = None,
        output_encoding: str | None = None,
        encoding: str | None = None,
        errors: str | None = None,
    ) -> None:
        super().__init__(encoding=encoding, errors=errors)
        self.stream = stream
        if binary is None:
            binary = isinstance(stream, (io.RawIOBase, io.BufferedIOBase))
        self.binary = binary
        self.output_encoding = output_encoding or self.encoding

    def write_text(self, text: str) -> None:
        try:
            self.stream.write(text.encode(self.output_encoding) if self.binary else text)
        except (OSError, ValueError) as e:
            logger.debug("Stream write failed: %s", e)
            raise SinkWriteError(f"Stream write failed: {e}", self) from e


class CallbackSink(Sink):
    """Hands each decoded fragment to a callable.

    An exception from the callable is reported as ``SinkWriteError``.
    """

    def __init__(
        self,
        callback: Callable[[str], object],
        encoding: str | None = None,
        errors: str | None = None,
    ) -> None:
        super().__init__(encoding=encoding, errors=errors)
        self.callback = callback

    def write_text(self, text: str) -> None:
        try:
            self.callback(text)
        except SinkWriteError:
            raise
        except Exception as e:
            raise SinkWriteError(f"Sink callback failed: {e}", self) from e
