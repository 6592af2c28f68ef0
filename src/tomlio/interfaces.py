# topmark:header:start
#
#   project      : tomlio
#   file         : interfaces.py
#   file_relpath : src/tomlio/interfaces.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Codec contracts shared by the generic I/O helpers.

A codec is injected as a *factory*: a callable that takes a binary stream and
returns an object with a single method (`Decoder.decode` or `Encoder.encode`).
Any callable with that shape works, including a class whose constructor takes
the stream.
"""

from __future__ import annotations

from typing import IO, Any, Callable, Protocol, runtime_checkable

# Binary streams as accepted by the decoder and encoder factories.
BinaryStream = IO[bytes]


@runtime_checkable
class Decoder(Protocol):
    """Protocol for decoders bound to a readable binary stream."""

    def decode(self, destination: Any) -> None:
        """Populate ``destination`` from the underlying stream.

        Args:
            destination (Any): Mutable object to populate in place.

        Raises:
            Exception: Implementations raise on malformed content or shape mismatch.
        """
        ...


@runtime_checkable
class Encoder(Protocol):
    """Protocol for encoders bound to a writable binary stream."""

    def encode(self, value: Any) -> None:
        """Write ``value`` to the underlying stream.

        Args:
            value (Any): The object to serialize.
        """
        ...


DecoderFactory = Callable[[BinaryStream], Decoder]
EncoderFactory = Callable[[BinaryStream], Encoder]
