# topmark:header:start
#
#   project      : tomlio
#   file         : streams.py
#   file_relpath : src/tomlio/streams.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Codec-agnostic load/save helpers.

Every helper takes a decoder or encoder *factory* (see `tomlio.interfaces`), so
the same code serves any format. Loads follow one pattern:

1. `stage` a private copy of the destination,
2. open and decode each source into that copy,
3. `commit` the copy into the caller's object.

A failure at any step raises before step 3, so the destination is unchanged.

Error mapping:
    - the source cannot be opened or read -> `OpenError`
    - the decoder rejects the content -> `DecodeError`
    - the encoder rejects the value -> `EncodeError`
    - the target cannot be written -> `SaveError`
"""

from __future__ import annotations

import io
from functools import partial
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, Callable

from tomlio.binding import commit, stage
from tomlio.errors import BindingError, DecodeError, EncodeError, OpenError, SaveError
from tomlio.logging import TomlioLogger, get_logger

if TYPE_CHECKING:
    import sys
    from collections.abc import Iterable
    from os import PathLike

    if sys.version_info < (3, 11):
        from importlib.abc import Traversable
    else:
        from importlib.resources.abc import Traversable

    from tomlio.interfaces import BinaryStream, DecoderFactory, EncoderFactory

logger: TomlioLogger = get_logger(__name__)


# --- Loading ---


def read(destination: Any, stream: BinaryStream, decoder_factory: DecoderFactory) -> None:
    """Decode ``destination`` from a readable binary stream.

    The stream is not closed.

    Args:
        destination (Any): Object to populate in place.
        stream (BinaryStream): Readable binary stream.
        decoder_factory (DecoderFactory): Builds the decoder for ``stream``.

    Raises:
        OpenError: If reading from the stream fails.
        DecodeError: If the decoder rejects the content.
    """
    staged: Any = stage_for_decode(destination)
    _decode_stream(staged, stream, decoder_factory, label="<stream>", path=None)
    commit(destination, staged)


def read_bytes(destination: Any, data: bytes, decoder_factory: DecoderFactory) -> None:
    """Decode ``destination`` from an in-memory document."""
    read(destination, io.BytesIO(data), decoder_factory)


def open_path(
    destination: Any,
    path: str | PathLike[str],
    decoder_factory: DecoderFactory,
) -> None:
    """Decode ``destination`` from the file at ``path``.

    Raises:
        OpenError: If the file cannot be opened or read.
        DecodeError: If the decoder rejects the content.
    """
    open_files(destination, [path], decoder_factory)


def open_files(
    destination: Any,
    paths: Iterable[str | PathLike[str]],
    decoder_factory: DecoderFactory,
) -> None:
    """Decode ``destination`` from several files, in order.

    Each file is decoded into the same staged object, so later files override
    keys set by earlier ones. The first failure aborts the whole load and
    nothing is committed.

    Args:
        destination (Any): Object to populate in place.
        paths (Iterable[str | PathLike[str]]): Files to read, lowest priority first.
        decoder_factory (DecoderFactory): Builds a decoder for each opened file.
    """
    staged: Any = stage_for_decode(destination)
    for raw in paths:
        decode_path(staged, Path(raw), decoder_factory)
    commit(destination, staged)


def open_fs(
    destination: Any,
    root: Traversable,
    name: str,
    decoder_factory: DecoderFactory,
) -> None:
    """Decode ``destination`` from ``name`` inside a resource tree.

    ``root`` is an `importlib.resources` ``Traversable``, e.g.
    ``importlib.resources.files("mypackage")``; this also covers packages
    installed as zip archives.
    """
    open_files_fs(destination, root, [name], decoder_factory)


def open_files_fs(
    destination: Any,
    root: Traversable,
    names: Iterable[str],
    decoder_factory: DecoderFactory,
) -> None:
    """Decode ``destination`` from several resources under ``root``, in order."""
    staged: Any = stage_for_decode(destination)
    for name in names:
        resource: Traversable = root.joinpath(name)
        _decode_opened(
            staged, partial(resource.open, "rb"), decoder_factory, label=str(resource), path=None
        )
    commit(destination, staged)


def decode_path(staged: Any, path: Path, decoder_factory: DecoderFactory) -> None:
    """Open ``path`` and decode it into ``staged`` without staging or committing.

    Building block for loaders that handle staging themselves. The file is
    closed on every exit path; a handle that failed to open is never touched.

    Raises:
        OpenError: If the file cannot be opened or read.
        DecodeError: If the decoder rejects the content.
    """
    _decode_opened(staged, partial(path.open, "rb"), decoder_factory, label=str(path), path=path)


def _decode_opened(
    staged: Any,
    opener: Callable[[], IO[bytes]],
    decoder_factory: DecoderFactory,
    *,
    label: str,
    path: Path | None,
) -> None:
    try:
        fp: IO[bytes] = opener()
    except OSError as exc:
        logger.error("Cannot open %s: %s", label, exc)
        raise OpenError(f"cannot open {label}: {exc}", path=path) from exc
    logger.debug("Opened %s", label)
    with fp:
        _decode_stream(staged, fp, decoder_factory, label=label, path=path)


def _decode_stream(
    staged: Any,
    stream: BinaryStream,
    decoder_factory: DecoderFactory,
    *,
    label: str,
    path: Path | None,
) -> None:
    try:
        decoder_factory(stream).decode(staged)
    except DecodeError as exc:
        if exc.path is None:
            exc.path = path
        logger.error("Cannot decode %s: %s", label, exc)
        raise
    except OSError as exc:
        logger.error("Cannot read %s: %s", label, exc)
        raise OpenError(f"cannot read {label}: {exc}", path=path) from exc
    except Exception as exc:
        # Injected decoders raise their own error types; all of them are decode failures.
        logger.error("Cannot decode %s: %s", label, exc)
        raise DecodeError(f"cannot decode {label}: {exc}", path=path) from exc


def stage_for_decode(destination: Any) -> Any:
    """Stage ``destination`` for decoding; an uncopyable destination raises `DecodeError`."""
    try:
        return stage(destination)
    except BindingError as exc:
        raise DecodeError(str(exc)) from exc


# --- Saving ---


def write(value: Any, stream: BinaryStream, encoder_factory: EncoderFactory) -> None:
    """Encode ``value`` to a writable binary stream.

    The stream is neither flushed nor closed.

    Raises:
        EncodeError: If the encoder rejects the value.
        SaveError: If writing to the stream fails.
    """
    try:
        encoder_factory(stream).encode(value)
    except SaveError:
        raise
    except OSError as exc:
        raise SaveError(f"cannot write stream: {exc}") from exc
    except (ValueError, TypeError) as exc:
        raise EncodeError(f"cannot encode {type(value).__name__}: {exc}") from exc


def write_bytes(value: Any, encoder_factory: EncoderFactory) -> bytes:
    """Encode ``value`` and return the encoded document."""
    buf = io.BytesIO()
    write(value, buf, encoder_factory)
    return buf.getvalue()


def save(value: Any, path: str | PathLike[str], encoder_factory: EncoderFactory) -> None:
    """Encode ``value`` and write it to ``path``.

    The value is encoded in memory first, so an encoding failure never
    truncates an existing file.

    Raises:
        EncodeError: If the encoder rejects the value.
        SaveError: If the file cannot be written.
    """
    target = Path(path)
    try:
        data: bytes = write_bytes(value, encoder_factory)
    except SaveError as exc:
        exc.path = target
        raise
    try:
        target.write_bytes(data)
    except OSError as exc:
        logger.error("Cannot write %s: %s", target, exc)
        raise SaveError(f"cannot write {target}: {exc}", path=target) from exc
    logger.debug("Wrote %d byte(s) to %s", len(data), target)
