# topmark:header:start
#
#   project      : tomlio
#   file         : codec.py
#   file_relpath : src/tomlio/codec.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""TOML codec built on `tomlkit`.

`TomlDecoder` and `TomlEncoder` adapt tomlkit's text-oriented API to the
stream-bound `Decoder` / `Encoder` protocols used by `tomlio.streams`:

- decoding parses the whole stream and unwraps the document into plain Python
  types before binding it into the destination;
- encoding converts the value with `to_table` (dropping ``None``) and renders
  it with ``tomlkit.dumps``.

`new_decoder` and `new_encoder` are the factories passed to the generic
helpers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import TOMLKitError

from tomlio.binding import TomlTable, bind, to_table
from tomlio.constants import TOML_ENCODING
from tomlio.errors import BindingError, DecodeError, EncodeError
from tomlio.logging import TomlioLogger, get_logger

if TYPE_CHECKING:
    from tomlio.interfaces import BinaryStream

logger: TomlioLogger = get_logger(__name__)


def loads(text: str) -> TomlTable:
    """Parse TOML text into a plain ``dict``.

    Args:
        text (str): TOML document text.

    Returns:
        TomlTable: The document content with tomlkit wrappers removed.

    Raises:
        DecodeError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TOMLKitError as exc:
        raise DecodeError(f"invalid TOML: {exc}") from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def dumps(value: Any) -> str:
    """Render ``value`` as TOML text.

    Raises:
        EncodeError: If the value has no TOML representation.
    """
    try:
        table: TomlTable = to_table(value)
        return cast("str", cast("Any", tomlkit).dumps(table))
    except (BindingError, TOMLKitError, TypeError, ValueError) as exc:
        raise EncodeError(f"cannot encode {type(value).__name__} as TOML: {exc}") from exc


class TomlDecoder:
    """Decoder reading one TOML document from a binary stream."""

    def __init__(self, stream: BinaryStream) -> None:
        self._stream: BinaryStream = stream

    def decode(self, destination: Any) -> None:
        """Parse the stream and populate ``destination``.

        Args:
            destination (Any): Mutable mapping, dataclass instance, or plain object.

        Raises:
            DecodeError: On invalid UTF-8, invalid TOML, or a shape mismatch.
        """
        raw: bytes = self._stream.read()
        try:
            text: str = raw.decode(TOML_ENCODING)
        except UnicodeDecodeError as exc:
            raise DecodeError(f"TOML document is not valid {TOML_ENCODING}: {exc}") from exc
        table: TomlTable = loads(text)
        logger.trace("Decoded %d top-level key(s)", len(table))
        try:
            bind(destination, table)
        except BindingError as exc:
            raise DecodeError(str(exc)) from exc


class TomlEncoder:
    """Encoder writing one TOML document to a binary stream."""

    def __init__(self, stream: BinaryStream) -> None:
        self._stream: BinaryStream = stream

    def encode(self, value: Any) -> None:
        """Render ``value`` and write it to the stream.

        Raises:
            EncodeError: If the value has no TOML representation.
        """
        text: str = dumps(value)
        self._stream.write(text.encode(TOML_ENCODING))


def new_decoder(stream: BinaryStream) -> TomlDecoder:
    """Return a `TomlDecoder` bound to ``stream``."""
    return TomlDecoder(stream)


def new_encoder(stream: BinaryStream) -> TomlEncoder:
    """Return a `TomlEncoder` bound to ``stream``."""
    return TomlEncoder(stream)
