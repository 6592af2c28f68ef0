# topmark:header:start
#
#   project      : tomlio
#   file         : test_codec.py
#   file_relpath : tests/test_codec.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Tests for the tomlkit-backed codec in `tomlio.codec`."""

from __future__ import annotations

import io
from typing import Any

import pytest
import tomlkit

from tests.models import Mode, Plain, Server, Settings
from tomlio.codec import TomlDecoder, TomlEncoder, dumps, loads, new_decoder, new_encoder
from tomlio.errors import DecodeError, EncodeError
from tomlio.interfaces import Decoder, Encoder


def test_loads_returns_plain_python_types() -> None:
    """Parsed documents are unwrapped from tomlkit containers."""
    data = loads('name = "svc"\n[server]\nport = 1\ntags = ["a"]\n')

    assert data == {"name": "svc", "server": {"port": 1, "tags": ["a"]}}
    assert type(data) is dict
    assert type(data["server"]) is dict
    assert type(data["server"]["tags"]) is list


def test_loads_rejects_invalid_toml() -> None:
    """Syntax errors raise DecodeError with the tomlkit error chained."""
    with pytest.raises(DecodeError) as excinfo:
        loads("a = \n")
    assert excinfo.value.__cause__ is not None


def test_dumps_drops_none_and_converts_values() -> None:
    """None is omitted; enums and paths are rendered as plain values."""
    settings = Settings(name="svc", mode=Mode.PROD, server=Server("h", 1))
    text = dumps(settings)
    parsed: Any = tomlkit.parse(text).unwrap()

    assert "backup" not in parsed
    assert "root" not in parsed
    assert parsed["mode"] == "prod"
    assert parsed["server"] == {"host": "h", "port": 1}


def test_dumps_plain_object_skips_private_attributes() -> None:
    """Plain objects are encoded from their public attributes."""
    obj = Plain()
    obj._secret = "x"  # type: ignore[attr-defined]
    parsed: Any = tomlkit.parse(dumps(obj)).unwrap()

    assert parsed == {"name": "default", "extra": {}}


def test_dumps_rejects_non_tables() -> None:
    """Top-level values must convert to a table."""
    with pytest.raises(EncodeError):
        dumps(42)
    with pytest.raises(EncodeError):
        dumps({"bad": object()})


def test_decoder_reads_stream_into_destination() -> None:
    """TomlDecoder populates the destination from the bound stream."""
    dest = Settings()
    TomlDecoder(io.BytesIO(b'name = "svc"\ndebug = true\n')).decode(dest)

    assert dest.name == "svc"
    assert dest.debug is True


def test_decoder_rejects_invalid_utf8() -> None:
    """Bytes that are not UTF-8 raise DecodeError."""
    with pytest.raises(DecodeError, match="utf-8"):
        TomlDecoder(io.BytesIO(b'name = "\xff"\n')).decode({})


def test_encoder_writes_utf8() -> None:
    """TomlEncoder writes UTF-8 encoded TOML to the stream."""
    buf = io.BytesIO()
    TomlEncoder(buf).encode({"name": "café"})

    assert loads(buf.getvalue().decode("utf-8")) == {"name": "café"}


def test_factories_satisfy_protocols() -> None:
    """The factories build objects matching the Decoder / Encoder protocols."""
    assert isinstance(new_decoder(io.BytesIO(b"")), Decoder)
    assert isinstance(new_encoder(io.BytesIO()), Encoder)
