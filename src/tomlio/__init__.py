# topmark:header:start
#
#   project      : tomlio
#   file         : __init__.py
#   file_relpath : src/tomlio/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""tomlio: load and save Python objects as TOML.

Typical use:

```python
import tomlio

settings = Settings()
tomlio.open_from_paths(settings, "app.toml", ["~/.config/app", "/etc/app"])
tomlio.save(settings, "app.toml")
```

The generic, codec-agnostic helpers live in `tomlio.streams` and
`tomlio.resolver`; the TOML codec lives in `tomlio.codec`.
"""

from __future__ import annotations

from tomlio.api import (
    open,
    open_files,
    open_files_fs,
    open_from_paths,
    open_fs,
    read,
    read_bytes,
    save,
    write,
    write_bytes,
)
from tomlio.codec import TomlDecoder, TomlEncoder, dumps, loads, new_decoder, new_encoder
from tomlio.errors import (
    DecodeError,
    EncodeError,
    LoadError,
    NotFoundError,
    OpenError,
    SaveError,
    TomlioError,
)
from tomlio.interfaces import Decoder, DecoderFactory, Encoder, EncoderFactory
from tomlio.paths import find_files_on_paths, find_first_existing
from tomlio.resolver import load_from_search_paths

__all__: list[str] = [
    "DecodeError",
    "Decoder",
    "DecoderFactory",
    "EncodeError",
    "Encoder",
    "EncoderFactory",
    "LoadError",
    "NotFoundError",
    "OpenError",
    "SaveError",
    "TomlDecoder",
    "TomlEncoder",
    "TomlioError",
    "dumps",
    "find_files_on_paths",
    "find_first_existing",
    "load_from_search_paths",
    "loads",
    "new_decoder",
    "new_encoder",
    "open",
    "open_files",
    "open_files_fs",
    "open_from_paths",
    "open_fs",
    "read",
    "read_bytes",
    "save",
    "write",
    "write_bytes",
]
