# topmark:header:start
#
#   project      : tomlio
#   file         : resolver.py
#   file_relpath : src/tomlio/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 The tomlio Authors
#
# topmark:header:end

"""Resolve a file name against search paths and decode it.

`load_from_search_paths` is the single entry point:

1. look up ``file_name`` in ``search_paths`` (first match wins);
2. fail with `NotFoundError` when no directory has it, without opening anything;
3. open the match and decode it with the injected decoder factory;
4. publish the result into ``destination`` only once decoding succeeded.

Open failures (including the file disappearing between lookup and open) raise
`OpenError`; decoder failures raise `DecodeError`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

from tomlio.binding import commit
from tomlio.errors import NotFoundError
from tomlio.logging import TomlioLogger, get_logger
from tomlio.paths import find_first_existing
from tomlio.streams import decode_path, stage_for_decode

if TYPE_CHECKING:
    import os
    from collections.abc import Iterable

    from tomlio.interfaces import DecoderFactory

logger: TomlioLogger = get_logger(__name__)


def load_from_search_paths(
    destination: Any,
    file_name: str,
    search_paths: Iterable[str | os.PathLike[str]],
    decoder_factory: DecoderFactory,
) -> Path:
    """Load ``destination`` from the first ``file_name`` found on ``search_paths``.

    Args:
        destination (Any): Object to populate in place. Left unchanged on failure.
        file_name (str): Non-empty, relative file name to look for.
        search_paths (Iterable[str | os.PathLike[str]]): Directories, highest priority first.
            May be empty.
        decoder_factory (DecoderFactory): Builds the decoder for the opened file.

    Returns:
        Path: The file that was loaded.

    Raises:
        NotFoundError: If no directory contains ``file_name``.
        OpenError: If the file was found but could not be opened or read.
        DecodeError: If the decoder rejects the content.
        ValueError: If ``file_name`` is empty or absolute.
    """
    paths: list[Path] = [Path(p) for p in search_paths]
    found: Path | None = find_first_existing(paths, file_name)
    if found is None:
        logger.info("%s not found on %d search path(s)", file_name, len(paths))
        raise NotFoundError(file_name, paths)

    staged: Any = stage_for_decode(destination)
    decode_path(staged, found, decoder_factory)
    commit(destination, staged)
    logger.debug("Loaded %s", found)
    return found
