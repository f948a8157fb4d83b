"""
Read a world export from disk.

Opens the file in binary mode and hands it to nlworld.parser.parse, which decodes with
ParserSettings.encoding. OS-level failures are raised as IoReadError; parse failures
propagate as nlworld.core.errors.WorldParseError.
"""

from __future__ import annotations

import logging
import os

from nlworld.core.schema import WorldSnapshot
from nlworld.parser import ParserSettings, parse

from .errors import IoReadError

logger = logging.getLogger(__name__)


def read_world(
    path: str | os.PathLike[str], settings: ParserSettings | None = None
) -> WorldSnapshot:
    """
    Parse the world export stored at `path`.

    Args:
        path (str | os.PathLike[str]): Location of a .dat / .csv export.
        settings (ParserSettings | None): Parser options (defaults when None).

    Returns:
        WorldSnapshot: Parsed snapshot.

    Raises:
        IoReadError: If the file cannot be opened.
        nlworld.core.errors.WorldParseError: On the first structural failure.
    """
    try:
        fh = open(path, "rb")
    except OSError as exc:
        raise IoReadError(f"cannot open world export {os.fspath(path)!r}: {exc}") from exc
    with fh:
        logger.debug("reading world export %s", os.fspath(path))
        return parse(fh, settings)
