"""Render sealed pools as plain-text decklists."""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TextIO, Union

from sealed_pool_creator.exceptions import PoolWriteError
from sealed_pool_creator.models import Side

logger = logging.getLogger(__name__)

BANNERS = {
    Side.CORP: "The Shadow: Pulling the Strings",
    Side.RUNNER: "The Masque: Cyber General",
}


def render(pool: Mapping[str, int], side: Side) -> list[str]:
    """Render a pool as lines: the side banner, then one line per title.

    Titles are sorted by code point so identical pools give identical output.
    """
    lines = [BANNERS[Side(side)]]
    lines.extend(f"{title} x{pool[title]}" for title in sorted(pool))
    return lines


def pool_filename(side: Side, pool_size: int, seed: int) -> str:
    """Return the output file name for a side, pool size and seed."""
    return f"{Side(side).value.lower()}-{pool_size}-{seed}.txt"


def write_pool(
    pool: Mapping[str, int], side: Side, destination: Union[str, Path, TextIO]
) -> None:
    """Write a rendered pool to a file path or an open text stream.

    Raises:
        PoolWriteError: If the output cannot be encoded, created or written.
    """
    text = "".join(f"{line}\n" for line in render(pool, side))

    if not isinstance(destination, (str, Path)):
        try:
            destination.write(text)
        except (OSError, UnicodeError) as e:
            raise PoolWriteError(_stream_name(destination), _reason(e)) from e
        return

    path = Path(destination)
    try:
        # encode first so an unencodable title leaves no file behind
        data = text.encode("utf-8")
        with open(path, "wb") as f:
            f.write(data)
    except (OSError, UnicodeError) as e:
        raise PoolWriteError(path, _reason(e)) from e

    logger.info(f"Finished writing to {path}")


def _stream_name(stream: TextIO) -> str:
    name = getattr(stream, "name", None)
    return name if isinstance(name, str) else "<stream>"


def _reason(error: Exception) -> str:
    return getattr(error, "strerror", None) or str(error)
