"""JSONL transcript writer."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

import aiofiles
import aiofiles.os

logger = logging.getLogger(__name__)


async def write_transcript_lines(path: Path, lines: Sequence[str]) -> None:
    """Overwrite a transcript with the given lines.

    The content goes to a sibling temp file first and replaces the
    transcript only once fully written, so a failed write leaves the
    original in place.

    Args:
        path: Transcript file to write.
        lines: Lines without trailing newlines. The file always ends with one.
    """
    tmp_path = path.with_name(f".{path.name}.tmp")
    try:
        async with aiofiles.open(
            tmp_path, "w", encoding="utf-8", errors="surrogateescape", newline="\n"
        ) as f:
            await f.write("\n".join(lines) + "\n")
        await aiofiles.os.replace(tmp_path, path)
    except BaseException:
        if await aiofiles.os.path.exists(tmp_path):
            await aiofiles.os.remove(tmp_path)
        raise
    logger.debug("transcript_written", extra={"file": str(path), "lines": len(lines)})
