"""JSONL transcript reader."""

from __future__ import annotations

import logging
from pathlib import Path

import aiofiles

logger = logging.getLogger(__name__)


def split_lines(raw: str) -> list[str]:
    """Split raw transcript text into lines, dropping empty ones."""
    return [line for line in raw.replace("\r\n", "\n").split("\n") if line]


async def read_transcript_lines(path: Path) -> list[str]:
    """Read the non-empty lines of a transcript.

    Bytes that are not valid UTF-8 are carried as surrogate escapes so that
    writing the lines back reproduces them unchanged.
    """
    async with aiofiles.open(path, encoding="utf-8", errors="surrogateescape") as f:
        raw = await f.read()
    lines = split_lines(raw)
    logger.debug("transcript_read", extra={"file": str(path), "lines": len(lines)})
    return lines
