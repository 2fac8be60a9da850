"""Message pruning for JSONL session transcripts.

A transcript is a list of JSON lines. The first line is the session header
and is always kept. Lines whose ``type`` is user/assistant/system are
message lines; only they are subject to pruning. Everything else (tool
records, diagnostics, unparseable text) passes through untouched.

Retention is anchored on assistant messages: keeping N means keeping the
last N assistant messages together with every message that follows the
first of them.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Sequence
from typing import Any

from claude_prune.sessions.types import MESSAGE_TYPES, MessageKind, PruneResult

logger = logging.getLogger(__name__)

CACHE_READ_FIELD = "cache_read_input_tokens"

_SURROGATE_RE = re.compile("[\ud800-\udfff]")


def try_parse_json(line: str) -> dict[str, Any] | None:
    """Parse a line as a JSON object, returning None for anything else."""
    try:
        value = json.loads(line)
    except (json.JSONDecodeError, ValueError, RecursionError):
        return None
    return value if isinstance(value, dict) else None


def _dump_line(obj: dict[str, Any]) -> str:
    dumped = json.dumps(obj, ensure_ascii=False, separators=(",", ":"))
    # Lone surrogates only occur inside JSON strings; keep them escaped
    return _SURROGATE_RE.sub(lambda m: f"\\u{ord(m.group()):04x}", dumped)


def _message_type(line: str) -> str | None:
    obj = try_parse_json(line)
    if obj is None:
        return None
    msg_type = obj.get("type")
    if isinstance(msg_type, str) and msg_type in MESSAGE_TYPES:
        return msg_type
    return None


def _is_set(value: Any) -> bool:
    """Truthiness of a decoded JSON value; empty objects and arrays count as set."""
    if value is None or value is False or value == "":
        return False
    if isinstance(value, int | float) and not isinstance(value, bool):
        return value == value and value != 0
    return True


def _usage_of(obj: dict[str, Any]) -> dict[str, Any] | None:
    """Return the usage block, preferring top-level ``usage`` over ``message.usage``.

    Any set top-level value shadows ``message.usage``, even ``{}`` or a
    non-object, in which case the record has no usable block.
    """
    usage = obj.get("usage")
    if _is_set(usage):
        return usage if isinstance(usage, dict) else None
    message = obj.get("message")
    if isinstance(message, dict):
        nested = message.get("usage")
        if isinstance(nested, dict):
            return nested
    return None


def _has_cache_reads(obj: dict[str, Any]) -> bool:
    usage = _usage_of(obj)
    if usage is None:
        return False
    value = usage.get(CACHE_READ_FIELD)
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return value > 0


def find_last_cache_read_line(lines: Sequence[str]) -> int | None:
    """Index of the last line carrying a positive cache-read counter."""
    last: int | None = None
    for i, line in enumerate(lines):
        obj = try_parse_json(line)
        if obj is not None and _has_cache_reads(obj):
            last = i
    return last


def zero_cache_reads(line: str) -> str:
    """Return the line with its cache-read counter set to 0.

    Lines that no longer parse, or carry no usage block, are returned as-is.
    """
    obj = try_parse_json(line)
    usage = _usage_of(obj) if obj is not None else None
    if obj is None or usage is None:
        logger.warning("cache_rewrite_skipped", extra={"line_preview": line[:80]})
        return line
    usage[CACHE_READ_FIELD] = 0
    return _dump_line(obj)


def compute_cutoff(assistant_indexes: Sequence[int], keep: int, line_count: int) -> int:
    """Index from which message lines are retained.

    When there are more assistant messages than ``keep``, the cutoff is the
    index of the first assistant message among the last ``keep``. With
    ``keep == 0`` that position lies past the list, so the cutoff moves past
    the end of the transcript and every message line is dropped.
    """
    keep = max(0, keep)
    if len(assistant_indexes) <= keep:
        return 0
    position = len(assistant_indexes) - keep
    if position >= len(assistant_indexes):
        return line_count
    return assistant_indexes[position]


def prune_session_lines(lines: Sequence[str], keep: int) -> PruneResult:
    """Drop older message lines from a transcript.

    Args:
        lines: Transcript lines in file order, without empty lines.
        keep: Number of trailing assistant messages to retain. Negative
            values behave like 0.

    Returns:
        PruneResult with the retained lines and message counts.
    """
    # Pass 1: classify message lines (the header is never classified)
    message_indexes: list[int] = []
    assistant_indexes: list[int] = []
    for i, line in enumerate(lines):
        if i == 0:
            continue
        msg_type = _message_type(line)
        if msg_type is None:
            continue
        message_indexes.append(i)
        if msg_type == MessageKind.ASSISTANT.value:
            assistant_indexes.append(i)

    cutoff = compute_cutoff(assistant_indexes, keep, len(lines))

    # Pass 2: zero the last positive cache-read counter, kept or not
    processed = list(lines)
    cache_index = find_last_cache_read_line(lines)
    if cache_index is not None:
        processed[cache_index] = zero_cache_reads(lines[cache_index])

    result = PruneResult(assistant_message_count=len(assistant_indexes))
    if not processed:
        return result

    result.kept_lines.append(processed[0])
    messages = set(message_indexes)
    for i in range(1, len(processed)):
        if i not in messages:
            result.kept_lines.append(processed[i])
        elif i >= cutoff:
            result.kept_lines.append(processed[i])
            result.kept_count += 1
        else:
            result.dropped_count += 1

    logger.debug(
        "transcript_pruned",
        extra={
            "lines": len(lines),
            "messages": len(message_indexes),
            "cutoff": cutoff,
            "kept": result.kept_count,
            "dropped": result.dropped_count,
        },
    )
    return result
