# taskhook/codec.py - Task <-> JSON line codec
"""Decode and encode task JSON lines with compact UTC timestamps.

Decoding is staged:

1. ``decode_raw`` - JSON text to :class:`RawTask`, dates still strings.
2. ``parse_raw_task`` - apply the timestamp grammar, drop undated annotations.

Encoding mirrors it: ``task_to_wire`` builds the JSON object (dates formatted,
empty values omitted) and ``encode`` serialises it.
"""
from __future__ import annotations

import json
import math
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from .domain.task import TEMPORAL_FIELDS, Annotation, RawAnnotation, RawTask, Task
from .errors import DecodeError, EncodeError
from .timestamps import format_optional_timestamp, parse_optional_timestamp, parse_timestamp
from .utils import setup_logger

logger = setup_logger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"non-finite number {name} is not valid JSON")


def _field_path(loc) -> str:
    return ".".join(str(part) for part in loc)


def decode_raw(line: Union[str, bytes]) -> RawTask:
    """Structural decode stage: JSON object to RawTask."""
    try:
        payload = json.loads(line, parse_constant=_reject_constant)
    except ValueError as e:
        raise DecodeError(None, line, str(e)) from e

    if not isinstance(payload, dict):
        raise DecodeError(None, line, "expected a JSON object")

    try:
        return RawTask.model_validate(payload)
    except ValidationError as e:
        err = e.errors()[0]
        raise DecodeError(_field_path(err["loc"]), err.get("input"), err["msg"]) from e


def drop_undated_annotations(annotations: List[RawAnnotation]) -> List[RawAnnotation]:
    """Keep only annotations that carry an ``entry`` timestamp, in order."""
    return [a for a in annotations if a.entry]


def parse_raw_task(raw: RawTask) -> Task:
    """Temporal decode stage: parse every date string of ``raw``."""
    fields: Dict[str, Any] = raw.model_dump(exclude={*TEMPORAL_FIELDS, "annotations"})
    for name in TEMPORAL_FIELDS:
        fields[name] = parse_optional_timestamp(getattr(raw, name), name)

    fields["annotations"] = [
        Annotation(
            entry=parse_timestamp(a.entry, "annotations.entry"),
            description=a.description,
        )
        for a in drop_undated_annotations(raw.annotations)
    ]
    return Task(**fields)


def decode(line: Union[str, bytes]) -> Task:
    """Decode one JSON line into a Task. Raises DecodeError."""
    try:
        return parse_raw_task(decode_raw(line))
    except DecodeError as e:
        logger.debug(f"decode failed: {e}")
        raise


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, list)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


def _check_finite(name: str, value: Any) -> None:
    if isinstance(value, float) and not math.isfinite(value):
        raise EncodeError(name, f"{value!r} is not representable in JSON")


def annotation_to_wire(annotation: Annotation) -> Dict[str, str]:
    out: Dict[str, str] = {}
    entry = format_optional_timestamp(annotation.entry)
    if entry:
        out["entry"] = entry
    if annotation.description:
        out["description"] = annotation.description
    return out


def task_to_wire(task: Task) -> Dict[str, Any]:
    """Build the JSON object for ``task``.

    Keys follow the model's field order. Unset dates and zero values
    (0, 0.0, "", []) are left out entirely.
    """
    out: Dict[str, Any] = {}
    for name in Task.model_fields:
        value = getattr(task, name)
        if name in TEMPORAL_FIELDS:
            value = format_optional_timestamp(value)
        elif name == "annotations":
            value = [annotation_to_wire(a) for a in value]
        elif name == "tags":
            value = list(value)
        _check_finite(name, value)
        if _is_empty(value):
            continue
        out[name] = value
    return out


def encode(task: Task) -> bytes:
    """Encode a Task as one compact JSON object (UTF-8). Raises EncodeError."""
    try:
        payload = task_to_wire(task)
        text = json.dumps(payload, ensure_ascii=False, separators=(",", ":"), allow_nan=False)
    except EncodeError as e:
        logger.debug(f"encode failed: {e}")
        raise
    except (TypeError, ValueError) as e:
        logger.debug(f"encode failed: {e}")
        raise EncodeError(None, str(e)) from e
    return text.encode("utf-8")


class TaskCodec:
    """Stateless codec object for callers that prefer an instance."""

    def decode(self, line: Union[str, bytes]) -> Task:
        return decode(line)

    def encode(self, task: Task) -> bytes:
        return encode(task)
