from datetime import datetime
from typing import List, Optional, Tuple

import pytz
from pydantic import (
    BaseModel,
    ConfigDict,
    StrictFloat,
    StrictInt,
    StrictStr,
    field_validator,
    model_validator,
)

TEMPORAL_FIELDS = ("due", "entry", "modified", "reviewed", "until", "wait")


def _drop_nulls(data):
    # JSON null behaves like a missing key
    if isinstance(data, dict):
        return {k: v for k, v in data.items() if v is not None}
    return data


def _as_utc_second(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        value = pytz.utc.localize(value)
    else:
        value = value.astimezone(pytz.utc)
    return value.replace(microsecond=0)


class Annotation(BaseModel):
    model_config = ConfigDict(frozen=True)

    entry: Optional[datetime] = None
    description: str = ""

    @field_validator("entry")
    @classmethod
    def normalise_entry(cls, v):
        return _as_utc_second(v)


class Task(BaseModel):
    """One to-do item as the codec hands it to callers.

    Temporal fields are ``None`` when unset, otherwise UTC datetimes with
    second precision (the wire grammar carries nothing finer).
    """

    model_config = ConfigDict(frozen=True)

    id: int = 0
    description: str = ""
    due: Optional[datetime] = None
    entry: Optional[datetime] = None
    imask: float = 0.0
    modified: Optional[datetime] = None
    parent: str = ""
    project: str = ""
    recur: str = ""
    reviewed: Optional[datetime] = None
    rtype: str = ""
    status: str = ""
    until: Optional[datetime] = None
    uuid: str = ""
    wait: Optional[datetime] = None
    annotations: Tuple[Annotation, ...] = ()
    tags: Tuple[str, ...] = ()
    urgency: float = 0.0

    @field_validator(*TEMPORAL_FIELDS)
    @classmethod
    def normalise_temporal(cls, v):
        return _as_utc_second(v)


class RawAnnotation(BaseModel):
    """Annotation as it sits on the wire, ``entry`` still a string."""

    entry: StrictStr = ""
    description: StrictStr = ""

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data):
        return _drop_nulls(data)


class RawTask(BaseModel):
    """First decode stage: structural typing only.

    Unknown keys are ignored and every date is kept as the raw string so the
    timestamp grammar can be applied as a separate step.
    """

    model_config = ConfigDict(extra="ignore")

    id: StrictInt = 0
    description: StrictStr = ""
    due: StrictStr = ""
    entry: StrictStr = ""
    imask: StrictFloat = 0.0
    modified: StrictStr = ""
    parent: StrictStr = ""
    project: StrictStr = ""
    recur: StrictStr = ""
    reviewed: StrictStr = ""
    rtype: StrictStr = ""
    status: StrictStr = ""
    until: StrictStr = ""
    uuid: StrictStr = ""
    wait: StrictStr = ""
    annotations: List[RawAnnotation] = []
    tags: List[StrictStr] = []
    urgency: StrictFloat = 0.0

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data):
        data = _drop_nulls(data)
        # a null annotation has no entry either, drop it with the undated ones
        if isinstance(data, dict) and isinstance(data.get("annotations"), list):
            data["annotations"] = [a for a in data["annotations"] if a is not None]
        return data
