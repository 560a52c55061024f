"""Task JSON codec and Taskwarrior on-modify hook."""
from .codec import TaskCodec, decode, encode
from .domain.task import Annotation, Task
from .errors import CodecError, DecodeError, EncodeError

__all__ = [
    "Annotation",
    "CodecError",
    "DecodeError",
    "EncodeError",
    "Task",
    "TaskCodec",
    "decode",
    "encode",
]
