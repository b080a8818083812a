"""Conversion of decoded records into JSON friendly structures."""
from dataclasses import fields, is_dataclass
from datetime import datetime
from enum import Enum, IntFlag
from types import MappingProxyType
from typing import Any

import numpy as np


def to_jsonable(value: Any) -> Any:
    """Recursively convert a decoded value for json.dump."""
    if isinstance(value, IntFlag):
        return [member.name for member in type(value) if member in value and member.value]
    if isinstance(value, Enum):
        return value.name
    if is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in fields(value)}
    if isinstance(value, (dict, MappingProxyType)):
        return {_key(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [to_jsonable(v) for v in value]
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, bytes):
        return value.hex()
    return value


def _key(key: Any) -> Any:
    if isinstance(key, Enum):
        return key.name
    if isinstance(key, (str, int, float, bool)) or key is None:
        return key
    return str(key)


class DictMixin:
    """Gives dataclass records a to_dict()."""

    def to_dict(self) -> dict:
        return to_jsonable(self)
