"""
Parameter binding and row mapping.

The facade never inspects a payload's meaning; these helpers only convert its
shape into bind values and convert result rows into the caller's row type.
"""

import dataclasses
from collections.abc import Mapping
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Dict, List, Type, TypeVar, Union
from uuid import UUID
from pydantic import BaseModel

T = TypeVar("T")

SCALAR_TYPES = (int, float, str, bool, bytes, Decimal, datetime, date, time, UUID)


def bind_parameters(payload: Any, allow_many: bool = False) -> Union[Dict[str, Any], List[Dict[str, Any]]]:
    """
    Convert a parameter payload into bind values.

    A list or tuple of payloads is only accepted with ``allow_many`` and yields
    one dict per element, in order.
    """
    if allow_many and isinstance(payload, (list, tuple)):
        return [_to_dict(item) for item in payload]
    return _to_dict(payload)


def _to_dict(payload: Any) -> Dict[str, Any]:
    if payload is None:
        return {}
    if isinstance(payload, Mapping):
        return dict(payload)
    if isinstance(payload, BaseModel):
        return payload.model_dump()
    if dataclasses.is_dataclass(payload) and not isinstance(payload, type):
        return dataclasses.asdict(payload)
    if hasattr(payload, "__dict__"):
        return {k: v for k, v in vars(payload).items() if not k.startswith("_")}
    raise TypeError(f"Unsupported parameter payload type: {type(payload).__name__}")


def parameter_names(bound: Union[Dict[str, Any], List[Dict[str, Any]]]) -> List[str]:
    """Names of the bind parameters, in payload order."""
    if isinstance(bound, list):
        return list(bound[0]) if bound else []
    return list(bound)


def map_row(row_type: Type[T], row: Mapping) -> T:
    """Map one result row (column name -> value) onto ``row_type``."""
    if row_type is dict:
        return dict(row)
    if row_type in SCALAR_TYPES:
        return next(iter(row.values()), None)
    if isinstance(row_type, type) and issubclass(row_type, SCALAR_TYPES):
        # str/int subclasses such as enums wrap the first column
        value = next(iter(row.values()), None)
        return None if value is None else row_type(value)
    if isinstance(row_type, type) and issubclass(row_type, BaseModel):
        return row_type.model_validate(dict(row))
    return row_type(**row)
