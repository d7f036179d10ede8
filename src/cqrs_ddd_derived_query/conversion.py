"""Domain value -> BSON value conversion for bound query parameters."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable
from uuid import UUID

from bson import Decimal128
from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from .parameters import ParameterCursor

VALUE_SLOT = "value"


class ValueHolder(BaseModel):
    """Wraps a single parameter so the converter sees a document with one slot."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    value: Any = None


@runtime_checkable
class ValueConverter(Protocol):
    """
    Converts a bound parameter into its datastore-native form.

    Implementations receive a :class:`ValueHolder` and return the written
    document (or any object exposing a ``value`` attribute).  Only the
    ``value`` slot of the result is used.
    """

    def convert(self, holder: ValueHolder) -> Any:
        ...


def _serialize_value(value: Any) -> Any:
    """Convert Python types to BSON-safe types."""
    if isinstance(value, BaseModel):
        return _serialize_value(value.model_dump())
    if isinstance(value, Enum):
        return _serialize_value(value.value)
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, Decimal):
        return Decimal128(value)
    if isinstance(value, Mapping):
        return {str(k): _serialize_value(v) for k, v in value.items()}
    if isinstance(value, (list, tuple, set, frozenset)):
        return [_serialize_value(v) for v in value]
    return value


class DocumentValueConverter:
    """Default converter: writes the holder as a BSON-ready document."""

    def convert(self, holder: ValueHolder) -> dict[str, Any]:
        return {VALUE_SLOT: _serialize_value(holder.value)}


def read_converted_value(converted: Any) -> Any:
    """Pick the ``value`` slot out of a converter result, dropping the wrapper."""
    if isinstance(converted, Mapping):
        return converted.get(VALUE_SLOT)
    return getattr(converted, VALUE_SLOT, None)


def next_converted(
    parameters: ParameterCursor, converter: ValueConverter, field: str
) -> Any:
    """Consume one parameter and run it through ``converter`` exactly once."""
    raw = parameters.next(field)
    return read_converted_value(converter.convert(ValueHolder(value=raw)))
