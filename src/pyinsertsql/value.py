"""Typed values that can be embedded in or bound to a statement.

``Value`` is a closed family of frozen dataclasses. The renderer inspects the
variant to decide whether a cell is emitted inline (``Ident``, ``Choice``,
``Null(NullType.CHOICE)``) or pushed to the parameter list.
"""

from __future__ import annotations

import datetime
import enum
import ipaddress
import json
import uuid
from dataclasses import dataclass
from typing import Any, ClassVar

from pyinsertsql._errors import ERR_MSG_INVALID_VALUE, InvalidValueError


class NullType(enum.Enum):
    """The type a ``Null`` stands in for.

    One entry per payload variant of ``Value``.
    """

    STRING = "string"
    CHOICE = "choice"
    I64 = "i64"
    I32 = "i32"
    I16 = "i16"
    BOOL = "bool"
    F64 = "f64"
    F32 = "f32"
    BINARY = "binary"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    DATETIME_TZ = "datetime_tz"
    UUID = "uuid"
    UUID_HYPHENATED = "uuid_hyphenated"
    UUID_SIMPLE = "uuid_simple"
    JSON_VALUE = "json_value"
    # PostgreSQL only
    MAC_ADDRESS = "mac_address"
    IP_NETWORK = "ip_network"
    BIT_VEC = "bit_vec"


POSTGRES_ONLY_NULL_TYPES: frozenset[NullType] = frozenset({
    NullType.MAC_ADDRESS,
    NullType.IP_NETWORK,
    NullType.BIT_VEC,
})


@dataclass(frozen=True)
class Value:
    """Base class of every value variant."""

    NULL_TYPE: ClassVar[NullType | None] = None

    def to_python(self) -> Any:
        """Return the object a DB-API driver should bind for this value."""
        raise NotImplementedError

    def is_postgres_only(self) -> bool:
        return self.NULL_TYPE in POSTGRES_ONLY_NULL_TYPES


@dataclass(frozen=True)
class _Scalar(Value):
    value: Any

    def to_python(self) -> Any:
        return self.value


def _check_int_range(value: int, bits: int, variant: str) -> None:
    low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
    if not low <= value <= high:
        raise InvalidValueError(
            ERR_MSG_INVALID_VALUE,
            f"{variant} value {value} outside [{low}, {high}]",
        )


# --- References ---


@dataclass(frozen=True)
class Null(Value):
    """SQL NULL for a column of the given type."""

    null_type: NullType

    def to_python(self) -> Any:
        return None

    def is_postgres_only(self) -> bool:
        return self.null_type in POSTGRES_ONLY_NULL_TYPES


@dataclass(frozen=True)
class Ident(Value):
    """A raw identifier such as a column name.

    Emitted verbatim and never escaped, so never pass unchecked data.
    """

    value: str

    def to_python(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Column(Value):
    """A column reference with an optional table name."""

    column_name: str
    table_name: str | None = None

    def to_python(self) -> Any:
        if self.table_name is None:
            return self.column_name
        return f"{self.table_name}.{self.column_name}"


# --- Text ---


@dataclass(frozen=True)
class Choice(_Scalar):
    """An enumeration label, rendered inline as an escaped literal."""

    NULL_TYPE = NullType.CHOICE
    value: str


@dataclass(frozen=True)
class String(_Scalar):
    NULL_TYPE = NullType.STRING
    value: str


# --- Numbers ---


@dataclass(frozen=True)
class I64(_Scalar):
    NULL_TYPE = NullType.I64
    value: int

    def __post_init__(self) -> None:
        _check_int_range(self.value, 64, "I64")


@dataclass(frozen=True)
class I32(_Scalar):
    NULL_TYPE = NullType.I32
    value: int

    def __post_init__(self) -> None:
        _check_int_range(self.value, 32, "I32")


@dataclass(frozen=True)
class I16(_Scalar):
    NULL_TYPE = NullType.I16
    value: int

    def __post_init__(self) -> None:
        _check_int_range(self.value, 16, "I16")


@dataclass(frozen=True)
class Bool(_Scalar):
    NULL_TYPE = NullType.BOOL
    value: bool


@dataclass(frozen=True)
class F64(_Scalar):
    NULL_TYPE = NullType.F64
    value: float


@dataclass(frozen=True)
class F32(_Scalar):
    NULL_TYPE = NullType.F32
    value: float


@dataclass(frozen=True)
class Binary(_Scalar):
    NULL_TYPE = NullType.BINARY
    value: bytes


# --- Temporal ---


@dataclass(frozen=True)
class Date(_Scalar):
    NULL_TYPE = NullType.DATE
    value: datetime.date


@dataclass(frozen=True)
class Time(_Scalar):
    NULL_TYPE = NullType.TIME
    value: datetime.time


@dataclass(frozen=True)
class DateTime(_Scalar):
    """A datetime without timezone."""

    NULL_TYPE = NullType.DATETIME
    value: datetime.datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is not None:
            raise InvalidValueError(
                ERR_MSG_INVALID_VALUE,
                f"DateTime expects a naive datetime, got {self.value.isoformat()}",
            )


@dataclass(frozen=True)
class DateTimeTz(_Scalar):
    """A timezone-aware datetime."""

    NULL_TYPE = NullType.DATETIME_TZ
    value: datetime.datetime

    def __post_init__(self) -> None:
        if self.value.tzinfo is None or self.value.utcoffset() is None:
            raise InvalidValueError(
                ERR_MSG_INVALID_VALUE,
                f"DateTimeTz expects an aware datetime, got {self.value.isoformat()}",
            )


# --- UUID ---


@dataclass(frozen=True)
class Uuid(_Scalar):
    """A UUID bound in the driver's native representation."""

    NULL_TYPE = NullType.UUID
    value: uuid.UUID


@dataclass(frozen=True)
class UuidHyphenated(_Scalar):
    """A UUID bound as ``xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx`` text."""

    NULL_TYPE = NullType.UUID_HYPHENATED
    value: uuid.UUID

    def to_python(self) -> Any:
        return str(self.value)


@dataclass(frozen=True)
class UuidSimple(_Scalar):
    """A UUID bound as 32 hex digits without hyphens."""

    NULL_TYPE = NullType.UUID_SIMPLE
    value: uuid.UUID

    def to_python(self) -> Any:
        return self.value.hex


# --- JSON ---


@dataclass(frozen=True)
class JsonValue(_Scalar):
    """Any JSON-serialisable object, bound as its JSON text."""

    NULL_TYPE = NullType.JSON_VALUE
    value: Any

    def to_python(self) -> Any:
        return json.dumps(self.value)


# --- PostgreSQL only ---


@dataclass(frozen=True)
class MacAddress(_Scalar):
    NULL_TYPE = NullType.MAC_ADDRESS
    value: bytes

    def __post_init__(self) -> None:
        if len(self.value) != 6:
            raise InvalidValueError(
                ERR_MSG_INVALID_VALUE,
                f"MacAddress expects 6 bytes, got {len(self.value)}",
            )

    def to_python(self) -> Any:
        return ":".join(f"{b:02x}" for b in self.value)


@dataclass(frozen=True)
class IpNetwork(_Scalar):
    NULL_TYPE = NullType.IP_NETWORK
    value: ipaddress.IPv4Network | ipaddress.IPv6Network


@dataclass(frozen=True)
class BitVec(_Scalar):
    NULL_TYPE = NullType.BIT_VEC
    value: tuple[bool, ...]

    def to_python(self) -> Any:
        return "".join("1" if bit else "0" for bit in self.value)


PAYLOAD_VARIANTS: tuple[type[Value], ...] = (
    Choice,
    String,
    I64,
    I32,
    I16,
    Bool,
    F64,
    F32,
    Binary,
    Date,
    Time,
    DateTime,
    DateTimeTz,
    Uuid,
    UuidHyphenated,
    UuidSimple,
    JsonValue,
    MacAddress,
    IpNetwork,
    BitVec,
)
"""Every variant that carries a typed payload, in ``NullType`` order."""
