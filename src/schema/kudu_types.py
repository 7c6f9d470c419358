"""Kudu column type model."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class KuduType(Enum):
    """Kudu primitive column types understood by the bridge."""

    BOOL = "bool"
    INT8 = "int8"
    INT16 = "int16"
    INT32 = "int32"
    INT64 = "int64"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    UNIXTIME_MICROS = "unixtime_micros"
    STRING = "string"
    BINARY = "binary"


@dataclass(frozen=True)
class ColumnTypeAttributes:
    """Type attributes for parameterized Kudu columns."""

    precision: int
    scale: int


@dataclass(frozen=True)
class KuduColumn:
    """One column of a Kudu table schema.

    Attributes:
        name: Column name.
        type: Kudu type tag, either a KuduType or its name.
        attributes: Decimal precision and scale, when applicable.
    """

    name: str
    type: KuduType | str
    attributes: ColumnTypeAttributes | None = None
