"""Hive primitive type descriptors.

This module defines one tagged descriptor type for all Hive primitive
types. Only the decimal tag carries precision and scale.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.constants import HIVE_MAX_DECIMAL_PRECISION
from core.errors import UnsupportedTypeError


class HivePrimitive(Enum):
    """Hive primitive categories reachable from Kudu columns."""

    BOOLEAN = "boolean"
    TINYINT = "tinyint"
    SMALLINT = "smallint"
    INT = "int"
    BIGINT = "bigint"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    TIMESTAMP = "timestamp"
    STRING = "string"
    BINARY = "binary"


@dataclass(frozen=True)
class HiveTypeInfo:
    """Hive primitive type descriptor.

    Attributes:
        category: Primitive category tag.
        precision: Decimal precision, None for other categories.
        scale: Decimal scale, None for other categories.
    """

    category: HivePrimitive
    precision: int | None = None
    scale: int | None = None

    @property
    def type_name(self) -> str:
        """Hive DDL type name, e.g. ``decimal(10,2)``."""
        if self.category is HivePrimitive.DECIMAL:
            return f"decimal({self.precision},{self.scale})"
        return self.category.value


def primitive_type_info(category: HivePrimitive) -> HiveTypeInfo:
    """Return the descriptor for a non-parameterized category."""
    if category is HivePrimitive.DECIMAL:
        raise UnsupportedTypeError("Hive decimal types require precision and scale.")
    return HiveTypeInfo(category=category)


def decimal_type_info(precision: int, scale: int) -> HiveTypeInfo:
    """Return a decimal descriptor carrying the exact precision and scale.

    Raises:
        UnsupportedTypeError: If Hive cannot represent the pair.
    """
    if not 1 <= precision <= HIVE_MAX_DECIMAL_PRECISION:
        raise UnsupportedTypeError(
            f"Decimal precision {precision} is outside Hive's range "
            f"[1, {HIVE_MAX_DECIMAL_PRECISION}]."
        )
    if not 0 <= scale <= precision:
        raise UnsupportedTypeError(
            f"Decimal scale {scale} must be between 0 and the precision {precision}."
        )
    return HiveTypeInfo(category=HivePrimitive.DECIMAL, precision=precision, scale=scale)
