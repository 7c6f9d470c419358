"""Kudu to Hive type conversion.

This module maps each Kudu column type onto exactly one Hive primitive
type descriptor. Unknown tags fail instead of being coerced.
"""

from __future__ import annotations

from typing import Sequence

from core.errors import UnsupportedTypeError
from schema.hive_types import HivePrimitive, HiveTypeInfo, decimal_type_info, primitive_type_info
from schema.kudu_types import ColumnTypeAttributes, KuduColumn, KuduType

_PRIMITIVE_TYPE_MAP: dict[KuduType, HivePrimitive] = {
    KuduType.BOOL: HivePrimitive.BOOLEAN,
    KuduType.INT8: HivePrimitive.TINYINT,
    KuduType.INT16: HivePrimitive.SMALLINT,
    KuduType.INT32: HivePrimitive.INT,
    KuduType.INT64: HivePrimitive.BIGINT,
    KuduType.UNIXTIME_MICROS: HivePrimitive.TIMESTAMP,
    KuduType.FLOAT: HivePrimitive.FLOAT,
    KuduType.DOUBLE: HivePrimitive.DOUBLE,
    KuduType.STRING: HivePrimitive.STRING,
    KuduType.BINARY: HivePrimitive.BINARY,
}


def to_hive_type(
    kudu_type: KuduType | str,
    attributes: ColumnTypeAttributes | None = None,
) -> HiveTypeInfo:
    """Convert a Kudu column type to the corresponding Hive type.

    Args:
        kudu_type: Kudu type, or its tag name in any case.
        attributes: Precision and scale, required for DECIMAL.

    Returns:
        Hive primitive type descriptor.

    Raises:
        UnsupportedTypeError: If the tag is unknown or decimal
            attributes are missing.
    """
    resolved_type = parse_kudu_type(kudu_type)
    if resolved_type is KuduType.DECIMAL:
        if attributes is None:
            raise UnsupportedTypeError(
                "Unsupported column type: DECIMAL without precision and scale attributes."
            )
        return decimal_type_info(attributes.precision, attributes.scale)
    return primitive_type_info(_PRIMITIVE_TYPE_MAP[resolved_type])


def parse_kudu_type(kudu_type: KuduType | str) -> KuduType:
    """Resolve a Kudu type tag.

    Raises:
        UnsupportedTypeError: If the tag is not a supported Kudu type.
    """
    if isinstance(kudu_type, KuduType):
        return kudu_type
    try:
        return KuduType[str(kudu_type).upper()]
    except KeyError as error:
        raise UnsupportedTypeError(f"Unsupported column type: {kudu_type}") from error


def to_hive_columns(columns: Sequence[KuduColumn]) -> list[tuple[str, HiveTypeInfo]]:
    """Map a Kudu schema onto Hive column descriptors in schema order."""
    return [(column.name, to_hive_type(column.type, column.attributes)) for column in columns]
