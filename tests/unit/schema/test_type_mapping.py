"""Unit tests for Kudu to Hive type conversion."""

from __future__ import annotations

import pytest

from core.errors import UnsupportedTypeError
from schema.hive_types import HivePrimitive, HiveTypeInfo
from schema.kudu_types import ColumnTypeAttributes, KuduColumn, KuduType
from schema.type_mapping import to_hive_columns, to_hive_type

_EXPECTED_TYPE_NAMES = {
    KuduType.BOOL: "boolean",
    KuduType.INT8: "tinyint",
    KuduType.INT16: "smallint",
    KuduType.INT32: "int",
    KuduType.INT64: "bigint",
    KuduType.UNIXTIME_MICROS: "timestamp",
    KuduType.FLOAT: "float",
    KuduType.DOUBLE: "double",
    KuduType.STRING: "string",
    KuduType.BINARY: "binary",
}


@pytest.mark.parametrize(("kudu_type", "type_name"), sorted(_EXPECTED_TYPE_NAMES.items(), key=lambda item: item[0].name))
def test_primitive_types_map_to_hive(kudu_type: KuduType, type_name: str) -> None:
    """Each non-decimal Kudu type should map to one stable Hive type."""
    first = to_hive_type(kudu_type)
    second = to_hive_type(kudu_type)

    assert first == second and first.type_name == type_name


def test_every_kudu_type_is_mapped() -> None:
    """The mapping should cover all eleven Kudu types."""
    attributes = ColumnTypeAttributes(precision=5, scale=1)

    mapped = {kudu_type: to_hive_type(kudu_type, attributes) for kudu_type in KuduType}

    assert len(mapped) == 11


def test_decimal_keeps_exact_precision_and_scale() -> None:
    """DECIMAL(10,2) should map to a Hive decimal with the same attributes."""
    hive_type = to_hive_type(KuduType.DECIMAL, ColumnTypeAttributes(precision=10, scale=2))

    assert hive_type == HiveTypeInfo(category=HivePrimitive.DECIMAL, precision=10, scale=2)
    assert hive_type.type_name == "decimal(10,2)"


def test_decimal_without_attributes_fails() -> None:
    """DECIMAL without precision and scale cannot be represented."""
    with pytest.raises(UnsupportedTypeError):
        to_hive_type(KuduType.DECIMAL)


def test_decimal_out_of_range_fails() -> None:
    """Precision above Hive's maximum should fail rather than clamp."""
    with pytest.raises(UnsupportedTypeError):
        to_hive_type(KuduType.DECIMAL, ColumnTypeAttributes(precision=39, scale=0))


def test_unknown_tag_names_the_tag() -> None:
    """Unrecognized tags should fail with the tag in the message."""
    with pytest.raises(UnsupportedTypeError, match="LIST"):
        to_hive_type("LIST")


def test_tag_names_are_case_insensitive() -> None:
    """String tags should resolve regardless of case."""
    assert to_hive_type("int32").category is HivePrimitive.INT


def test_to_hive_columns_preserves_order() -> None:
    """Schema mapping should keep column order."""
    columns = [
        KuduColumn(name="id", type=KuduType.INT64),
        KuduColumn(name="amount", type="DECIMAL", attributes=ColumnTypeAttributes(18, 4)),
        KuduColumn(name="ts", type=KuduType.UNIXTIME_MICROS),
    ]

    hive_columns = to_hive_columns(columns)

    assert [(name, info.type_name) for name, info in hive_columns] == [
        ("id", "bigint"),
        ("amount", "decimal(18,4)"),
        ("ts", "timestamp"),
    ]
