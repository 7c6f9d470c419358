"""Merge job configuration with Hive table properties."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from conf.job_conf import JobConf


@dataclass(frozen=True)
class HiveTable:
    """Subset of a metastore table record used by the bridge.

    Attributes:
        table_name: Qualified Hive table name.
        parameters: Table-level properties.
        serde_parameters: Serde properties from the storage descriptor,
            None when the table has no serde info parameters.
    """

    table_name: str
    parameters: Mapping[str, str] = field(default_factory=dict)
    serde_parameters: Mapping[str, str] | None = None


def create_overlayed_conf(conf: JobConf, table_props: Mapping[str, str] | None) -> JobConf:
    """Return the union of a configuration and table properties.

    Table properties take precedence on key collision. The input
    configuration is never mutated.

    Args:
        conf: Base job configuration.
        table_props: Table properties, possibly None or empty.

    Returns:
        A new configuration instance.
    """
    new_conf = conf.copy()
    for key, value in (table_props or {}).items():
        new_conf[key] = value
    return new_conf


def get_table_properties(table: HiveTable) -> dict[str, str]:
    """Combine table properties with serde properties, if any."""
    table_props = dict(table.parameters)
    if table.serde_parameters is not None:
        table_props.update(table.serde_parameters)
    return table_props
