"""Public SDK surface for the Hive/Kudu bridge.

This module provides a stable import path for storage-handler code.
It re-exports the bridge operations and their typed models.
"""

from __future__ import annotations

from conf.job_conf import JobConf
from conf.master_addresses import get_master_addresses
from conf.overlay import HiveTable, create_overlayed_conf, get_table_properties
from core.config import BridgeConfig
from core.errors import (
    BridgeError,
    ConfigurationError,
    DependencyResolutionError,
    IOFailure,
    UnsupportedTypeError,
)
from jobs.dependency_jars import add_dependency_jars
from schema.hive_types import HivePrimitive, HiveTypeInfo
from schema.kudu_types import ColumnTypeAttributes, KuduColumn, KuduType
from schema.type_mapping import to_hive_columns, to_hive_type
from security.credential_import import import_credentials
from security.credentials import Credentials, SecurityToken
from security.providers import StaticCredentialProvider, TokenFileCredentialProvider
from storage.kudu_client import get_kudu_client

__all__ = [
    "BridgeConfig",
    "BridgeError",
    "ColumnTypeAttributes",
    "ConfigurationError",
    "Credentials",
    "DependencyResolutionError",
    "HivePrimitive",
    "HiveTable",
    "HiveTypeInfo",
    "IOFailure",
    "JobConf",
    "KuduColumn",
    "KuduType",
    "SecurityToken",
    "StaticCredentialProvider",
    "TokenFileCredentialProvider",
    "UnsupportedTypeError",
    "add_dependency_jars",
    "create_overlayed_conf",
    "get_kudu_client",
    "get_master_addresses",
    "get_table_properties",
    "import_credentials",
    "to_hive_columns",
    "to_hive_type",
]
