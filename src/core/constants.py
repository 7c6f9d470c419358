"""Core constants used across bridge modules.

This module centralizes configuration keys and protocol identifiers.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

KUDU_MASTER_ADDRS_KEY = "kudu.master_addresses"
KUDU_MASTER_ADDRS_KEY_DEFAULT = "hive.kudu.master.addresses.default"
KUDU_TOKEN_KIND = "kudu-authn-data"
SHIP_JARS_KEY = "tmpjars"
TOKEN_FILE_ENV_VAR = "HADOOP_TOKEN_FILE_LOCATION"
MASTER_ADDRESSES_DEFAULT_ENV_VAR = "HIVE_KUDU_MASTER_ADDRESSES_DEFAULT"
DEFAULT_KUDU_MASTER_PORT = 7051
TOKEN_STORAGE_MAGIC = b"HDTS"
TOKEN_STORAGE_WRITABLE_VERSION = 0
TOKEN_STORAGE_PROTOBUF_VERSION = 1
HIVE_MAX_DECIMAL_PRECISION = 38
