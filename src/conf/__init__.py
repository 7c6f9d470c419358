"""Job configuration layer.

This module merges job settings with Hive table properties and
resolves the Kudu master addresses a client connects to.
"""
