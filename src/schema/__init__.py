"""Schema bridging layer.

This module converts Kudu column types into Hive type descriptors.
"""
