"""Security token layer.

This module reads ambient Hadoop delegation tokens and imports the
matching Kudu token into freshly built clients.
"""
