"""Job preparation layer.

This module makes sure the code a distributed job needs is shipped
to the cluster alongside it.
"""
