"""Kudu client construction layer.

This module builds connected Kudu client handles for Hive jobs and
primes them with the current principal's delegation token.
"""
