"""Salary Sheet package.

Per-employee monthly salary history kept in a local key-value store, with
month resolution for prefilling new entries.
"""
