"""Constants and defaults.

Note: Keep constants here to avoid magic strings spread across code.
"""

STORAGE_VERSION = "salary-sheet:v1"

# Explicitly blank value, as stored for an empty form input.
EMPTY = ""

KV_TABLE = "kv_store"
