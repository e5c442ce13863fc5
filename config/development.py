import os

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sql")
STORAGE_KEY = os.getenv("SALARY_STORAGE_KEY", "salary-sheet:v1")

DB_CONFIG = {
    "url": os.getenv("DATABASE_URL", "sqlite:///salary_sheet.db"),
    "echo": bool(int(os.getenv("SQL_ECHO", "0"))),
}

DEBUG = True

# If enabled, schema.sql is applied on startup (idempotent: CREATE TABLE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))
