import os

STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "sql")
STORAGE_KEY = os.getenv("SALARY_STORAGE_KEY", "salary-sheet:v1")

DB_CONFIG = {
    "url": os.getenv("DATABASE_URL", "sqlite:///salary_sheet.db"),
}

DEBUG = False

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
