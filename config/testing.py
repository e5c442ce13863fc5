import os

STORAGE_BACKEND = "memory"
STORAGE_KEY = os.getenv("SALARY_STORAGE_KEY", "salary-sheet:test")

DB_CONFIG = {
    "url": os.getenv("DATABASE_URL", "sqlite://"),
}

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
