import os
from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Database connection string
# postgresql://postgres:[PASSWORD]@[HOST]:[PORT]/postgres or sqlite+aiosqlite:///./dev.db
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite+aiosqlite:///./dev.db")

# Connection pool configuration (ignored for SQLite)
DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "5"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "10"))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))
DB_POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", "3600"))

# Frontend origin allow-list
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

BACKEND_PORT = int(os.getenv("BACKEND_PORT", "3001"))

# Used by the API client
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:3001/api")
