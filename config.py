import os

DATABASE_URL = os.getenv("DATABASE_URL") or os.getenv("POSTGRES_URL")

# libpq sslmode; "require" encrypts without checking the server certificate,
# "verify-full" checks it. Unset keeps the libpq default.
DB_SSLMODE = os.getenv("DB_SSLMODE") or None

SETTINGS = dict(
    SECRET_KEY=os.getenv("SECRET_KEY", "dev"),
    DATABASE_URL=DATABASE_URL,
    DB_SSLMODE=DB_SSLMODE,
    FRONTEND_URL=os.getenv("FRONTEND_URL", "http://localhost:3000"),
    LOG_LEVEL=os.getenv("LOG_LEVEL", "INFO"),
)
