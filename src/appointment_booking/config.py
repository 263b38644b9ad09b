import os

from dotenv import load_dotenv

load_dotenv()


def _as_bool(value):
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def build_database_uri():
    # DATABASE_URL wins over the individual DB_* settings
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    return (
        f"mysql+pymysql://{os.getenv('DB_USER', 'root')}:{os.getenv('DB_PASSWORD', 'password')}"
        f"@{os.getenv('DB_HOST', '127.0.0.1')}:{os.getenv('DB_PORT', '3306')}"
        f"/{os.getenv('DB_NAME', 'appointment_booking')}"
    )


def load_config():
    """Read the application settings from the environment."""
    config = {
        "SECRET_KEY": os.getenv("SECRET_KEY", "dev-secret-key"),
        "SQLALCHEMY_DATABASE_URI": build_database_uri(),
        "SQLALCHEMY_TRACK_MODIFICATIONS": False,
        "PORT": int(os.getenv("PORT", "3000")),
        "DB_POOL_SIZE": int(os.getenv("DB_POOL_SIZE", "10")),
        "SEED_ADMIN": _as_bool(os.getenv("SEED_ADMIN", "true")),
        "ADMIN_EMAIL": "admin@appointment.com",
        "ADMIN_PASSWORD": os.getenv("ADMIN_PASSWORD", "admin123"),
        "LOG_LEVEL": os.getenv("LOG_LEVEL", "INFO").upper(),
    }
    return config
