import os
from dotenv import load_dotenv

if os.getenv("ENVIRONMENT") == "development":
    load_dotenv()


SECRET_KEY = os.getenv("SECRET_KEY")
if not SECRET_KEY:
    raise RuntimeError("SECRET_KEY is not set")

ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_HOURS = int(os.getenv("ACCESS_TOKEN_EXPIRE_HOURS", "3"))

SQLALCHEMY_DATABASE_URL = os.getenv("DB_URL_STRING", "sqlite:///./attendance.db")

UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
PHOTO_BASE_URL = os.getenv("PHOTO_BASE_URL", "/uploads").rstrip("/")
MAX_PHOTO_SIZE = int(os.getenv("MAX_PHOTO_SIZE", str(2 * 1024 * 1024)))

ALLOWED_ORIGINS = [
    origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",")
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
