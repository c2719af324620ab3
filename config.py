import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./cmms.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    SESSION_TTL_MINUTES = int(data.get("SESSION_TTL_MINUTES", 60))
    FRONTEND_URL = data.get("FRONTEND_URL", "http://localhost:3000")
    # Primary invitation channel (Resend HTTP API)
    RESEND_API_KEY = data.get("RESEND_API_KEY", "")
    RESEND_API_URL = data.get("RESEND_API_URL", "https://api.resend.com/emails")
    RESEND_FROM = data.get("RESEND_FROM", "CMMS Admin <onboarding@resend.dev>")
    # Fallback channel (SMTP)
    SMTP_HOST = data.get("SMTP_HOST", "")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USER = data.get("SMTP_USER", "")
    SMTP_PASS = data.get("SMTP_PASS", "")
    SMTP_FROM = data.get("SMTP_FROM", "CMMS Admin <no-reply@cmms.local>")
    SMTP_STARTTLS = bool(data.get("SMTP_STARTTLS", True))
    EXTERNAL_CALL_TIMEOUT_SECONDS = float(data.get("EXTERNAL_CALL_TIMEOUT_SECONDS", 10))
