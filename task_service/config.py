from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from repo root and package/.env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")
load_dotenv(Path(__file__).resolve().parent / ".env")

DB_PATH = os.getenv("TASKS_DB_PATH", "db.json")
HOST = os.getenv("HOST", "127.0.0.1")
PORT = int(os.getenv("PORT", "8080"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Localhost origins, plus an empty Origin header.
CORS_ORIGIN_REGEX = os.getenv("CORS_ORIGIN_REGEX", r"^(http://localhost.*)?$")
