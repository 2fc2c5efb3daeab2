# app/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def parse_log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise RuntimeError(f"Invalid LOG_LEVEL {value!r}, expected one of: {', '.join(LOG_LEVELS)}")
    return level


HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
LOG_LEVEL = parse_log_level(os.getenv("LOG_LEVEL", "INFO"))
