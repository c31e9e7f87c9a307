"""Environment-driven settings for the FilterLab API."""

import os

from dotenv import load_dotenv

load_dotenv()

FRONTEND_URL = os.getenv("FRONTEND_URL")
LOG_LEVEL = os.getenv("FILTERLAB_LOG_LEVEL", "INFO").upper()
MAX_POINTS = int(os.getenv("FILTERLAB_MAX_POINTS", "5000"))
