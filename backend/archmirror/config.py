import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

CANVAS_WIDTH = float(os.getenv("CANVAS_WIDTH", "900"))
CANVAS_HEIGHT = float(os.getenv("CANVAS_HEIGHT", "560"))

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

APP_VERSION = "0.1.0"
