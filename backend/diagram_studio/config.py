import os
from dotenv import load_dotenv

# Load .env from project root
load_dotenv()

STRENGTH_MIN = int(os.getenv("STRENGTH_MIN", "25"))
DEFAULT_VARIATIONS = int(os.getenv("DEFAULT_VARIATIONS", "2"))
DEFAULT_INTENT_COUNT = int(os.getenv("DEFAULT_INTENT_COUNT", "4"))
MAX_DIAGRAM_COUNT = int(os.getenv("MAX_DIAGRAM_COUNT", "4"))
PROMPT_MAX_CHARS = int(os.getenv("PROMPT_MAX_CHARS", "500"))
DEFAULT_LANGUAGE = os.getenv("DEFAULT_LANGUAGE", "en")

CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if origin.strip()
]
