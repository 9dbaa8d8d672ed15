# idea_roulette/config.py

import os
from dotenv import load_dotenv

# Load .env file if present (local development)
load_dotenv()

PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

OLLAMA_URL = os.getenv("OLLAMA_URL", "http://localhost:11434/api/generate")
OLLAMA_MODEL = os.getenv("OLLAMA_MODEL", "llama3")
DATA_DIR = os.getenv("IDEA_DATA_DIR", os.path.join(PACKAGE_DIR, "data"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

try:
    OLLAMA_TIMEOUT = float(os.getenv("OLLAMA_TIMEOUT", "120"))
except ValueError:
    raise ValueError("OLLAMA_TIMEOUT must be a number of seconds.") from None
