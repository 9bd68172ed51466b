"""Central Configuration for HealthCalc Hub."""
import os
from pathlib import Path
from dotenv import load_dotenv

# Base Directory (Root of the project)
BASE_DIR = Path(__file__).resolve().parent.parent

# Load Environment Variables
load_dotenv(BASE_DIR / ".env")

# LLM Settings
GOOGLE_API_KEY = os.getenv("GOOGLE_API_KEY")
GEMINI_MODEL_NAME = os.getenv("GEMINI_MODEL_NAME", "gemini-2.0-flash")
TIP_REQUEST_TIMEOUT_SECONDS = float(os.getenv("TIP_REQUEST_TIMEOUT_SECONDS", "30"))

# Logging
LOG_LEVEL = os.getenv("HEALTHCALC_LOG_LEVEL", "INFO").upper()

# Tip Settings (how many tips we ask the model for)
MIN_TIPS = 3
MAX_TIPS = 5

# Input Validation
AGE_MIN = 1
AGE_MAX = 120

# Gemini safety filters for tip generation; dangerous content (medication,
# extreme diets) is blocked from low probability up.
GEMINI_SAFETY_SETTINGS = [
    {"category": "HARM_CATEGORY_HARASSMENT", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
    {"category": "HARM_CATEGORY_HATE_SPEECH", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
    {"category": "HARM_CATEGORY_SEXUALLY_EXPLICIT", "threshold": "BLOCK_MEDIUM_AND_ABOVE"},
    {"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "threshold": "BLOCK_LOW_AND_ABOVE"},
]
