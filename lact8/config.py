import os
from pathlib import Path
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()

# Base directory
BASE_DIR = Path(__file__).parent.parent

class Config:
    # --- Application Settings ---
    APP_TITLE = os.getenv("APP_TITLE", "Lact8")
    APP_ICON = os.getenv("APP_ICON", "🩸")
    APP_LAYOUT = os.getenv("APP_LAYOUT", "wide")
    CSS_FILE = os.getenv("CSS_FILE", str(BASE_DIR / "style.css"))
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # --- Step Table ---
    INITIAL_EMPTY_STEPS = int(os.getenv("INITIAL_EMPTY_STEPS", "5"))

    # Editor input limits (entry-time hints only, detection validates on its own)
    MAX_HEART_RATE = int(os.getenv("MAX_HEART_RATE", "250"))
    MAX_LACTATE = float(os.getenv("MAX_LACTATE", "30.0"))

    # --- UI Colors ---
    COLOR_LACTATE = os.getenv("COLOR_LACTATE", '#19d3f3')
    COLOR_HR = os.getenv("COLOR_HR", '#ef553b')
    COLOR_LT1 = os.getenv("COLOR_LT1", '#ff6384')
    COLOR_LT2 = os.getenv("COLOR_LT2", '#ffce56')
    COLOR_CHORD = os.getenv("COLOR_CHORD", '#8b949e')
