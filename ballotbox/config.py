# ballotbox/config.py
# Central place for settings and constants
import os
from dotenv import load_dotenv

load_dotenv()

# --- Security & JWT Config ---
# In production, set SECRET_KEY in the environment
SECRET_KEY = os.environ.get("SECRET_KEY", "a_very_secret_key_for_dev_only")
ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.environ.get("ACCESS_TOKEN_EXPIRE_MINUTES", "60"))

# --- Ballot Config ---
# Identity allowed to add candidates and end voting, fixed for the process lifetime
BALLOT_ADMINISTRATOR = os.environ.get("BALLOT_ADMINISTRATOR", "admin")

# --- App Config ---
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get(
        "CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
    ).split(",")
    if origin.strip()
]
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
