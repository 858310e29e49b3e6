import os
from dotenv import load_dotenv

# Load environment variables only for local development
ENV_FILE_LOADED = os.path.exists('.env')
if ENV_FILE_LOADED:
    load_dotenv()

# ------------------------------------------------------------------------------
# SERVER
# ------------------------------------------------------------------------------
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", 8000))
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

# ------------------------------------------------------------------------------
# PROFILE (/me)
# ------------------------------------------------------------------------------
CAT_FACTS_API = os.getenv("CAT_FACTS_API", "https://catfact.ninja/fact")
API_TIMEOUT = float(os.getenv("API_TIMEOUT", 5.0))

USER_EMAIL = os.getenv("USER_EMAIL", "your.email@example.com")
USER_NAME = os.getenv("USER_NAME", "Your Full Name")
USER_STACK = os.getenv("USER_STACK", "Python/FastAPI")
