import os

# --- MongoDB ---
MONGO_URI = os.environ.get("MONGO_URI", "mongodb://db-games:27017/")
MONGO_DB_NAME = os.environ.get("MONGO_DB_NAME", "games_db")
GAMES_COLLECTION = os.environ.get("GAMES_COLLECTION", "games")
MONGO_TIMEOUT_MS = int(os.environ.get("MONGO_TIMEOUT_MS", "5000"))

# --- HTTP ---
GAMES_URL_PREFIX = os.environ.get("GAMES_URL_PREFIX", "")
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "5000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# --- Swagger ---
SWAGGER_URL = os.environ.get("SWAGGER_URL", "/apidocs")
API_URL = os.environ.get("API_URL", "/static/openapi.yml")
