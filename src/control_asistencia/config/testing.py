from .common import BACKGROUND_IMAGE_URL, MAP_EMBED_URL

SECRET_KEY = "test-secret"

SUPABASE_CONFIG = {
    "url": "http://localhost:54321",
    "key": "test-anon-key",
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
