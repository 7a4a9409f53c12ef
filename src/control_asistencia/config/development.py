import os

from .common import BACKGROUND_IMAGE_URL, MAP_EMBED_URL, supabase_config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

SUPABASE_CONFIG = supabase_config()

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
