import os

from .common import BACKGROUND_IMAGE_URL, MAP_EMBED_URL, supabase_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

SUPABASE_CONFIG = supabase_config()

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
