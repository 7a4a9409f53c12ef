from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import Container, build_container
from .fichajes.controller import register as register_fichajes
from .registros.controller import register as register_registros

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    supabase_config = getattr(settings, "SUPABASE_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["BACKGROUND_IMAGE_URL"] = getattr(settings, "BACKGROUND_IMAGE_URL", "")
    app.config["MAP_EMBED_URL"] = getattr(settings, "MAP_EMBED_URL", "")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    if container is None:
        if not supabase_config.get("url"):
            logger.warning("SUPABASE_URL is not set; backend calls will fail until it is configured")
        container = build_container(supabase_config=supabase_config)

    if app.config["DEBUG"]:
        supabase_url = container.conn.url if container.conn else None
        logger.info("[control-asistencia] settings=%s supabase=%s", settings_module, supabase_url or "-")

    register_registros(app, container)
    register_fichajes(app, container)

    return app
