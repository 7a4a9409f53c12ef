import os

# Fondo de ciudad y mapa de la sede (pantallas de formulario y lista)
BACKGROUND_IMAGE_URL = os.getenv(
    "BACKGROUND_IMAGE_URL",
    "https://images.unsplash.com/photo-1480714378408-67cf0d13bc1b?q=80&w=2070&auto=format&fit=crop",
)
MAP_EMBED_URL = os.getenv(
    "MAP_EMBED_URL",
    "https://maps.google.com/maps?width=100%25&height=600&hl=es&q=Universidad+(Mi%20Organizacion)"
    "&t=&z=14&ie=UTF8&iwloc=B&output=embed",
)


def supabase_config() -> dict:
    return {
        "url": os.getenv("SUPABASE_URL", ""),
        "key": os.getenv("SUPABASE_KEY", os.getenv("SUPABASE_ANON_KEY", "")),
    }
