"""
Configuration de l'application, lue depuis les variables d'environnement.

Toutes les valeurs propres à l'artiste sont ici pour pouvoir réutiliser le
portfolio pour un autre artiste sans toucher au code.
"""
import os
from dotenv import load_dotenv

load_dotenv()

# Base de données
MONGO_URI = os.getenv("MONGO_URI", "mongodb://localhost:27017/")
MONGO_DB = os.getenv("MONGO_DB", "portfolio")

# CORS
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

# Admin
ADMIN_USERNAME = os.getenv("ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin123")
SECRET_KEY = os.getenv("SECRET_KEY", "your-secret-key-change-this-in-production")
SESSION_DURATION_HOURS = int(os.getenv("SESSION_DURATION_HOURS", "2"))
ADMIN_PAGE_SIZE = int(os.getenv("ADMIN_PAGE_SIZE", "10"))

# Artiste
ARTIST_NAME = os.getenv("ARTIST_NAME", "Marcella Vlahos")
ARTIST_BIO_FALLBACK = os.getenv(
    "ARTIST_BIO_FALLBACK",
    "Contemporary artist working in painting, works on paper, and sculpture.",
)
ARTIST_EMAIL = os.getenv("ARTIST_EMAIL", "marcellavlahos@gmail.com")
ARTIST_INSTAGRAM = os.getenv("ARTIST_INSTAGRAM", "@marcella.vlahos")
ARTIST_WEBSITE = os.getenv("ARTIST_WEBSITE", "https://marcellavlahos.com")


def get_allowed_origins() -> list:
    """Liste des origines CORS (FRONTEND_URL peut contenir plusieurs URLs séparées par des virgules)"""
    return [origin.strip() for origin in FRONTEND_URL.split(",") if origin.strip()]


def build_page_title(title: str = None) -> str:
    """Titre de page: 'Titre | Nom de l'artiste', ou le nom seul"""
    if title:
        return f"{title} | {ARTIST_NAME}"
    return ARTIST_NAME
