from pymongo import MongoClient
import logging

from app.config import MONGO_URI, MONGO_DB

logger = logging.getLogger(__name__)

ARTWORKS = "artworks"
BIO = "bio"
SITE_ASSETS = "site_assets"

_client = None


def get_client() -> MongoClient:
    """
    Crée le client MongoDB à la première utilisation.
    La connexion réelle est établie par pymongo lors de la première requête.
    """
    global _client
    if _client is None:
        _client = MongoClient(MONGO_URI, serverSelectionTimeoutMS=5000)
        logger.info(f"MongoDB client created for database '{MONGO_DB}'")
    return _client


def get_database():
    """Retourne l'instance de la base de données MongoDB"""
    return get_client()[MONGO_DB]


def get_collection(name: str):
    """Retourne une collection de la base"""
    return get_database()[name]
