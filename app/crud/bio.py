from typing import Optional
from datetime import datetime
from app.database import get_collection, BIO
import logging

logger = logging.getLogger(__name__)


def get_bio() -> Optional[dict]:
    """
    Renvoie la biographie (document unique) ou None si elle n'a jamais été saisie.
    """
    return get_collection(BIO).find_one({})


def update_bio(content: str) -> dict:
    """
    Remplace le contenu de la biographie (crée le document s'il n'existe pas).
    Retourne le document à jour.
    """
    collection = get_collection(BIO)
    collection.update_one(
        {},
        {"$set": {"content": content, "updated_at": datetime.utcnow()}},
        upsert=True,
    )
    logger.info("Bio updated")
    return collection.find_one({})
