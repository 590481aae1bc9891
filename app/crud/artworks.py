from typing import List, Optional
from datetime import datetime
from bson.objectid import ObjectId
from app.database import get_collection, ARTWORKS
import logging

logger = logging.getLogger(__name__)

HERO_SAMPLE_SIZE = 100


def get_artworks_collection():
    return get_collection(ARTWORKS)


def get_all_artworks() -> List[dict]:
    """
    Renvoie la liste de toutes les œuvres (ordre d'insertion).
    """
    return list(get_artworks_collection().find())


def get_hero_candidates() -> List[dict]:
    """
    Renvoie au plus HERO_SAMPLE_SIZE œuvres parmi lesquelles la page d'accueil
    en tire une au hasard.
    """
    return list(get_artworks_collection().find().limit(HERO_SAMPLE_SIZE))


def get_artwork_by_id(artwork_id: str) -> Optional[dict]:
    """
    Renvoie une seule œuvre correspondant à l'_id MongoDB.
    """
    try:
        oid = ObjectId(artwork_id)
    except Exception:
        return None
    return get_artworks_collection().find_one({"_id": oid})


def create_artwork(data: dict) -> str:
    """
    Insère une nouvelle œuvre.
    Retourne l'_id de la nouvelle entrée sous forme de chaîne.
    """
    data = dict(data)
    data.pop("_id", None)
    now = datetime.utcnow()
    data["created_at"] = now
    data["updated_at"] = now
    result = get_artworks_collection().insert_one(data)
    logger.info(f"Artwork created: {result.inserted_id} ({data.get('title')})")
    return str(result.inserted_id)


def update_artwork(artwork_id: str, update_data: dict) -> int:
    """
    Met à jour l'œuvre au _id donné avec les champs de update_data.
    Retourne le nombre de documents modifiés (0 ou 1).
    """
    try:
        oid = ObjectId(artwork_id)
    except Exception:
        return 0

    update_data = dict(update_data)
    for key in ("_id", "created_at", "updated_at"):
        update_data.pop(key, None)

    collection = get_artworks_collection()
    existing = collection.find_one({"_id": oid})
    if not existing:
        return 0

    # Si aucun champ ne change, updated_at n'est pas touché
    changed_fields = [key for key, value in update_data.items() if existing.get(key) != value]
    if not changed_fields:
        return 0

    update_data["updated_at"] = datetime.utcnow()
    result = collection.update_one({"_id": oid}, {"$set": update_data})
    logger.info(f"Artwork {artwork_id} updated: {', '.join(changed_fields)}")
    return result.modified_count


def delete_artwork(artwork_id: str) -> int:
    """
    Supprime l'œuvre au _id donné.
    Retourne le nombre de documents supprimés (0 ou 1).
    """
    try:
        oid = ObjectId(artwork_id)
    except Exception:
        return 0
    result = get_artworks_collection().delete_one({"_id": oid})
    if result.deleted_count:
        logger.info(f"Artwork deleted: {artwork_id}")
    return result.deleted_count
