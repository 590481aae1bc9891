"""
Fichiers uniques du site (photo de l'artiste, CV).

Le fichier lui-même est sur le stockage externe; la base ne conserve que son
URL publique et son nom d'origine. Un document par type de fichier.
"""
from typing import Optional
from datetime import datetime
from app.database import get_collection, SITE_ASSETS
from app.models.site_asset import SiteAssetKind
import logging

logger = logging.getLogger(__name__)


def get_site_asset(kind: SiteAssetKind) -> Optional[dict]:
    return get_collection(SITE_ASSETS).find_one({"kind": kind.value})


def set_site_asset(kind: SiteAssetKind, url: str, filename: Optional[str] = None) -> dict:
    """
    Enregistre l'URL du fichier (remplace la précédente).
    Retourne le document à jour.
    """
    collection = get_collection(SITE_ASSETS)
    collection.update_one(
        {"kind": kind.value},
        {"$set": {"url": url, "filename": filename, "updated_at": datetime.utcnow()}},
        upsert=True,
    )
    logger.info(f"Site asset '{kind.value}' set to {url}")
    return collection.find_one({"kind": kind.value})


def delete_site_asset(kind: SiteAssetKind) -> int:
    """
    Supprime la référence au fichier.
    Retourne le nombre de documents supprimés (0 ou 1).
    """
    result = get_collection(SITE_ASSETS).delete_one({"kind": kind.value})
    if result.deleted_count:
        logger.info(f"Site asset '{kind.value}' removed")
    return result.deleted_count
