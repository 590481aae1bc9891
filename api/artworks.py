from fastapi import APIRouter, HTTPException, Query
from typing import List, Optional
import logging
import random

from app.crud import artworks as artworks_crud
from app.models.artwork import ArtworkInDB
from app.models.catalog import ArtworkDetail, CatalogView, CategoryLink
from app.services import catalog
from app.utils.string_utils import decode_category_param

logger = logging.getLogger(__name__)
router = APIRouter()


def serialize_artwork(raw: dict) -> ArtworkInDB:
    """
    Convertit le document MongoDB (ObjectId) en modèle ArtworkInDB.
    """
    return ArtworkInDB(**{**raw, "_id": str(raw["_id"])})


def load_artworks() -> List[ArtworkInDB]:
    """Instantané complet du catalogue, chargé avant tout calcul de vue"""
    try:
        raws = artworks_crud.get_all_artworks()
    except Exception as e:
        logger.error(f"Failed to fetch artworks: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch artworks")
    return [serialize_artwork(raw) for raw in raws]


@router.get("/", response_model=CatalogView)
def list_artworks(medium: Optional[str] = Query(None)):
    """
    Grille des œuvres, éventuellement filtrée par catégorie (?medium=Work+on+Paper).
    Une catégorie inconnue affiche toutes les œuvres.
    """
    return catalog.build_grid(load_artworks(), decode_category_param(medium))


@router.get("/categories", response_model=List[CategoryLink])
def list_categories():
    return catalog.category_links()


@router.get("/hero", response_model=Optional[ArtworkInDB])
def get_hero_artwork():
    """
    Œuvre tirée au hasard pour la page d'accueil (None si le catalogue est vide).
    """
    try:
        candidates = artworks_crud.get_hero_candidates()
    except Exception as e:
        logger.error(f"Failed to fetch hero artwork: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch artworks")
    if not candidates:
        return None
    return serialize_artwork(random.choice(candidates))


@router.get("/{artwork_id}", response_model=ArtworkDetail)
def get_artwork(artwork_id: str, medium: Optional[str] = Query(None)):
    try:
        return catalog.build_detail(load_artworks(), artwork_id, decode_category_param(medium))
    except catalog.ArtworkNotFoundError:
        raise HTTPException(status_code=404, detail="Artwork not found")
