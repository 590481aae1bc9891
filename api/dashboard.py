"""
Dashboard admin: tableau des œuvres et gestion du contenu (œuvres, bio,
photo de l'artiste, CV). Toutes les routes exigent la session admin.
"""
from fastapi import APIRouter, Depends, HTTPException, Query
from typing import Optional
import logging

from api.artworks import load_artworks, serialize_artwork
from api.auth_admin import require_admin_auth
from app.crud import artworks as artworks_crud
from app.crud import bio as bio_crud
from app.crud import site_assets as site_assets_crud
from app.models.artwork import Artwork, ArtworkInDB
from app.models.bio import BioInDB, BioUpdate
from app.models.catalog import AdminTableView, SortDirection, SortField
from app.models.site_asset import CVUpdate, SiteAssetInDB, SiteAssetKind, SiteAssetUpdate
from app.services.admin_table import AdminTableState, derive_view
from app.utils.string_utils import decode_category_param

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(require_admin_auth)])


def serialize_document(raw: dict) -> dict:
    return {**raw, "_id": str(raw["_id"])}


# === Œuvres ===

@router.get("/artworks", response_model=AdminTableView)
def list_admin_artworks(
    search: str = Query(""),
    medium: Optional[str] = Query(None),
    year: Optional[int] = Query(None),
    sort: SortField = Query(SortField.YEAR),
    direction: SortDirection = Query(SortDirection.DESC),
    page: int = Query(1),
):
    """
    Page du tableau admin. Le client remet page=1 à chaque changement de
    recherche ou de filtre (voir AdminTableState).
    """
    state = AdminTableState(
        search_text=search,
        category_filter=decode_category_param(medium),
        year_filter=year,
        sort_field=sort,
        sort_direction=direction,
        page=page,
    )
    return derive_view(load_artworks(), state)


@router.post("/artworks", response_model=ArtworkInDB)
def create_artwork(artwork: Artwork):
    created_id = artworks_crud.create_artwork(artwork.model_dump(mode="json"))
    created_doc = artworks_crud.get_artwork_by_id(created_id)
    if not created_doc:
        raise HTTPException(status_code=500, detail="Erreur lors de la récupération de l'œuvre créée")
    return serialize_artwork(created_doc)


@router.put("/artworks/{artwork_id}", response_model=ArtworkInDB)
def update_artwork(artwork_id: str, artwork: Artwork):
    if not artworks_crud.get_artwork_by_id(artwork_id):
        raise HTTPException(status_code=404, detail="Artwork not found")

    # 0 document modifié = aucune différence, l'œuvre est renvoyée telle quelle
    artworks_crud.update_artwork(artwork_id, artwork.model_dump(mode="json"))
    return serialize_artwork(artworks_crud.get_artwork_by_id(artwork_id))


@router.delete("/artworks/{artwork_id}")
def delete_artwork(artwork_id: str):
    if artworks_crud.delete_artwork(artwork_id) == 0:
        raise HTTPException(status_code=404, detail="Artwork not found")
    return {"deleted": True}


# === Bio ===

@router.put("/bio", response_model=BioInDB)
def update_bio(bio: BioUpdate):
    return serialize_document(bio_crud.update_bio(bio.content))


# === Photo de l'artiste et CV ===

@router.put("/headshot", response_model=SiteAssetInDB)
def set_headshot(asset: SiteAssetUpdate):
    doc = site_assets_crud.set_site_asset(SiteAssetKind.HEADSHOT, asset.url, asset.filename)
    return serialize_document(doc)


@router.delete("/headshot")
def delete_headshot():
    if site_assets_crud.delete_site_asset(SiteAssetKind.HEADSHOT) == 0:
        raise HTTPException(status_code=404, detail="Headshot not found")
    return {"deleted": True}


@router.put("/cv", response_model=SiteAssetInDB)
def set_cv(asset: CVUpdate):
    doc = site_assets_crud.set_site_asset(SiteAssetKind.CV, asset.url, asset.filename)
    return serialize_document(doc)


@router.delete("/cv")
def delete_cv():
    if site_assets_crud.delete_site_asset(SiteAssetKind.CV) == 0:
        raise HTTPException(status_code=404, detail="CV not found")
    return {"deleted": True}
