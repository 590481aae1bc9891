from fastapi import APIRouter, HTTPException
import logging

from app import config
from app.crud import bio as bio_crud
from app.crud import site_assets as site_assets_crud
from app.models.site_asset import AboutPage, SiteAssetKind

logger = logging.getLogger(__name__)
router = APIRouter()


def instagram_url(handle: str) -> str:
    """'@marcella.vlahos' -> 'https://instagram.com/marcella.vlahos'"""
    return f"https://instagram.com/{handle.lstrip('@')}"


@router.get("/", response_model=AboutPage)
def get_about():
    """
    Page "About": bio (texte par défaut si elle n'a jamais été saisie),
    photo, CV et coordonnées de l'artiste.
    """
    try:
        bio = bio_crud.get_bio()
        headshot = site_assets_crud.get_site_asset(SiteAssetKind.HEADSHOT)
        cv = site_assets_crud.get_site_asset(SiteAssetKind.CV)
    except Exception as e:
        logger.error(f"Failed to fetch about page content: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch bio")

    return AboutPage(
        artist_name=config.ARTIST_NAME,
        bio=bio["content"] if bio else config.ARTIST_BIO_FALLBACK,
        bio_updated_at=bio.get("updated_at") if bio else None,
        headshot_url=headshot["url"] if headshot else None,
        cv_url=cv["url"] if cv else None,
        email=config.ARTIST_EMAIL or None,
        instagram=config.ARTIST_INSTAGRAM or None,
        instagram_url=instagram_url(config.ARTIST_INSTAGRAM) if config.ARTIST_INSTAGRAM else None,
        website=config.ARTIST_WEBSITE or None,
    )
