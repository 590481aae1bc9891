from pydantic import BaseModel
from typing import Optional, List
from enum import Enum
from .artwork import ArtworkInDB, ArtworkCategory


class Breadcrumb(BaseModel):
    label: str
    href: str


class CategoryLink(BaseModel):
    value: ArtworkCategory
    label: str
    href: str


class CatalogView(BaseModel):
    """Grille publique des œuvres"""
    artworks: List[ArtworkInDB]
    display_count: int
    category: Optional[ArtworkCategory] = None
    label: Optional[str] = None


class CatalogPosition(BaseModel):
    position: int  # commence à 1
    total: int
    prev_id: Optional[str] = None
    next_id: Optional[str] = None


class ArtworkDetail(CatalogPosition):
    """Page de détail d'une œuvre avec la navigation précédent / suivant"""
    artwork: ArtworkInDB
    dimensions: Optional[str] = None
    breadcrumb: Optional[Breadcrumb] = None
    page_title: str


class SortField(str, Enum):
    YEAR = "year"
    CREATED_AT = "created_at"
    TITLE = "title"
    CATEGORY = "category"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class AdminTableView(BaseModel):
    """Page du tableau des œuvres du dashboard admin"""
    rows: List[ArtworkInDB]
    total_filtered_count: int
    total_pages: int
    current_page: int
    years: List[int] = []
