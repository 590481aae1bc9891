"""
Tableau des œuvres du dashboard admin: recherche, filtres, tri et pagination.

La vue est recalculée entièrement à partir de la liste complète à chaque
changement d'état (quelques centaines d'œuvres au plus).
"""
import math
from typing import Callable, Dict, Iterable, List, Optional

from pydantic import BaseModel, Field

from app.config import ADMIN_PAGE_SIZE
from app.models.artwork import ArtworkCategory, ArtworkInDB
from app.models.catalog import AdminTableView, SortDirection, SortField
from app.services.catalog import recency_key
from app.utils.string_utils import collation_key


class AdminTableState(BaseModel):
    search_text: str = ""
    category_filter: Optional[ArtworkCategory] = None
    year_filter: Optional[int] = None
    sort_field: SortField = SortField.YEAR
    sort_direction: SortDirection = SortDirection.DESC
    page: int = 1
    page_size: int = Field(default=ADMIN_PAGE_SIZE, ge=1)

    # Tout changement de filtre ramène à la page 1

    def with_search(self, search_text: str) -> "AdminTableState":
        return self.model_copy(update={"search_text": search_text or "", "page": 1})

    def with_category(self, category: Optional[ArtworkCategory]) -> "AdminTableState":
        return self.model_copy(update={"category_filter": category, "page": 1})

    def with_year(self, year: Optional[int]) -> "AdminTableState":
        return self.model_copy(update={"year_filter": year, "page": 1})

    def toggle_sort(self, field: SortField) -> "AdminTableState":
        """Même colonne: inverse le sens. Autre colonne: tri décroissant sur cette colonne."""
        if field == self.sort_field:
            direction = SortDirection.ASC if self.sort_direction == SortDirection.DESC else SortDirection.DESC
            return self.model_copy(update={"sort_direction": direction})
        return self.model_copy(update={"sort_field": field, "sort_direction": SortDirection.DESC})

    def go_to_page(self, page: int) -> "AdminTableState":
        return self.model_copy(update={"page": page})


def _created_key(artwork: ArtworkInDB) -> float:
    if artwork.created_at is None:
        return float("-inf")
    return artwork.created_at.timestamp()


SORT_KEYS: Dict[SortField, Callable[[ArtworkInDB], object]] = {
    SortField.YEAR: lambda artwork: artwork.year,
    SortField.CREATED_AT: _created_key,
    SortField.TITLE: lambda artwork: collation_key(artwork.title),
    SortField.CATEGORY: lambda artwork: collation_key(artwork.category.value),
}


def filter_artworks(artworks: Iterable[ArtworkInDB], state: AdminTableState) -> List[ArtworkInDB]:
    filtered = list(artworks)

    if state.search_text:
        query = state.search_text.casefold()
        filtered = [a for a in filtered if query in a.title.casefold()]

    if state.category_filter is not None:
        filtered = [a for a in filtered if a.category == state.category_filter]

    if state.year_filter is not None:
        filtered = [a for a in filtered if a.year == state.year_filter]

    return filtered


def sort_artworks(
    artworks: Iterable[ArtworkInDB], field: SortField, direction: SortDirection
) -> List[ArtworkInDB]:
    """
    Trie selon la colonne et le sens demandés. En cas d'égalité, l'œuvre
    modifiée le plus récemment passe devant, quel que soit le sens du tri.
    """
    by_recency = sorted(artworks, key=recency_key, reverse=True)
    return sorted(by_recency, key=SORT_KEYS[field], reverse=direction == SortDirection.DESC)


def paginate(artworks: List[ArtworkInDB], page: int, page_size: int) -> List[ArtworkInDB]:
    if page < 1:
        return []
    start = (page - 1) * page_size
    return artworks[start:start + page_size]


def unique_years(artworks: Iterable[ArtworkInDB]) -> List[int]:
    """Années disponibles pour le filtre, de la plus récente à la plus ancienne"""
    return sorted({artwork.year for artwork in artworks}, reverse=True)


def derive_view(artworks: Iterable[ArtworkInDB], state: AdminTableState) -> AdminTableView:
    artworks = list(artworks)
    filtered = filter_artworks(artworks, state)
    ordered = sort_artworks(filtered, state.sort_field, state.sort_direction)

    return AdminTableView(
        rows=paginate(ordered, state.page, state.page_size),
        total_filtered_count=len(ordered),
        total_pages=math.ceil(len(ordered) / state.page_size),
        current_page=state.page,
        years=unique_years(artworks),
    )
