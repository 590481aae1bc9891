"""
Catalogue public des œuvres: filtre par catégorie, ordre d'affichage,
position et navigation précédent / suivant sur la page de détail.

La grille et la page de détail passent toutes les deux par build_grid:
les deux vues utilisent le même ordre et le même filtre, sinon "< 3 / 12 >"
ne correspondrait plus à la position dans la grille.
"""
from typing import Iterable, List, Optional, Sequence

from app.config import build_page_title
from app.models.artwork import ArtworkCategory, ArtworkInDB
from app.models.catalog import ArtworkDetail, Breadcrumb, CatalogPosition, CatalogView, CategoryLink
from app.utils.string_utils import encode_category_param

ARTWORKS_PATH = "/artworks"


class ArtworkNotFoundError(LookupError):
    """L'œuvre demandée n'est pas dans la liste affichée"""

    def __init__(self, artwork_id: str):
        super().__init__(f"Artwork {artwork_id} not found")
        self.artwork_id = artwork_id


def recency_key(artwork: ArtworkInDB) -> float:
    """Timestamp de dernière modification (une œuvre sans date est la plus ancienne)"""
    if artwork.updated_at is None:
        return float("-inf")
    return artwork.updated_at.timestamp()


def filter_by_category(
    artworks: Iterable[ArtworkInDB], category: Optional[ArtworkCategory] = None
) -> List[ArtworkInDB]:
    if category is None:
        return list(artworks)
    return [artwork for artwork in artworks if artwork.category == category]


def order_for_display(artworks: Iterable[ArtworkInDB]) -> List[ArtworkInDB]:
    """
    Ordre canonique: année décroissante, puis dernière modification
    décroissante, puis ordre d'origine.
    sorted() est stable (y compris avec reverse=True), d'où les deux passes.
    """
    by_recency = sorted(artworks, key=recency_key, reverse=True)
    return sorted(by_recency, key=lambda artwork: artwork.year, reverse=True)


def locate(ordered_ids: Sequence[str], target_id: str) -> CatalogPosition:
    """
    Position (à partir de 1) de target_id et ses voisins dans la liste.

    Raises:
        ArtworkNotFoundError: si target_id n'est pas dans la liste
    """
    try:
        index = list(ordered_ids).index(target_id)
    except ValueError:
        raise ArtworkNotFoundError(target_id) from None

    total = len(ordered_ids)
    return CatalogPosition(
        position=index + 1,
        total=total,
        prev_id=ordered_ids[index - 1] if index > 0 else None,
        next_id=ordered_ids[index + 1] if index < total - 1 else None,
    )


def _format_measure(value: float) -> str:
    return f'{value:g}"'


def format_dimensions(artwork: ArtworkInDB) -> Optional[str]:
    """
    Sculpture: 'L" × l" × H"' (longueur, largeur, hauteur) si les trois sont renseignées.
    Autres catégories: 'H" × l"' si hauteur et largeur sont renseignées.
    Sinon rien n'est affiché.
    """
    if artwork.category == ArtworkCategory.SCULPTURE:
        measures = (artwork.length, artwork.width, artwork.height)
    else:
        measures = (artwork.height, artwork.width)

    if any(value is None for value in measures):
        return None
    return " × ".join(_format_measure(value) for value in measures)


def category_href(category: Optional[ArtworkCategory]) -> str:
    if category is None:
        return ARTWORKS_PATH
    return f"{ARTWORKS_PATH}?medium={encode_category_param(category)}"


def category_breadcrumb(category: ArtworkCategory) -> Breadcrumb:
    return Breadcrumb(label=category.label, href=category_href(category))


def category_links() -> List[CategoryLink]:
    """Entrées du menu latéral, dans l'ordre de l'énumération"""
    return [
        CategoryLink(value=category, label=category.label, href=category_href(category))
        for category in ArtworkCategory
    ]


def build_grid(
    artworks: Iterable[ArtworkInDB], category: Optional[ArtworkCategory] = None
) -> CatalogView:
    displayed = filter_by_category(order_for_display(artworks), category)
    return CatalogView(
        artworks=displayed,
        display_count=len(displayed),
        category=category,
        label=category.label if category else None,
    )


def build_detail(
    artworks: Iterable[ArtworkInDB],
    artwork_id: str,
    category: Optional[ArtworkCategory] = None,
) -> ArtworkDetail:
    """
    Vue détail d'une œuvre. Sans catégorie explicite, la navigation se fait
    dans la catégorie de l'œuvre elle-même.

    Raises:
        ArtworkNotFoundError: œuvre absente du catalogue ou de la catégorie demandée
    """
    artworks = list(artworks)
    artwork = next((a for a in artworks if a.id == artwork_id), None)
    if artwork is None:
        raise ArtworkNotFoundError(artwork_id)

    navigation_category = category if category is not None else artwork.category
    grid = build_grid(artworks, navigation_category)
    position = locate([a.id for a in grid.artworks], artwork_id)

    return ArtworkDetail(
        **position.model_dump(),
        artwork=artwork,
        dimensions=format_dimensions(artwork),
        breadcrumb=category_breadcrumb(artwork.category),
        page_title=build_page_title(artwork.title),
    )
