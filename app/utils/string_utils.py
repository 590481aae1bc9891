import unicodedata
from typing import Optional
from urllib.parse import quote_plus, unquote_plus

from app.models.artwork import ArtworkCategory


def collation_key(value: str) -> str:
    """
    Clé de tri "naturelle" pour les chaînes affichées:
    - retire les accents
    - ignore la casse
    Exemple: 'Été' et 'ete' donnent la même clé.
    """
    if value is None:
        return ""
    s = unicodedata.normalize('NFKD', str(value))
    s = ''.join(ch for ch in s if not unicodedata.combining(ch))
    return s.casefold()


def encode_category_param(category: ArtworkCategory) -> str:
    """'Work on Paper' -> 'Work+on+Paper' (valeur du paramètre ?medium=)"""
    return quote_plus(category.value)


def decode_category_param(raw: Optional[str]) -> Optional[ArtworkCategory]:
    """
    Décode la valeur du paramètre ?medium=.
    Accepte 'Work+on+Paper', 'Work%20on%20Paper' et 'Work on Paper'.
    Toute autre valeur (ou absence) signifie "pas de filtre".
    """
    if not raw:
        return None
    decoded = unquote_plus(raw)
    for category in ArtworkCategory:
        if category.value == decoded:
            return category
    return None
