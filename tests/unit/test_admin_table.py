"""Unit tests for the admin artworks table (search, filters, sort, pagination)."""

import pytest

from app.models.artwork import ArtworkCategory
from app.models.catalog import SortDirection, SortField
from app.services.admin_table import AdminTableState, derive_view, sort_artworks, unique_years


def ids(artworks):
    return [artwork.id for artwork in artworks]


@pytest.fixture
def catalog(artwork_factory):
    return [
        artwork_factory("1", year=2020, title="Blue Harbor", category=ArtworkCategory.PAINTING, updated_offset=1, created_offset=3),
        artwork_factory("2", year=2022, title="blue study", category=ArtworkCategory.WORK_ON_PAPER, updated_offset=2, created_offset=1),
        artwork_factory("3", year=2022, title="Étude", category=ArtworkCategory.SCULPTURE, updated_offset=8, created_offset=2),
        artwork_factory("4", year=2021, title="Anchor", category=ArtworkCategory.PAINTING, updated_offset=4, created_offset=4),
    ]


@pytest.fixture
def big_catalog(artwork_factory):
    return [artwork_factory(str(n), year=2000 + n, updated_offset=n) for n in range(1, 26)]


def test_default_state_sorts_by_year_descending(catalog):
    view = derive_view(catalog, AdminTableState())
    assert ids(view.rows) == ["3", "2", "4", "1"]
    assert view.total_filtered_count == 4
    assert view.total_pages == 1
    assert view.current_page == 1


def test_search_is_case_insensitive_substring(catalog):
    view = derive_view(catalog, AdminTableState(search_text="BLUE"))
    assert sorted(ids(view.rows)) == ["1", "2"]


def test_empty_search_passes_everything(catalog):
    assert derive_view(catalog, AdminTableState(search_text="")).total_filtered_count == 4


def test_category_and_year_filters(catalog):
    state = AdminTableState(category_filter=ArtworkCategory.PAINTING)
    assert ids(derive_view(catalog, state).rows) == ["4", "1"]

    state = AdminTableState(year_filter=2022)
    assert ids(derive_view(catalog, state).rows) == ["3", "2"]

    state = AdminTableState(year_filter=2022, category_filter=ArtworkCategory.PAINTING)
    view = derive_view(catalog, state)
    assert view.rows == []
    assert view.total_pages == 0


def test_tie_break_is_recent_update_first_in_both_directions(catalog):
    # 2 and 3 share year 2022; 3 was updated more recently
    desc = sort_artworks(catalog, SortField.YEAR, SortDirection.DESC)
    asc = sort_artworks(catalog, SortField.YEAR, SortDirection.ASC)
    assert ids(desc) == ["3", "2", "4", "1"]
    assert ids(asc) == ["1", "4", "3", "2"]


def test_title_sort_ignores_case_and_accents(catalog):
    ordered = sort_artworks(catalog, SortField.TITLE, SortDirection.ASC)
    assert ids(ordered) == ["4", "1", "2", "3"]


def test_created_at_sort(catalog):
    ordered = sort_artworks(catalog, SortField.CREATED_AT, SortDirection.DESC)
    assert ids(ordered) == ["4", "1", "3", "2"]


def test_category_sort(catalog):
    ordered = sort_artworks(catalog, SortField.CATEGORY, SortDirection.ASC)
    # Painting < Sculpture < Work on Paper; paintings 4 and 1 tie, 4 updated later
    assert ids(ordered) == ["4", "1", "3", "2"]


def test_pagination_of_25_rows(big_catalog):
    state = AdminTableState(page_size=10, page=3)
    view = derive_view(big_catalog, state)
    assert view.total_pages == 3
    assert len(view.rows) == 5
    # year descending: rows 21 to 25 are the five oldest
    assert ids(view.rows) == ["5", "4", "3", "2", "1"]


def test_pages_cover_filtered_list_exactly(big_catalog):
    state = AdminTableState(page_size=7)
    full = sort_artworks(big_catalog, state.sort_field, state.sort_direction)
    view = derive_view(big_catalog, state)

    collected = []
    for page in range(1, view.total_pages + 1):
        rows = derive_view(big_catalog, state.go_to_page(page)).rows
        if page < view.total_pages:
            assert len(rows) == 7
        collected.extend(rows)
    assert ids(collected) == ids(full)


@pytest.mark.parametrize("page", [0, -1, 4, 99])
def test_out_of_range_page_is_empty(big_catalog, page):
    view = derive_view(big_catalog, AdminTableState(page_size=10, page=page))
    assert view.rows == []
    assert view.total_pages == 3


def test_filter_changes_reset_page(catalog):
    state = AdminTableState(page=4)
    assert state.with_search("blue").page == 1
    assert state.with_category(ArtworkCategory.SCULPTURE).page == 1
    assert state.with_year(2021).page == 1
    assert state.with_year(None).page == 1


def test_sort_toggle_does_not_reset_page():
    assert AdminTableState(page=3).toggle_sort(SortField.TITLE).page == 3


def test_toggle_same_field_flips_direction():
    state = AdminTableState()
    flipped = state.toggle_sort(SortField.YEAR)
    assert flipped.sort_direction == SortDirection.ASC
    assert flipped.toggle_sort(SortField.YEAR).sort_direction == SortDirection.DESC


def test_switching_field_resets_direction_to_descending():
    state = AdminTableState().toggle_sort(SortField.YEAR)
    assert state.sort_direction == SortDirection.ASC

    switched = state.toggle_sort(SortField.TITLE)
    assert switched.sort_field == SortField.TITLE
    assert switched.sort_direction == SortDirection.DESC


def test_unique_years(catalog):
    assert unique_years(catalog) == [2022, 2021, 2020]
    assert derive_view(catalog, AdminTableState()).years == [2022, 2021, 2020]
