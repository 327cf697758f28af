"""
Tests pour les objets valeur de recherche (SearchCategory, SearchQuery).
"""

import pytest

from moviefinder.core.exceptions import SearchValidationError
from moviefinder.core.value_objects import SearchCategory, SearchQuery


class TestSearchCategory:
    """Tests pour l'enum SearchCategory."""

    def test_exactly_three_categories(self):
        """Le selecteur propose exactement movie, series et episode."""
        assert [c.value for c in SearchCategory] == ["movie", "series", "episode"]

    def test_parse_form_value(self):
        assert SearchCategory.parse("series") is SearchCategory.SERIES
        assert SearchCategory.parse(" Episode ") is SearchCategory.EPISODE

    def test_parse_accepts_enum(self):
        assert SearchCategory.parse(SearchCategory.MOVIE) is SearchCategory.MOVIE

    def test_parse_unknown_category_raises(self):
        with pytest.raises(SearchValidationError):
            SearchCategory.parse("game")

    def test_label(self):
        assert SearchCategory.SERIES.label == "Series"


class TestSearchQuery:
    """Tests pour la creation et la validation de SearchQuery."""

    def test_create_trims_title(self):
        query = SearchQuery.create("  batman  ", "movie")
        assert query.title == "batman"
        assert query.category is SearchCategory.MOVIE

    def test_default_category_is_movie(self):
        assert SearchQuery.create("batman").category is SearchCategory.MOVIE

    @pytest.mark.parametrize("title", ["", "   ", "\t\n", None])
    def test_blank_title_is_rejected(self, title):
        """Un titre vide ou compose d'espaces est refuse."""
        with pytest.raises(SearchValidationError) as exc_info:
            SearchQuery.create(title, "movie")
        assert exc_info.value.message == "Search term is required"

    def test_direct_construction_is_validated(self):
        with pytest.raises(SearchValidationError):
            SearchQuery(title="  ")

    def test_query_is_immutable(self):
        query = SearchQuery.create("batman")
        with pytest.raises(AttributeError):
            query.title = "superman"
