"""Unit tests for HTTP status metadata lookups and predicates."""

import pytest

from problem_details.core.errors import InvalidStatusError
from problem_details.domain.status_metadata import (
    HTTP_STATUS_TITLES,
    TRANSLATIONS,
    check_problem_status,
    get_status_title,
    get_type_slug,
    is_client_error,
    is_server_error,
    is_valid_problem_status,
)


@pytest.mark.unit
class TestStatusTitles:
    """Title lookup with language fallback."""

    def test_english_title(self):
        assert get_status_title(404) == "Not Found"
        assert get_status_title(500, "en") == "Internal Server Error"

    @pytest.mark.parametrize(
        ("language", "expected"),
        [
            ("it", "Non Trovato"),
            ("es", "No Encontrado"),
            ("de", "Nicht Gefunden"),
            ("fr", "Non Trouvé"),
        ],
    )
    def test_translated_title(self, language, expected):
        assert get_status_title(404, language) == expected

    def test_unknown_language_falls_back_to_english(self):
        assert get_status_title(404, "pt") == "Not Found"

    def test_missing_translation_falls_back_to_english(self):
        """Italian has no entry for 418; English does."""
        assert 418 not in TRANSLATIONS["it"]
        assert get_status_title(418, "it") == "I'm a Teapot"

    def test_unknown_status_yields_sentinel(self):
        assert get_status_title(499, "en") == "Unknown Error"
        assert get_status_title(499, "de") == "Unknown Error"


@pytest.mark.unit
class TestTypeSlugs:
    """Slug lookup for type URIs."""

    def test_known_slug(self):
        assert get_type_slug(404) == "not-found"
        assert get_type_slug(422) == "unprocessable-entity"
        assert get_type_slug(500) == "internal-server-error"

    def test_unknown_slug_is_synthesized(self):
        assert get_type_slug(499) == "error-499"

    def test_status_with_title_but_no_slug(self):
        assert 506 in HTTP_STATUS_TITLES
        assert get_type_slug(506) == "error-506"


@pytest.mark.unit
class TestStatusClassification:
    """Range predicates."""

    @pytest.mark.parametrize("status", [400, 404, 451, 499])
    def test_client_errors(self, status):
        assert is_client_error(status)
        assert not is_server_error(status)
        assert is_valid_problem_status(status)

    @pytest.mark.parametrize("status", [500, 503, 599])
    def test_server_errors(self, status):
        assert is_server_error(status)
        assert not is_client_error(status)
        assert is_valid_problem_status(status)

    @pytest.mark.parametrize("status", [-1, 0, 100, 200, 302, 399, 600, 999])
    def test_non_problem_statuses(self, status):
        assert not is_valid_problem_status(status)

    def test_every_status_in_range_is_valid(self):
        assert all(is_valid_problem_status(status) for status in range(400, 600))
        assert not any(is_valid_problem_status(status) for status in range(0, 400))


@pytest.mark.unit
class TestCheckProblemStatus:
    """Shared status gate used by documents, registry, builder and exceptions."""

    @pytest.mark.parametrize("status", [400, 422, 599])
    def test_returns_valid_status(self, status):
        assert check_problem_status(status) == status

    @pytest.mark.parametrize("status", [399, 600, 200, True, False, 404.0, "404", None])
    def test_rejects_everything_else(self, status):
        with pytest.raises(InvalidStatusError) as exc_info:
            check_problem_status(status)

        assert exc_info.value.status is status
