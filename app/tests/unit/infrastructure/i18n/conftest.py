"""Feature-level fixtures for i18n system tests.

Provides translators, stores and resource files for resolution and loading
scenarios.
"""

from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import ResourceStore
from tests.factories.i18n import (
    make_en_resource,
    make_fa_resource,
    make_seasons_resource,
    make_translator,
    write_resource_file,
)


@pytest.fixture
def translator():
    """Translator with English and Persian resources, current language en."""
    return make_translator()


@pytest.fixture
def store():
    """ResourceStore with English and Persian resources."""
    resource_store = ResourceStore()
    resource_store.add_resource(make_en_resource())
    resource_store.add_resource(make_fa_resource())
    return resource_store


@pytest.fixture
def temp_resources_dir(tmp_path):
    """Create a temporary directory with resource files.

    Returns a directory structure like:
    - en.json                  (shaped as {"en": {...}} content of en)
    - fa.yml
    - en/seasons.json
    - fa/seasons.yaml
    - notes.txt                (ignored)
    """
    write_resource_file(tmp_path / "en.json", make_en_resource()["en"])
    write_resource_file(tmp_path / "fa.yml", make_fa_resource()["fa"])
    write_resource_file(tmp_path / "en" / "seasons.json", make_seasons_resource("en"))
    write_resource_file(tmp_path / "fa" / "seasons.yaml", make_seasons_resource("fa"))
    (tmp_path / "notes.txt").write_text("not a resource", encoding="utf-8")
    return tmp_path


@pytest.fixture
def mock_session():
    """Requests session double whose get() returns ``mock_session.response``."""
    session = MagicMock()
    response = MagicMock()
    response.status_code = 200
    response.raise_for_status.return_value = None
    response.json.return_value = make_seasons_resource("en")
    session.get.return_value = response
    session.response = response
    return session
