# tests/conftest.py
import pytest


DIRECTORY_MARKERS = {
    "/unit/": pytest.mark.unit,
    "/integration/": pytest.mark.integration,
    "/e2e/": pytest.mark.e2e,
}


def pytest_collection_modifyitems(items):
    """Mark tests by the directory they live in."""
    for item in items:
        path = str(item.fspath)
        for directory, marker in DIRECTORY_MARKERS.items():
            if directory in path:
                item.add_marker(marker)
