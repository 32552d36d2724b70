import sys
from typing import List

import pytest

import typebind

collect_ignore_glob: List[str] = []


@pytest.fixture(scope="function", autouse=True)
def clear_field_cache():
    """Tests define throwaway classes; keep the per-class field cache from growing
    across tests."""
    yield
    typebind._unsafe_cache.clear_cache()


if not sys.version_info >= (3, 12):
    collect_ignore_glob.append("*min_py312*.py")
