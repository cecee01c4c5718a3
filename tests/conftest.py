from __future__ import annotations

import pytest
from hypothesis import settings

_ALLOWED_MARKERS = {"unit", "integration"}

settings.register_profile("checktypo", deadline=None, max_examples=150)
settings.load_profile("checktypo")


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        names = {mark.name for mark in item.iter_markers()}
        if not names.intersection(_ALLOWED_MARKERS):
            item.add_marker("unit")


@pytest.fixture(autouse=True)
def clean_checktypo_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("CHECKTYPO_JOBS", "CHECKTYPO_SOURCE", "CHECKTYPO_MANIFEST", "CHECKTYPO_LOG_JSON", "RUN_ID"):
        monkeypatch.delenv(name, raising=False)
