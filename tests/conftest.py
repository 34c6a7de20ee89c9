from __future__ import annotations

import pytest


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:  # noqa: D401
    """Skip performance tests whenever coverage measurement is requested."""
    cov_requested = bool(config.getoption("--cov", default=None))
    if not cov_requested:
        return
    skip_marker = pytest.mark.skip(reason="Performance tests skipped under coverage measurement")
    for item in items:
        if item.get_closest_marker("performance"):
            item.add_marker(skip_marker)
