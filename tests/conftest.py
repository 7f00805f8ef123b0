"""Root conftest -- auto-skip kaleido-dependent tests when image export can't run."""

import importlib.util
import shutil
import sys
from importlib.metadata import PackageNotFoundError, version

import pytest

# Individual test names that trigger kaleido
_KALEIDO_TESTS = {
    "test_writes_png",
    "test_cli_palettes_save_png",
}

_CHROME_BINARIES = ("google-chrome", "google-chrome-stable", "chromium", "chromium-browser", "chrome")


def _kaleido_unavailable() -> str | None:
    if sys.platform == "win32":
        return "kaleido hangs on Windows -- validate with real image output"
    if importlib.util.find_spec("kaleido") is None:
        return "kaleido not installed"
    try:
        major = int(version("kaleido").split(".")[0])
    except (PackageNotFoundError, ValueError):
        return None
    # kaleido 1.x drives a system Chrome instead of bundling one
    if major >= 1 and not any(shutil.which(b) for b in _CHROME_BINARIES):
        return "kaleido>=1 needs Chrome on PATH"
    return None


def pytest_collection_modifyitems(config, items):
    """Auto-skip image-export tests when kaleido can't be used."""
    reason = _kaleido_unavailable()
    if reason is None:
        return

    skip = pytest.mark.skip(reason=reason)
    for item in items:
        if item.name in _KALEIDO_TESTS:
            item.add_marker(skip)
