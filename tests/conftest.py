from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable

import pytest

# Ensure local package import wins over an installed distribution
_HERE = os.path.dirname(__file__)
_ROOT = os.path.abspath(os.path.join(_HERE, ".."))
if _ROOT not in sys.path:
    sys.path.insert(0, _ROOT)


@pytest.fixture()
def fake_root(tmp_path: Path) -> Callable[..., Path]:
    """Return a writer that places files under a throwaway filesystem root.

    ``fake_root({"/etc/os-release": "ID=ubuntu\\n"}, linux=True)`` creates the
    files and, with ``linux=True``, the /proc/version marker as well.
    """

    def make(files: dict[str, str] | None = None, linux: bool = True) -> Path:
        entries = dict(files or {})
        if linux:
            entries.setdefault("/proc/version", "Linux version 5.15.0\n")
        for path, content in entries.items():
            target = tmp_path / path.lstrip("/")
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
        return tmp_path

    return make


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove the user-name variables so tests can set exactly what they need."""
    for name in ("USERNAME", "LOGNAME", "USER"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
