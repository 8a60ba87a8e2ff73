from __future__ import annotations

import importlib
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).resolve().parents[2] / "src"
PACKAGE_ROOT = SRC_ROOT / "maps_api_client"


def _source_module_names() -> list[str]:
    names: list[str] = []
    for path in sorted(PACKAGE_ROOT.rglob("*.py")):
        parts = path.relative_to(SRC_ROOT).with_suffix("").parts
        if parts[-1] == "__init__":
            parts = parts[:-1]
        names.append(".".join(parts))
    return names


@pytest.mark.parametrize("module_name", _source_module_names())
def test_source_module_exports_resolve_without_duplicates(module_name: str) -> None:
    module = importlib.import_module(module_name)
    exported = getattr(module, "__all__", None)
    assert exported is not None, f"{module_name} does not define __all__"
    assert len(exported) == len(set(exported)), f"{module_name} repeats a name in __all__"
    unresolved = [name for name in exported if not hasattr(module, name)]
    assert unresolved == []
