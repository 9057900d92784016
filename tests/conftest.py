"""Shared fixtures and helpers for tests."""

import json
from pathlib import Path
from typing import Any

import pytest

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag every test under tests/unit as "unit"
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        if rel.parts and rel.parts[0] == "unit":
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def login_screen() -> dict[str, Any]:
    """Return a raw FRAME subtree resembling a small login screen."""
    return {
        "id": "10:1",
        "name": "Login",
        "type": "FRAME",
        "absoluteBoundingBox": {"x": 0, "y": 0, "width": 375, "height": 812},
        "fills": [{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1, "a": 1}}],
        "children": [
            {"id": "10:2", "name": "Background", "type": "RECTANGLE"},
            {"id": "10:3", "name": "Title", "type": "TEXT", "characters": "Welcome back"},
            {
                "id": "10:4",
                "name": "Frame 12",
                "type": "FRAME",
                "children": [
                    {"id": "10:5", "name": "Email", "type": "TEXT", "characters": "Email"},
                    {"id": "10:6", "name": "Hidden hint", "type": "TEXT", "characters": "x", "visible": False},
                ],
            },
            {
                "id": "10:7",
                "name": "Primary Button",
                "type": "INSTANCE",
                "componentProperties": {"State": {"type": "VARIANT", "value": "Default"}},
                "reactions": [{"action": {"type": "NODE"}}],
                "children": [{"id": "10:8", "name": "Label", "type": "TEXT", "characters": "Sign in"}],
            },
        ],
    }


@pytest.fixture
def canvas_with_section() -> dict[str, Any]:
    """Return a raw CANVAS holding a frame, a note, and a section with its own frame."""
    return {
        "id": "0:1",
        "name": "Page 1",
        "type": "CANVAS",
        "children": [
            {"id": "1:1", "name": "Home", "type": "FRAME", "children": []},
            {"id": "1:2", "name": "Note", "type": "INSTANCE", "children": []},
            {
                "id": "2:1",
                "name": "Checkout flow",
                "type": "SECTION",
                "children": [
                    {"id": "2:2", "name": "Cart", "type": "FRAME", "children": []},
                    {"id": "2:3", "name": "Note", "type": "INSTANCE"},
                ],
            },
            {"id": "1:3", "name": "Sticker", "type": "RECTANGLE"},
        ],
    }


@pytest.fixture
def file_payload(tmp_path: Path, canvas_with_section: dict[str, Any]) -> Path:
    """Write a whole-file API response to disk and return its path."""
    payload = {
        "name": "Shop",
        "document": {"id": "0:0", "name": "Document", "type": "DOCUMENT", "children": [canvas_with_section]},
    }
    path = tmp_path / "file.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path
