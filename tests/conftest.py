"""Shared fixtures: a throwaway icon source tree and output directory."""

import os
import sys

# Make the top-level build/svg/transform/utils modules importable
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest

ARROW_LEFT = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" fill="none" '
    'viewBox="0 0 24 24" stroke="#000">\n'
    "  <!-- arrow -->\n"
    '  <path stroke-linecap="round" stroke-linejoin="round" stroke-width="1.5" d="M15 19l-7-7 7-7"/>\n'
    "</svg>\n"
)

USER_CIRCLE = (
    '<svg xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 24 24">'
    '<circle cx="12" cy="8" r="4" stroke="red"/>'
    '<path d="M4 20c0-4 4-6 8-6s8 2 8 6"/>'
    "</svg>"
)


@pytest.fixture
def sources(tmp_path):
    src = tmp_path / "src"
    (src / "layout").mkdir(parents=True)
    (src / "layout" / "arrow-left.svg").write_text(ARROW_LEFT, encoding="utf-8")
    (src / "users").mkdir()
    (src / "users" / "user-circle.svg").write_text(USER_CIRCLE, encoding="utf-8")
    (src / "users" / ".DS_Store").write_bytes(b"\x00\x01")
    (src / "maps").mkdir()
    return src


@pytest.fixture
def output(tmp_path):
    out = tmp_path / "out"
    out.mkdir()
    return out
