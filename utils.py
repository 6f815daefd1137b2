import asyncio
import json
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any


COLORS = {
    "DEBUG": "\033[36m",  # cyan
    "INFO": "\033[32m",  # green
    "WARNING": "\033[33m",  # yellow
    "ERROR": "\033[31m",  # red
    "CRITICAL": "\033[1;31m",  # bold red
}
COLOR_RESET = "\033[0m"

WORD_SPLIT_RE = re.compile(r"[^0-9A-Za-z]+")
DIGIT_LETTER_RE = re.compile(r"(\d+)([a-z])")


class ColorFormatter(logging.Formatter):
    def format(self, record):
        color = COLORS.get(record.levelname, "")
        record.levelname = f"{color}{record.levelname}{COLOR_RESET}"
        return super().format(record)


def setup_logging():
    handler = logging.StreamHandler()
    handler.setFormatter(ColorFormatter("%(levelname)s %(message)s"))
    logging.root.addHandler(handler)
    logging.root.setLevel(logging.INFO)


def get_component_name(file_name: str) -> str:
    """Turn an icon file name into a component identifier.

    `arrow-left.svg` becomes `ArrowLeftIcon`. Words are split on anything that is
    not an ASCII letter or digit, and a letter that follows a run of digits is
    uppercased (`arrow-2x` becomes `Arrow2XIcon`).
    """
    stem = re.sub(r"\.svg$", "", file_name)
    if stem.isupper():
        stem = stem.lower()

    words = [w for w in WORD_SPLIT_RE.split(stem) if w]
    if not words:
        raise ValueError(f"Cannot derive a component name from {file_name!r}")

    name = "".join(w[0].upper() + w[1:] for w in words)
    name = DIGIT_LETTER_RE.sub(lambda m: m.group(1) + m.group(2).upper(), name)
    name = f"{name}Icon"

    if not name.isidentifier():
        raise ValueError(f"{file_name!r} does not give a valid identifier ({name})")
    return name


@dataclass(frozen=True)
class Icon:
    file_name: str
    component_name: str
    svg: str

    def __post_init__(self):
        if not self.component_name:
            raise ValueError(f"Icon component name must not be empty (file={self.file_name})")


async def ensure_write(path: Path, text: str):
    """Write text to path, creating parent directories and replacing any old file."""

    def _write():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")

    await asyncio.to_thread(_write)


async def ensure_write_json(path: Path, value: Any):
    await ensure_write(path, json.dumps(value, indent=2))
