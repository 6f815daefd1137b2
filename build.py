#!python3
import argparse
import asyncio
import logging
import shutil
from pathlib import Path
from typing import Iterable, List, Sequence

from tqdm.asyncio import tqdm_asyncio

from svg import optimize_svg
from transform import FORMATS, get_transformer
from utils import Icon, ensure_write, ensure_write_json, get_component_name, setup_logging

SOURCES = Path("optimized/icons/")
OUTPUT = Path(".")

CATEGORIES = (
    "editor",
    "education",
    "files",
    "finance",
    "general",
    "images",
    "layout",
    "maps",
    "media",
    "security",
    "shapes",
    "time",
    "users",
    "weather",
)

CJS_PACKAGE_JSON = {"module": "./esm/index.js", "sideEffects": False}
ESM_PACKAGE_JSON = {"type": "module", "sideEffects": False}


async def get_icons(sources: Path, category: str) -> List[Icon]:
    """Read every SVG in sources/category, sorted by file name.

    Raises ValueError when two files map to the same component name.
    """
    category_dir = sources / category
    entries = await asyncio.to_thread(lambda: sorted(category_dir.iterdir()))

    files = []
    for entry in entries:
        if entry.suffix != ".svg":
            logging.debug("Skipping %s: not an SVG file", entry)
            continue
        files.append(entry)

    texts = await asyncio.gather(
        *(asyncio.to_thread(f.read_text, encoding="utf-8") for f in files)
    )

    icons = []
    seen = {}
    for f, text in zip(files, texts):
        name = get_component_name(f.name)
        if name in seen:
            raise ValueError(
                f"{category}: {f.name} and {seen[name]} both map to component {name}"
            )
        seen[name] = f.name
        icons.append(Icon(file_name=f.name, component_name=name, svg=text))

    logging.debug("Found %d icons in %s", len(icons), category_dir)
    return icons


def export_all(icons: Iterable[Icon], fmt: str, include_extension: bool = True) -> str:
    extension = ".js" if include_extension else ""
    lines = []
    for icon in icons:
        name = icon.component_name
        if fmt == "esm":
            lines.append(f"export {{ default as {name} }} from './{name}{extension}'")
        else:
            lines.append(f'module.exports.{name} = require("./{name}{extension}")')
    return "\n".join(lines)


def get_out_dir(output: Path, package: str, category: str, fmt: str) -> Path:
    out_dir = output / package / category
    if fmt == "esm":
        out_dir = out_dir / "esm"
    return out_dir


async def build_icons(package: str, category: str, fmt: str, sources: Path = SOURCES, output: Path = OUTPUT) -> int:
    """Write the components, type declarations and barrels of one category/format."""
    transformer = get_transformer(package)
    out_dir = get_out_dir(output, package, category, fmt)

    icons = await get_icons(sources, category)

    async def _build(icon: Icon):
        svg = await asyncio.to_thread(optimize_svg, icon.svg)
        content = await asyncio.to_thread(transformer.component, svg, icon.component_name, fmt)
        types = transformer.types(icon.component_name)
        await asyncio.gather(
            ensure_write(out_dir / f"{icon.component_name}.js", content),
            ensure_write(out_dir / f"{icon.component_name}.d.ts", types),
        )

    await asyncio.gather(*(_build(icon) for icon in icons))

    await ensure_write(out_dir / "index.js", export_all(icons, fmt))
    await ensure_write(out_dir / "index.d.ts", export_all(icons, "esm", include_extension=False))

    return len(icons)


def clear_output(output: Path, package: str, categories: Sequence[str]):
    for category in categories:
        target = output / package / category
        if target.exists():
            logging.debug("Removing %s", target)
            shutil.rmtree(target)


async def build_package(
    package: str,
    sources: Path = SOURCES,
    output: Path = OUTPUT,
    categories: Sequence[str] = CATEGORIES,
) -> int:
    # Unknown packages fail here, before anything on disk is touched.
    get_transformer(package)

    logging.info(f"Building {package} package...")
    clear_output(output, package, categories)

    tasks = []
    for category in categories:
        for fmt in FORMATS:
            tasks.append(build_icons(package, category, fmt, sources, output))
        tasks.append(ensure_write_json(output / package / category / "package.json", CJS_PACKAGE_JSON))
        tasks.append(ensure_write_json(output / package / category / "esm" / "package.json", ESM_PACKAGE_JSON))

    results = await tqdm_asyncio.gather(*tasks, desc=f"Building {package}", unit=" tasks")

    # Each icon is counted once per format.
    total = sum(r for r in results if isinstance(r, int)) // len(FORMATS)
    logging.info(f"Finished building {package} package ({total} icons).")
    return total


def main(args):
    asyncio.run(
        build_package(
            args.package,
            sources=args.src,
            output=args.out,
            categories=args.category or CATEGORIES,
        )
    )


def cli(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate React/Vue icon component packages from SVG sources."
    )
    parser.add_argument("package", help="Target package to build, e.g. react or vue")
    parser.add_argument(
        "--src",
        type=Path,
        default=SOURCES,
        help="Directory holding one subdirectory of SVGs per category",
    )
    parser.add_argument(
        "--out",
        type=Path,
        default=OUTPUT,
        help="Directory the package tree is written into",
    )
    parser.add_argument(
        "--category",
        action="append",
        choices=CATEGORIES,
        help="Only build this category (repeatable)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    args = parser.parse_args(argv)

    setup_logging()
    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    main(args)


if __name__ == "__main__":
    cli()
