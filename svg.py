import logging
import re

from lxml import etree

SVG_NS = "http://www.w3.org/2000/svg"

NUMBER_RE = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))(?:px)?\s*$")

# Attributes removed from every element, and from specific elements only.
REMOVE_ATTRS = ("stroke",)
REMOVE_ELEMENT_ATTRS = {"path": ("stroke-width",)}

# Set on the root element after cleanup, in this order.
ROOT_ATTRIBUTES = (
    ("stroke-width", "2"),
    ("stroke", "currentColor"),
    ("aria-hidden", "true"),
)


def _format_number(value: float) -> str:
    return f"{value:g}"


def parse_svg(text: str) -> etree._Element:
    parser = etree.XMLParser(remove_comments=True, remove_pis=True, resolve_entities=False)
    root = etree.fromstring(text.encode("utf-8"), parser)
    if etree.QName(root).localname != "svg":
        raise ValueError(f"Expected an <svg> root element, found <{etree.QName(root).localname}>")
    return root


def remove_dimensions(root: etree._Element):
    width = root.get("width")
    height = root.get("height")
    if width is None and height is None:
        return

    if root.get("viewBox") is None:
        # No viewBox: derive one from the size, or keep the size if it has units.
        mw = NUMBER_RE.match(width or "")
        mh = NUMBER_RE.match(height or "")
        if not (mw and mh):
            logging.debug("Keeping width/height (%s, %s): no viewBox to fall back on", width, height)
            return
        w, h = float(mw.group(1)), float(mh.group(1))
        root.set("viewBox", f"0 0 {_format_number(w)} {_format_number(h)}")

    for attr in ("width", "height"):
        if attr in root.attrib:
            del root.attrib[attr]


def remove_xmlns(root: etree._Element):
    for elem in root.iter():
        if not isinstance(elem.tag, str):
            continue
        if etree.QName(elem).namespace == SVG_NS:
            elem.tag = etree.QName(elem).localname
    etree.cleanup_namespaces(root)


def remove_attrs(root: etree._Element):
    for elem in root.iter():
        if not isinstance(elem.tag, str):
            continue
        for attr in REMOVE_ATTRS + REMOVE_ELEMENT_ATTRS.get(etree.QName(elem).localname, ()):
            if attr in elem.attrib:
                del elem.attrib[attr]


def add_root_attributes(root: etree._Element):
    for name, value in ROOT_ATTRIBUTES:
        root.set(name, value)


def optimize_svg(text: str) -> str:
    """Normalize icon markup so every icon is stroked with currentColor.

    Width/height are dropped in favour of the viewBox, the SVG namespace is removed,
    stroke attributes are stripped (stroke-width only on paths) and the canonical
    stroke-width, stroke and aria-hidden attributes are set on the root.
    """
    root = parse_svg(text)

    remove_dimensions(root)
    remove_xmlns(root)
    remove_attrs(root)
    add_root_attributes(root)

    return etree.tostring(root, encoding="unicode")
