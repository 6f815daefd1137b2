"""Turn optimized icon SVG into React and Vue component modules.

Both generators walk the lxml tree of the icon and print JavaScript directly: React
gets a `React.createElement` tree behind `React.forwardRef`, Vue gets a compiled
`render` function. CommonJS output is derived from the ESM text by rewriting the
import and export statements.
"""

import json
import re
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from lxml import etree

from svg import parse_svg

FORMATS = ("esm", "cjs")

XLINK_NS = "http://www.w3.org/1999/xlink"
XML_NS = "http://www.w3.org/XML/1998/namespace"

IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][\w$]*$")
# Leading-zero integers such as "05" would be octal literals, so they stay strings.
NUMERIC_RE = re.compile(r"^-?(?:(?:0|[1-9]\d*)(?:\.\d*)?|\.\d+)$")
HYPHEN_RE = re.compile(r"-([a-z])")

# HTML-style attribute names React spells differently.
REACT_PROP_NAMES = {
    "class": "className",
    "for": "htmlFor",
    "tabindex": "tabIndex",
    "crossorigin": "crossOrigin",
    "autofocus": "autoFocus",
}

# Vue helpers in the order the compiler imports them.
VUE_HELPERS = ("createElementVNode", "createTextVNode", "openBlock", "createElementBlock")
VUE_IMPORT_RE = re.compile(r"import\s+\{\s*([^}]+)\s*\}\s+from\s+(['\"])(.*?)\2")


class UnknownPackageError(KeyError):
    pass


def _js_string(value: str) -> str:
    return json.dumps(value, ensure_ascii=False)


def _js_key(key: str) -> str:
    return key if IDENTIFIER_RE.match(key) else _js_string(key)


def _js_object(props: List[Tuple[str, str]], indent: str) -> str:
    if not props:
        return "null"
    inner = ",\n".join(f"{indent}  {_js_key(k)}: {v}" for k, v in props)
    return "{\n" + inner + "\n" + indent + "}"


def _children(elem: etree._Element) -> List[etree._Element]:
    return [c for c in elem if isinstance(c.tag, str)]


def _text(elem: etree._Element) -> Optional[str]:
    """Return the text of a leaf element, or None if it has none worth keeping."""
    if _children(elem) or elem.text is None or not elem.text.strip():
        return None
    return elem.text.strip()


def _attr_name(elem: etree._Element, name: str) -> str:
    qname = etree.QName(name)
    if qname.namespace == XLINK_NS:
        return f"xlink:{qname.localname}"
    if qname.namespace == XML_NS:
        return f"xml:{qname.localname}"
    return qname.localname


# React


def react_prop_name(name: str) -> str:
    if name in REACT_PROP_NAMES:
        return REACT_PROP_NAMES[name]
    if name.startswith(("aria-", "data-")):
        return name
    if ":" in name:
        prefix, local = name.split(":", 1)
        return prefix + local[0].upper() + local[1:]
    return HYPHEN_RE.sub(lambda m: m.group(1).upper(), name)


def react_style(style: str, indent: str) -> str:
    props = []
    for declaration in style.split(";"):
        if ":" not in declaration:
            continue
        key, value = (part.strip() for part in declaration.split(":", 1))
        if not key.startswith("--"):
            key = HYPHEN_RE.sub(lambda m: m.group(1).upper(), key)
        props.append((key, _js_string(value)))
    return _js_object(props, indent)


def react_value(value: str) -> str:
    return value if NUMERIC_RE.match(value) else _js_string(value)


def react_element(elem: etree._Element, indent: str = "  ", root: bool = False) -> str:
    props = []
    for name, value in elem.attrib.items():
        prop = react_prop_name(_attr_name(elem, name))
        if prop == "style":
            props.append((prop, react_style(value, indent + "  ")))
        else:
            props.append((prop, react_value(value)))

    tag = etree.QName(elem).localname
    if root:
        props.append(("ref", "svgRef"))
        args = [_js_string(tag), f"Object.assign({_js_object(props, indent)}, props)"]
    else:
        args = [_js_string(tag), _js_object(props, indent)]

    if elem.text is not None and elem.text.strip():
        args.append(_js_string(elem.text.strip()))
    for child in _children(elem):
        args.append(react_element(child, indent))
        if child.tail is not None and child.tail.strip():
            args.append(_js_string(child.tail.strip()))

    return "/*#__PURE__*/React.createElement(" + ", ".join(args) + ")"


def react_component(svg: str, component_name: str, fmt: str) -> str:
    root = parse_svg(svg)
    code = (
        'import * as React from "react";\n'
        "\n"
        f"function {component_name}(props, svgRef) {{\n"
        f"  return {react_element(root, root=True)};\n"
        "}\n"
        "\n"
        f"const ForwardRef = React.forwardRef({component_name});\n"
        "export default ForwardRef;"
    )
    if fmt == "esm":
        return code

    return code.replace('import * as React from "react"', 'const React = require("react")').replace(
        "export default", "module.exports ="
    )


def react_types(component_name: str) -> str:
    return (
        "import * as React from 'react';\n"
        f"declare function {component_name}(props: React.ComponentProps<'svg'>): JSX.Element;\n"
        f"export default {component_name};\n"
    )


# Vue


class _VueRender:
    def __init__(self):
        self.helpers = set()

    def helper(self, name: str) -> str:
        self.helpers.add(name)
        return f"_{name}"

    def props(self, elem: etree._Element, indent: str) -> str:
        props = [(_attr_name(elem, name), _js_string(value)) for name, value in elem.attrib.items()]
        return _js_object(props, indent)

    def children(self, elem: etree._Element, indent: str) -> Optional[str]:
        text = _text(elem)
        if text is not None:
            return _js_string(text)

        nodes = []
        if elem.text is not None and elem.text.strip():
            nodes.append(f"{indent}  {self.helper('createTextVNode')}({_js_string(elem.text.strip())})")
        for child in _children(elem):
            nodes.append(f"{indent}  {self.vnode(child, indent + '  ')}")
            if child.tail is not None and child.tail.strip():
                nodes.append(f"{indent}  {self.helper('createTextVNode')}({_js_string(child.tail.strip())})")
        if not nodes:
            return None
        return "[\n" + ",\n".join(nodes) + "\n" + indent + "]"

    def vnode(self, elem: etree._Element, indent: str) -> str:
        args = [_js_string(etree.QName(elem).localname), self.props(elem, indent)]
        children = self.children(elem, indent)
        if children is not None:
            args.append(children)
        return f"{self.helper('createElementVNode')}(" + ", ".join(args) + ")"

    def block(self, elem: etree._Element) -> str:
        args = [_js_string(etree.QName(elem).localname), self.props(elem, "  ")]
        children = self.children(elem, "  ")
        if children is not None:
            args.append(children)
        return (
            f"({self.helper('openBlock')}(), {self.helper('createElementBlock')}(" + ", ".join(args) + "))"
        )


def vue_component(svg: str, component_name: str, fmt: str) -> str:
    render = _VueRender()
    body = render.block(parse_svg(svg))
    imports = ", ".join(f"{h} as _{h}" for h in VUE_HELPERS if h in render.helpers)
    code = (
        f'import {{ {imports} }} from "vue"\n'
        "\n"
        "export function render(_ctx, _cache) {\n"
        f"  return {body}\n"
        "}"
    )
    if fmt == "esm":
        return code.replace("export function", "export default function")

    def _require(m: re.Match) -> str:
        names = ", ".join(re.sub(r"\s+as\s+", ": ", i.strip()) for i in m.group(1).split(","))
        return f'const {{ {names} }} = require("{m.group(3)}")'

    return VUE_IMPORT_RE.sub(_require, code, count=1).replace(
        "export function render", "module.exports = function render"
    )


def vue_types(component_name: str) -> str:
    return (
        "import type { FunctionalComponent, HTMLAttributes, VNodeProps } from 'vue';\n"
        f"declare const {component_name}: FunctionalComponent<HTMLAttributes & VNodeProps>;\n"
        f"export default {component_name};\n"
    )


@dataclass(frozen=True)
class Transformer:
    component: Callable[[str, str, str], str]
    types: Callable[[str], str]


TRANSFORMERS: Dict[str, Transformer] = {
    "react": Transformer(component=react_component, types=react_types),
    "vue": Transformer(component=vue_component, types=vue_types),
}


def get_transformer(package: str) -> Transformer:
    try:
        return TRANSFORMERS[package]
    except KeyError:
        raise UnknownPackageError(f"No transformer found for package {package!r}") from None
