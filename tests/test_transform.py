import pytest

from svg import optimize_svg
from transform import (
    TRANSFORMERS,
    UnknownPackageError,
    get_transformer,
    react_component,
    react_prop_name,
    react_types,
    react_value,
    vue_component,
    vue_types,
)

from conftest import ARROW_LEFT

ARROW_SVG = optimize_svg(ARROW_LEFT)

REACT_ESM = """import * as React from "react";

function ArrowLeftIcon(props, svgRef) {
  return /*#__PURE__*/React.createElement("svg", Object.assign({
    fill: "none",
    viewBox: "0 0 24 24",
    strokeWidth: 2,
    stroke: "currentColor",
    "aria-hidden": "true",
    ref: svgRef
  }, props), /*#__PURE__*/React.createElement("path", {
    strokeLinecap: "round",
    strokeLinejoin: "round",
    d: "M15 19l-7-7 7-7"
  }));
}

const ForwardRef = React.forwardRef(ArrowLeftIcon);
export default ForwardRef;"""

VUE_ESM = """import { createElementVNode as _createElementVNode, openBlock as _openBlock, createElementBlock as _createElementBlock } from "vue"

export default function render(_ctx, _cache) {
  return (_openBlock(), _createElementBlock("svg", {
    fill: "none",
    viewBox: "0 0 24 24",
    "stroke-width": "2",
    stroke: "currentColor",
    "aria-hidden": "true"
  }, [
    _createElementVNode("path", {
      "stroke-linecap": "round",
      "stroke-linejoin": "round",
      d: "M15 19l-7-7 7-7"
    })
  ]))
}"""


def test_react_esm():
    assert react_component(ARROW_SVG, "ArrowLeftIcon", "esm") == REACT_ESM


def test_react_cjs():
    code = react_component(ARROW_SVG, "ArrowLeftIcon", "cjs")
    assert code.startswith('const React = require("react");\n')
    assert code.endswith("module.exports = ForwardRef;")
    assert "import " not in code
    assert "export default" not in code


@pytest.mark.parametrize(
    "name, prop",
    [
        ("stroke-width", "strokeWidth"),
        ("class", "className"),
        ("aria-hidden", "aria-hidden"),
        ("data-slot", "data-slot"),
        ("xlink:href", "xlinkHref"),
        ("fill-rule", "fillRule"),
        ("d", "d"),
        ("tabindex", "tabIndex"),
        ("for", "htmlFor"),
    ],
)
def test_react_prop_name(name, prop):
    assert react_prop_name(name) == prop


def test_react_style_and_xlink():
    svg = (
        '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">'
        '<use xlink:href="#a" style="fill-opacity: 0.5; --tone: red"/>'
        "<title>Arrow</title></svg>"
    )
    code = react_component(svg, "UseIcon", "esm")
    assert 'xlinkHref: "#a"' in code
    assert 'fillOpacity: "0.5"' in code
    assert '"--tone": "red"' in code
    assert 'React.createElement("title", null, "Arrow")' in code


def test_react_keeps_mixed_text():
    svg = '<svg viewBox="0 0 24 24"><text x="1">Hello <tspan>big</tspan> world</text></svg>'
    react = react_component(svg, "TextIcon", "esm")
    vue = vue_component(svg, "TextIcon", "esm")
    for word in ("Hello", "big", "world"):
        assert f'"{word}"' in react
        assert f'"{word}"' in vue
    assert '"Hello", /*#__PURE__*/React.createElement("tspan", null, "big"), "world")' in react


@pytest.mark.parametrize(
    "value, expected",
    [
        ("05", '"05"'),
        ("-007", '"-007"'),
        ("0", "0"),
        ("0.5", "0.5"),
        ("12", "12"),
        ("-1.25", "-1.25"),
        (".5", ".5"),
        ("0 0 24 24", '"0 0 24 24"'),
    ],
)
def test_react_value(value, expected):
    assert react_value(value) == expected


def test_react_leading_zero_stays_string():
    svg = '<svg viewBox="0 0 24 24"><rect x="05" y="2" width="10" height="10"/></svg>'
    code = react_component(svg, "RectIcon", "esm")
    assert "x: 05" not in code
    assert 'x: "05"' in code
    assert "y: 2" in code


def test_vue_esm():
    assert vue_component(ARROW_SVG, "ArrowLeftIcon", "esm") == VUE_ESM


def test_vue_cjs():
    code = vue_component(ARROW_SVG, "ArrowLeftIcon", "cjs")
    first_line = code.splitlines()[0]
    assert first_line == (
        "const { createElementVNode: _createElementVNode, openBlock: _openBlock, "
        'createElementBlock: _createElementBlock } = require("vue")'
    )
    assert "module.exports = function render(_ctx, _cache) {" in code
    assert "export " not in code


def test_vue_only_imports_used_helpers():
    svg = '<svg viewBox="0 0 24 24" stroke="currentColor"/>'
    code = vue_component(svg, "EmptyIcon", "esm")
    assert code.splitlines()[0] == (
        'import { openBlock as _openBlock, createElementBlock as _createElementBlock } from "vue"'
    )
    assert "_createElementVNode" not in code


def test_types():
    assert react_types("ArrowLeftIcon") == (
        "import * as React from 'react';\n"
        "declare function ArrowLeftIcon(props: React.ComponentProps<'svg'>): JSX.Element;\n"
        "export default ArrowLeftIcon;\n"
    )
    assert "declare const ArrowLeftIcon: FunctionalComponent<HTMLAttributes & VNodeProps>;" in vue_types(
        "ArrowLeftIcon"
    )


def test_get_transformer():
    assert get_transformer("react") is TRANSFORMERS["react"]
    assert get_transformer("vue").types is vue_types


def test_unknown_package():
    with pytest.raises(UnknownPackageError, match="No transformer found"):
        get_transformer("svelte")
