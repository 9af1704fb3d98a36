"""
SVG Export

Serializes a renderer Scene to a standalone SVG document.

Structure:
==========
    <svg width=W height=H>
      <g class="graph-container" transform="translate(x,y) scale(k)">
        <g class="links">  <line .../> ...  </g>
        <g class="nodes">
          <g class="node contact-node" data-id="contact-1" transform="translate(x,y)">
            <rect .../> <text>name</text> <text>role</text>
          </g>
        </g>
      </g>
    </svg>
"""

import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from portico.graph.renderer import Scene


SVG_NS = "http://www.w3.org/2000/svg"

_NODE_CLASS = {
    "hub": "portico-node",
    "cluster": "cluster-node",
    "contact": "contact-node",
}


def _num(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def render_svg(scene: "Scene") -> str:
    """Render ``scene`` as an SVG string."""
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": _num(scene.width),
            "height": _num(scene.height),
            "viewBox": f"0 0 {_num(scene.width)} {_num(scene.height)}",
        },
    )
    container = ET.SubElement(
        root,
        "g",
        {"class": "graph-container", "transform": scene.transform.to_svg()},
    )

    links = ET.SubElement(container, "g", {"class": "links"})
    for link in scene.links:
        attrs = {
            "data-id": link.id,
            "x1": _num(link.x1),
            "y1": _num(link.y1),
            "x2": _num(link.x2),
            "y2": _num(link.y2),
            "stroke": link.stroke,
            "stroke-width": _num(link.stroke_width),
        }
        if link.dasharray:
            attrs["stroke-dasharray"] = link.dasharray
        ET.SubElement(links, "line", attrs)

    nodes = ET.SubElement(container, "g", {"class": "nodes"})
    for node in scene.nodes:
        group = ET.SubElement(
            nodes,
            "g",
            {
                "class": f"node {_NODE_CLASS.get(node.kind, 'node')}",
                "data-id": node.id,
                "data-state": node.state.value,
                "transform": f"translate({_num(node.x)},{_num(node.y)})",
            },
        )
        ET.SubElement(
            group,
            "rect",
            {
                "x": _num(-node.width / 2),
                "y": _num(-node.height / 2),
                "width": _num(node.width),
                "height": _num(node.height),
                "rx": _num(node.corner_radius),
                "ry": _num(node.corner_radius),
                "fill": node.fill,
                "stroke": node.stroke,
                "stroke-width": _num(node.stroke_width),
            },
        )
        for label in node.labels:
            text = ET.SubElement(
                group,
                "text",
                {
                    "text-anchor": "middle",
                    "dy": label.dy,
                    "fill": label.color,
                    "font-size": f"{label.font_size}px",
                    "font-weight": str(label.font_weight),
                },
            )
            text.text = label.text

    return ET.tostring(root, encoding="unicode")
