"""SVG serialization of a rendered scene."""

from __future__ import annotations

import logging
from pathlib import Path as FilePath
from xml.etree import ElementTree as ET

from hex_rail.config import CANVAS_ORIGIN_X_PX, CANVAS_ORIGIN_Y_PX
from hex_rail.scene import Circle, Line, Path, Polygon, Scene, format_number
from hex_rail.visual import stylesheet

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _primitive_element(primitive) -> ET.Element:
    if isinstance(primitive, Polygon):
        return ET.Element("polygon", {"class": primitive.css_class, "points": primitive.points_attr})
    if isinstance(primitive, Line):
        (x1, y1), (x2, y2) = primitive.start, primitive.end
        return ET.Element(
            "line",
            {
                "class": primitive.css_class,
                "x1": format_number(x1),
                "y1": format_number(y1),
                "x2": format_number(x2),
                "y2": format_number(y2),
            },
        )
    if isinstance(primitive, Path):
        return ET.Element("path", {"class": primitive.css_class, "d": primitive.d})
    if isinstance(primitive, Circle):
        cx, cy = primitive.center
        return ET.Element(
            "circle",
            {
                "class": primitive.css_class,
                "cx": format_number(cx),
                "cy": format_number(cy),
                "r": format_number(primitive.radius),
            },
        )
    raise TypeError(f"Unsupported primitive: {primitive!r}")


def scene_to_element(scene: Scene, origin=(CANVAS_ORIGIN_X_PX, CANVAS_ORIGIN_Y_PX)) -> ET.Element:
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NAMESPACE,
            "viewBox": f"0 0 {scene.width} {scene.height}",
            "width": str(scene.width),
            "height": str(scene.height),
        },
    )
    style = ET.SubElement(root, "style")
    style.text = stylesheet()

    origin_x, origin_y = origin
    for group in scene.cells:
        x, y = group.origin
        element = ET.SubElement(
            root,
            "g",
            {"transform": f"translate({format_number(origin_x + x)},{format_number(origin_y + y)})"},
        )
        for child in group.children:
            element.append(_primitive_element(child))
    return root


def scene_to_svg(scene: Scene, origin=(CANVAS_ORIGIN_X_PX, CANVAS_ORIGIN_Y_PX)) -> str:
    return ET.tostring(scene_to_element(scene, origin), encoding="unicode")


def write_svg(scene: Scene, path) -> FilePath:
    target = FilePath(path)
    target.write_text(scene_to_svg(scene), encoding="utf-8")
    logger.info("Wrote SVG scene to %s", target)
    return target


__all__ = ["scene_to_element", "scene_to_svg", "write_svg"]
