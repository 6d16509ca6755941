"""
Link Module: 组装完整的 <link> 元素
visual -> collision -> inertial 依次输出，缺省的子结构整体省略
"""

from dataclasses import dataclass, field
from typing import Optional, Sequence
from xml.dom import minidom

from ..core.logger import get_logger
from ..core.xml_io import (
    close_container,
    create_element,
    encode_xml,
    pretty_print_xml,
    to_compact_xml,
)
from .elements import Origin
from .geometry import DEFAULT_GEOMETRY_KIND, Dimension, Geometry, Material, geometry_from_dimensions
from .inertia import CylinderInertia

logger = get_logger(__name__)


def _add_origin_and_geometry(doc: minidom.Document, parent: minidom.Element,
                             origin: Origin, geometry: Optional[Geometry]):
    create_element(doc, "origin", origin.attributes(), parent)
    geometry_element = create_element(doc, "geometry", parent=parent)
    if geometry is not None:
        geometry.add_to_element(doc, geometry_element)
    close_container(doc, geometry_element)


@dataclass(frozen=True)
class Visual:
    origin: Origin = field(default_factory=Origin)
    geometry: Optional[Geometry] = None
    material: Optional[Material] = None

    def to_element(self, doc: minidom.Document, parent: minidom.Element) -> minidom.Element:
        visual = create_element(doc, "visual", parent=parent)
        _add_origin_and_geometry(doc, visual, self.origin, self.geometry)
        if self.material is not None:
            self.material.add_to_element(doc, visual)
        return close_container(doc, visual)


@dataclass(frozen=True)
class Collision:
    origin: Origin = field(default_factory=Origin)
    geometry: Optional[Geometry] = None

    def to_element(self, doc: minidom.Document, parent: minidom.Element) -> minidom.Element:
        collision = create_element(doc, "collision", parent=parent)
        _add_origin_and_geometry(doc, collision, self.origin, self.geometry)
        return close_container(doc, collision)


@dataclass(frozen=True)
class Link:
    """
    URDF link

    Attributes:
        name: link 名称 (非空)
        visual: 可视化描述，None 时省略 <visual>
        collision: 碰撞描述，None 时省略 <collision>
        inertial: 圆柱近似的惯性参数，None 时省略 <inertial>
    """
    name: str
    visual: Optional[Visual] = None
    collision: Optional[Collision] = None
    inertial: Optional[CylinderInertia] = None

    def __post_init__(self):
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Link name must be a non-empty string, got {self.name!r}")

    @classmethod
    def from_fields(cls,
                    link_name: str,
                    visual_origin: Optional[Origin] = None,
                    visual_mesh_filename: Optional[str] = None,
                    material_name: Optional[str] = None,
                    material_color: Optional[str] = None,
                    collision_origin: Optional[Origin] = None,
                    collision_mesh: Optional[str] = None,
                    inertial_origin: Optional[Origin] = None,
                    inertial_radius: Optional[float] = None,
                    inertial_length: Optional[float] = None,
                    inertial_mass: Optional[float] = None,
                    geometry_type: Optional[str] = DEFAULT_GEOMETRY_KIND,
                    geometry_dimensions: Sequence[Dimension] = ()) -> "Link":
        """
        由扁平字段构造 Link

        geometry_type / geometry_dimensions 同时作用于 visual 与 collision；
        mesh 形状分别使用 visual_mesh_filename / collision_mesh。

        Raises:
            ValueError: inertial 的 origin / radius / length / mass 只给出了一部分
        """
        visual = None
        if visual_origin is not None:
            visual = Visual(
                origin=visual_origin,
                geometry=geometry_from_dimensions(geometry_type, geometry_dimensions, visual_mesh_filename),
                material=Material.from_optional(material_name, material_color),
            )

        collision = None
        if collision_origin is not None:
            collision = Collision(
                origin=collision_origin,
                geometry=geometry_from_dimensions(geometry_type, geometry_dimensions, collision_mesh),
            )

        inertial_fields = {
            "inertial_origin": inertial_origin,
            "inertial_radius": inertial_radius,
            "inertial_length": inertial_length,
            "inertial_mass": inertial_mass,
        }
        missing = [key for key, value in inertial_fields.items() if value is None]
        if 0 < len(missing) < len(inertial_fields):
            raise ValueError(f"Link '{link_name}': inertial data is incomplete, missing {missing}")

        inertial = None
        if not missing:
            inertial = CylinderInertia(
                radius=float(inertial_radius),
                length=float(inertial_length),
                mass=float(inertial_mass),
                origin=inertial_origin,
            )

        return cls(name=link_name, visual=visual, collision=collision, inertial=inertial)

    def to_element(self, doc: minidom.Document) -> minidom.Element:
        link = create_element(doc, "link", {"name": self.name})
        if self.visual is not None:
            self.visual.to_element(doc, link)
        if self.collision is not None:
            self.collision.to_element(doc, link)
        if self.inertial is not None:
            self.inertial.to_element(doc, link)
        return close_container(doc, link)

    def to_xml(self) -> str:
        """紧凑文档: 元素之间无空白，无 XML 声明"""
        xml_text = to_compact_xml(self.to_element(minidom.Document()))
        logger.debug(f"Serialized link '{self.name}' ({len(xml_text)} chars)")
        return xml_text

    def to_bytes(self, encoding: str = "utf-8") -> bytes:
        return encode_xml(self.to_xml(), encoding)

    def to_pretty_xml(self) -> str:
        return pretty_print_xml(self.to_xml())
