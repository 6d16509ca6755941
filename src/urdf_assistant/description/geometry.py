"""
Geometry Module: visual / collision 的几何形状
每种形状只携带自己需要的字段 (Mesh / Cylinder / Box / Sphere)
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Union
from xml.dom import minidom

from ..core.logger import get_logger
from ..core.xml_io import create_element, format_float

logger = get_logger(__name__)

GEOMETRY_KINDS = ("mesh", "cylinder", "box", "sphere")
DEFAULT_GEOMETRY_KIND = "mesh"

Dimension = Union[str, float]


def _token(value: Dimension) -> str:
    # 尺寸以文本原样输出；数值按默认浮点格式转成文本
    if isinstance(value, str):
        return value
    return format_float(value)


class Geometry(ABC):
    """几何形状基类"""

    kind: str = ""

    @abstractmethod
    def attributes(self) -> Optional[Dict[str, str]]:
        """
        Returns:
            属性字典 (按输出顺序)；返回 None 表示该形状不输出
        """

    def add_to_element(self, doc: minidom.Document, parent: minidom.Element) -> Optional[minidom.Element]:
        """在 <geometry> 下追加形状元素"""
        attributes = self.attributes()
        if attributes is None:
            logger.debug(f"Skipping <{self.kind}>: missing data")
            return None
        return create_element(doc, self.kind, attributes, parent)


@dataclass(frozen=True)
class Mesh(Geometry):
    filename: Optional[str] = None
    kind = "mesh"

    def attributes(self) -> Optional[Dict[str, str]]:
        if self.filename is None:
            return None
        return {"filename": self.filename}


@dataclass(frozen=True)
class Cylinder(Geometry):
    radius: Dimension
    length: Dimension
    kind = "cylinder"

    def attributes(self) -> Dict[str, str]:
        return {"radius": _token(self.radius), "length": _token(self.length)}


@dataclass(frozen=True)
class Box(Geometry):
    x: Dimension
    y: Dimension
    z: Dimension
    kind = "box"

    def attributes(self) -> Dict[str, str]:
        return {"size": " ".join(_token(v) for v in (self.x, self.y, self.z))}


@dataclass(frozen=True)
class Sphere(Geometry):
    radius: Dimension
    kind = "sphere"

    def attributes(self) -> Dict[str, str]:
        return {"radius": _token(self.radius)}


@dataclass(frozen=True)
class Material:
    """
    visual 材质；name 与 color 必须同时给出

    Attributes:
        name: 材质名称
        color: rgba 文本, 例如 "0.1 0.2 0.3 0.4"
    """
    name: str
    color: str

    @classmethod
    def from_optional(cls, name: Optional[str], color: Optional[str]) -> Optional["Material"]:
        if name is None or color is None:
            return None
        return cls(name, color)

    def add_to_element(self, doc: minidom.Document, parent: minidom.Element) -> minidom.Element:
        material = create_element(doc, "material", {"name": self.name}, parent)
        create_element(doc, "color", {"rgba": self.color}, material)
        return material


def geometry_from_dimensions(kind: Optional[str], dimensions: Sequence[Dimension] = (),
                             mesh_filename: Optional[str] = None) -> Optional[Geometry]:
    """
    由 (形状标签, 尺寸列表) 构造几何形状

    Args:
        kind: mesh / cylinder / box / sphere，None 视为 mesh
        dimensions: cylinder: [radius, length]; box: [x, y, z]; sphere: [radius]
        mesh_filename: mesh 形状使用的文件名

    Returns:
        几何形状；尺寸不足或标签未知时返回 None (该几何元素被省略)
    """
    kind = DEFAULT_GEOMETRY_KIND if kind is None else kind
    dimensions = list(dimensions)

    if kind == "mesh":
        return Mesh(mesh_filename)

    required = {"cylinder": 2, "box": 3, "sphere": 1}.get(kind)
    if required is None:
        logger.debug(f"Unknown geometry type '{kind}', geometry left empty")
        return None
    if len(dimensions) < required:
        logger.debug(f"Geometry '{kind}' needs {required} dimensions, got {len(dimensions)}")
        return None

    if kind == "cylinder":
        return Cylinder(dimensions[0], dimensions[1])
    if kind == "box":
        return Box(dimensions[0], dimensions[1], dimensions[2])
    return Sphere(dimensions[0])
