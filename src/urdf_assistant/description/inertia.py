"""
Inertia Module: 实心圆柱近似的惯性张量
负责计算惯性矩阵并输出 <inertial> 片段
"""

from dataclasses import dataclass, field
from typing import Optional
from xml.dom import minidom

import numpy as np

from ..core.logger import get_logger
from ..core.xml_io import (
    close_container,
    create_element,
    format_fixed,
    pretty_print_xml,
    round_fixed,
    to_compact_xml,
)
from .elements import Origin

logger = get_logger(__name__)

# 1/12 截断到 7 位有效数字；参考输出 (0.005833331) 依赖这个取值
TRANSVERSE_FACTOR = 0.0833333
AXIAL_FACTOR = 0.5

INERTIA_COMPONENTS = ("ixx", "ixy", "ixz", "iyy", "iyz", "izz")


@dataclass(frozen=True)
class InertiaTensor:
    ixx: float = 0.0
    ixy: float = 0.0
    ixz: float = 0.0
    iyy: float = 0.0
    iyz: float = 0.0
    izz: float = 0.0

    def as_matrix(self) -> np.ndarray:
        """3x3 对称惯性矩阵"""
        return np.array([
            [self.ixx, self.ixy, self.ixz],
            [self.ixy, self.iyy, self.iyz],
            [self.ixz, self.iyz, self.izz],
        ])

    def attributes(self) -> dict:
        return {name: format_fixed(getattr(self, name)) for name in INERTIA_COMPONENTS}


def compute_tensor(radius: float, length: float, mass: float) -> InertiaTensor:
    """
    实心圆柱 (轴线沿 z) 的惯性张量

    Args:
        radius: 半径 (m)
        length: 长度 (m)
        mass: 质量 (kg)

    Returns:
        InertiaTensor，各分量保留 9 位小数，惯性积为 0
    """
    ixx_iyy = round_fixed(TRANSVERSE_FACTOR * mass * (3.0 * radius ** 2 + length ** 2))
    izz = round_fixed(AXIAL_FACTOR * mass * radius ** 2)
    return InertiaTensor(
        ixx=ixx_iyy,
        ixy=0.0,
        ixz=0.0,
        iyy=ixx_iyy,
        iyz=0.0,
        izz=izz,
    )


@dataclass(frozen=True)
class CylinderInertia:
    """
    link 的惯性参数 (圆柱近似)

    Attributes:
        radius: 圆柱半径
        length: 圆柱长度
        mass: 质量
        origin: 惯性坐标系位姿
    """
    radius: float
    length: float
    mass: float
    origin: Origin = field(default_factory=Origin)

    def calculate_inertia(self) -> InertiaTensor:
        # 每次重新计算，不缓存
        return compute_tensor(self.radius, self.length, self.mass)

    def to_element(self, doc: minidom.Document, parent: Optional[minidom.Element] = None) -> minidom.Element:
        inertia = self.calculate_inertia()
        logger.debug(f"Inertia for r={self.radius} l={self.length} m={self.mass}: {inertia}")

        inertial = create_element(doc, "inertial", parent=parent)
        create_element(doc, "mass", {"value": format_fixed(self.mass)}, inertial)
        create_element(doc, "origin", self.origin.attributes(), inertial)
        create_element(doc, "inertia", inertia.attributes(), inertial)
        return close_container(doc, inertial)

    def to_xml(self) -> str:
        """紧凑的 <inertial> 片段"""
        return to_compact_xml(self.to_element(minidom.Document()))

    def to_pretty_xml(self) -> str:
        return pretty_print_xml(self.to_xml())
