"""
URDF 元素数据类
Origin 被 visual / collision / inertial 共用；其余为关节级记录，目前不参与序列化
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..core.xml_io import format_vector

Vector3 = Tuple[float, float, float]


@dataclass(frozen=True)
class Origin:
    """
    刚体位姿

    Attributes:
        xyz: 平移 (m)
        rpy: 旋转 roll / pitch / yaw (rad)
    """
    xyz: Vector3 = (0.0, 0.0, 0.0)
    rpy: Vector3 = (0.0, 0.0, 0.0)

    def __post_init__(self):
        if len(self.xyz) != 3 or len(self.rpy) != 3:
            raise ValueError(f"Origin needs 3 components, got xyz={self.xyz} rpy={self.rpy}")
        # 允许传入 list / numpy 数组，统一成 float 元组
        object.__setattr__(self, "xyz", tuple(float(v) for v in self.xyz))
        object.__setattr__(self, "rpy", tuple(float(v) for v in self.rpy))

    def xyz_text(self) -> str:
        return format_vector(self.xyz)

    def rpy_text(self) -> str:
        return format_vector(self.rpy)

    def attributes(self) -> dict:
        return {"xyz": self.xyz_text(), "rpy": self.rpy_text()}


@dataclass(frozen=True)
class Calibration:
    rising: Optional[float] = 0.0
    falling: float = 0.0


@dataclass(frozen=True)
class Dynamics:
    damping: Optional[float] = 0.0
    friction: Optional[float] = 0.0


@dataclass(frozen=True)
class Limits:
    lower: Optional[float] = 0.0
    upper: Optional[float] = 0.0
    effort: Optional[float] = 0.0
    velocity: Optional[float] = 0.0


@dataclass(frozen=True)
class JointMimic:
    joint: str = ""
    multiplier: Optional[float] = None
    offset: Optional[float] = None


@dataclass(frozen=True)
class SafetyController:
    soft_lower_limit: float = 0.0
    soft_upper_limit: float = 0.0
    k_position: float = 0.0
    k_velocity: float = 0.0


@dataclass(frozen=True)
class SafetyParams:
    safety_pos_margin: float = 0.0
    safety_k_position: float = 0.0
