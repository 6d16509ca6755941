"""
关节属性
"""

from dataclasses import dataclass
from enum import Enum


class JointType(Enum):
    PRISMATIC = "prismatic"
    REVOLUTE = "revolute"
    FIXED = "fixed"
    FLOATING = "floating"
    PLANAR = "planar"
    CONTINUOUS = "continuous"

    def as_str(self) -> str:
        """URDF 中 type 属性的取值"""
        return self.value


@dataclass(frozen=True)
class JointAttributes:
    joint_name: str = ""
    joint_type: JointType = JointType.REVOLUTE
