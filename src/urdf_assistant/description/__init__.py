"""
Description module for urdf_assistant - URDF link data model and serialization
"""

from .attributes import JointAttributes, JointType
from .elements import (
    Calibration,
    Dynamics,
    JointMimic,
    Limits,
    Origin,
    SafetyController,
    SafetyParams,
)
from .geometry import Box, Cylinder, Geometry, Material, Mesh, Sphere, geometry_from_dimensions
from .inertia import CylinderInertia, InertiaTensor, compute_tensor
from .link import Collision, Link, Visual

__all__ = [
    "JointAttributes",
    "JointType",
    "Calibration",
    "Dynamics",
    "JointMimic",
    "Limits",
    "Origin",
    "SafetyController",
    "SafetyParams",
    "Box",
    "Cylinder",
    "Geometry",
    "Material",
    "Mesh",
    "Sphere",
    "geometry_from_dimensions",
    "CylinderInertia",
    "InertiaTensor",
    "compute_tensor",
    "Collision",
    "Link",
    "Visual",
]
