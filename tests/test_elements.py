"""
数据类测试
测试 Origin 与关节级记录的默认值
"""
import unittest
import dataclasses
import sys
from pathlib import Path

import numpy as np

# 添加src路径
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from urdf_assistant.description import (
    Calibration,
    Dynamics,
    JointAttributes,
    JointMimic,
    JointType,
    Limits,
    Origin,
    SafetyController,
    SafetyParams,
)


class TestOrigin(unittest.TestCase):

    def test_identity_default(self):
        origin = Origin()

        self.assertEqual(origin.xyz, (0.0, 0.0, 0.0))
        self.assertEqual(origin.rpy, (0.0, 0.0, 0.0))
        self.assertEqual(origin.attributes(), {"xyz": "0 0 0", "rpy": "0 0 0"})

    def test_sequence_inputs(self):
        """list / numpy 输入统一为 float 元组"""
        origin = Origin(xyz=[1, 2, 3], rpy=np.array([0.0, 0.5, -0.25]))

        self.assertEqual(origin.xyz, (1.0, 2.0, 3.0))
        self.assertEqual(origin.xyz_text(), "1 2 3")
        self.assertEqual(origin.rpy_text(), "0 0.5 -0.25")
        self.assertEqual(origin, Origin(xyz=(1.0, 2.0, 3.0), rpy=(0.0, 0.5, -0.25)))

    def test_wrong_length(self):
        with self.assertRaises(ValueError):
            Origin(xyz=(0.0, 0.0))

    def test_immutable(self):
        with self.assertRaises(dataclasses.FrozenInstanceError):
            Origin().xyz = (1.0, 0.0, 0.0)


class TestJointRecords(unittest.TestCase):

    def test_joint_type_strings(self):
        self.assertEqual(
            [t.as_str() for t in JointType],
            ["prismatic", "revolute", "fixed", "floating", "planar", "continuous"]
        )

    def test_joint_attributes_default(self):
        attrs = JointAttributes()

        self.assertEqual(attrs.joint_name, "")
        self.assertIs(attrs.joint_type, JointType.REVOLUTE)

    def test_defaults(self):
        self.assertEqual(Calibration(), Calibration(rising=0.0, falling=0.0))
        self.assertEqual(Dynamics(), Dynamics(damping=0.0, friction=0.0))
        self.assertEqual(Limits(), Limits(lower=0.0, upper=0.0, effort=0.0, velocity=0.0))
        self.assertEqual(JointMimic(), JointMimic(joint="", multiplier=None, offset=None))
        self.assertEqual(SafetyController(), SafetyController(0.0, 0.0, 0.0, 0.0))
        self.assertEqual(SafetyParams(), SafetyParams(safety_pos_margin=0.0, safety_k_position=0.0))

    def test_optional_fields(self):
        self.assertIsNone(Calibration(rising=None).rising)
        self.assertIsNone(Limits(effort=None).effort)
        self.assertEqual(JointMimic(joint="elbow_joint", multiplier=2.0).multiplier, 2.0)


if __name__ == "__main__":
    unittest.main()
