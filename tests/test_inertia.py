"""
惯性计算测试
测试圆柱惯性张量、定点舍入与 <inertial> 片段输出
"""
import unittest
import itertools
import sys
from pathlib import Path

import numpy as np

# 添加src路径
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from urdf_assistant.core.xml_io import round_fixed, pretty_print_xml
from urdf_assistant.description.elements import Origin
from urdf_assistant.description.inertia import (
    TRANSVERSE_FACTOR,
    CylinderInertia,
    InertiaTensor,
    compute_tensor,
)

EXPECTED_FRAGMENT = (
    '<inertial><mass value="1.000000000"/><origin xyz="0 0 0" rpy="0 0 0"/>'
    '<inertia ixx="0.005833331" ixy="0.000000000" ixz="0.000000000" '
    'iyy="0.005833331" iyz="0.000000000" izz="0.005000000"/></inertial>'
)


class TestComputeTensor(unittest.TestCase):
    """测试惯性张量计算"""

    def test_reference_cylinder(self):
        """r=0.1, l=0.2, m=1.0 的参考值"""
        inertia = compute_tensor(0.1, 0.2, 1.0)

        self.assertEqual(inertia.ixx, 0.005833331)
        self.assertEqual(inertia.ixy, 0.0)
        self.assertEqual(inertia.ixz, 0.0)
        self.assertEqual(inertia.iyy, 0.005833331)
        self.assertEqual(inertia.iyz, 0.0)
        self.assertEqual(inertia.izz, 0.005)

    def test_tensor_properties(self):
        """ixx == iyy, 惯性积为 0, 各分量为 9 位小数"""
        values = [0.0, 0.05, 0.1, 0.37, 1.0, 2.5]
        for radius, length, mass in itertools.product(values, values, [0.0, 0.3, 1.0, 12.0]):
            inertia = compute_tensor(radius, length, mass)

            self.assertEqual(inertia.ixx, inertia.iyy)
            self.assertEqual(inertia.ixx, round(TRANSVERSE_FACTOR * mass * (3 * radius ** 2 + length ** 2), 9))
            self.assertEqual(inertia.izz, round(0.5 * mass * radius ** 2, 9))
            self.assertEqual((inertia.ixy, inertia.ixz, inertia.iyz), (0.0, 0.0, 0.0))

            # 与 1/12 的解析式只差截断常数带来的相对误差
            exact = mass * (3 * radius ** 2 + length ** 2) / 12.0
            self.assertLessEqual(abs(inertia.ixx - exact), 1e-6 * exact + 1e-9)

    def test_zero_inputs(self):
        """零输入得到零张量，不报错"""
        self.assertEqual(compute_tensor(0.0, 0.0, 0.0), InertiaTensor())

    def test_rounding_idempotent(self):
        """对 9 位小数再次舍入不改变数值"""
        for value in [0.0, 0.005833331, 1.0 / 3.0, 2.0 / 7.0, 123.456789012345, -0.1234567894]:
            once = round_fixed(value)
            self.assertEqual(round_fixed(once), once)
            self.assertEqual(once, float(f"{value:.9f}"))

    def test_as_matrix(self):
        """3x3 对称矩阵"""
        matrix = compute_tensor(0.1, 0.2, 1.0).as_matrix()

        self.assertEqual(matrix.shape, (3, 3))
        self.assertTrue(np.allclose(matrix, matrix.T))
        self.assertTrue(np.allclose(np.diag(matrix), [0.005833331, 0.005833331, 0.005]))


class TestCylinderInertia(unittest.TestCase):
    """测试 <inertial> 片段"""

    def setUp(self):
        self.cylinder = CylinderInertia(radius=0.1, length=0.2, mass=1.0, origin=Origin())

    def test_calculate_inertia(self):
        self.assertEqual(self.cylinder.calculate_inertia(), compute_tensor(0.1, 0.2, 1.0))

    def test_to_xml(self):
        """紧凑片段逐字匹配"""
        self.assertEqual(self.cylinder.to_xml(), EXPECTED_FRAGMENT)

    def test_default_origin(self):
        self.assertEqual(CylinderInertia(0.1, 0.2, 1.0).to_xml(), EXPECTED_FRAGMENT)

    def test_origin_uses_default_float_format(self):
        """origin 不使用定点格式，mass 使用"""
        cylinder = CylinderInertia(0.1, 0.2, 2.5, Origin(xyz=(0.0, 0.0, 0.1), rpy=(0.0, 0.5, 0.0)))
        xml = cylinder.to_xml()

        self.assertIn('<mass value="2.500000000"/>', xml)
        self.assertIn('<origin xyz="0 0 0.1" rpy="0 0.5 0"/>', xml)

    def test_pretty_xml(self):
        expected = "\n".join([
            "<inertial>",
            '    <mass value="1.000000000"/>',
            '    <origin xyz="0 0 0" rpy="0 0 0"/>',
            '    <inertia ixx="0.005833331" ixy="0.000000000" ixz="0.000000000" '
            'iyy="0.005833331" iyz="0.000000000" izz="0.005000000"/>',
            "</inertial>",
        ])
        self.assertEqual(self.cylinder.to_pretty_xml(), expected)
        self.assertEqual(pretty_print_xml(self.cylinder.to_xml()), expected)


if __name__ == "__main__":
    unittest.main()
