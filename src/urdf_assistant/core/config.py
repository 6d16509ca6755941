"""
配置管理系统
使用 OmegaConf 加载 / 验证 / 合并 link 描述配置，并转换为 Link 对象
"""
from omegaconf import OmegaConf, DictConfig
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from ..description.elements import Origin
from ..description.geometry import DEFAULT_GEOMETRY_KIND, GEOMETRY_KINDS
from ..description.link import Link
from .logger import get_logger

logger = get_logger(__name__)

INERTIAL_KEYS = ("origin", "radius", "length", "mass")
DEFAULT_CONFIG = Path(__file__).parent.parent / "config" / "defaults.yaml"


class ConfigManager:
    """配置管理器 - 负责加载、验证和导出配置"""

    @staticmethod
    def load(config_path: Union[str, Path] = DEFAULT_CONFIG) -> DictConfig:
        """
        加载配置文件

        Args:
            config_path: 配置文件路径

        Returns:
            OmegaConf 配置对象 (插值已解析)
        """
        if not Path(config_path).exists():
            raise FileNotFoundError(f"配置文件不存在: {config_path}")

        conf = OmegaConf.load(config_path)
        return OmegaConf.create(OmegaConf.to_container(conf, resolve=True))

    @staticmethod
    def validate_config(conf: DictConfig) -> bool:
        """
        验证 link 配置的正确性

        Args:
            conf: 配置对象 (需包含 link 节点)

        Returns:
            验证是否通过
        """
        if not OmegaConf.select(conf, "link.name"):
            logger.error("配置验证失败: 缺少必需字段 link.name")
            return False

        geometry_type = OmegaConf.select(conf, "link.geometry_type", default=DEFAULT_GEOMETRY_KIND)
        if geometry_type is not None and geometry_type not in GEOMETRY_KINDS:
            logger.error(f"配置验证失败: 未知 geometry_type '{geometry_type}', 可选 {GEOMETRY_KINDS}")
            return False

        inertial = OmegaConf.select(conf, "link.inertial")
        if inertial is not None:
            missing = [key for key in INERTIAL_KEYS if OmegaConf.select(inertial, key) is None]
            if missing:
                logger.error(f"配置验证失败: inertial 缺少字段 {missing}")
                return False
            for key in ("radius", "length", "mass"):
                try:
                    float(inertial[key])
                except (TypeError, ValueError):
                    logger.error(f"配置验证失败: inertial.{key} 不是数值: {inertial[key]!r}")
                    return False

        logger.info("配置验证通过")
        return True

    @staticmethod
    def merge_configs(base_config: DictConfig, override_config: DictConfig) -> DictConfig:
        """
        合并两个配置对象，后面的覆盖前面的
        """
        return OmegaConf.merge(base_config, override_config)

    @staticmethod
    def save_config(conf: DictConfig, path: str):
        """保存配置到文件"""
        OmegaConf.save(conf, path)


def origin_from_config(conf: Optional[Any]) -> Optional[Origin]:
    """{xyz: [...], rpy: [...]} -> Origin；缺省的分量取 0"""
    if conf is None:
        return None
    xyz = conf.get("xyz") or (0.0, 0.0, 0.0)
    rpy = conf.get("rpy") or (0.0, 0.0, 0.0)
    return Origin(xyz=tuple(xyz), rpy=tuple(rpy))


def _section_origin(section: Optional[Any]) -> Optional[Origin]:
    # 给出了 visual / collision 节点但没有 origin: 按单位位姿处理
    if section is None:
        return None
    origin = origin_from_config(section.get("origin"))
    return origin if origin is not None else Origin()


def link_from_config(conf: Union[DictConfig, Mapping[str, Any]]) -> Link:
    """
    将配置中的 link 节点转换为 Link

    Args:
        conf: link 节点 (DictConfig 或普通 dict)，例如 ConfigManager.load(path).link

    Raises:
        ValueError: 名称为空或 inertial 字段不完整
    """
    visual = conf.get("visual")
    collision = conf.get("collision")
    inertial = conf.get("inertial")
    material = visual.get("material") if visual is not None else None

    return Link.from_fields(
        link_name=conf.get("name"),
        visual_origin=_section_origin(visual),
        visual_mesh_filename=visual.get("mesh_filename") if visual is not None else None,
        material_name=material.get("name") if material is not None else None,
        material_color=material.get("color") if material is not None else None,
        collision_origin=_section_origin(collision),
        collision_mesh=collision.get("mesh_filename") if collision is not None else None,
        inertial_origin=origin_from_config(inertial.get("origin")) if inertial is not None else None,
        inertial_radius=inertial.get("radius") if inertial is not None else None,
        inertial_length=inertial.get("length") if inertial is not None else None,
        inertial_mass=inertial.get("mass") if inertial is not None else None,
        geometry_type=conf.get("geometry_type", DEFAULT_GEOMETRY_KIND),
        geometry_dimensions=[str(v) for v in conf.get("geometry_dimensions") or []],
    )
