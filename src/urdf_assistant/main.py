#!/usr/bin/env python3
"""
urdf-assistant 入口: 由配置生成 URDF link
"""
import sys

import hydra
from omegaconf import DictConfig, OmegaConf
from rich.console import Console
from rich.syntax import Syntax

from urdf_assistant.core.config import ConfigManager, link_from_config
from urdf_assistant.core.logger import configure_logging
from urdf_assistant.core.xml_io import pretty_print_xml, save_urdf
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


def log_joint_records(logger):
    """打印关节级数据类的示例值"""
    joint_attrs = JointAttributes(joint_name="elbow_joint", joint_type=JointType.REVOLUTE)
    logger.info(f"Joint name: {joint_attrs.joint_name}, type: {joint_attrs.joint_type.as_str()}")
    logger.info(f"Safety controller: {SafetyController()}")
    logger.info(f"Origin: {Origin()}")
    logger.info(f"Calibration: {Calibration(rising=0.4)}")
    logger.info(f"Dynamics: {Dynamics()}")
    logger.info(f"Limits: {Limits()}")
    logger.info(f"Joint mimic: {JointMimic(joint='elbow_joint', multiplier=0.0, offset=0.0)}")
    logger.info(f"Safety params: {SafetyParams(safety_pos_margin=0.5, safety_k_position=0.7)}")


@hydra.main(config_path="config", config_name="defaults", version_base=None)
def main(cfg: DictConfig):
    logger = configure_logging(cfg.logging.level, cfg.logging.file)

    if cfg.demo:
        log_joint_records(logger)

    if not ConfigManager.validate_config(cfg):
        sys.exit(1)

    try:
        link = link_from_config(OmegaConf.to_container(cfg.link, resolve=True))
    except ValueError as e:
        logger.error(f"Invalid link description: {e}")
        sys.exit(1)

    xml_text = link.to_xml()
    logger.info(f"Link '{link.name}' serialized")

    if cfg.output.path:
        save_urdf(xml_text, cfg.output.path, pretty=cfg.output.pretty)
        return

    if cfg.output.pretty:
        xml_text = pretty_print_xml(xml_text)

    console = Console()
    if console.is_terminal:
        console.print(Syntax(xml_text, "xml", theme="ansi_dark", background_color="default"))
    else:
        print(xml_text)


if __name__ == "__main__":
    main()
