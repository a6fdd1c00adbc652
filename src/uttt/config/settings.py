import logging
import os

import yaml

# 随包发布的默认配置
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "engine.yaml")


def load_config(config_path=None):
    """
    加载 YAML 配置文件并返回 Python 字典。

    参数:
        config_path (str): 配置文件的路径，为 None 时使用默认的 engine.yaml。

    返回:
        dict: 配置文件内容作为字典（空文件返回空字典）。

    异常:
        FileNotFoundError: 如果配置文件不存在。
        ValueError: 如果文件格式不正确。
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    if not os.path.exists(config_path):
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as file:
            config = yaml.safe_load(file)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse config file {config_path}: {e}") from e
    return config or {}


def setup_logging(config):
    # 只处理 logging 一节，未配置的项使用默认值
    section = (config or {}).get("logging") or {}
    level = section.get("level", "WARNING")
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown logging level: {section.get('level')!r}")
    logging.basicConfig(
        level=level,
        format=section.get("format", "%(asctime)s %(name)s %(levelname)s %(message)s"),
    )
    return level
