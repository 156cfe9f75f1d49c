# -*- coding: utf-8 -*-
"""
config_loader.py
----------------
统一加载项目配置，对外提供一个全局可用的配置字典。

设计要点：
1. 配置文件统一放在项目根目录的 configs 目录下；
2. configs/config.yaml 为默认配置，config_<env>.yaml 为环境覆盖配置；
3. 环境名优先取环境变量 SAUCE_UI_ENV，其次取默认配置中的 env 字段；
4. get_config() 使用 lru_cache 懒加载，整个进程只读取一次。
"""

import os
from functools import lru_cache
from typing import Any, Dict

import yaml

ENV_VAR_NAME = "SAUCE_UI_ENV"


def get_project_root() -> str:
    """返回项目根目录（当前文件 -> framework/core -> 项目根）。"""
    current_dir = os.path.dirname(os.path.abspath(__file__))
    return os.path.dirname(os.path.dirname(current_dir))


def _load_yaml_file(file_path: str) -> Dict[str, Any]:
    """
    读取 YAML 文件并返回字典。

    :param file_path: YAML 配置文件的绝对路径
    :return: 解析后的字典，空文件返回 {}
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"配置文件不存在: {file_path}")

    with open(file_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return data


def load_config(config_dir: str, env_name: str | None = None) -> Dict[str, Any]:
    """
    从指定目录加载配置：默认配置 + 环境覆盖配置。

    :param config_dir: 配置目录，需包含 config.yaml
    :param env_name: 环境名；为 None 时使用 config.yaml 中的 env 字段
    :return: 合并后的配置字典
    """
    config = _load_yaml_file(os.path.join(config_dir, "config.yaml"))

    if env_name:
        config["env"] = env_name

    env_name = config.get("env")
    if env_name and env_name != "default":
        env_config_path = os.path.join(config_dir, f"config_{env_name}.yaml")
        # 环境配置文件可选，不存在时仅使用默认配置
        if os.path.exists(env_config_path):
            config = _merge_dicts(config, _load_yaml_file(env_config_path))

    return config


@lru_cache(maxsize=1)
def get_config() -> Dict[str, Any]:
    """
    对外暴露的配置获取函数（单例）。

    环境变量 SAUCE_UI_ENV 可覆盖 env 字段，方便 CI 切换环境。

    :return: 合并后的配置字典
    """
    config_dir = os.path.join(get_project_root(), "configs")
    return load_config(config_dir, os.getenv(ENV_VAR_NAME))


def _merge_dicts(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    递归合并两个字典，override 中的值覆盖 base 中的同名键。

    :param base: 基础配置字典
    :param override: 覆盖配置字典
    :return: 合并后的新字典（不修改入参）
    """
    result = dict(base)
    for key, value in override.items():
        if (
            key in result
            and isinstance(result[key], dict)
            and isinstance(value, dict)
        ):
            result[key] = _merge_dicts(result[key], value)
        else:
            result[key] = value
    return result
