# -*- coding: utf-8 -*-
"""
path_utils.py
-------------
统一管理截图、trace、视频、HAR 等输出路径。
"""

import os
import re
from datetime import datetime

from framework.core.config_loader import get_config


def ensure_dir(path: str) -> None:
    """确保目录存在，不存在则递归创建。"""
    os.makedirs(path, exist_ok=True)


def safe_file_name(name: str) -> str:
    """
    把用例名转换为可用作文件名的字符串。

    参数化用例名形如 test_login[LOGIN]，方括号等字符统一替换为下划线。
    """
    return re.sub(r"[^\w.-]+", "_", name).strip("_")


def _report_dir(key: str, default: str) -> str:
    report_cfg = get_config().get("report", {})
    directory = report_cfg.get(key, default)
    ensure_dir(directory)
    return directory


def _timestamped_path(directory: str, test_name: str, suffix: str) -> str:
    # 带微秒的时间戳，避免同名用例重复执行时互相覆盖
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
    return os.path.join(directory, f"{safe_file_name(test_name)}_{timestamp}{suffix}")


def get_screenshot_path(test_name: str) -> str:
    """
    根据用例名生成失败截图路径（.png）。

    :param test_name: 用例名（一般来自 item.name）
    """
    directory = _report_dir("screenshot_dir", "reports/screenshots")
    return _timestamped_path(directory, test_name, ".png")


def get_trace_path(test_name: str) -> str:
    """根据用例名生成 Playwright trace 文件路径（.zip）。"""
    directory = _report_dir("trace_dir", "reports/traces")
    return _timestamped_path(directory, test_name, ".zip")


def get_har_path(test_name: str) -> str:
    directory = _report_dir("har_dir", "reports/har")
    return _timestamped_path(directory, test_name, ".har")


def get_video_dir() -> str:
    return _report_dir("video_dir", "reports/videos")
