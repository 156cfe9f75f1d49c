# tests/framework/test_packaging.py
# -*- coding: utf-8 -*-
"""安装配置：只声明依赖，不把项目内的通用包名装进 site-packages。"""

import os

import pytest

from framework.core.config_loader import get_project_root

tomllib = pytest.importorskip("tomllib")


def _load_pyproject() -> dict:
    with open(os.path.join(get_project_root(), "pyproject.toml"), "rb") as f:
        return tomllib.load(f)


def test_no_top_level_packages_are_installed():
    setuptools_cfg = _load_pyproject()["tool"]["setuptools"]

    assert setuptools_cfg["packages"] == []


def test_runtime_dependencies_are_declared():
    deps = " ".join(_load_pyproject()["project"]["dependencies"])

    for name in ("playwright", "pytest", "pytest-html", "loguru", "PyYAML"):
        assert name in deps
