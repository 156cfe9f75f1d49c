# tests/framework/test_utils.py
# -*- coding: utf-8 -*-
"""不依赖浏览器的工具函数：URL 拼接、输出路径、浏览器类型校验、mock 页面渲染。"""

import os

import pytest

from framework.core.base_page import join_url
from framework.fixtures.browser_fixtures import launch_browser
from utils.network_utils import INVENTORY_PATH, render_login_page
from utils import path_utils
from utils.path_utils import get_screenshot_path, get_trace_path, safe_file_name


@pytest.mark.parametrize(
    "base_url,path,expected",
    [
        ("https://www.saucedemo.com", "", "https://www.saucedemo.com"),
        ("https://www.saucedemo.com/", None, "https://www.saucedemo.com"),
        ("https://www.saucedemo.com/", "/inventory.html", "https://www.saucedemo.com/inventory.html"),
        ("https://www.saucedemo.com", "login", "https://www.saucedemo.com/login"),
        ("https://www.saucedemo.com", "https://other.example/login", "https://other.example/login"),
    ],
)
def test_join_url(base_url, path, expected):
    assert join_url(base_url, path) == expected


def test_safe_file_name_replaces_parametrize_brackets():
    assert safe_file_name("test_login_button[LOGIN]") == "test_login_button_LOGIN"


def test_artifact_paths_are_created_under_report_dirs(tmp_path, monkeypatch):
    report_cfg = {
        "screenshot_dir": str(tmp_path / "screenshots"),
        "trace_dir": str(tmp_path / "traces"),
    }
    monkeypatch.setattr(path_utils, "get_config", lambda: {"report": report_cfg})

    screenshot = get_screenshot_path("test_login[Login]")
    trace = get_trace_path("test_login[Login]")

    assert screenshot.endswith(".png")
    assert trace.endswith(".zip")
    assert os.path.basename(screenshot).startswith("test_login_Login_")
    assert os.path.dirname(screenshot) == report_cfg["screenshot_dir"]
    assert os.path.dirname(trace) == report_cfg["trace_dir"]
    assert os.path.isdir(report_cfg["screenshot_dir"])
    assert os.path.isdir(report_cfg["trace_dir"])


def test_unsupported_browser_type_is_rejected():
    with pytest.raises(ValueError, match="opera"):
        launch_browser(object(), {"type": "opera"})


def test_login_page_markup_uses_data_test_hooks():
    html = render_login_page(button_label='Log"in', username_visible=False)

    assert 'data-test="username"' in html
    assert 'data-test="password"' in html
    assert 'value="Log&quot;in"' in html
    assert 'style="display:none"' in html
    assert INVENTORY_PATH in html
