"""
全局 Pytest 配置与钩子：
1. 以插件方式注册浏览器 fixtures；
2. 用例失败时自动截图 + 导出 Playwright trace；
3. 将截图 / trace 挂到 pytest-html 报告中。
"""

from pathlib import Path
from typing import Any

import pytest
import pytest_html
from playwright.sync_api import Page

from framework.core.logger import get_logger
from utils.path_utils import get_screenshot_path, get_trace_path

logger = get_logger()

REPORT_ROOT = Path("reports")

pytest_plugins = [
    "framework.fixtures.browser_fixtures",  # config / playwright_instance / browser / page
]


def _relative_to_report(path: str) -> str:
    """报告 HTML 位于 reports/ 下，附件路径转换为相对路径后才能正常引用。"""
    try:
        return Path(path).relative_to(REPORT_ROOT).as_posix()
    except ValueError:
        return Path(path).as_posix()


def _attach_screenshot(page: Page, test_name: str, extras: list) -> None:
    screenshot_path = get_screenshot_path(test_name)
    try:
        page.screenshot(path=screenshot_path, full_page=True)
        logger.error(f"[截图] 已保存失败截图: {screenshot_path}")
        extras.append(
            pytest_html.extras.image(_relative_to_report(screenshot_path), mime_type="image/png")
        )
    except Exception as e:  # noqa: BLE001
        logger.error(f"[截图失败] 保存截图时发生异常: {e}")


def _attach_trace(page: Page, test_name: str, extras: list) -> None:
    trace_path = get_trace_path(test_name)
    try:
        page.context.tracing.stop(path=trace_path)
        logger.error(f"[Tracing] 已保存失败 trace 文件: {trace_path}")
        extras.append(
            pytest_html.extras.html(
                f'<a href="{_relative_to_report(trace_path)}" target="_blank">'
                f"下载 Playwright trace</a>"
            )
        )
    except Exception as e:  # noqa: BLE001
        logger.error(f"[Tracing] 保存 trace 时发生异常: {e}")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item: pytest.Item, call: pytest.CallInfo[Any]) -> None:
    """
    用例执行阶段（call）失败时，截图并导出 trace，作为 extras 挂到报告。

    setup / teardown 阶段不处理；未注入 page 的用例直接跳过。
    """
    outcome = yield
    report = outcome.get_result()

    if report.when != "call":
        return

    extras = getattr(report, "extras", [])

    if report.failed:
        logger.error(f"[失败] 用例失败，准备自动截图和保存 trace: {report.nodeid}")
        page: Page | None = item.funcargs.get("page")
        if page is None:
            logger.warning("[失败] 用例中未注入 page fixture，无法截图和保存 trace")
        else:
            _attach_screenshot(page, item.name, extras)
            _attach_trace(page, item.name, extras)

    report.extras = extras
