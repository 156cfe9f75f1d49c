"""
browser_fixtures.py
-------------------
Playwright 浏览器相关的 pytest fixture。

设计要点：
1. session 级别的 Playwright 实例，避免重复启动底层 driver；
2. 每个用例 function 级别创建 browser/context/page，用例之间完全隔离；
3. 浏览器类型、headless、slow_mo、超时统一从配置读取；
4. 用例只需要注入 page fixture，不关心浏览器如何启动。
"""
import os
from typing import Generator

import pytest
from playwright.sync_api import Browser, BrowserContext, Page, Playwright, sync_playwright

from framework.core.config_loader import get_config
from framework.core.logger import get_logger
from utils.path_utils import get_har_path, get_video_dir

logger = get_logger()

SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit")


def _env_flag(name: str) -> bool:
    return os.getenv(name, "false").lower() == "true"


def launch_browser(playwright: Playwright, browser_cfg: dict) -> Browser:
    """
    按配置启动浏览器。

    :param playwright: Playwright 实例
    :param browser_cfg: 配置中的 browser 节点
    :return: Browser 实例
    """
    browser_type = browser_cfg.get("type", "chromium")
    headless = browser_cfg.get("headless", True)
    slow_mo = browser_cfg.get("slow_mo", 0)

    if browser_type not in SUPPORTED_BROWSERS:
        raise ValueError(
            f"不支持的浏览器类型: {browser_type}，可选值: {', '.join(SUPPORTED_BROWSERS)}"
        )

    logger.info(
        f"[Browser] 启动浏览器: type={browser_type}, headless={headless}, slow_mo={slow_mo}"
    )
    return getattr(playwright, browser_type).launch(headless=headless, slow_mo=slow_mo)


@pytest.fixture(scope="session")
def config() -> dict:
    """session 级别的配置 fixture，整个测试进程只读取一次配置文件。"""
    cfg = get_config()
    logger.info(f"[配置] 当前环境: {cfg.get('env')}")
    return cfg


@pytest.fixture(scope="session")
def playwright_instance() -> Generator[Playwright, None, None]:
    logger.info("[Playwright] 启动 Playwright 服务")
    with sync_playwright() as playwright:
        yield playwright
    logger.info("[Playwright] 关闭 Playwright 服务")


@pytest.fixture(scope="function")
def browser(playwright_instance: Playwright, config: dict) -> Generator[Browser, None, None]:
    """
    function 级别的 Browser fixture，每个用例独立一个浏览器进程。
    """
    browser = launch_browser(playwright_instance, config.get("browser", {}))

    yield browser

    logger.info("[Browser] 关闭浏览器实例")
    browser.close()


@pytest.fixture(scope="function")
def page(
    browser: Browser, config: dict, request: pytest.FixtureRequest
) -> Generator[Page, None, None]:
    """
    function 级别的 Page fixture。

    1. 每个用例新建独立的 BrowserContext 和 Page；
    2. 启动 tracing，失败时由 conftest 中的 hook 导出 trace；
    3. 默认超时取 timeout.medium，框架内所有等待都以此为上限；
    4. 环境变量开关：
       - SAUCE_RECORD_VIDEO=true  开启视频录制
       - SAUCE_RECORD_HAR=true    开启 HAR 记录
    """
    base_url = config.get("app", {}).get("base_url", "")
    logger.info(f"[Context] 创建浏览器上下文, base_url={base_url}")

    context_args: dict = {"base_url": base_url}

    if _env_flag("SAUCE_RECORD_VIDEO"):
        video_dir = get_video_dir()
        context_args["record_video_dir"] = video_dir
        logger.info(f"[Context] 启用视频录制, 目录: {video_dir}")

    if _env_flag("SAUCE_RECORD_HAR"):
        har_path = get_har_path(request.node.name)
        context_args["record_har_path"] = har_path
        context_args["record_har_mode"] = "minimal"
        logger.info(f"[Context] 启用 HAR 记录, 文件: {har_path}")

    context: BrowserContext = browser.new_context(**context_args)
    context.tracing.start(screenshots=True, snapshots=True, sources=True)

    default_timeout = config.get("timeout", {}).get("medium", 5000)
    context.set_default_timeout(default_timeout)

    page: Page = context.new_page()
    page.set_default_timeout(default_timeout)

    yield page

    logger.info("[Context] 关闭浏览器上下文")
    # 失败用例的 tracing 已在 hook 中导出并停止，这里兜底停掉通过用例的
    try:
        context.tracing.stop()
    except Exception as e:  # noqa: BLE001
        logger.warning(f"[Tracing] 停止 tracing 时发生异常（可能已提前停止）: {e}")

    context.close()
