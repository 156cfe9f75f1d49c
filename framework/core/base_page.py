# framework/core/base_page.py
# -*- coding: utf-8 -*-
"""
base_page.py
------------
所有 Page Object 的基类，对 Playwright 的 Page 做一层薄封装。

要点：
1. 超时时间统一从配置读取（short/medium/long），方法可单独传 timeout；
2. 元素参数既可以是定位字符串，也可以是 get_by_xxx 返回的 Locator；
3. 所有 Playwright 异常只记录日志后原样抛出，不做重试、不吞异常。
"""

import re

from playwright.sync_api import (
    Error as PlaywrightError,
    Locator,
    Page,
    TimeoutError as PlaywrightTimeoutError,
    expect,
)

from framework.core.config_loader import get_config
from framework.core.logger import get_logger

logger = get_logger()

UrlPattern = str | re.Pattern[str]


def join_url(base_url: str, path: str | None) -> str:
    """
    拼接 base_url 与页面路径。

    - path 为空：直接返回 base_url；
    - path 为绝对 URL（http 开头）：直接返回 path；
    - 其他情况：按 "/" 拼接，两端多余的斜杠会被去掉。
    """
    base_url = (base_url or "").rstrip("/")
    path = (path or "").strip()

    if not path:
        return base_url
    if path.startswith("http"):
        return path
    return f"{base_url}/{path.lstrip('/')}"


def _describe(target: str | Locator | UrlPattern) -> str:
    if isinstance(target, re.Pattern):
        return f"/{target.pattern}/"
    return str(target)


class BasePage:
    """
    Page Object 基类。

    属性：
        page: Playwright Page 实例；
        _short_timeout / _medium_timeout / _long_timeout: 配置中的超时（毫秒）。
    """

    def __init__(self, page: Page):
        """
        :param page: Playwright Page 实例，由 pytest fixture 传入
        """
        self.page = page

        timeout_cfg = get_config().get("timeout", {})
        self._short_timeout: int = timeout_cfg.get("short", 3000)
        self._medium_timeout: int = timeout_cfg.get("medium", 5000)
        self._long_timeout: int = timeout_cfg.get("long", 10000)

    def _locate(self, target: str | Locator) -> Locator:
        if isinstance(target, str):
            return self.page.locator(target)
        return target

    # ========== 导航 ==========

    def open(self, url: str, wait_until: str = "load") -> None:
        """
        打开指定 URL。

        :param url: 完整 URL 或相对路径（依赖 context 的 base_url）
        :param wait_until: load / domcontentloaded / networkidle
        """
        logger.info(f"[导航] 打开页面: {url}")
        try:
            self.page.goto(url, wait_until=wait_until)
        except PlaywrightError as e:
            logger.error(f"[导航失败] 打开页面失败: {url}, 原因: {e.message}")
            raise

    # ========== 元素操作 ==========

    def wait_visible(self, target: str | Locator, timeout: int | None = None) -> Locator:
        """
        等待元素可见，超时抛出 Playwright TimeoutError。

        :param target: 定位字符串或 Locator
        :param timeout: 超时时间（毫秒），默认 medium
        :return: 已可见的 Locator
        """
        effective_timeout = timeout or self._medium_timeout
        logger.info(
            f"[等待] 元素可见: {_describe(target)}, timeout={effective_timeout}ms"
        )
        element = self._locate(target)
        try:
            element.wait_for(state="visible", timeout=effective_timeout)
        except PlaywrightTimeoutError:
            logger.error(
                f"[超时] 元素在 {effective_timeout}ms 内未可见: {_describe(target)}"
            )
            raise
        return element

    def fill(
        self,
        target: str | Locator,
        value: str,
        timeout: int | None = None,
        secret: bool = False,
    ) -> None:
        """
        向输入框填入文本（Playwright 会先清空原内容），值不做任何裁剪。

        :param target: 定位字符串或 Locator
        :param value: 要输入的文本
        :param timeout: 超时时间（毫秒），默认 medium
        :param secret: 为 True 时日志中不打印明文
        """
        effective_timeout = timeout or self._medium_timeout
        shown = "******" if secret else value
        logger.info(
            f"[操作] 输入文本: locator={_describe(target)}, value={shown}, "
            f"timeout={effective_timeout}ms"
        )
        try:
            self._locate(target).fill(value, timeout=effective_timeout)
        except PlaywrightTimeoutError:
            logger.error(f"[超时] 输入文本超时: {_describe(target)}")
            raise

    def click(self, target: str | Locator, timeout: int | None = None) -> None:
        """
        点击元素（Playwright 自带可操作性等待）。

        :param target: 定位字符串或 Locator
        :param timeout: 超时时间（毫秒），默认 medium
        """
        effective_timeout = timeout or self._medium_timeout
        logger.info(
            f"[操作] 点击元素: {_describe(target)}, timeout={effective_timeout}ms"
        )
        try:
            self._locate(target).click(timeout=effective_timeout)
        except PlaywrightTimeoutError:
            logger.error(f"[超时] 点击元素超时: {_describe(target)}")
            raise

    def get_value(self, target: str | Locator, timeout: int | None = None) -> str:
        """读取输入框当前的值。"""
        effective_timeout = timeout or self._medium_timeout
        return self._locate(target).input_value(timeout=effective_timeout)

    def is_visible(self, target: str | Locator, timeout: int | None = None) -> bool:
        """
        判断元素是否可见。

        与 wait_visible 不同，超时不抛异常而是返回 False，只用于探测。
        """
        effective_timeout = timeout or self._short_timeout
        logger.info(
            f"[校验] 判断元素是否可见: {_describe(target)}, timeout={effective_timeout}ms"
        )
        try:
            self._locate(target).wait_for(state="visible", timeout=effective_timeout)
            return True
        except PlaywrightTimeoutError:
            logger.warning(f"[不可见或超时] 元素: {_describe(target)}")
            return False

    # ========== URL 等待 / 断言 ==========

    def wait_for_url(self, pattern: UrlPattern, timeout: int | None = None) -> None:
        """
        等待页面 URL 匹配指定模式，超时抛出 Playwright TimeoutError。

        :param pattern: glob 字符串或正则
        :param timeout: 超时时间（毫秒），默认 long（跳转通常比元素出现慢）
        """
        effective_timeout = timeout or self._long_timeout
        logger.info(
            f"[等待] URL 匹配: {_describe(pattern)}, timeout={effective_timeout}ms"
        )
        try:
            self.page.wait_for_url(pattern, timeout=effective_timeout)
        except PlaywrightTimeoutError:
            logger.error(
                f"[超时] URL 未在 {effective_timeout}ms 内匹配 {_describe(pattern)}，"
                f"当前 URL: {self.page.url}"
            )
            raise

    def assert_url_matches(self, pattern: UrlPattern, timeout: int | None = None) -> None:
        """
        断言当前 URL 匹配指定模式（Playwright expect，失败抛 AssertionError）。
        """
        effective_timeout = timeout or self._medium_timeout
        logger.info(
            f"[断言] URL 匹配: expected={_describe(pattern)}, actual={self.page.url}"
        )
        try:
            expect(self.page).to_have_url(pattern, timeout=effective_timeout)
        except AssertionError:
            logger.error(
                f"[断言失败] URL 不匹配，期望: {_describe(pattern)}，实际: {self.page.url}"
            )
            raise
