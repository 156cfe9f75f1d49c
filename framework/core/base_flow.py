# framework/core/base_flow.py
# -*- coding: utf-8 -*-
"""
base_flow.py
------------
业务流程（Flow）基类。

Flow 层负责把若干页面操作串成一个业务步骤序列，
具体 Flow（例如 LoginFlow）只关心步骤本身。
"""

from playwright.sync_api import Page

from framework.core.logger import get_logger

logger = get_logger()


class BaseFlow:
    """
    Flow 层基类。

    属性：
        page: Playwright Page 实例。
        steps: 本次流程已执行的步骤描述，按执行顺序记录。
    """

    def __init__(self, page: Page):
        self.page = page
        self.steps: list[str] = []

    def step(self, description: str) -> None:
        """
        记录一个业务步骤，日志中带序号，便于对照 trace 排查。

        用法：
            self.step("打开登录页面")
        """
        self.steps.append(description)
        logger.info(f"[Flow Step {len(self.steps)}] {description}")

