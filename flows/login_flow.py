# flows/login_flow.py
# -*- coding: utf-8 -*-
"""
login_flow.py
-------------
登录业务流程（Flow 层）。

流程严格按顺序执行，没有分支和重试：
打开登录页 -> 等待表单可见 -> 输入用户名 -> 输入密码 -> 点击登录
-> 等待 URL 跳转到商品列表页 -> 断言 URL。
任何一步超时或断言失败，都直接抛出 Playwright 原生异常。
"""

import re

from playwright.sync_api import Page

from framework.core.base_flow import BaseFlow
from framework.core.config_loader import get_config
from framework.core.logger import get_logger
from pages.login_page import LoginPage

logger = get_logger()

DEFAULT_SUCCESS_URL_PATTERN = ".*inventory"


class LoginFlow(BaseFlow):
    """
    登录业务流程类。

    继承 BaseFlow，复用 step() 步骤日志。
    """

    def __init__(self, page: Page):
        """
        :param page: pytest fixture 提供的 Page 实例
        """
        super().__init__(page)
        self.login_page = LoginPage(page)

        app_cfg = get_config().get("app", {})
        self.success_url = re.compile(
            app_cfg.get("success_url_pattern") or DEFAULT_SUCCESS_URL_PATTERN
        )

    def _get_default_account(self) -> tuple[str, str]:
        """
        获取默认登录账号（用户名、密码），只取 configs/config.yaml 中的 account 节点。

        账号是固定的字面量，不允许被环境变量替换。
        """
        account_cfg = get_config().get("account", {})

        username = account_cfg.get("username")
        password = account_cfg.get("password")

        if not username or not password:
            raise ValueError(
                "默认登录账号未配置，请在配置文件 account 下配置用户名和密码。"
            )

        return username, password

    def login(self, username: str, password: str) -> None:
        """
        使用指定账号提交登录表单（只做操作，不做断言）。

        :param username: 登录用户名，原样输入
        :param password: 登录密码，原样输入
        """
        self.step("打开登录页面")
        self.login_page.open_login_page()

        self.step("等待登录表单可见")
        self.login_page.wait_for_form()

        self.step(f"输入用户名：{username}")
        self.login_page.input_username(username)

        self.step("输入密码")
        self.login_page.input_password(password)

        self.step("点击登录按钮")
        self.login_page.click_login_button()

        logger.info("[流程] 登录表单已提交（是否成功由后续步骤断言）")

    def login_should_success(
        self,
        username: str | None = None,
        password: str | None = None,
    ) -> None:
        """
        带断言的“登录应当成功”流程。

        - 传了 username/password：使用传入的账号；
        - 没传：使用配置文件中的默认账号。

        成功标准：URL 跳转到匹配 app.success_url_pattern 的页面。
        """
        if username is None or password is None:
            username, password = self._get_default_account()
            logger.info(f"[流程] 使用默认账号执行 login_should_success: username={username}")
        else:
            logger.info(f"[流程] 使用自定义账号执行 login_should_success: username={username}")

        self.login(username=username, password=password)

        self.step("等待跳转到登录后页面")
        self.login_page.wait_for_url(self.success_url)

        self.step("断言当前 URL 为登录后页面")
        self.login_page.assert_url_matches(self.success_url)
