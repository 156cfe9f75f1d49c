# pages/login_page.py
# -*- coding: utf-8 -*-
"""
login_page.py
-------------
SauceDemo 登录页的 Page Object（PO 层）。

设计要点：
1. 输入框使用页面自带的 data-test 属性定位（SauceDemo 用的是 data-test，不是 data-testid）；
2. 登录按钮用语义角色 + 不区分大小写的名称正则定位，"Login" / "LOGIN" 都能命中；
3. 登录页 URL = app.base_url + app.login_path，与配置保持一致。
"""

import re

from playwright.sync_api import Locator

from framework.core.base_page import BasePage, join_url
from framework.core.config_loader import get_config


class LoginPage(BasePage):
    """登录页 Page 对象，继承 BasePage。"""

    USERNAME_INPUT = '[data-test="username"]'
    PASSWORD_INPUT = '[data-test="password"]'
    ERROR_MESSAGE = '[data-test="error"]'
    # 登录按钮的可访问名称，按正则匹配且忽略大小写
    LOGIN_BUTTON_NAME = re.compile("login", re.IGNORECASE)

    # ========== URL ==========

    def login_url(self) -> str:
        app_cfg = get_config().get("app", {})
        return join_url(app_cfg.get("base_url", ""), app_cfg.get("login_path"))

    def open_login_page(self) -> None:
        """打开登录页面。"""
        self.open(self.login_url())

    # ========== 内部 Locator ==========

    def _username_input(self) -> Locator:
        return self.page.locator(self.USERNAME_INPUT)

    def _password_input(self) -> Locator:
        return self.page.locator(self.PASSWORD_INPUT)

    def _login_button(self) -> Locator:
        """
        返回登录按钮的 Locator。

        SauceDemo 的按钮是 <input type="submit" value="Login">，
        role 为 button，可访问名称取自 value。
        """
        return self.page.get_by_role("button", name=self.LOGIN_BUTTON_NAME)

    # ========== 对外操作（供 Flow 层调用） ==========

    def wait_for_form(self, timeout: int | None = None) -> None:
        """
        等待登录表单可交互（以用户名输入框可见为准）。

        超时抛出 Playwright TimeoutError，不会无限等待。
        """
        self.wait_visible(self._username_input(), timeout=timeout)

    def input_username(self, username: str) -> None:
        self.fill(self._username_input(), username)

    def input_password(self, password: str) -> None:
        self.fill(self._password_input(), password, secret=True)

    def click_login_button(self) -> None:
        self.click(self._login_button())

    # ========== 状态读取（供用例层断言） ==========

    def get_username_value(self) -> str:
        return self.get_value(self._username_input())

    def get_password_value(self) -> str:
        return self.get_value(self._password_input())

    def is_error_message_visible(self) -> bool:
        """是否出现登录错误提示（data-test="error"）。"""
        return self.is_visible(self.ERROR_MESSAGE)
