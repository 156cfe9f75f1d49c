"""
network_utils.py
----------------
基于 Playwright 路由拦截的登录站点 mock 工具。

主要能力：
1. 拦截 base_url 下的所有请求，返回本地构造的登录页 / 商品列表页；
2. 页面结构与 SauceDemo 保持一致（data-test 属性、submit 按钮），
   可以在不访问外网的情况下验证登录 Flow；
3. 支持改按钮文案、隐藏用户名输入框，用于制造特殊场景。
"""

import json
from html import escape
from string import Template
from urllib.parse import urlparse

from playwright.sync_api import Page, Request, Route

from framework.core.base_page import join_url
from framework.core.config_loader import get_config
from framework.core.logger import get_logger

logger = get_logger()

INVENTORY_PATH = "/inventory.html"

_LOGIN_PAGE = Template("""<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>Swag Labs</title></head>
<body>
  <div class="login_logo">Swag Labs</div>
  <form id="login_form">
    <input class="form_input" placeholder="Username" type="text"
           data-test="username" id="user-name" name="user-name"$username_style>
    <input class="form_input" placeholder="Password" type="password"
           data-test="password" id="password" name="password">
    <div class="error-message-container"></div>
    <input type="submit" class="submit-button btn_action"
           data-test="login-button" id="login-button" name="login-button"
           value="$button_label">
  </form>
  <script>
    const accepted = $accepted;
    document.getElementById("login_form").addEventListener("submit", (event) => {
      event.preventDefault();
      const username = document.getElementById("user-name").value;
      const password = document.getElementById("password").value;
      if (username === accepted.username && password === accepted.password) {
        window.location.assign("$inventory_path");
        return;
      }
      document.querySelector(".error-message-container").innerHTML =
        '<h3 data-test="error">Epic sadface: Username and password do not match any user in this service</h3>';
    });
  </script>
</body>
</html>
""")

_INVENTORY_PAGE = """<!DOCTYPE html>
<html lang="en">
<head><meta charset="utf-8"><title>Swag Labs</title></head>
<body>
  <span class="title" data-test="title">Products</span>
  <div class="inventory_list" data-test="inventory-list"></div>
</body>
</html>
"""


def render_login_page(
    button_label: str = "Login",
    username_visible: bool = True,
    username: str = "standard_user",
    password: str = "secret_sauce",
) -> str:
    """
    生成 mock 登录页 HTML。

    :param button_label: 提交按钮的文案（即按钮的可访问名称）
    :param username_visible: False 时用户名输入框 display:none
    :param username: 允许登录的用户名（严格相等比较）
    :param password: 允许登录的密码（严格相等比较）
    """
    return _LOGIN_PAGE.substitute(
        username_style="" if username_visible else ' style="display:none"',
        button_label=escape(button_label, quote=True),
        accepted=json.dumps({"username": username, "password": password}),
        inventory_path=INVENTORY_PATH,
    )


def mock_login_site(
    page: Page,
    base_url: str,
    button_label: str = "Login",
    username_visible: bool = True,
    username: str = "standard_user",
    password: str = "secret_sauce",
    login_path: str | None = None,
) -> None:
    """
    在当前 page 上用 mock 页面替换 base_url 下的登录站点。

    - "/" 和登录页路径返回登录页；
    - INVENTORY_PATH 返回商品列表页；
    - base_url 下其他路径返回 404；
    - base_url 以外的请求正常放行。

    :param page: 当前用例的 Page 实例
    :param base_url: 被替换站点的根地址，例如 https://www.saucedemo.com
    :param login_path: 登录页路径，为 None 时取配置 app.login_path
    """
    site = urlparse(base_url)
    if login_path is None:
        login_path = get_config().get("app", {}).get("login_path")
    login_paths = {"/", urlparse(join_url(base_url, login_path)).path or "/"}
    login_html = render_login_page(
        button_label=button_label,
        username_visible=username_visible,
        username=username,
        password=password,
    )

    def _handler(route: Route, request: Request) -> None:
        target = urlparse(request.url)
        if (target.scheme, target.netloc) != (site.scheme, site.netloc):
            route.fallback()
            return

        path = target.path or "/"
        if path in login_paths:
            route.fulfill(status=200, content_type="text/html", body=login_html)
        elif path == INVENTORY_PATH:
            route.fulfill(status=200, content_type="text/html", body=_INVENTORY_PAGE)
        else:
            route.fulfill(status=404, content_type="text/plain", body="Not Found")

    logger.info(
        f"[Mock] 拦截站点: {base_url}, button_label={button_label}, "
        f"username_visible={username_visible}"
    )
    page.route("**/*", _handler)
