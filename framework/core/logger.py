# -*- coding: utf-8 -*-
"""
logger.py
---------
统一日志封装，基于 loguru。

- 控制台 + 文件双输出，文件按天切割；
- 日志目录取自配置 report.log_dir；
- 对外只暴露 get_logger()。
"""

import os
from functools import lru_cache

from loguru import logger

from framework.core.config_loader import get_config

LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | "
    "{name}:{function}:{line} - {message}"
)


@lru_cache(maxsize=1)
def get_logger():
    """
    获取全局日志记录器（loguru.logger）。

    lru_cache 保证 handler 只添加一次。
    """
    config = get_config()

    report_config = config.get("report", {})
    log_dir = report_config.get("log_dir", "reports/logs")
    os.makedirs(log_dir, exist_ok=True)

    # 去掉 loguru 默认的 stderr handler，避免重复输出
    logger.remove()

    # 用 print 作为 sink，运行时再取 sys.stdout，兼容 pytest 的输出捕获
    logger.add(
        sink=lambda msg: print(msg, end=""),
        format=LOG_FORMAT,
        level="INFO",
        enqueue=True,
    )

    log_file_path = os.path.join(log_dir, "saucedemo_ui_{time:YYYYMMDD}.log")
    logger.add(
        log_file_path,
        format=LOG_FORMAT,
        rotation="00:00",
        retention="10 days",
        encoding="utf-8",
        level="INFO",
        enqueue=True,
    )

    return logger
