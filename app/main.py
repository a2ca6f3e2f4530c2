# -*- coding: utf-8 -*-
"""
@Time    : 2025/10/3 21:14
@Author  : QIN2DIM
@GitHub  : https://github.com/QIN2DIM
@Desc    : 启动入口：校验密钥，挂载 webhook 并运行 uvicorn
"""
import json
import sys

import uvicorn
from loguru import logger

from relaybot.context import build_default_context
from relaybot.webhook import create_app
from settings import settings, LOG_DIR, ConfigurationError
from utils import init_log

init_log(
    runtime=LOG_DIR.joinpath("runtime.log"),
    error=LOG_DIR.joinpath("error.log"),
    serialize=LOG_DIR.joinpath("serialize.log"),
)


def main() -> None:
    """Start the webhook server."""
    try:
        settings.ensure_required()
    except ConfigurationError as err:
        logger.critical(str(err))
        sys.exit(1)

    sp = settings.model_dump(mode="json")
    s = json.dumps(sp, indent=2, ensure_ascii=False)
    logger.success(f"Loading settings: {s}")

    if settings.ENABLE_DEV_MODE:
        logger.warning("🪄 开发模式已启动，翻译请求不会发送到 Gemini")

    app = create_app(build_default_context())

    logger.success(f"Local server running on http://localhost:{settings.PORT}")
    logger.info("Make sure your LINE Webhook URL is configured for /callback")
    uvicorn.run(app, host="0.0.0.0", port=settings.PORT, log_level="info")


if __name__ == "__main__":
    main()
