from pathlib import Path
from typing import Any, List

import dotenv
from loguru import logger
from pydantic import SecretStr, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

dotenv.load_dotenv()


PROJECT_DIR = Path(__file__).parent
LOG_DIR = PROJECT_DIR.joinpath("logs")


class ConfigurationError(RuntimeError):
    """A required secret is missing, the bot cannot start."""


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_ignore_empty=True, extra="ignore")

    LINE_CHANNEL_ACCESS_TOKEN: SecretStr = Field(
        default="", description="LINE Developers Console 中 Messaging API 的 channel access token"
    )

    LINE_CHANNEL_SECRET: SecretStr = Field(
        default="", description="用于校验 webhook 请求头 X-Line-Signature 的 channel secret"
    )

    GEMINI_API_KEY: SecretStr = Field(default="", description="Google AI Studio 的 API_KEY")

    PORT: int = Field(default=3000, description="webhook 服务监听端口")

    LINE_API_BASE_URL: str = Field(
        default="https://api.line.me", description="LINE Messaging API 后端连接"
    )

    GEMINI_API_BASE_URL: str = Field(
        default="https://generativelanguage.googleapis.com/v1beta",
        description="Gemini REST API 后端连接",
    )

    GEMINI_MODEL: str = Field(default="gemini-1.5-flash", description="用于翻译的模型名称")

    BOT_MENTION_NAME: str = Field(
        default="@TranslatorBot",
        description="群聊中设置语言的指令前缀，例如 `@TranslatorBot language th`",
    )

    FALLBACK_DISPLAY_NAME: str = Field(
        default="Someone", description="获取用户昵称失败时使用的名称"
    )

    HTTP_REQUEST_TIMEOUT: float = Field(
        default=30.0, description="HTTP 请求超时时间（秒），同时作用于 LINE 和 Gemini 客户端。"
    )

    ENABLE_DEV_MODE: bool = Field(
        default=False,
        description="""
        是否为开发模式，开发模式下会 MOCK 模型调用请求，立即返回模版翻译。
        消息不会发送到 Gemini，一般在仅开发 Bot 端功能时按需启动。
        """,
    )

    DEV_MODE_MOCKED_TEMPLATE: str = Field(
        default="[{language}] {text}", description="当开发模式开启时，将返回该模版作为翻译结果。"
    )

    def model_post_init(self, context: Any, /) -> None:
        self.BOT_MENTION_NAME = self.BOT_MENTION_NAME.strip()
        if not self.BOT_MENTION_NAME.startswith("@"):
            logger.warning(f"BOT_MENTION_NAME 缺少 @ 前缀，已自动补全 - {self.BOT_MENTION_NAME}")
            self.BOT_MENTION_NAME = f"@{self.BOT_MENTION_NAME}"

    @property
    def missing_secrets(self) -> List[str]:
        required = {
            "LINE_CHANNEL_ACCESS_TOKEN": self.LINE_CHANNEL_ACCESS_TOKEN,
            "LINE_CHANNEL_SECRET": self.LINE_CHANNEL_SECRET,
            "GEMINI_API_KEY": self.GEMINI_API_KEY,
        }
        return [name for name, secret in required.items() if not secret.get_secret_value()]

    def ensure_required(self) -> None:
        """Raise ConfigurationError when any required secret is missing."""
        if missing := self.missing_secrets:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )


settings = Settings()  # type: ignore
