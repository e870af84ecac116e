import os
from pathlib import Path

from dotenv import dotenv_values
from pydantic_settings import BaseSettings

_ENV_FILE = Path.home() / "env" / ".env.dev"
_env_vars = dotenv_values(str(_ENV_FILE)) if _ENV_FILE.exists() else {}


class Settings(BaseSettings):
    app_name: str = "Item Researcher"
    debug: bool = False
    log_level: str = "INFO"
    anthropic_api_key: str = ""
    research_model: str = "claude-sonnet-4-20250514"
    research_max_tokens: int = 2048

    model_config = {
        "env_prefix": "RESEARCH_",
        "env_file": ".env",
        "extra": "ignore",
    }

    def model_post_init(self, __context):
        if not self.anthropic_api_key:
            self.anthropic_api_key = (
                os.environ.get("ANTHROPIC_API_KEY") or _env_vars.get("ANTHROPIC_API_KEY") or ""
            )

    @property
    def demo_mode(self) -> bool:
        """No credential means every lookup goes through the demo generator."""
        return not self.anthropic_api_key


settings = Settings()
