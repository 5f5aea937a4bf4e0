from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    log_level: str = "INFO"  # The logging level used by the command line entry point.
    max_depth: int = Field(64, ge=1, description="Maximum container nesting accepted while building the tree.")
    render_max_bytes: int = Field(
        32, ge=0, description="Number of payload bytes shown in hex dumps before the rendering is truncated."
    )

    model_config = SettingsConfigDict(env_prefix="EBMLTREE_", env_file=".env", extra="ignore")


settings = Settings()
