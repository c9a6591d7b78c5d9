from functools import lru_cache
from pathlib import Path
from typing import Literal
import os
from pydantic_settings import BaseSettings, SettingsConfigDict

EnvName = Literal["development", "production"]

# Bundled site: catalog document, templates and static roots
DEFAULT_SITE_DIR = Path(__file__).resolve().parent.parent / "site"

def _env_file_for(app_env: EnvName) -> str:
    return ".env.development" if app_env == "development" else ".env.production"

class Settings(BaseSettings):

    # Core
    APP_ENV: EnvName = "development"
    APP_NAME: str = "Farmstand"
    DEBUG: bool = False

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8000

    # Site layout (relative names are resolved against SITE_DIR)
    SITE_DIR: Path = DEFAULT_SITE_DIR
    catalog_file: str = "dev-data/data.json"
    overview_template: str = "templates/template-overview.html"
    card_template: str = "templates/template-card.html"
    product_template: str = "templates/template-product.html"
    not_found_template: str = "html/404.html"
    public_dir: str = "public"
    images_dir: str = "images"
    html_dir: str = "html"

    # pydantic-settings config will be set dynamically in the factory below
    model_config = SettingsConfigDict(env_file=None, case_sensitive=True)

    def site_path(self, relative: str) -> Path:
        return self.SITE_DIR / relative

    @property
    def public_root(self) -> Path:
        return self.site_path(self.public_dir)

    @property
    def images_root(self) -> Path:
        return self.site_path(self.images_dir)

    @property
    def html_root(self) -> Path:
        return self.site_path(self.html_dir)

@lru_cache
def get_settings() -> Settings:
    """
    Factory that chooses the right .env file based on APP_ENV.
    Missing .env files are fine: every field has a default.
    """
    app_env: EnvName = os.getenv("APP_ENV", "development")  # earliest switch
    env_file = _env_file_for(app_env)
    return Settings(
                _env_file=env_file,  # load .env.development or .env.production
                _env_file_encoding="utf-8"
    )
