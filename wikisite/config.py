from pydantic_settings import BaseSettings, SettingsConfigDict

from wikisite.domain.note import AssetKind


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WIKISITE_")

    # Corpus discovery settings
    extensions: dict[str, AssetKind] = {
        ".md": AssetKind.NOTE,
        ".png": AssetKind.IMAGE,
        ".jpg": AssetKind.IMAGE,
        ".jpeg": AssetKind.IMAGE,
        ".gif": AssetKind.IMAGE,
        ".svg": AssetKind.IMAGE,
        ".webp": AssetKind.IMAGE,
    }
    encoding: str = "utf-8"

    # Output settings
    copy_assets: bool = True

    # Markdown settings
    markdown_extensions: list[str] = ["tables", "fenced_code", "sane_lists"]
    external_links_new_tab: bool = True

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL


settings = Settings()
