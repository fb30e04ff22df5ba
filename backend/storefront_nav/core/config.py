from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", case_sensitive=False)

    app_name: str = "storefront_nav"
    environment: str = "dev"
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    database_url: str = "sqlite:///./storefront_nav.db"

    rate_limit_per_min: int = 60

    # Fall back to matching the request path against section urls when the
    # page does not name its section.
    nav_match_path: bool = True

    nav_list_class: str = "site-nav"
    nav_item_class: str = "site-nav__item"
    nav_link_class: str = "site-nav__link"
    nav_dropdown_class: str = "site-nav__dropdown"
    nav_active_class: str = "active"
    nav_trail_class: str = "active-trail"

    log_level: str = "INFO"
    log_json: bool = True


settings = Settings()
