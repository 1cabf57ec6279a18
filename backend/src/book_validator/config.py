from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "info"
    # Page expressions longer than this are refused (count_pages returns None)
    max_page_expression_length: int = 1000
    # The only tags clean_for_html lets through; everything else is escaped
    allowed_html_tags: list[str] = ["b", "i"]

    model_config = {
        "env_prefix": "BOOK_VALIDATOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()
