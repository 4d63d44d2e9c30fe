"""
Configuration and environment handling for Product Picker.
"""
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()


DEFAULT_PRODUCT_URL_TEMPLATE = "https://www.amazon.com/dp/{product_id}"


class ExtractionConfig(BaseModel):
    """How raw page elements are read and turned into listings."""
    product_url_template: str = Field(
        default_factory=lambda: os.getenv("PRODUCT_URL_TEMPLATE", DEFAULT_PRODUCT_URL_TEMPLATE),
        description="Template used to build a product url, must contain {product_id}",
    )
    html_parser: str = Field(
        default_factory=lambda: os.getenv("HTML_PARSER", "html.parser"),
        description="BeautifulSoup tree builder for saved pages",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    format: str = Field(default="%(asctime)s %(levelname)s %(name)s: %(message)s")


class Config(BaseModel):
    """Main configuration."""
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# Singleton config instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get or create the singleton config instance."""
    global _config
    if _config is None:
        _config = Config()
    return _config


def reset_config() -> None:
    """Drop the cached config so the environment is read again."""
    global _config
    _config = None
