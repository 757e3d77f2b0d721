"""Environment-driven settings for the library API."""
from app.config.settings import Config, DevelopmentConfig, ProductionConfig, TestingConfig, get_config

__all__ = ["Config", "DevelopmentConfig", "ProductionConfig", "TestingConfig", "get_config"]
