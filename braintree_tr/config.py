"""
Braintree Transparent Redirect Configuration Module

Loads environment variables for the gateway credentials and the demo merchant server.
"""
from pydantic_settings import BaseSettings
from typing import Literal


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Security Notes:
    - The public/private key pair signs every transparent redirect descriptor
    - Keys are environment-based and never logged
    - Sandbox is the default environment so a missing setting never hits production
    """

    # Gateway Configuration
    braintree_environment: Literal["development", "sandbox", "production"] = "sandbox"
    braintree_merchant_id: str = "merchant_id_demo_only"
    braintree_public_key: str = "public_key_demo_only"
    braintree_private_key: str = "private_key_demo_only_change_me"

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # Merchant callback base URL (the processor redirects the browser here)
    redirect_base_url: str = "http://localhost:8000"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    class Config:
        env_file = ".env"
        case_sensitive = False


# Global settings instance
settings = Settings()
