"""Application configuration using pydantic-settings."""

from decimal import Decimal
from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ======================
    # API
    # ======================
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(default=8000, description="API server port")

    # ======================
    # Environment
    # ======================
    environment: str = Field(default="development", description="Runtime environment")
    debug: bool = Field(default=False, description="Enable debug mode")

    # ======================
    # Networks
    # ======================
    default_network: str = Field(
        default="mantra-dukong-1", description="Network used when none is given"
    )
    custom_networks: Optional[str] = Field(
        default=None, description="JSON object of extra networks keyed by name"
    )
    request_timeout: float = Field(
        default=30.0, description="Transport timeout for REST queries (seconds)"
    )

    # ======================
    # Wallet
    # ======================
    wallet_mnemonic: Optional[str] = Field(
        default=None, description="BIP39 mnemonic for the signing wallet"
    )

    # ======================
    # DEX
    # ======================
    default_slippage: Decimal = Field(
        default=Decimal("1"), ge=0, le=100, description="Default slippage tolerance in percent"
    )

    @property
    def has_wallet(self) -> bool:
        """Check if a wallet mnemonic is configured."""
        return bool(self.wallet_mnemonic and len(self.wallet_mnemonic.split()) >= 12)

    def get_safe_dict(self) -> dict:
        """Return settings dict with secrets redacted."""
        return {
            "environment": self.environment,
            "debug": self.debug,
            "api_host": self.api_host,
            "api_port": self.api_port,
            "default_network": self.default_network,
            "custom_networks": "(set)" if self.custom_networks else "(not set)",
            "wallet_configured": self.has_wallet,
            "dex": {
                "default_slippage": str(self.default_slippage),
                "request_timeout": self.request_timeout,
            },
        }


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
