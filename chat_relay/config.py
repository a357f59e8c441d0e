"""
Configuration for the chat relay service using Vertex AI.

Reference: https://cloud.google.com/vertex-ai/generative-ai/docs/start/quickstart
"""
import warnings
from typing import Annotated, List

from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Relay settings, read once from the environment and `.env`."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        protected_namespaces=(),
    )

    # ============================================
    # Vertex AI Configuration
    # ============================================
    # Set GOOGLE_GENAI_USE_VERTEXAI=True to enable Vertex AI mode
    GOOGLE_GENAI_USE_VERTEXAI: bool = True

    # Google Cloud Project ID (required for Vertex AI)
    # Example: export GOOGLE_CLOUD_PROJECT=YOUR_PROJECT
    GOOGLE_CLOUD_PROJECT: str = ""

    # Example: export GOOGLE_CLOUD_LOCATION=us-central1
    GOOGLE_CLOUD_LOCATION: str = "us-central1"

    # ============================================
    # Model Configuration
    # ============================================
    GENAI_MODEL: str = "gemini-2.5-flash"

    # ============================================
    # Server
    # ============================================
    ENVIRONMENT: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    CORS_ORIGINS: Annotated[List[str], NoDecode] = ["*"]

    # Prebuilt UI bundle served at "/" when the directory exists
    UI_DIST_DIR: str = "dist"

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def split_cors(cls, v):
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    def validate_config(self, strict: bool = True) -> bool:
        """
        Validate configuration.

        Args:
            strict: If True, raise error on missing config. If False, only warn.

        Returns:
            True if configuration is valid

        Raises:
            ValueError: If required configuration is missing and strict=True
        """
        errors = []

        if not self.GOOGLE_GENAI_USE_VERTEXAI:
            errors.append(
                "GOOGLE_GENAI_USE_VERTEXAI should be set to 'True' for Vertex AI mode"
            )

        if not self.GOOGLE_CLOUD_PROJECT:
            errors.append(
                "GOOGLE_CLOUD_PROJECT environment variable is required. "
                "Example: export GOOGLE_CLOUD_PROJECT=YOUR_PROJECT"
            )

        if not self.GOOGLE_CLOUD_LOCATION:
            errors.append(
                "GOOGLE_CLOUD_LOCATION environment variable is required. "
                "Example: export GOOGLE_CLOUD_LOCATION=us-central1"
            )

        if errors:
            error_msg = "\n".join([f"  - {err}" for err in errors])
            full_msg = (
                "Configuration validation failed:\n"
                f"{error_msg}\n\n"
                "Please set the required environment variables:\n"
                "  export GOOGLE_CLOUD_PROJECT=your-project-id\n"
                "  export GOOGLE_CLOUD_LOCATION=us-central1\n"
                "  export GOOGLE_GENAI_USE_VERTEXAI=True\n\n"
                "See: https://cloud.google.com/vertex-ai/generative-ai/docs/start/quickstart"
            )

            if strict:
                raise ValueError(full_msg)
            warnings.warn(full_msg)
            return False

        return True

    def get_config_summary(self) -> dict:
        """Get a summary of current configuration."""
        return {
            "use_vertexai": self.GOOGLE_GENAI_USE_VERTEXAI,
            "project_id": self.GOOGLE_CLOUD_PROJECT or "(not set)",
            "location": self.GOOGLE_CLOUD_LOCATION,
            "model": self.GENAI_MODEL,
            "environment": self.ENVIRONMENT,
            "ui_dist_dir": self.UI_DIST_DIR,
        }


settings = Settings()
