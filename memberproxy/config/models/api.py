"""HTTP server configuration."""

from pydantic import BaseModel, Field, field_validator


class APIConfig(BaseModel):
    """Configuration for the proxy's HTTP surface."""

    host: str = Field(default="0.0.0.0", description="Bind address")
    port: int = Field(default=8080, ge=1, le=65535, description="Port number")
    cors_origins: list[str] = Field(
        default=["*"],
        description="Allowed CORS origins",
    )

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        """Accept a comma separated string as well as a list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v
