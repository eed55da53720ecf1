"""Member Authority connection settings."""

from pydantic import BaseModel, Field, field_validator


class AuthorityConfig(BaseModel):
    """Where and how to reach the Member Authority."""

    base_url: str = Field(
        default="http://localhost:8888",
        description="Base URL of the Member Authority",
    )
    timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Per-request timeout for Authority calls",
    )

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")
