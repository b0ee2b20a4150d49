"""Request models for the policy admin API."""

from pydantic import BaseModel, Field, field_validator


class LoginRequest(BaseModel):
    """Credentials posted by the admin login form."""

    token: str = Field(..., description="Admin access token", min_length=1)
    party_id: str = Field(
        ..., description="Party whose admin panel to open", min_length=1, max_length=128
    )

    @field_validator("party_id")
    @classmethod
    def validate_party_id(cls, v):
        """Party ids become a path segment, so no slashes or blanks."""
        v = v.strip()
        if not v or "/" in v:
            raise ValueError("party_id must be a single non-empty path segment")
        return v
