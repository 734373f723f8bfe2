"""
Authentication related Pydantic models for copilot-api.

Stored credentials use the camelCase field names of the host plugin's
secure store, so the models accept and emit those aliases.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field, ConfigDict


class AccessToken(BaseModel):
    """
    Short-lived access token obtained from the token exchange.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    token: Optional[str] = Field(None, description="Bearer token for the chat API")
    expires_at: Optional[int] = Field(
        None, alias="expiresAt", description="Expiry as unix seconds"
    )


class Credentials(BaseModel):
    """
    Everything persisted for one host context.

    Unknown fields are kept so that updates never drop data written by
    other parts of the host plugin.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    pat: Optional[str] = Field(
        None, alias="personalAccessToken", description="Long-lived personal access token"
    )
    access_token: Optional[AccessToken] = Field(
        None, alias="accessToken", description="Cached short-lived access token"
    )

    def with_access_token(self, access_token: AccessToken) -> Credentials:
        """Return a copy with the access token replaced and all else preserved."""
        return self.model_copy(update={"access_token": access_token})

    def to_store(self) -> dict:
        """Serialize in the store's camelCase shape."""
        return self.model_dump(by_alias=True, exclude_none=True)


class TokenResponse(BaseModel):
    """
    Result of exchanging a personal token for an access token.
    """

    model_config = ConfigDict(extra="ignore")

    token: str = Field(..., description="New access token", min_length=1)
    expires_at: int = Field(..., description="Expiry as unix seconds")

    def to_access_token(self) -> AccessToken:
        return AccessToken(token=self.token, expires_at=self.expires_at)
