"""OAuth token model"""

import time
from typing import Optional
from pydantic import BaseModel, Field


class Token(BaseModel):
    """
    Bearer token issued by the client credentials exchange

    The expiry instant is always derived from ``created_at`` and
    ``expires_in``; a token is replaced wholesale, never updated.
    """

    access_token: str = Field(..., description="Opaque bearer token", min_length=1)
    token_type: str = Field("bearer", description="Token type")
    expires_in: int = Field(..., description="Validity in seconds", ge=0)
    scope: Optional[str] = Field(None, description="Granted scopes")
    jti: Optional[str] = Field(None, description="Token identifier")
    created_at: float = Field(
        default_factory=time.time, description="Issue instant (epoch seconds)"
    )

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }

    @property
    def expires_at(self) -> float:
        return self.created_at + self.expires_in

    def is_expired(self, now: Optional[float] = None) -> bool:
        """Check whether the token is past its expiry instant"""
        if now is None:
            now = time.time()
        return now >= self.expires_at
