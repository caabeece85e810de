import base64
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict

NETWORK_ERROR = "network_error"
DECODE_ERROR = "decode_error"
NON_SUCCESS_STATUS = "non_success_status"
UNEXPECTED_ERROR = "unexpected_error"


@dataclass(frozen=True)
class ClientCredentials:
    client_id: str
    client_secret: str = field(repr=False)

    def basic_auth(self) -> str:
        """Value for the Authorization header: base64 of `client_id:client_secret`."""
        raw = f"{self.client_id}:{self.client_secret}"
        return f"Basic {base64.b64encode(raw.encode()).decode()}"


@dataclass
class RefreshRequest:
    refresh_token: str

    @classmethod
    def from_body(cls, body: Optional[dict]) -> Optional["RefreshRequest"]:
        """Build a request from a parsed body, or None when the token is absent."""
        refresh_token = (body or {}).get("refresh_token")
        if not refresh_token:
            return None
        return cls(refresh_token=str(refresh_token))


class SpotifyTokenPayload(BaseModel):
    """JSON body returned by the Spotify token endpoint, success or error.

    Values are kept as Spotify sent them; any JSON object is accepted.
    """

    model_config = ConfigDict(extra="ignore")

    access_token: Any = None
    token_type: Any = None
    scope: Any = None
    expires_in: Any = None
    refresh_token: Any = None
    error: Any = None
    error_description: Any = None


@dataclass
class TokenResponse:
    access_token: Any
    expires_in: Any

    @classmethod
    def from_payload(cls, payload: SpotifyTokenPayload) -> "TokenResponse":
        # scope, token_type and any rotated refresh_token are not forwarded
        return cls(access_token=payload.access_token, expires_in=payload.expires_in)

    def to_dict(self) -> dict:
        return {"access_token": self.access_token, "expires_in": self.expires_in}


@dataclass
class RefreshSuccess:
    token: TokenResponse
    status_code: int = 200


@dataclass
class RefreshFailure:
    reason: str
    error: Optional[BaseException] = None
    status_code: Optional[int] = None
    payload: Optional[SpotifyTokenPayload] = None

    def details(self) -> dict[str, Any]:
        details: dict[str, Any] = {"reason": self.reason}
        if self.error is not None:
            details["type"] = type(self.error).__name__
            details["message"] = str(self.error)
        if self.status_code is not None:
            details["status_code"] = self.status_code
        return details


RefreshResult = Union[RefreshSuccess, RefreshFailure]


@dataclass
class HandlerResponse:
    status: int
    body: dict
