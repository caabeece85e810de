from typing import Mapping, Optional

from token_refresh.client import SpotifyTokenClient
from token_refresh.config import load_credentials, load_token_timeout
from token_refresh.types import (
    NON_SUCCESS_STATUS,
    UNEXPECTED_ERROR,
    ClientCredentials,
    HandlerResponse,
    RefreshFailure,
    RefreshRequest,
    SpotifyTokenPayload,
    TokenResponse,
)

METHOD_NOT_ALLOWED = {"error": "Method not allowed"}
MISSING_REFRESH_TOKEN = {"error": "Missing refresh_token"}
SERVER_ERROR = "Server error"


class TokenRefreshHandler:
    """Validates a refresh request, exchanges the token with Spotify and shapes the reply."""

    def __init__(self, credentials: ClientCredentials, client: Optional[SpotifyTokenClient] = None):
        self.credentials = credentials
        self.client = client or SpotifyTokenClient(credentials)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "TokenRefreshHandler":
        credentials = load_credentials(environ)
        client = SpotifyTokenClient(credentials, timeout=load_token_timeout(environ))
        return cls(credentials, client)

    def handle(self, method: str, body: Optional[dict]) -> HandlerResponse:
        if (method or "").upper() != "POST":
            return HandlerResponse(405, dict(METHOD_NOT_ALLOWED))

        request = RefreshRequest.from_body(body)
        if request is None:
            return HandlerResponse(400, dict(MISSING_REFRESH_TOKEN))

        try:
            result = self.client.refresh(request.refresh_token)
        except Exception as e:
            print(f"[spotify_refresh] Unexpected error refreshing token: {type(e).__name__}: {e}")
            failure = RefreshFailure(reason=UNEXPECTED_ERROR, error=e)
            return HandlerResponse(500, {"error": SERVER_ERROR, "details": failure.details()})

        if isinstance(result, RefreshFailure):
            if result.reason != NON_SUCCESS_STATUS:
                print(f"[spotify_refresh] Token refresh failed: {result.details()}")
                return HandlerResponse(500, {"error": SERVER_ERROR, "details": result.details()})

            # Spotify's error payload goes through the normal shaping, so the
            # caller sees null access_token/expires_in with a 200.
            print(f"[spotify_refresh] Warning: Spotify answered {result.status_code}, passing payload through")
            token = TokenResponse.from_payload(result.payload or SpotifyTokenPayload())
        else:
            token = result.token

        return HandlerResponse(200, token.to_dict())
