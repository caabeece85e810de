import urllib.parse
from typing import Optional

import requests

from token_refresh.config import SPOTIFY_TOKEN_URL
from token_refresh.types import (
    DECODE_ERROR,
    NETWORK_ERROR,
    NON_SUCCESS_STATUS,
    ClientCredentials,
    RefreshFailure,
    RefreshResult,
    RefreshSuccess,
    SpotifyTokenPayload,
    TokenResponse,
)


class SpotifyTokenClient:
    """Exchanges a refresh token for a new access token at the Spotify accounts service.

    `refresh` never raises for transport or decode problems; it returns a
    RefreshFailure describing what went wrong instead.
    """

    def __init__(
        self,
        credentials: ClientCredentials,
        token_url: str = SPOTIFY_TOKEN_URL,
        timeout: Optional[float] = None,
        session=None,
    ):
        self.credentials = credentials
        self.token_url = token_url
        self.timeout = timeout
        # anything with a requests-style post(); defaults to the requests module
        self.session = session

    def build_request_body(self, refresh_token: str) -> str:
        return urllib.parse.urlencode({
            "grant_type": "refresh_token",
            "refresh_token": refresh_token,
        })

    def build_headers(self) -> dict:
        return {
            "Authorization": self.credentials.basic_auth(),
            "Content-Type": "application/x-www-form-urlencoded",
        }

    def refresh(self, refresh_token: str) -> RefreshResult:
        poster = self.session if self.session is not None else requests

        try:
            response = poster.post(
                self.token_url,
                headers=self.build_headers(),
                data=self.build_request_body(refresh_token),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            return RefreshFailure(reason=NETWORK_ERROR, error=e)

        try:
            payload = response.json()
        except ValueError as e:
            return RefreshFailure(reason=DECODE_ERROR, error=e, status_code=response.status_code)

        if not isinstance(payload, dict):
            return RefreshFailure(
                reason=DECODE_ERROR,
                error=ValueError(f"Expected a JSON object, got {type(payload).__name__}"),
                status_code=response.status_code,
            )

        token_payload = SpotifyTokenPayload.model_validate(payload)

        if not response.ok:
            return RefreshFailure(
                reason=NON_SUCCESS_STATUS,
                status_code=response.status_code,
                payload=token_payload,
            )

        return RefreshSuccess(token=TokenResponse.from_payload(token_payload), status_code=response.status_code)
