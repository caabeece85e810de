import os
from typing import Mapping, Optional

from token_refresh.types import ClientCredentials

SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"

CLIENT_ID_ENV = "SPOTIFY_CLIENT_ID"
CLIENT_SECRET_ENV = "SPOTIFY_CLIENT_SECRET"
TOKEN_TIMEOUT_ENV = "SPOTIFY_TOKEN_TIMEOUT"

# backend/.env.local, same file the FastAPI app loads
DOTENV_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), ".env.local")


def load_credentials(environ: Optional[Mapping[str, str]] = None) -> ClientCredentials:
    """Read the Spotify client id/secret from the environment.

    Missing values are not rejected here. They end up as an empty half of the
    Basic auth header and Spotify answers with an authentication error.
    """
    environ = os.environ if environ is None else environ
    client_id = environ.get(CLIENT_ID_ENV) or ""
    client_secret = environ.get(CLIENT_SECRET_ENV) or ""

    if not client_id or not client_secret:
        print(f"[spotify_refresh] Warning: {CLIENT_ID_ENV} or {CLIENT_SECRET_ENV} is not set")

    return ClientCredentials(client_id=client_id, client_secret=client_secret)


def load_token_timeout(environ: Optional[Mapping[str, str]] = None) -> Optional[float]:
    """Optional timeout (seconds) for the call to Spotify. None means no timeout."""
    environ = os.environ if environ is None else environ
    raw = environ.get(TOKEN_TIMEOUT_ENV)
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError:
        print(f"[spotify_refresh] Warning: ignoring invalid {TOKEN_TIMEOUT_ENV}={raw!r}")
        return None
