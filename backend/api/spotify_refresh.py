import os
import sys
import json
from http.server import BaseHTTPRequestHandler

from dotenv import load_dotenv

# Make the backend packages importable when Vercel runs this file directly
backend_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, backend_dir)

from token_refresh.body import parse_body  # noqa: E402
from token_refresh.config import DOTENV_PATH  # noqa: E402
from token_refresh.handler import TokenRefreshHandler  # noqa: E402

load_dotenv(dotenv_path=DOTENV_PATH)


class handler(BaseHTTPRequestHandler):
    """Refresh a Spotify access token given a refresh token (POST)."""

    def _cors(self):
        self.send_header("Access-Control-Allow-Origin", "*")
        self.send_header("Access-Control-Allow-Methods", "POST, OPTIONS")
        self.send_header("Access-Control-Allow-Headers", "Content-Type, Authorization")

    # --------------------------------- Pre-flight ---------------------------------
    def do_OPTIONS(self):  # noqa: N802
        # A bare OPTIONS that is not a CORS pre-flight is just another wrong method
        if not self.headers.get("Access-Control-Request-Method"):
            self._dispatch(None)
            return
        self.send_response(204)
        self._cors()
        self.end_headers()

    # ------------------------------------ POST ------------------------------------
    def do_POST(self):  # noqa: N802
        content_length = self._content_length()
        raw_body = self.rfile.read(content_length) if content_length else b""
        body = parse_body(raw_body, self.headers.get("Content-Type"))
        self._dispatch(body)

    # ------------------------------- Other methods -------------------------------
    def do_GET(self):  # noqa: N802
        self._dispatch(None)

    do_HEAD = do_GET
    do_PUT = do_GET
    do_PATCH = do_GET
    do_DELETE = do_GET

    def __getattr__(self, name):
        # Any other verb (PURGE, PROPFIND, ...) also goes to the handler
        if name.startswith("do_"):
            return self.do_GET
        raise AttributeError(name)

    # -----------------------------------------------------------------------------
    def _content_length(self) -> int:
        """Declared body size; missing, malformed or negative means no body."""
        try:
            content_length = int(self.headers.get("Content-Length", 0))
        except ValueError:
            return 0
        return max(content_length, 0)

    def _dispatch(self, body):
        # Credentials are read per invocation
        refresher = TokenRefreshHandler.from_env()
        result = refresher.handle(self.command, body)
        self._json_response(result.body, result.status)

    def _json_response(self, payload: dict, status: int = 200):
        """Helper to write JSON response with CORS headers."""
        encoded = json.dumps(payload).encode()
        self.send_response(status)
        self._cors()
        self.send_header("Content-Type", "application/json")
        self.send_header("Content-Length", str(len(encoded)))
        self.end_headers()
        if self.command != "HEAD":
            self.wfile.write(encoded)
