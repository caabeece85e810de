# main.py
import os
import sys

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

# Load environment variables from .env file
from dotenv import load_dotenv

current_dir = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, current_dir)

from token_refresh.body import parse_body  # noqa: E402
from token_refresh.config import DOTENV_PATH  # noqa: E402
from token_refresh.handler import TokenRefreshHandler  # noqa: E402

load_dotenv(dotenv_path=DOTENV_PATH)

app = FastAPI()                 # <- Vercel will pick this up
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_refresh_handler() -> TokenRefreshHandler:
    """Build a handler from the current environment (read on every request)."""
    return TokenRefreshHandler.from_env()


# --------------------------- Spotify token refresh ---------------------------
@app.api_route("/api/spotify/refresh", methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"])
async def refresh_spotify_token(request: Request):
    """Refresh a Spotify access token given a refresh token"""
    body = None
    if request.method == "POST":
        raw_body = await request.body()
        body = parse_body(raw_body, request.headers.get("content-type"))

    refresher = get_refresh_handler()
    # requests is blocking; keep it off the event loop
    result = await run_in_threadpool(refresher.handle, request.method, body)
    return JSONResponse(status_code=result.status, content=result.body)
