from token_refresh.handler import TokenRefreshHandler
from token_refresh.types import ClientCredentials, HandlerResponse, TokenResponse

__all__ = ["TokenRefreshHandler", "ClientCredentials", "HandlerResponse", "TokenResponse"]
