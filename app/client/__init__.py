"""HTTP client for the dashboard API"""

from app.client.api_client import ApiClient, ApiError

__all__ = ["ApiClient", "ApiError"]
