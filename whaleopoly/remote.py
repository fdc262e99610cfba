"""Optional remote rules authority for dice and purchases."""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional, Tuple

import httpx
from pydantic import BaseModel, ValidationError

from whaleopoly.exceptions import RemoteAuthorityError
from whaleopoly.schemas import RemotePurchaseRequest, RemotePurchaseResponse, RemoteRollResponse
from whaleopoly.settings import RemoteAuthoritySettings, get_remote_settings

logger = logging.getLogger(__name__)


class RemoteAuthority(ABC):
    """
    External source of truth consulted best-effort for rolls and purchases.

    Implementations return None, or raise RemoteAuthorityError, when they
    cannot produce a result; the engine then carries on locally.
    """

    @abstractmethod
    def remote_roll(self, game_id: int) -> Optional[Tuple[int, int]]:
        """
        Ask the authority for the next dice pair.

        Args:
            game_id: Game identifier known to the authority.

        Returns:
            (d1, d2), each in 1..6, or None when unavailable.
        """

    @abstractmethod
    def remote_purchase(self, game_id: int, tile_id: int) -> Optional[bool]:
        """
        Submit a purchase to the authority.

        Returns:
            True when confirmed, None when unavailable. Anything else is
            treated as unconfirmed and the purchase completes locally.
        """


class HttpRemoteAuthority(RemoteAuthority):
    """
    JSON-over-HTTP authority client.

    Endpoints (relative to the configured base URL):
        POST /games/{game_id}/roll      -> {"d1": int, "d2": int}
        POST /games/{game_id}/purchase  {"tile_id": int} -> {"success": bool}
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float = 5.0,
        client: Optional[httpx.Client] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_seconds = timeout_seconds
        self._client = client

    @classmethod
    def from_settings(
        cls,
        settings: Optional[RemoteAuthoritySettings] = None,
        client: Optional[httpx.Client] = None,
    ) -> Optional["HttpRemoteAuthority"]:
        """Build a client from environment settings, or None if no URL is configured."""
        settings = settings or get_remote_settings()
        if not settings.remote_enabled:
            return None
        return cls(settings.remote_base_url, settings.remote_timeout_seconds, client)

    def _post(self, path: str, payload: Dict[str, Any], model: type[BaseModel]) -> BaseModel:
        url = f"{self.base_url}{path}"
        client = self._client or httpx.Client(timeout=self.timeout_seconds)
        try:
            response = client.post(url, json=payload, timeout=self.timeout_seconds)
            response.raise_for_status()
            return model.model_validate(response.json())
        except (httpx.HTTPError, ValueError, ValidationError) as e:
            raise RemoteAuthorityError(f"{url}: {e}") from e
        finally:
            if self._client is None:
                client.close()

    def remote_roll(self, game_id: int) -> Optional[Tuple[int, int]]:
        result = self._post(f"/games/{game_id}/roll", {}, RemoteRollResponse)
        return result.d1, result.d2

    def remote_purchase(self, game_id: int, tile_id: int) -> Optional[bool]:
        request = RemotePurchaseRequest(tile_id=tile_id)
        result = self._post(f"/games/{game_id}/purchase", request.model_dump(), RemotePurchaseResponse)
        if not result.success:
            raise RemoteAuthorityError(f"purchase of tile {tile_id} not confirmed")
        return True

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
