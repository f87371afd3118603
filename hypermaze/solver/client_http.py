"""HTTP client for the maze API, built on requests."""

import logging
from typing import Optional
from urllib.parse import urljoin

import requests

from ..core.grid import Direction
from ..core.models import Link, MazeResponse, SessionResponse
from .client_base import MazeClient

logger = logging.getLogger(__name__)


class MazeApiClient(MazeClient):
    """Talks to a running maze API.

    Link hrefs are used exactly as received, resolved against ``base_url``.
    Transport and HTTP errors surface as ``requests.RequestException``.
    """

    def __init__(
        self,
        base_url: str,
        *,
        http: Optional[requests.Session] = None,
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/") + "/"
        self.timeout = timeout
        self._http = http or requests.Session()

    def create_maze(self, width: int, height: int) -> MazeResponse:
        logger.debug("Creating maze %dx%d", width, height)
        data = self._request("POST", "/api/mazes", json={"width": width, "height": height})
        return MazeResponse.model_validate(data)

    def start_session(self, maze: MazeResponse) -> SessionResponse:
        link = self.require_link(maze.links, "start")
        logger.debug("Starting session via %s", link.href)
        return SessionResponse.model_validate(self._follow(link))

    def move(self, session: SessionResponse, direction: Direction) -> SessionResponse:
        link = self.require_link(session.links, direction.value)
        logger.debug("Moving via %s", link.href)
        return SessionResponse.model_validate(self._follow(link))

    def close(self) -> None:
        self._http.close()

    def _follow(self, link: Link) -> dict:
        return self._request(link.method, link.href)

    def _request(self, method: str, href: str, json: Optional[dict] = None) -> dict:
        url = urljoin(self.base_url, href)
        response = self._http.request(method, url, json=json, timeout=self.timeout)
        response.raise_for_status()
        return response.json()
