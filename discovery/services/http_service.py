"""
HTTP Service Module

Builds outbound HTTP clients for the external content and metadata services
(WorldCat, DPLA, Europeana, Wikipedia, Facebook).
"""

import logging
from typing import Any, Dict, Mapping, Optional

import requests

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30


class HttpClient(requests.Session):
    """A requests session that applies a default timeout and base URL."""

    def __init__(self, url: Optional[str] = None, timeout: Optional[float] = None) -> None:
        super().__init__()
        self.url = url
        self.timeout = timeout

    def request(self, method, url=None, *args, **kwargs):  # type: ignore[override]
        if url is None:
            url = self.url
        if kwargs.get("timeout") is None and self.timeout is not None:
            kwargs["timeout"] = self.timeout
        return super().request(method, url, *args, **kwargs)


class HttpService:
    """
    Factory for configured HTTP clients.

    Args:
        proxy_config (dict): ``proxy_host``, ``proxy_port`` and ``proxy_type`` options
        defaults (dict): Client defaults from the [Http] section
            (``timeout``, ``sslverifypeer``, ``user_agent``)
    """

    def __init__(
        self,
        proxy_config: Optional[Mapping[str, Any]] = None,
        defaults: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.proxy_config = dict(proxy_config or {})
        self.defaults = dict(defaults or {})

    def get_proxies(self) -> Dict[str, str]:
        """Proxy mapping in the form requests expects."""
        host = self.proxy_config.get("proxy_host")
        if not host:
            return {}
        scheme = "http"
        proxy_type = str(self.proxy_config.get("proxy_type", "")).lower()
        if proxy_type.startswith("socks"):
            scheme = "socks5h" if proxy_type == "socks5" else proxy_type
        address = f"{scheme}://{host}"
        port = self.proxy_config.get("proxy_port")
        if port:
            address = f"{address}:{port}"
        return {"http": address, "https": address}

    def _default_timeout(self) -> float:
        value = self.defaults.get("timeout")
        return float(value) if value not in (None, "") else DEFAULT_TIMEOUT

    def create_client(
        self, url: Optional[str] = None, timeout: Optional[float] = None
    ) -> HttpClient:
        """
        Create a new client carrying the proxy settings and defaults.

        Args:
            url (str, optional): Default URL used when a request omits one
            timeout (float, optional): Overrides the configured timeout

        Returns:
            HttpClient: Fresh client; callers own and close it
        """
        client = HttpClient(url, timeout if timeout is not None else self._default_timeout())
        client.proxies.update(self.get_proxies())

        verify = self.defaults.get("sslverifypeer")
        if verify is not None:
            client.verify = str(verify).lower() not in ("0", "false", "no", "off")

        user_agent = self.defaults.get("user_agent")
        if user_agent:
            client.headers["User-Agent"] = user_agent

        return client

    def get(self, url: str, params: Optional[Mapping[str, Any]] = None, timeout=None):
        """Perform a one-off GET request with a fresh client."""
        logger.debug(f"GET {url}")
        with self.create_client(timeout=timeout) as client:
            return client.get(url, params=params)
