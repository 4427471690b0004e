"""
WorldCat Utilities Module

Lookups against the WorldCat Identities and xID services.
"""

import json
import logging
import xml.etree.ElementTree as ET
from typing import Any, Callable, Dict, List, Optional, Union
from urllib.parse import quote

import requests

from ..settings.reader import ConfigSection

logger = logging.getLogger(__name__)

IDENTITIES_URL = "http://worldcat.org/identities"
XID_URL = "http://xisbn.worldcat.org/webservices/xid"


class WorldCatUtils:
    """
    Helper for WorldCat web services.

    Args:
        config (ConfigSection or None): The [WorldCat] section, if configured
        client (requests.Session): HTTP client used for all calls
        silent (bool): Log and swallow service failures instead of raising
        ip (str or callable, optional): Server address reported to xID, or a
            callable returning it for the request being served
    """

    def __init__(
        self,
        config: Optional[ConfigSection],
        client: requests.Session,
        silent: bool = True,
        ip: Union[str, Callable[[], Optional[str]], None] = None,
    ) -> None:
        self.config = config if config is not None else ConfigSection()
        self.client = client
        self.silent = silent
        self.ip = ip

    def get_ip(self) -> Optional[str]:
        return self.ip() if callable(self.ip) else self.ip

    def _fetch(self, url: str, params: Optional[Dict[str, Any]] = None) -> Optional[str]:
        try:
            response = self.client.get(url, params=params)
            response.raise_for_status()
            return response.text
        except requests.RequestException as e:
            if not self.silent:
                raise
            logger.warning(f"WorldCat request to {url} failed: {e}")
            return None

    def _parse(self, body: Optional[str]) -> Optional[ET.Element]:
        if not body:
            return None
        try:
            return ET.fromstring(body)
        except ET.ParseError as e:
            if not self.silent:
                raise
            logger.warning(f"Could not parse WorldCat response: {e}")
            return None

    def _identities_url(self) -> str:
        return (self.config.get("identities_url") or IDENTITIES_URL).rstrip("/")

    def get_related_identities(self, name: str, max_records: int = 10) -> Dict[str, List[str]]:
        """
        Find name identities similar to ``name``.

        Returns:
            dict: Established heading -> subject headings associated with it
        """
        root = self._parse(
            self._fetch(
                f"{self._identities_url()}/find",
                {"fullName": name, "maxList": max_records},
            )
        )
        if root is None:
            return {}

        identities: Dict[str, List[str]] = {}
        for match in list(root.iter("match"))[:max_records]:
            heading = (match.findtext("establishedForm") or "").strip()
            uri = (match.findtext("uri") or "").strip()
            if not heading or heading in identities:
                continue
            identities[heading] = self._get_identity_subjects(uri) if uri else []
        return identities

    def _get_identity_subjects(self, uri: str) -> List[str]:
        root = self._parse(self._fetch(f"{self._identities_url()}{uri}/identity.xml"))
        if root is None:
            return []
        subjects = []
        for subject in root.iter("subject"):
            text = (subject.text or "").strip()
            if text and text not in subjects:
                subjects.append(text)
        return subjects

    def get_xisbn(self, isbn: str) -> List[str]:
        """Related ISBNs (other editions) for ``isbn`` from the xID service."""
        params: Dict[str, Any] = {"method": "getEditions", "format": "json"}
        if self.config.get("id"):
            params["ai"] = self.config.get("id")
        ip = self.get_ip()
        if ip:
            params["ip"] = ip
        body = self._fetch(f"{XID_URL}/isbn/{quote(isbn)}", params)
        if body is None:
            return []
        try:
            data = json.loads(body)
        except ValueError as e:
            if not self.silent:
                raise
            logger.warning(f"Could not parse xISBN response: {e}")
            return []
        if data.get("stat") != "ok":
            return []
        return [related for entry in data.get("list", []) for related in entry.get("isbn", [])]
