"""Client for the admin console: load, show and export RSVPs."""

import logging
from typing import Any

import httpx

from src.rsvps.export import rsvps_to_csv
from src.rsvps.urls import ADMIN_RSVPS_URL

logger = logging.getLogger(__name__)

TABLE_COLUMNS = ("id", "name", "attending", "guestCount", "email", "phone", "message", "createdAt")
MAX_CELL_WIDTH = 30


class AdminConsoleError(Exception):
    """Raised with a message meant to be shown to the admin as-is."""


class AdminConsole:
    """Holds the last loaded RSVP list; exports work on that list, not a fresh fetch."""

    def __init__(
        self,
        base_url: str,
        username: str = "admin",
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._base_url = base_url.rstrip("/")
        self._username = username
        self._http_client_class = http_client_class
        self.latest: list[dict[str, Any]] = []

    async def load(self, password: str) -> list[dict[str, Any]]:
        if not password:
            raise AdminConsoleError("Enter the admin password.")

        auth = httpx.BasicAuth(self._username, password)
        try:
            async with self._http_client_class(base_url=self._base_url) as client:
                response = await client.get(ADMIN_RSVPS_URL, auth=auth)
        except httpx.TransportError as e:
            logger.warning("Admin fetch failed: %s", e)
            raise AdminConsoleError("Failed to fetch. Make sure the server is running.") from e

        if response.status_code == 401:
            raise AdminConsoleError(
                "Wrong password (401). Check ADMIN_PASSWORD and restart the server."
            )
        if response.is_error:
            raise AdminConsoleError(f"Request failed ({response.status_code}).")

        self.latest = response.json().get("rsvps") or []
        return self.latest

    def status(self) -> str:
        if not self.latest:
            return "No RSVPs yet."
        return f"Loaded {len(self.latest)} RSVP(s)."

    def render_table(self) -> str:
        rows = [list(TABLE_COLUMNS)]
        for record in self.latest:
            rows.append([_cell(record.get(column)) for column in TABLE_COLUMNS])

        widths = [max(len(row[i]) for row in rows) for i in range(len(TABLE_COLUMNS))]
        lines = ["  ".join(value.ljust(widths[i]) for i, value in enumerate(row)).rstrip() for row in rows]
        lines.insert(1, "  ".join("-" * width for width in widths))
        return "\n".join(lines)

    def export_csv(self) -> str:
        if not self.latest:
            raise AdminConsoleError("Nothing to export yet.")
        return rsvps_to_csv(self.latest)


def _cell(value: Any) -> str:
    text = "" if value is None else " ".join(str(value).split())
    if len(text) > MAX_CELL_WIDTH:
        text = text[: MAX_CELL_WIDTH - 1] + "…"
    return text
