"""Google Groups scraper used to find a project's last discussion post."""

import re
from datetime import datetime
from typing import Final

import httpx

from src.press.core.config import get_settings
from src.press.core.exceptions import AppException
from src.press.core.logging import get_logger

logger = get_logger(__name__)

# Thread pages render each post date as e.g. <span class="zX2W9c">Jan 5, 2024, 3:04:05 PM</span>.
# Newer pages put a narrow no-break space before AM/PM.
POST_TIMESTAMP_REGEX: Final[str] = (
    r'<span class="[^"]+?">'
    r"([a-z]{3} \d{1,2}, \d{4}, \d{1,2}:\d{1,2}:\d{1,2}[ \u00a0\u202f](?:AM|PM))"
)
POST_TIMESTAMP_FORMAT: Final[str] = "%b %d, %Y, %I:%M:%S %p"

_POST_TIMESTAMP_PATTERN: Final[re.Pattern[str]] = re.compile(POST_TIMESTAMP_REGEX, re.IGNORECASE)


def parse_last_post_timestamp(html: str) -> datetime | None:
    """Return the last post date on a thread page, assumed UTC.

    Returns None when nothing timestamp-shaped is found or it fails to parse.
    """
    matches = _POST_TIMESTAMP_PATTERN.findall(html)
    if not matches:
        return None

    raw = matches[-1].replace("\u202f", " ").replace("\u00a0", " ")
    try:
        return datetime.strptime(raw, POST_TIMESTAMP_FORMAT)
    except ValueError:
        logger.info("Unparseable discussion timestamp", value=raw)
        return None


class DiscussionClient:
    """Fetches mailing list thread pages.

    Args:
        transport: Optional httpx transport override for testing.
        timeout: Seconds before the request gives up.
    """

    def __init__(
        self,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ):
        settings = get_settings()
        self.timeout = timeout if timeout is not None else settings.external_http_timeout_seconds
        self.transport = transport

    async def last_post_at(self, discussion_url: str) -> datetime | None:
        """Scrape the date of the newest post in a thread.

        Raises:
            AppException: On any transport error or non-200 status.
        """
        try:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(self.timeout),
                transport=self.transport,
                follow_redirects=True,
            ) as client:
                response = await client.get(discussion_url)
        except httpx.HTTPError as e:
            raise AppException(
                f"Error when fetching discussion for URL <{discussion_url}>: {e}"
            ) from e

        if response.status_code != httpx.codes.OK:
            raise AppException(
                f"Error when fetching discussion for URL <{discussion_url}>: "
                f"HTTP code {response.status_code} received."
            )

        return parse_last_post_timestamp(response.text)
