"""Test helpers: stand-ins for GitHub and Google Groups."""

from collections.abc import Callable

import httpx

COMMIT_DATE = "2024-03-02T10:20:30Z"
POST_HTML = (
    "<div>"
    '<span class="zX2W9c">Feb 1, 2024, 9:15:00 AM</span>'
    '<span class="zX2W9c">Mar 5, 2024, 3:04:05 PM</span>'
    "</div>"
)


def github_handler(
    commits: list | None = None,
    status_code: int = 200,
    redirect_to: str | None = None,
) -> Callable[[httpx.Request], httpx.Response]:
    """Build a MockTransport handler imitating github.com and its API.

    ``redirect_to`` makes the HEAD request to the repository redirect there,
    as GitHub does after a repository is renamed.
    """
    if commits is None:
        commits = [{"commit": {"committer": {"date": COMMIT_DATE}}}]

    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "github.com":
            if redirect_to is not None and str(request.url) != redirect_to:
                return httpx.Response(301, headers={"Location": redirect_to})
            return httpx.Response(200)
        return httpx.Response(status_code, json=commits)

    return handler


def discussion_handler(
    html: str = POST_HTML, status_code: int = 200
) -> Callable[[httpx.Request], httpx.Response]:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, text=html)

    return handler


def failing_handler(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)
