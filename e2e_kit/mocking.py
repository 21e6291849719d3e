"""
API Response Mocking

Route interception helpers: answer matching requests with a fabricated JSON
body instead of letting them reach the network.
"""
import json
import logging
from typing import Any, Dict, List, Pattern, Union

from playwright.sync_api import Page, Route

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

FETCH_JSON_SCRIPT = """
async (url) => {
    const response = await fetch(url);
    return await response.json();
}
"""


def user_payload(
    user_id: int = 2,
    email: str = "janet.weaver@reqres.in",
    first_name: str = "Janet",
    last_name: str = "Weaver",
    avatar: str = None,
) -> Dict[str, Any]:
    """Build a single-user API record."""
    return {
        "data": {
            "id": user_id,
            "email": email,
            "first_name": first_name,
            "last_name": last_name,
            "avatar": avatar or f"https://reqres.in/img/faces/{user_id}-image.jpg",
        },
        "support": {
            "url": "https://reqres.in/#support-heading",
            "text": "To keep ReqRes free, contributions towards server costs are appreciated!",
        },
    }


class RouteMock:
    """Route handler that fulfils every request it receives with one JSON body."""

    def __init__(self, payload: Any, status: int = 200, headers: Dict[str, str] = None):
        self.payload = payload
        self.status = status
        self.body = json.dumps(payload)
        self.headers = {"Access-Control-Allow-Origin": "*"}
        if headers:
            self.headers.update(headers)
        self.calls: List[str] = []

    def __call__(self, route: Route) -> None:
        url = route.request.url
        self.calls.append(url)
        logger.debug(f"Mocked {route.request.method} {url} -> {self.status}")
        route.fulfill(
            status=self.status,
            content_type=JSON_CONTENT_TYPE,
            headers=self.headers,
            body=self.body,
        )

    @property
    def call_count(self) -> int:
        return len(self.calls)


def mock_json(
    page: Page,
    url_pattern: Union[str, Pattern],
    payload: Any,
    status: int = 200,
    headers: Dict[str, str] = None,
) -> RouteMock:
    """
    Intercept requests matching url_pattern and answer them with payload.

    Register before the navigation or fetch that triggers the request;
    requests that do not match pass through to the network.
    """
    handler = RouteMock(payload, status=status, headers=headers)
    page.route(url_pattern, handler)
    return handler


def fetch_json(page: Page, url: str) -> Any:
    """Run fetch() inside the page and return the decoded JSON body."""
    return page.evaluate(FETCH_JSON_SCRIPT, url)
