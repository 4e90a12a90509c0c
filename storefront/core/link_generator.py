from typing import Any, Mapping, Optional
from urllib.parse import urlencode

from starlette.routing import NoMatchFound


class LinkGenerator:
    """
    Builds absolute URLs to named routes outside of a request.

    `router` is anything with Starlette's `url_path_for` (the app or a
    router), so routes of included routers resolve with their prefixes.
    """

    def __init__(self, router, base_url: str):
        self.router = router
        self.base_url = base_url.rstrip("/")

    def link(
        self,
        name: str,
        path_params: Optional[Mapping[str, Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
    ) -> str:
        path_params = {k: str(v) for k, v in (path_params or {}).items()}
        try:
            path = self.router.url_path_for(name, **path_params)
        except NoMatchFound as e:
            raise ValueError(f"No route named '{name}' with parameters {sorted(path_params)}") from e

        query_string = urlencode({k: v for k, v in (query or {}).items() if v is not None})
        return f"{self.base_url}{path}" + (f"?{query_string}" if query_string else "")
