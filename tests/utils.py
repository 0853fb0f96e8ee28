from typing import Any


def wire_cookie(
    name: str = "sid", value: str = "1", domain: str = "a.com", path: str = "/", **extra: Any
) -> dict[str, Any]:
    """setCookie wire arguments. The url defaults to the undotted domain."""
    url = extra.pop("url", f"http://{domain.lstrip('.')}")
    return {"url": url, "name": name, "value": value, "domain": domain, "path": path, **extra}
