"""
Content-negotiated error responses
"""
from functools import lru_cache
from pathlib import Path

from fastapi import Request, status
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse, Response

STATIC_DIR = Path(__file__).resolve().parent.parent / "static"

NOT_AUTHORIZED_ALERT = "You are not authorized to perform this action."
FLASH_COOKIE = "flash_alert"


def wants_json(request: Request) -> bool:
    """JSON when the client accepts it explicitly or asked for a .json path"""
    accept = request.headers.get("accept", "")
    return "application/json" in accept.lower() or request.url.path.endswith(".json")


@lru_cache(maxsize=None)
def static_page(name: str) -> str:
    return (STATIC_DIR / name).read_text(encoding="utf-8")


def not_found_response(request: Request) -> Response:
    if wants_json(request):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"error": "Not Found"})
    return HTMLResponse(static_page("404.html"), status_code=status.HTTP_404_NOT_FOUND)


def forbidden_response(request: Request) -> Response:
    if wants_json(request):
        return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"error": "Forbidden"})
    return HTMLResponse(static_page("403.html"), status_code=status.HTTP_403_FORBIDDEN)


def not_authorized_response(request: Request) -> Response:
    """
    Policy denial: API clients get a JSON 403, browsers are sent back to the
    referring page with an alert
    """
    if wants_json(request):
        # lowercase body, distinct from the tenant guard's "Forbidden"
        return JSONResponse(status_code=status.HTTP_403_FORBIDDEN, content={"error": "forbidden"})
    target = request.headers.get("referer") or "/"
    response = RedirectResponse(url=target, status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(FLASH_COOKIE, NOT_AUTHORIZED_ALERT, max_age=60, httponly=True)
    return response
