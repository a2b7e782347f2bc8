"""Page routes: every path outside /static renders the index page."""

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse

from chip8_web.dependencies import get_index_page
from chip8_web.static_files import STATIC_PREFIX
from chip8_web.views.template_renderer import IndexPage

router = APIRouter()

# The method is not part of routing
PAGE_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/", methods=PAGE_METHODS, response_class=HTMLResponse)
async def index(page: IndexPage = Depends(get_index_page)):
    """Render the emulator page."""
    return page.render()


@router.api_route(STATIC_PREFIX, methods=PAGE_METHODS, include_in_schema=False)
async def static_root(request: Request):
    """Redirect the bare asset prefix to the asset tree."""
    url = f"{STATIC_PREFIX}/"
    if request.url.query:
        url = f"{url}?{request.url.query}"
    return RedirectResponse(url, status_code=301)


@router.api_route("/{path:path}", methods=PAGE_METHODS, response_class=HTMLResponse, include_in_schema=False)
async def index_fallback(path: str, page: IndexPage = Depends(get_index_page)):
    """Render the emulator page for any other path."""
    return page.render()
