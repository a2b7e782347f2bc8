"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from chip8_web.views.template_renderer import IndexPage


async def get_index_page(request: Request) -> IndexPage:
    """
    Get the loaded index page from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The IndexPage built at startup.

    Raises:
        RuntimeError: If the app was built without an index page.
    """
    page: IndexPage | None = getattr(request.app.state, "index_page", None)

    if page is None:
        raise RuntimeError("Index page not loaded. This should never happen.")

    return page
