"""Template loading and rendering for the index page."""

from dataclasses import dataclass
from pathlib import Path

from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template, TemplateError, select_autoescape

from chip8_web.config import Settings
from chip8_web.exceptions import TemplateLoadException, TemplateRenderException
from chip8_web.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


def create_templates(templates_dir: Path) -> Jinja2Templates:
    """Create the template collection used for the index page.

    Templates are compiled once: auto-reload is off so the cached template
    never changes after startup. Undefined variables raise at render time.
    """
    env = Environment(
        loader=FileSystemLoader(templates_dir),
        autoescape=select_autoescape(["html", "htm", "xml", "tmpl"]),
        undefined=StrictUndefined,
        auto_reload=False,
    )
    return Jinja2Templates(env=env)


@dataclass(frozen=True)
class IndexPage:
    """The compiled index template together with its fixed title."""

    template: Template
    title: str

    @property
    def name(self) -> str:
        return self.template.name or "<string>"

    def render(self) -> HTMLResponse:
        """Render the page.

        Returns:
            HTMLResponse with the rendered document

        Raises:
            TemplateRenderException: If the template fails while rendering
        """
        try:
            content = self.template.render(title=self.title)
        except Exception as e:
            raise TemplateRenderException(
                str(e),
                details={"template": self.name, "error_type": type(e).__name__},
            ) from e

        return HTMLResponse(content=content)


def load_index_page(settings: Settings) -> IndexPage:
    """Load and compile the index template.

    Args:
        settings: Settings with the template location and page title

    Returns:
        IndexPage ready to render

    Raises:
        TemplateLoadException: If the template is missing, unreadable or does not parse
    """
    templates = create_templates(settings.templates_dir)

    try:
        template = templates.get_template(settings.template_name)
    except (TemplateError, OSError, UnicodeDecodeError) as e:
        log_with_context(
            logger,
            "error",
            "Failed to load index template",
            template=str(settings.template_path),
            error=str(e),
            error_type=type(e).__name__,
            event_type="template_load_failed",
        )
        raise TemplateLoadException(
            f"Could not load template {settings.template_path}: {e}",
            details={"template": str(settings.template_path), "error_type": type(e).__name__},
        ) from e

    log_with_context(
        logger,
        "info",
        "Index template loaded",
        template=str(settings.template_path),
        title=settings.page_title,
        event_type="template_loaded",
    )
    return IndexPage(template=template, title=settings.page_title)
