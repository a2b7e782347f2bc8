"""Tests for index template loading and rendering."""

import dataclasses

import pytest
from fastapi.templating import Jinja2Templates
from jinja2 import StrictUndefined

from chip8_web.config import Settings
from chip8_web.exceptions import ErrorCode, TemplateLoadException, TemplateRenderException
from chip8_web.views.template_renderer import IndexPage, create_templates, load_index_page


def make_settings(tmp_path, template: str | None, **overrides) -> Settings:
    if template is not None:
        (tmp_path / "index.html").write_text(template, encoding="utf-8")
    return Settings(_env_file=None, templates_dir=tmp_path, assets_dir=tmp_path / "assets", **overrides)


class TestLoadIndexPage:
    """Tests for load_index_page."""

    def test_load_returns_page_with_title(self, test_settings):
        """Test loading the template yields a page with the fixed title."""
        page = load_index_page(test_settings)

        assert isinstance(page, IndexPage)
        assert page.title == "Chip-8"
        assert page.name == "index.html"

    def test_load_uses_configured_title(self, tmp_path):
        settings = make_settings(tmp_path, "{{ title }}", page_title="Space Invaders")

        page = load_index_page(settings)

        assert page.title == "Space Invaders"

    def test_missing_template_raises(self, tmp_path):
        """Test a missing template fails the load."""
        settings = make_settings(tmp_path, None)

        with pytest.raises(TemplateLoadException) as exc_info:
            load_index_page(settings)

        assert exc_info.value.code == ErrorCode.TEMPLATE_LOAD_ERROR
        assert exc_info.value.details["error_type"] == "TemplateNotFound"
        assert str(tmp_path / "index.html") in exc_info.value.message

    def test_missing_templates_dir_raises(self, tmp_path):
        settings = Settings(_env_file=None, templates_dir=tmp_path / "nowhere")

        with pytest.raises(TemplateLoadException):
            load_index_page(settings)

    def test_syntax_error_raises(self, tmp_path):
        """Test a template that does not parse fails the load."""
        settings = make_settings(tmp_path, "<h1>{% if %}</h1>")

        with pytest.raises(TemplateLoadException) as exc_info:
            load_index_page(settings)

        assert exc_info.value.details["error_type"] == "TemplateSyntaxError"


class TestIndexPageRender:
    """Tests for IndexPage.render."""

    def test_render_contains_title(self, test_settings):
        page = load_index_page(test_settings)

        response = page.render()

        assert response.status_code == 200
        assert response.media_type == "text/html"
        assert b"<title>Chip-8</title>" in response.body

    def test_render_escapes_title(self, tmp_path):
        """Test the title is HTML-escaped in .html templates."""
        settings = make_settings(tmp_path, "<h1>{{ title }}</h1>", page_title="<b>Chip-8</b>")

        response = load_index_page(settings).render()

        assert response.body == b"<h1>&lt;b&gt;Chip-8&lt;/b&gt;</h1>"

    def test_render_error_raises(self, tmp_path):
        """Test a template failing at render time raises with the error text."""
        settings = make_settings(tmp_path, "<p>{{ nope }}</p>")
        page = load_index_page(settings)

        with pytest.raises(TemplateRenderException) as exc_info:
            page.render()

        assert exc_info.value.message == "'nope' is undefined"
        assert exc_info.value.details["error_type"] == "UndefinedError"

    def test_render_runtime_error_raises(self, tmp_path):
        settings = make_settings(tmp_path, "{{ title + 1 }}")
        page = load_index_page(settings)

        with pytest.raises(TemplateRenderException) as exc_info:
            page.render()

        assert exc_info.value.details["error_type"] == "TypeError"

    def test_template_not_reloaded_after_load(self, tmp_path):
        """Test edits on disk after startup do not change the page."""
        settings = make_settings(tmp_path, "<p>{{ title }}</p>")
        page = load_index_page(settings)

        (tmp_path / "index.html").write_text("<p>changed</p>", encoding="utf-8")

        assert page.render().body == b"<p>Chip-8</p>"

    def test_page_is_immutable(self, test_settings):
        page = load_index_page(test_settings)

        with pytest.raises(dataclasses.FrozenInstanceError):
            page.title = "Other"

    def test_repeated_renders_identical(self, test_settings):
        page = load_index_page(test_settings)

        assert page.render().body == page.render().body


def test_create_templates_settings(tmp_path):
    """Test the template environment is strict and never reloads."""
    templates = create_templates(tmp_path)

    assert isinstance(templates, Jinja2Templates)
    assert templates.env.undefined is StrictUndefined
    assert templates.env.auto_reload is False
