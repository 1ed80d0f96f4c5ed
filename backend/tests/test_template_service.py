"""
Basic Resource — Template Service Unit Tests
==============================================

What we test:
    ✅ Template lookup by name, missing and uncompilable templates
    ✅ Data bindings: chaining, overwrite, context isolation
    ✅ Rendering with autoescaping and render-time failures
    ✅ The FastAPI dependency factory
"""

import pytest

from app.exceptions import TemplateNotFoundError, TemplateRenderError, ValidationError
from app.services import template_service
from app.services.template_service import TemplateEngine, TemplateInstance


class TestTemplateLookup:
    """Tests for TemplateEngine.get_template."""

    def test_get_template_by_name(self, engine):
        template = engine.get_template("hello")
        assert template.name == "hello"

    def test_missing_template_raises(self, engine):
        with pytest.raises(TemplateNotFoundError) as exc_info:
            engine.get_template("goodbye")
        assert exc_info.value.template == "goodbye"
        assert "goodbye" in exc_info.value.message

    def test_is_available(self, engine, tmp_path):
        assert engine.is_available("hello") is True
        assert engine.is_available("goodbye") is False
        assert TemplateEngine(str(tmp_path / "nowhere")).is_available("hello") is False


class TestTemplateInstance:
    """Tests for data bindings on template instances."""

    def test_data_returns_instance_with_binding(self, engine):
        instance = engine.get_template("hello").data("name", "micmine")
        assert isinstance(instance, TemplateInstance)
        assert instance.context == {"name": "micmine"}

    def test_data_chains_and_overwrites(self, engine):
        instance = (
            engine.get_template("hello")
            .data("name", "first")
            .data("sufix", 3)
            .data("name", "second")
        )
        assert instance.context == {"name": "second", "sufix": 3}

    def test_each_template_data_call_starts_fresh(self, engine):
        template = engine.get_template("hello")
        first = template.data("name", "a")
        second = template.data("name", "b")
        assert first.context == {"name": "a"}
        assert second.context == {"name": "b"}

    def test_context_is_a_copy(self, engine):
        instance = engine.get_template("hello").data("name", "micmine")
        instance.context["name"] = "changed"
        assert instance.context == {"name": "micmine"}

    def test_empty_key_rejected(self, engine):
        with pytest.raises(ValidationError) as exc_info:
            engine.get_template("hello").data("", "value")
        assert exc_info.value.field == "key"


class TestRendering:
    """Tests for TemplateInstance.render."""

    def test_render_binds_name(self, engine):
        html = engine.get_template("hello").data("name", "micmine").render()
        assert html == "<p>Hello micmine!</p>"

    def test_render_includes_optional_binding(self, engine):
        html = engine.get_template("hello").data("name", "x").data("sufix", 7).render()
        assert "<i>7</i>" in html

    def test_render_escapes_markup(self, engine):
        html = engine.get_template("hello").data("name", "<script>").render()
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_render_does_not_mutate_bindings(self, engine):
        instance = engine.get_template("hello").data("name", "micmine")
        instance.render()
        instance.render()
        assert instance.context == {"name": "micmine"}

    def test_render_failure_raises_template_render_error(self, templates_dir, engine):
        (templates_dir / "broken.html").write_text("{{ name.missing() }}", encoding="utf-8")
        instance = engine.get_template("broken").data("name", "micmine")
        with pytest.raises(TemplateRenderError) as exc_info:
            instance.render()
        assert exc_info.value.context["template"] == "broken"

    def test_syntax_error_raises_template_render_error(self, templates_dir, engine):
        (templates_dir / "invalid.html").write_text("{% if %}", encoding="utf-8")
        with pytest.raises(TemplateRenderError) as exc_info:
            engine.get_template("invalid")
        assert exc_info.value.context["template"] == "invalid"
        assert exc_info.value.context["line"] == 1
        assert engine.is_available("invalid") is False


class TestDependency:
    """Tests for the get_template() dependency factory."""

    def test_dependency_resolves_from_module_engine(self, engine, monkeypatch):
        monkeypatch.setattr(template_service, "template_engine", engine)
        dependency = template_service.get_template("hello")
        assert dependency.__name__ == "template_hello"
        assert dependency().name == "hello"

    def test_default_engine_ships_hello_template(self):
        assert template_service.template_engine.is_available("hello") is True
