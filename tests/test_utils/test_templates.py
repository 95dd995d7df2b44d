"""Tests for component template rendering."""

import pytest

from manifest_plugin.errors import TemplateError
from manifest_plugin.models.repo import DEFAULT_COMPONENT_TEMPLATE
from manifest_plugin.utils.templates import ComponentTemplate, translate


CONTEXT = {
    "Repo": "/octocat/hello-world",
    "Tag": "latest",
    "Os": "linux",
    "Arch": "arm64",
    "Variant": "",
}


class TestComponentTemplate:
    """Test parsing and rendering."""
    
    def test_default_template_without_variant(self):
        template = ComponentTemplate.parse(DEFAULT_COMPONENT_TEMPLATE)
        
        assert template.render(CONTEXT) == "/octocat/hello-world:latest-linux-arm64"
        
    def test_default_template_with_variant(self):
        template = ComponentTemplate.parse(DEFAULT_COMPONENT_TEMPLATE)
        
        assert template.render(dict(CONTEXT, Variant="v8")) == "/octocat/hello-world:latest-linux-arm64-v8"
        
    def test_fields_without_dot(self):
        """Test ``{{Field}}`` and ``{{.Field}}`` are equivalent."""
        template = ComponentTemplate.parse("{{Repo}}:{{Tag}}-{{Os}}-{{Arch}}{{if Variant}}-{{Variant}}{{end}}")
        
        assert template.render(dict(CONTEXT, Variant="v8")) == "/octocat/hello-world:latest-linux-arm64-v8"
        
    def test_else_branch(self):
        template = ComponentTemplate.parse("{{Arch}}{{if Variant}}{{Variant}}{{else}}-novariant{{end}}")
        
        assert template.render(CONTEXT) == "arm64-novariant"
        
    def test_literal_text_is_verbatim(self):
        """Test literal text containing Jinja2 syntax is not interpreted."""
        template = ComponentTemplate.parse("{#x#}{%y%}:{{Tag}}")
        
        assert template.render(CONTEXT) == "{#x#}{%y%}:latest"
        
    def test_template_is_reusable(self):
        template = ComponentTemplate.parse("{{Tag}}")
        
        assert template.render(CONTEXT) == "latest"
        assert template.render(dict(CONTEXT, Tag="v1")) == "v1"
        
    @pytest.mark.parametrize("source", [
        "{{",
        "{{.Repo}}:{{",
        "{{if .Variant}}-{{.Variant}}",
        "{{end}}",
        "{{else}}",
        "{{.Registry.Name}}",
        "{{Repo | upper}}",
    ])
    def test_invalid_syntax(self, source):
        with pytest.raises(TemplateError):
            ComponentTemplate.parse(source)
            
    @pytest.mark.parametrize("source", [
        "{{Registry}}",
        "{{range}}",
        "{{.dict}}",
        "{{none}}",
        "{{True}}",
        "{{if lipsum}}x{{end}}",
    ])
    def test_unknown_field(self, source):
        """Test names outside the render context are rejected."""
        with pytest.raises(TemplateError, match="unknown template field"):
            ComponentTemplate.parse(source)
            
    def test_render_missing_context_field(self):
        """Test a context without a referenced field fails at render time."""
        template = ComponentTemplate.parse("{{Variant}}")
        
        with pytest.raises(TemplateError):
            template.render({"Repo": "/octocat/hello-world"})


def test_translate():
    """Test translation into Jinja2 syntax."""
    assert translate("{{.Repo}}:{{if .Variant}}{{.Variant}}{{end}}") == (
        "{{ Repo }}:{% if Variant %}{{ Variant }}{% endif %}"
    )
