import pytest
from pydantic import SecretStr

from cicd_generator.core.exceptions.template_render_error import TemplateRenderError
from cicd_generator.templates.template_file_loader_service import TemplateFileLoaderService
from cicd_generator.templates.template_filters import groovy_block, groovy_gstring, groovy_string
from cicd_generator.templates.template_registry_service import TemplateRegistryService
from cicd_generator.templates.template_renderer_service import TemplateRendererService


@pytest.fixture
def catalog_dir(tmp_path):
    (tmp_path / "template_manifest.yaml").write_text("""
template_version: "1"
description: "Render Test"
templates:
  - id: greeting
    path: greeting.txt.j2
    slots: [name]
  - id: undeclared
    path: undeclared.txt.j2
    slots: []
""")
    (tmp_path / "greeting.txt.j2").write_text("Hello {{ name | groovy_string }}")
    (tmp_path / "undeclared.txt.j2").write_text("{{ missing }}")
    return tmp_path


def build_renderer(catalog_root):
    return TemplateRendererService(TemplateRegistryService(catalog_root), TemplateFileLoaderService())


def test_renderer_happy_path(catalog_dir):
    renderer = build_renderer(catalog_dir)

    assert renderer.render("greeting", {"name": "O'Neil"}) == "Hello 'O\\'Neil'"
    assert renderer.declared_slots("greeting") == ["name"]


def test_renderer_missing_slot(catalog_dir):
    renderer = build_renderer(catalog_dir)

    with pytest.raises(TemplateRenderError) as exc:
        renderer.render("greeting", {})

    assert exc.value.context["missing"] == ["name"]


def test_renderer_unexpected_slot(catalog_dir):
    renderer = build_renderer(catalog_dir)

    with pytest.raises(TemplateRenderError) as exc:
        renderer.render("greeting", {"name": "x", "password": "y"})

    assert exc.value.context["unexpected"] == ["password"]


def test_renderer_undefined_variable(catalog_dir):
    renderer = build_renderer(catalog_dir)

    with pytest.raises(TemplateRenderError) as exc:
        renderer.render("undeclared", {})

    assert "undefined" in str(exc.value)


@pytest.mark.parametrize(
    "value",
    [
        SecretStr("s3cr3t"),
        {"nested": SecretStr("s3cr3t")},
        [{"deep": (SecretStr("s3cr3t"),)}],
    ],
)
def test_renderer_rejects_secret_values(catalog_dir, value):
    renderer = build_renderer(catalog_dir)

    with pytest.raises(TemplateRenderError) as exc:
        renderer.render("greeting", {"name": value})

    assert "s3cr3t" not in str(exc.value)


def test_renderer_unknown_template(catalog_dir):
    with pytest.raises(TemplateRenderError):
        build_renderer(catalog_dir).render("nope", {})


def test_missing_catalog_is_reported(tmp_path):
    with pytest.raises(FileNotFoundError):
        build_renderer(tmp_path / "absent")


def test_invalid_manifest_is_reported(tmp_path):
    (tmp_path / "template_manifest.yaml").write_text('template_version: "2"\ndescription: x\ntemplates: []\n')

    with pytest.raises(ValueError):
        build_renderer(tmp_path)


def test_packaged_catalog_declares_every_template(renderer):
    for template_id in ("jenkinsfile", "deploy_aws", "deploy_digitalocean", "notify_teams", "readme"):
        assert renderer.declared_slots(template_id)


def test_groovy_filters():
    assert groovy_string("a\\b'c") == "'a\\\\b\\'c'"
    assert groovy_gstring('say "${x}"') == 'say \\"\\${x}\\"'
    assert groovy_block("printf '%s\\n'") == "printf '%s\\\\n'"
    with pytest.raises(ValueError):
        groovy_block("echo '''")


def test_groovy_filters_escape_line_breaks():
    assert groovy_string("a\nb\r\tc") == r"'a\nb\r\tc'"
    assert groovy_gstring("line\nnext") == r"line\nnext"
