import pytest

from apache_node_proxy.config.exceptions import ValidationError
from apache_node_proxy.preview import render_preview
from apache_node_proxy.settings import ProxySettings


def test_renders_without_existing_project():
    rendered = render_preview(
        "/opt/bitnami/projects/testapp", "3000", "testapp", True, ProxySettings()
    )
    assert list(rendered) == ["testapp-http-vhost.conf", "testapp-https-vhost.conf"]
    assert 'DocumentRoot "/opt/bitnami/projects/testapp"' in rendered["testapp-http-vhost.conf"]


def test_http_only(tmp_path):
    rendered = render_preview("/srv/app", 8080, "app", False, ProxySettings())
    assert list(rendered) == ["app-http-vhost.conf"]


def test_writes_output_dir(tmp_path):
    out = tmp_path / "test-output"
    rendered = render_preview("/srv/app", 3000, "app", True, ProxySettings(), output_dir=out)

    for name, content in rendered.items():
        assert (out / name).read_text() == content


def test_rejects_bad_name():
    with pytest.raises(ValidationError):
        render_preview("/srv/app", 3000, "bad/name", True, ProxySettings())


def test_relative_path_made_absolute(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    rendered = render_preview("./app", 3000, "app", False, ProxySettings())
    content = rendered["app-http-vhost.conf"]
    assert f'DocumentRoot "{tmp_path / "app"}"' in content
    assert 'DocumentRoot "./app"' not in content
