"""
Tests for writing virtual host files in predefined and custom mode.
"""

from unittest.mock import patch

import pytest

from apache_node_proxy.config.exceptions import WriteError
from apache_node_proxy.models import Configuration
from apache_node_proxy.vhosts import VirtualHostWriter


def make_config(project_dir, **overrides):
    params = {"project_path": project_dir, "port": 3000, "app_name": "testapp"}
    params.update(overrides)
    return Configuration(**params)


class TestCustomMode:
    def test_writes_http_and_https(self, bitnami, project_dir, console):
        writer = VirtualHostWriter(bitnami, console=console)
        written = writer.write(make_config(project_dir))

        http_path = bitnami.vhosts_dir / "testapp-http-vhost.conf"
        https_path = bitnami.vhosts_dir / "testapp-https-vhost.conf"
        assert written == [http_path, https_path]
        assert "_default_:80" in http_path.read_text()
        assert "SSLEngine on" in https_path.read_text()
        assert f'DocumentRoot "{project_dir}"' in http_path.read_text()

        output = console.file.getvalue()
        assert "Created HTTP virtual host" in output
        assert "Created HTTPS virtual host" in output

    def test_no_https_file_when_disabled(self, bitnami, project_dir, console):
        writer = VirtualHostWriter(bitnami, console=console)
        written = writer.write(make_config(project_dir, use_https=False))

        assert written == [bitnami.vhosts_dir / "testapp-http-vhost.conf"]
        assert not (bitnami.vhosts_dir / "testapp-https-vhost.conf").exists()

    def test_overwrites_existing_file(self, bitnami, project_dir, console):
        target = bitnami.vhosts_dir / "testapp-http-vhost.conf"
        target.write_text("old content")

        VirtualHostWriter(bitnami, console=console).write(
            make_config(project_dir, port=4321, use_https=False)
        )
        content = target.read_text()
        assert "old content" not in content
        assert "http://localhost:4321/" in content

    def test_write_failure(self, bitnami, project_dir, console):
        writer = VirtualHostWriter(bitnami, console=console)
        with patch("pathlib.Path.write_text", side_effect=PermissionError("denied")):
            with pytest.raises(WriteError, match="Permission denied"):
                writer.write(make_config(project_dir))

    def test_missing_vhosts_dir(self, bitnami, project_dir, console):
        bitnami.vhosts_dir.rmdir()
        with pytest.raises(WriteError, match="Failed to write virtual host"):
            VirtualHostWriter(bitnami, console=console).write(make_config(project_dir))


class TestPredefinedMode:
    def test_enables_both_samples(self, bitnami, project_dir, console):
        (bitnami.vhosts_dir / "sample-vhost.conf.disabled").write_text("http sample")
        (bitnami.vhosts_dir / "sample-https-vhost.conf.disabled").write_text("https sample")

        written = VirtualHostWriter(bitnami, console=console).write(
            make_config(project_dir, use_predefined=True)
        )

        assert written == [
            bitnami.vhosts_dir / "sample-vhost.conf",
            bitnami.vhosts_dir / "sample-https-vhost.conf",
        ]
        assert (bitnami.vhosts_dir / "sample-vhost.conf").read_text() == "http sample"
        assert (bitnami.vhosts_dir / "sample-https-vhost.conf").read_text() == "https sample"
        # the disabled samples stay in place
        assert (bitnami.vhosts_dir / "sample-vhost.conf.disabled").exists()
        assert not (bitnami.vhosts_dir / "testapp-http-vhost.conf").exists()

    def test_missing_source_is_a_warning(self, bitnami, project_dir, console):
        (bitnami.vhosts_dir / "sample-vhost.conf.disabled").write_text("http sample")

        written = VirtualHostWriter(bitnami, console=console).write(
            make_config(project_dir, use_predefined=True)
        )

        assert written == [bitnami.vhosts_dir / "sample-vhost.conf"]
        assert not (bitnami.vhosts_dir / "sample-https-vhost.conf").exists()
        assert "Predefined file not found: sample-https-vhost.conf.disabled" in console.file.getvalue()

    def test_copy_failure_is_a_warning(self, bitnami, project_dir, console):
        (bitnami.vhosts_dir / "sample-vhost.conf.disabled").write_text("http sample")
        (bitnami.vhosts_dir / "sample-https-vhost.conf.disabled").write_text("https sample")

        with patch("apache_node_proxy.vhosts.shutil.copyfile", side_effect=OSError("disk full")):
            written = VirtualHostWriter(bitnami, console=console).enable_predefined()

        assert written == []
        assert "Could not enable sample-vhost.conf: disk full" in console.file.getvalue()
