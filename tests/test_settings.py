from pathlib import Path

from apache_node_proxy.settings import ProxySettings


def test_defaults():
    settings = ProxySettings.from_env({})
    assert settings.base_dir == Path("/opt/bitnami")
    assert settings.conf_dir == Path("/opt/bitnami/apache/conf")
    assert settings.vhosts_dir == Path("/opt/bitnami/apache/conf/vhosts")
    assert settings.restart_command == "/opt/bitnami/ctlscript.sh restart apache"
    assert settings.cert_file == Path("/opt/bitnami/apache/conf/bitnami/certs/server.crt")
    assert settings.cert_key_file == Path("/opt/bitnami/apache/conf/bitnami/certs/server.key")


def test_env_overrides():
    settings = ProxySettings.from_env(
        {
            "APACHE_NODE_PROXY_BASE_DIR": "/srv/bitnami",
            "APACHE_NODE_PROXY_VHOSTS_DIR": "/srv/vhosts",
            "APACHE_NODE_PROXY_RESTART_COMMAND": "apachectl graceful",
            "APACHE_NODE_PROXY_CONF_DIR": "   ",
        }
    )
    assert settings.base_dir == Path("/srv/bitnami")
    assert settings.vhosts_dir == Path("/srv/vhosts")
    assert settings.restart_command == "apachectl graceful"
    # blank values fall back to the default
    assert settings.conf_dir == Path("/opt/bitnami/apache/conf")


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("APACHE_NODE_PROXY_BASE_DIR", "/tmp/bitnami")
    assert ProxySettings.from_env().base_dir == Path("/tmp/bitnami")
