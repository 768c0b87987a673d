# tests/config/test_config_service.py
import pytest

from price_preview.config import ConfigService
from price_preview.errors import ConfigurationError


def test_bundled_defaults_are_loaded():
    config = ConfigService(environ={})
    assert config.get("catalog.default_currency") == "USD"
    assert config.get("http.request_timeout_sec") == 30
    assert config.get("http.max_concurrency") is None
    assert config.get("presentation.not_available_label") == "N/A"


def test_missing_key_returns_default():
    config = ConfigService(environ={})
    assert config.get("nope.missing", "fallback") == "fallback"
    assert config.section("nope") == {}


def test_cast_is_applied_and_failure_is_configuration_error():
    config = ConfigService(overrides={"http.request_timeout_sec": "15"}, environ={})
    assert config.get("http.request_timeout_sec", cast=float) == 15.0

    bad = ConfigService(overrides={"http.request_timeout_sec": "soon"}, environ={})
    with pytest.raises(ConfigurationError):
        bad.get("http.request_timeout_sec", cast=float)


def test_section_is_a_copy():
    config = ConfigService(environ={})
    section = config.section("logging")
    section["suppress"]["httpx"] = "DEBUG"
    assert config.get("logging.suppress.httpx") == "WARNING"


# ──────────────────────────────────────────────────────────────────────────────
#                          🧪 Приоритет источников
# ──────────────────────────────────────────────────────────────────────────────

def test_user_yaml_overrides_bundled(tmp_path):
    user = tmp_path / "user.yaml"
    user.write_text("http:\n  max_concurrency: 4\ncatalog:\n  default_currency: EUR\n", encoding="utf-8")

    config = ConfigService(user, environ={})
    assert config.get("http.max_concurrency") == 4
    assert config.get("catalog.default_currency") == "EUR"
    assert config.get("http.html_parser") == "lxml"  # соседние ключи не потеряны


def test_env_overrides_yaml_and_overrides_win(tmp_path):
    user = tmp_path / "user.yaml"
    user.write_text("http:\n  user_agent: from-yaml\n", encoding="utf-8")
    environ = {
        "PRICE_PREVIEW_USER_AGENT": "from-env",
        "PRICE_PREVIEW_LOG_LEVEL": "DEBUG",
        "PRICE_PREVIEW_MAX_CONCURRENCY": "",
        "UNRELATED": "x",
    }

    config = ConfigService(user, environ=environ, overrides={"logging.level": "ERROR"})
    assert config.get("http.user_agent") == "from-env"
    assert config.get("logging.level") == "ERROR"
    assert config.get("http.max_concurrency") is None  # пустая переменная игнорируется


@pytest.mark.parametrize(
    "content",
    ["http: [unclosed", "- just\n- a list\n"],
    ids=["invalid_yaml", "non_mapping_root"],
)
def test_bad_user_yaml_is_configuration_error(tmp_path, content):
    user = tmp_path / "user.yaml"
    user.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        ConfigService(user, environ={})


def test_missing_user_yaml_is_configuration_error(tmp_path):
    with pytest.raises(ConfigurationError):
        ConfigService(tmp_path / "absent.yaml", environ={})
