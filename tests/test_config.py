import pytest

from showcase.core.config import Config, validate_config


class GoodConfig(Config):
    DATABASE_URL = "postgresql://user@localhost:5432/postgres"
    ADMIN_API_TOKEN = "token"
    SITE_URL = "https://example.test/"
    PORT = 8000
    LOG_LEVEL = "info"
    TOC_SCROLL_OFFSET = 80.0
    RELATED_PROJECTS_LIMIT = 2


class BadConfig(GoodConfig):
    DATABASE_URL = ""
    PORT = 0
    LOG_LEVEL = "chatty"
    TOC_SCROLL_OFFSET = -1.0
    SITE_URL = "example.test"


def test_valid_config_has_no_errors():
    config = GoodConfig()

    assert config.validate() == []
    validate_config(config)
    assert config.site_url == "https://example.test"
    assert config.toc_scroll_offset == 80.0


def test_invalid_config_reports_every_problem():
    errors = BadConfig().validate()

    assert len(errors) == 5
    with pytest.raises(ValueError, match="설정 오류"):
        validate_config(BadConfig())


def test_missing_admin_token_only_warns(caplog):
    class NoToken(GoodConfig):
        ADMIN_API_TOKEN = ""

    validate_config(NoToken())

    assert "ADMIN_API_TOKEN" in caplog.text
