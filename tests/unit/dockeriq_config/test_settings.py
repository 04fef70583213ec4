"""Unit tests for Settings."""

import pytest
from pydantic import ValidationError

from dockeriq_config import Settings, get_settings


class TestTrackingNumberPrefix:
    def test_default(self, monkeypatch):
        monkeypatch.delenv("TRACKING_NUMBER_PREFIX", raising=False)

        assert Settings().tracking_number_prefix == "DKIQ"

    @pytest.mark.parametrize("prefix", ["", "DKI", "DKIQX", "dkiq", "DK1Q"])
    def test_rejects_anything_but_four_upper_case_letters(self, prefix):
        with pytest.raises(ValidationError, match="4 uppercase letters"):
            Settings(tracking_number_prefix=prefix)


class TestCorsOrigins:
    def test_comma_separated(self):
        settings = Settings(api_cors_origins="http://a.test, http://b.test,")

        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_list_is_accepted(self):
        settings = Settings(api_cors_origins=["http://a.test", "http://b.test"])

        assert settings.api_cors_origins == "http://a.test,http://b.test"


class TestEnvironment:
    def test_reads_environment_variables(self, monkeypatch):
        monkeypatch.setenv("JWT_ACCESS_TOKEN_EXPIRE_MINUTES", "15")
        monkeypatch.setenv("TRACKING_NUMBER_PREFIX", "ABCD")

        settings = get_settings()

        assert settings.jwt_access_token_expire_minutes == 15
        assert settings.tracking_number_prefix == "ABCD"

    def test_secret_key_is_not_printed(self):
        settings = Settings(jwt_secret_key="top-secret")

        assert "top-secret" not in repr(settings)
        assert settings.jwt_secret_key.get_secret_value() == "top-secret"
