import pytest

from models.cors_policy import CorsSettings
from models.schemas.cors_settings import CorsSettingsSchema


@pytest.fixture
def schema():
    return CorsSettingsSchema()


def test_missing_key_means_absent_section(schema):
    settings = schema.load({})
    assert settings == CorsSettings(allowed_origins=None)
    assert not settings.section_exists


def test_null_means_absent_section(schema):
    assert schema.load({"AllowedOrigins": None}).allowed_origins is None


def test_list_is_kept_verbatim(schema):
    settings = schema.load({"AllowedOrigins": ["https://a.com", "", "https://b.com"]})
    assert settings.allowed_origins == ("https://a.com", "", "https://b.com")
    assert settings.section_exists


def test_comma_separated_string_is_split(schema):
    settings = schema.load({"AllowedOrigins": "https://a.com,,https://b.com"})
    assert settings.allowed_origins == ("https://a.com", "", "https://b.com")


def test_indexed_mapping_keeps_order(schema):
    settings = schema.load({"AllowedOrigins": {"0": "https://a.com", "1": "https://b.com"}})
    assert settings.allowed_origins == ("https://a.com", "https://b.com")


def test_malformed_entries_do_not_fail_loading(schema):
    settings = schema.load({"AllowedOrigins": [None, 5, "https://a.com"], "Other": 1})
    assert settings.allowed_origins == (None, 5, "https://a.com")
