import dataclasses

import pytest

from models.cors_policy import CorsPolicy, CorsSettings, DEFAULT_ORIGIN, POLICY_NAME
from proxy_api.cors import build_cors_policy, clean_origins


class TestBuildCorsPolicy:
    def test_absent_section_uses_default_origin(self):
        policy = build_cors_policy(CorsSettings())
        assert policy.origins == ("http://localhost:4200",)
        assert DEFAULT_ORIGIN == "http://localhost:4200"

    def test_blank_entries_removed_and_order_kept(self):
        policy = build_cors_policy(CorsSettings(("https://a.com", "", "https://b.com")))
        assert policy.origins == ("https://a.com", "https://b.com")

    def test_section_with_only_blanks_falls_back_to_default(self):
        policy = build_cors_policy(CorsSettings(("", "   ", None)))
        assert policy.origins == (DEFAULT_ORIGIN,)

    def test_empty_section_falls_back_to_default(self):
        assert build_cors_policy(CorsSettings(())).origins == (DEFAULT_ORIGIN,)

    def test_flags_always_enabled(self):
        for settings in (CorsSettings(), CorsSettings(("https://x.org",))):
            policy = build_cors_policy(settings)
            assert policy.allow_any_header is True
            assert policy.allow_any_method is True
            assert policy.allow_credentials is True
            assert policy.name == POLICY_NAME == "CorsPolicy"

    def test_deterministic(self):
        settings = CorsSettings(("https://b.com", "https://a.com"))
        first, second = build_cors_policy(settings), build_cors_policy(settings)
        assert first == second
        assert first.origins == ("https://b.com", "https://a.com")

    def test_policy_is_immutable(self):
        policy = build_cors_policy(CorsSettings())
        with pytest.raises(dataclasses.FrozenInstanceError):
            policy.origins = ("https://evil.com",)


def test_clean_origins_strips_and_skips_malformed():
    assert clean_origins([" https://a.com ", 42, "", "\t", "https://b.com"]) == (
        "https://a.com",
        "https://b.com",
    )


def test_policy_to_dict():
    policy = CorsPolicy(name="CorsPolicy", origins=("https://a.com",))
    assert policy.to_dict() == {
        "name": "CorsPolicy",
        "origins": ["https://a.com"],
        "allow_any_header": True,
        "allow_any_method": True,
        "allow_credentials": True,
    }
