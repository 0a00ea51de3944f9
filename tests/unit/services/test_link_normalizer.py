"""Unit tests for link normalization."""

import pytest

from domain.entities.profile import Profile, SocialPlatform
from domain.services.link_normalizer import (
    contact_links,
    normalize_handle,
    normalize_links,
    parse_extra_links,
)


def _profile(**handles: str) -> Profile:
    extra = handles.pop("extra_links", "")
    return Profile(
        name="Test",
        social_handles={SocialPlatform(k): v for k, v in handles.items()},
        extra_links=extra,
    )


class TestNormalizeHandle:
    @pytest.mark.parametrize(
        ("platform", "value", "expected"),
        [
            (SocialPlatform.INSTAGRAM, "@ana", "https://instagram.com/ana"),
            (SocialPlatform.INSTAGRAM, "ana", "https://instagram.com/ana"),
            (SocialPlatform.WHATSAPP, "+55 (11) 9999-8888", "https://wa.me/551199998888"),
            (SocialPlatform.FACEBOOK, "ana.souza", "https://facebook.com/ana.souza"),
            (SocialPlatform.LINKEDIN, "ana-souza", "https://linkedin.com/in/ana-souza"),
            (SocialPlatform.WEBSITE, "ana.dev", "https://ana.dev"),
        ],
    )
    def test_builds_platform_url(self, platform: SocialPlatform, value: str, expected: str):
        assert normalize_handle(platform, value) == expected

    @pytest.mark.parametrize("platform", list(SocialPlatform))
    def test_http_values_pass_through(self, platform: SocialPlatform):
        url = "http://example.com/@someone?x=1"
        assert normalize_handle(platform, url) == url

    def test_only_leading_at_is_stripped(self):
        assert normalize_handle(SocialPlatform.INSTAGRAM, "@a@b") == "https://instagram.com/a@b"


class TestParseExtraLinks:
    def test_label_and_scheme_added(self):
        [link] = parse_extra_links("GitHub|github.com/me")

        assert link.label == "GitHub"
        assert link.url == "https://github.com/me"

    def test_segment_without_url_is_dropped(self):
        assert parse_extra_links("NoURL|") == []
        assert parse_extra_links("just-a-label") == []

    def test_missing_label_defaults(self):
        [link] = parse_extra_links("|example.com")

        assert link.label == "Link"
        assert link.url == "https://example.com"

    def test_splits_on_first_pipe_only(self):
        [link] = parse_extra_links("Query|https://x.com/?a=1|2")

        assert link.url == "https://x.com/?a=1|2"

    def test_keeps_listed_order_and_trims(self):
        links = parse_extra_links(" A | a.com , B|http://b.com,,C|  ")

        assert [(link.label, link.url) for link in links] == [
            ("A", "https://a.com"),
            ("B", "http://b.com"),
        ]

    def test_empty_string(self):
        assert parse_extra_links("") == []


class TestNormalizeLinks:
    def test_fixed_platform_precedence_then_extras(self):
        profile = _profile(
            website="w.dev",
            extra_links="Z|z.com,A|a.com",
            linkedin="li",
            instagram="ig",
            facebook="fb",
            whatsapp="123",
        )

        labels = [link.label for link in normalize_links(profile)]

        assert labels == ["Instagram", "WhatsApp", "Facebook", "LinkedIn", "Website", "Z", "A"]

    def test_empty_fields_contribute_nothing(self):
        profile = _profile(facebook="fb")

        links = normalize_links(profile)

        assert [link.label for link in links] == ["Facebook"]

    def test_no_links(self):
        assert normalize_links(Profile(name="Nobody")) == []

    def test_carries_presentation_metadata(self):
        [link] = normalize_links(_profile(whatsapp="5511"))

        assert link.color == "#25D366"
        assert link.icon == "WA"

    def test_is_deterministic(self, full_profile: Profile):
        assert normalize_links(full_profile) == normalize_links(full_profile)


class TestContactLinks:
    def test_phone_and_email(self, full_profile: Profile):
        phone, email = contact_links(full_profile)

        assert phone.label == "+55 11 99999-8888"
        assert phone.url == "tel:+5511999998888"
        assert email.url == "mailto:ana@example.com"

    def test_no_contacts(self):
        assert contact_links(Profile()) == []
