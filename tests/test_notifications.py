"""
Tests for campaign email rendering.
"""
import pytest

from pledge_api.errors import StoreError
from pledge_api.models import Campaign
from pledge_api.worker.notifications import campaign_url, render_campaign_email


class TestCampaignUrl:

    def test_joins_without_double_slash(self):
        assert campaign_url("https://example.org/", "/pilot") == "https://example.org/pilot"
        assert campaign_url("https://example.org", "pilot") == "https://example.org/pilot"

    def test_missing_path(self):
        assert campaign_url("https://example.org", None) == "https://example.org/"


class TestRenderCampaignEmail:

    def test_defaults_use_campaign_name(self):
        campaign = Campaign(campaign="pilot_v1", threshold=2)

        message = render_campaign_email(campaign, "https://example.org")

        assert message.subject == "We begin"
        assert "We reached the goal for pilot_v1." in message.html
        assert "<ul>" not in message.html
        assert "See what happens next" in message.html

    def test_escapes_user_text(self):
        campaign = Campaign(
            campaign="pilot_v1",
            threshold=2,
            path='/p?a=1&b="2"',
            email_intro="<script>alert(1)</script>",
            email_bullets=["Tom & Jerry", "<b>bold</b>"],
            email_cta_label="Click <here>",
        )

        html = render_campaign_email(campaign, "https://example.org").html

        assert "<script>" not in html
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
        assert "<li>Tom &amp; Jerry</li>" in html
        assert "<li>&lt;b&gt;bold&lt;/b&gt;</li>" in html
        assert 'href="https://example.org/p?a=1&amp;b=&quot;2&quot;"' in html
        assert "Click &lt;here&gt;" in html

    def test_malformed_bullets(self):
        campaign = Campaign(campaign="pilot_v1", threshold=2, email_bullets=["ok", 3])

        with pytest.raises(StoreError):
            render_campaign_email(campaign, "https://example.org")
