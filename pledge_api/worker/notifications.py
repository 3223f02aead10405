"""
Campaign notification email rendering.

Copy comes from the campaign row. Anything that ends up inside the HTML
body is escaped first, since campaign copy is edited by hand.
"""
import html
from dataclasses import dataclass
from typing import List

from ..errors import StoreError
from ..models.campaign import Campaign

DEFAULT_SUBJECT = "We begin"
DEFAULT_CTA_LABEL = "See what happens next"


@dataclass
class RenderedEmail:
    """Subject line and HTML body for one notification"""
    subject: str
    html: str


def campaign_url(base_url: str, path: str) -> str:
    """Join the configured site URL and a campaign page path."""
    return f"{base_url.rstrip('/')}/{(path or '').lstrip('/')}"


def _bullets(campaign: Campaign) -> List[str]:
    bullets = campaign.email_bullets
    if bullets is None:
        return []
    if not isinstance(bullets, list) or not all(isinstance(b, str) for b in bullets):
        raise StoreError(f"Campaign {campaign.campaign} has malformed email_bullets")
    return bullets


def render_campaign_email(campaign: Campaign, base_url: str) -> RenderedEmail:
    """Build the 'we reached the goal' email for a campaign."""
    display_name = campaign.name or campaign.campaign
    subject = campaign.email_subject or DEFAULT_SUBJECT
    intro = campaign.email_intro or f"We reached the goal for {display_name}."
    cta_label = campaign.email_cta_label or DEFAULT_CTA_LABEL
    url = campaign_url(base_url, campaign.path)

    parts = [f"<p>{html.escape(intro)}</p>"]

    bullets = _bullets(campaign)
    if bullets:
        items = "".join(f"<li>{html.escape(b)}</li>" for b in bullets)
        parts.append(f"<ul>{items}</ul>")

    parts.append(f'<p><a href="{html.escape(url, quote=True)}">{html.escape(cta_label)}</a></p>')
    parts.append("<p>We begin together.</p>")

    return RenderedEmail(subject=subject, html="\n".join(parts))
