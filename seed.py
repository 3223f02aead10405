from pledge_api.database import SessionLocal, init_db
from pledge_api.models import Campaign, CampaignStatus

# Create tables
init_db()

db = SessionLocal()

campaigns = [
    Campaign(
        campaign="pilot_v1",
        name="If We All Did: Pilot",
        path="/pilot",
        threshold=2,
        status=CampaignStatus.COLLECTING.value,
        email_subject="We begin",
        email_intro="We reached the goal for the pilot. Thank you for pledging.",
        email_bullets=[
            "Everyone who pledged starts this week.",
            "Check in on the pledge page to see how it is going.",
        ],
        email_cta_label="Open the pledge page",
    ),
]

for campaign in campaigns:
    if db.get(Campaign, campaign.campaign) is None:
        db.add(campaign)

db.commit()
db.close()

print("Seeded campaigns:", ", ".join(c.campaign for c in campaigns))
