#!/usr/bin/env python3
"""
Run the Campaign Trigger Once
=============================
Runs the same pass as GET /api/trigger-campaigns without going through HTTP,
for hosts that schedule the job with cron directly.

Usage:
    python scripts/trigger_campaigns.py [--base-url https://ifwealldid.org] [--dry-run]
"""

import argparse
import json
import sys

from pledge_api.config import get_settings
from pledge_api.database import SessionLocal
from pledge_api.errors import PledgeError
from pledge_api.mailer import get_mailer
from pledge_api.schemas.trigger import TriggerResponse
from pledge_api.worker.campaign_trigger import find_ready_campaigns, run_campaign_trigger


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Notify pledgers of campaigns that reached their threshold")
    parser.add_argument("--base-url", help="Override BASE_URL for campaign links")
    parser.add_argument("--dry-run", action="store_true", help="List ready campaigns without claiming them")
    args = parser.parse_args(argv)

    settings = get_settings()
    if args.base_url:
        settings = settings.model_copy(update={"base_url": args.base_url})

    db = SessionLocal()
    try:
        if args.dry_run:
            for campaign in find_ready_campaigns(db):
                print(f"ready: {campaign.campaign} (threshold {campaign.threshold})")
            return 0

        try:
            summary = run_campaign_trigger(db, get_mailer(), settings)
        except PledgeError as e:
            print(json.dumps(TriggerResponse(success=False, error=str(e)).to_payload()))
            return 1

        print(json.dumps(TriggerResponse(success=True, summary=summary).to_payload(), indent=2))
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
