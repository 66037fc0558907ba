"""
Google Slides example for SlideTabs.

Requires the ``gslides`` extra and a service account that can edit the
presentation.
"""

from google.oauth2.service_account import Credentials
from googleapiclient.discovery import build

from slidetabs import LayoutConfig, TabBarPipeline
from slidetabs.adapters import GoogleSlidesAdapter

SCOPES = ["https://www.googleapis.com/auth/presentations"]


def main():
    credentials = Credentials.from_service_account_file("service_account.json", scopes=SCOPES)
    service = build("slides", "v1", credentials=credentials)

    adapter = GoogleSlidesAdapter(service, presentation_id="YOUR_PRESENTATION_ID")
    summary = TabBarPipeline(LayoutConfig(accent_color="#1A73E8", font_family="Roboto")).run(adapter)

    print(f"\n✓ {summary.tab_bars} tab bars, {summary.artifacts_removed} old elements replaced")


if __name__ == "__main__":
    main()
