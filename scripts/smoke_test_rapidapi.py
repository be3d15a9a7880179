#!/usr/bin/env python3
"""
RapidAPI Smoke Test
Fetches one channel listing and one transcript with the real services
"""

import sys
from pathlib import Path

from dotenv import load_dotenv

from rapidtube import (
    RapidAPIError,
    create_channel_videos_client,
    create_transcript_client,
)
from rapidtube.app.config import get_config, setup_logging

ROOT_DIR = Path(__file__).resolve().parent.parent
load_dotenv(ROOT_DIR / ".env")

CHANNEL_ID = "UCuAXFkgsw1L7xaCfnd5JJOw"  # Rick Astley
VIDEO_ID = "dQw4w9WgXcQ"  # Never Gonna Give You Up


def main() -> int:
    setup_logging()
    config = get_config()

    print("=" * 60)
    print("  🔑 RapidAPI Smoke Test")
    print("=" * 60)

    try:
        with create_channel_videos_client(config=config) as client:
            print(f"\n🔄 Listing channel {CHANNEL_ID} via {client.host}...")
            videos = client.get_channel_videos(CHANNEL_ID)
            print(f"✅ {len(videos)} videos")
            for video in videos[:5]:
                print(f"   - {video.title} ({video.length_text}, {video.view_count_text})")

        with create_transcript_client(config=config) as client:
            print(f"\n🔄 Fetching transcript {VIDEO_ID} via {client.host}...")
            transcript = client.get_transcript(VIDEO_ID)
            print(f"✅ {transcript.title}")
            print(f"   Languages: {', '.join(transcript.available_langs)}")
            print(f"   Segments: {len(transcript.segments)}")
            print(f"   Text: {transcript.full_text[:120]}...")

    except RapidAPIError as e:
        print(f"\n❌ {type(e).__name__}: {e}")
        return 1

    print("\n" + "=" * 60)
    return 0


if __name__ == "__main__":
    sys.exit(main())
