# data_quickstart.py
import sys

from auth_helper import authorize
from sample_runner import run_sample, safe_print
from youtube_client import build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube.readonly"]
USERNAME = "GoogleDevelopers"


def main(argv=None) -> int:
    def body():
        youtube = build_youtube(authorize(SCOPES, "quickstart"))
        resp = youtube.channels().list(part="snippet,contentDetails,statistics", forUsername=USERNAME).execute()
        items = resp.get("items", [])
        if not items:
            safe_print(f"No channel found for username {USERNAME}.")
            return 1
        channel = items[0]
        safe_print(
            "This channel's ID is %s. Its title is '%s', and it has %s views."
            % (channel["id"], channel["snippet"]["title"], channel["statistics"]["viewCount"])
        )

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
