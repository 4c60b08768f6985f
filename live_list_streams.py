# live_list_streams.py
import sys

from auth_helper import authorize
from sample_runner import print_banner, print_fields, print_separator, run_sample
from youtube_client import build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube.readonly"]


def main(argv=None) -> int:
    def body():
        youtube = build_youtube(authorize(SCOPES, "liststreams"))
        resp = youtube.liveStreams().list(part="id,snippet", mine=True).execute()

        print_banner("Returned Streams")
        for stream in resp.get("items", []):
            snippet = stream.get("snippet", {}) or {}
            print_fields(
                ("Id", stream.get("id")),
                ("Title", snippet.get("title")),
                ("Description", snippet.get("description")),
                ("Published At", snippet.get("publishedAt")),
            )
            print_separator()

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
