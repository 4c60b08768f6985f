# live_get_chat_id.py
import sys

from auth_helper import authorize
from sample_runner import run_sample, safe_print
from youtube_client import YouTubeClient, build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube.readonly"]


def resolve_live_chat_id(client: YouTubeClient, video_id=None):
    """Print and return the live chat id, or exit with status 1 when none is active."""
    live_chat_id = client.get_live_chat_id(video_id)
    if live_chat_id:
        safe_print("Live chat id:", live_chat_id)
        return live_chat_id
    safe_print("Unable to find a live chat id", file=sys.stderr)
    sys.exit(1)


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    video_id = args[0] if len(args) == 1 else None

    def body():
        client = YouTubeClient(build_youtube(authorize(SCOPES, "getlivechatid")))
        resolve_live_chat_id(client, video_id)

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
