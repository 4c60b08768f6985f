# live_insert_chat_message.py
import sys

from auth_helper import authorize
from live_get_chat_id import resolve_live_chat_id
from sample_runner import run_sample, safe_print, usage_error
from youtube_client import YouTubeClient, build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube.force-ssl"]


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        return usage_error("No message specified")
    message = args[0]
    video_id = args[1] if len(args) == 2 else None

    def body():
        client = YouTubeClient(build_youtube(authorize(SCOPES, "insertlivechatmessage")))
        live_chat_id = resolve_live_chat_id(client, video_id)
        res = client.insert_chat_message(live_chat_id, message)
        safe_print("Inserted message id", res.get("id"))

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
