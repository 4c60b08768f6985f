# live_delete_chat_message.py
import sys

from auth_helper import authorize
from sample_runner import run_sample, safe_print, usage_error
from youtube_client import YouTubeClient, build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube.force-ssl"]


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        return usage_error("No message id specified")
    message_id = args[0]

    def body():
        client = YouTubeClient(build_youtube(authorize(SCOPES, "deletelivechatmessage")))
        client.delete_chat_message(message_id)
        safe_print("Deleted message id", message_id)

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
