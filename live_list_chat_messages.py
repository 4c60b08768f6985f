# live_list_chat_messages.py
import sys

from auth_helper import authorize
from chat_poller import ChatPoller
from live_get_chat_id import resolve_live_chat_id
from sample_runner import run_sample
from youtube_client import YouTubeClient, build_youtube

SCOPES = ["https://www.googleapis.com/auth/youtube.readonly"]


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    video_id = args[0] if len(args) == 1 else None

    def body():
        client = YouTubeClient(build_youtube(authorize(SCOPES, "listlivechatmessages")))
        live_chat_id = resolve_live_chat_id(client, video_id)

        poller = ChatPoller(client.list_chat_messages, live_chat_id)
        try:
            return 0 if poller.run() else 1
        except KeyboardInterrupt:
            poller.stop()
            return 0

    return run_sample(body)


if __name__ == "__main__":
    sys.exit(main())
