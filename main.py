# main.py
"""
Run any sample by name:

  python main.py list-live-chat-messages [video_id]
  python main.py insert-live-chat-message "hello" [video_id]
"""

import importlib
import sys

from sample_runner import safe_print

# sample name -> module exposing main(argv) -> int
SAMPLES = {
    "get-live-chat-id": "live_get_chat_id",
    "list-live-chat-messages": "live_list_chat_messages",
    "insert-live-chat-message": "live_insert_chat_message",
    "delete-live-chat-message": "live_delete_chat_message",
    "list-broadcasts": "live_list_broadcasts",
    "list-streams": "live_list_streams",
    "create-broadcast": "live_create_broadcast",
    "quickstart": "data_quickstart",
    "search": "data_search",
    "geolocation-search": "data_geolocation_search",
    "my-uploads": "data_my_uploads",
    "add-subscription": "data_add_subscription",
    "upload-video": "data_upload_video",
    "update-video": "data_update_video",
    "upload-thumbnail": "data_upload_thumbnail",
    "playlist-updates": "data_playlist_updates",
    "channel-bulletin": "data_channel_bulletin",
    "comment-threads": "data_comment_threads",
    "comment-handling": "data_comment_handling",
    "captions": "data_captions",
    "analytics-reports": "analytics_reports",
    "create-reporting-job": "reporting_create_job",
    "retrieve-reports": "reporting_retrieve_reports",
    "rest-quickstart": "rest_quickstart",
    "rest-channel-searcher": "rest_channel_searcher",
    "authorize": "auth_helper",
}


def usage() -> str:
    names = "\n".join(f"  {name}" for name in sorted(SAMPLES))
    return f"Usage: python main.py <sample> [args...]\n\nSamples:\n{names}"


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if not args or args[0] not in SAMPLES:
        if args:
            safe_print(f"Unknown sample: {args[0]}", file=sys.stderr)
        safe_print(usage(), file=sys.stderr)
        return 1
    module = importlib.import_module(SAMPLES[args[0]])
    return module.main(args[1:])


if __name__ == "__main__":
    sys.exit(main())
