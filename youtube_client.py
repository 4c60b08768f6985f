"""
YouTube client helpers shared by the command-line samples.

- build_youtube / build_analytics / build_reporting construct the generated
  clients from OAuth credentials; build_youtube_with_key uses an API key.
- YouTubeClient wraps an already built youtube resource for the live chat
  calls. The resource is passed in so tests can hand over a mock.

Usage (short):
  creds = authorize(scopes, "listlivechatmessages")
  yt = YouTubeClient(build_youtube(creds))
  live_chat_id = yt.get_live_chat_id(video_id)
  result = yt.list_chat_messages(live_chat_id, page_token)
"""

from typing import Any, Optional, cast

import httplib2
from google.auth.exceptions import TransportError as AuthTransportError
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from chat_models import ChatPage, FetchResult, ServiceError, TransportError

LIVE_CHAT_FIELDS = (
    "items(authorDetails(channelId,displayName,isChatModerator,isChatOwner,isChatSponsor,"
    "profileImageUrl),snippet(displayMessage,superChatDetails,publishedAt)),"
    "nextPageToken,pollingIntervalMillis"
)

# failures that never reached the API
TRANSPORT_ERRORS = (httplib2.HttpLib2Error, OSError, AuthTransportError)


def build_youtube(credentials) -> Any:
    return cast(Any, build("youtube", "v3", credentials=credentials))


def build_youtube_with_key(api_key: str) -> Any:
    return cast(Any, build("youtube", "v3", developerKey=api_key))


def build_analytics(credentials) -> Any:
    return cast(Any, build("youtubeAnalytics", "v2", credentials=credentials))


def build_reporting(credentials) -> Any:
    return cast(Any, build("youtubereporting", "v1", credentials=credentials))


def http_error_code(e: HttpError) -> int:
    return int(e.resp.status)


def http_error_message(e: HttpError) -> str:
    reason = getattr(e, "reason", None)
    if reason:
        return reason
    return e._get_reason()


class YouTubeClient:
    def __init__(self, youtube: Any):
        self._youtube = youtube

    @property
    def youtube(self) -> Any:
        return self._youtube

    def get_live_chat_id(self, video_id: Optional[str] = None) -> Optional[str]:
        """Return the active live chat id of `video_id`, or of the signed-in user's active broadcast."""
        if video_id:
            return self._live_chat_id_for_video(video_id)
        return self._live_chat_id_for_active_broadcast()

    def _live_chat_id_for_active_broadcast(self) -> Optional[str]:
        resp = self._youtube.liveBroadcasts().list(
            part="snippet",
            fields="items/snippet/liveChatId",
            broadcastType="all",
            broadcastStatus="active",
        ).execute()
        for b in resp.get("items", []):
            live_chat_id = (b.get("snippet", {}) or {}).get("liveChatId")
            if live_chat_id:
                return live_chat_id
        return None

    def _live_chat_id_for_video(self, video_id: str) -> Optional[str]:
        resp = self._youtube.videos().list(
            part="liveStreamingDetails",
            fields="items/liveStreamingDetails/activeLiveChatId",
            id=video_id,
        ).execute()
        for v in resp.get("items", []):
            details = v.get("liveStreamingDetails", {}) or {}
            live_chat_id = details.get("activeLiveChatId")
            if live_chat_id:
                return live_chat_id
        return None

    def list_chat_messages(self, live_chat_id: str, page_token: Optional[str] = None,
                           fields: Optional[str] = LIVE_CHAT_FIELDS) -> FetchResult:
        """Fetch one page of chat messages. Failures are returned, not raised."""
        if not live_chat_id:
            raise ValueError("live_chat_id is required")
        kwargs = {"liveChatId": live_chat_id, "part": "snippet,authorDetails"}
        if page_token:
            kwargs["pageToken"] = page_token
        if fields:
            kwargs["fields"] = fields
        try:
            resp = self._youtube.liveChatMessages().list(**kwargs).execute()
        except HttpError as e:
            return ServiceError(code=http_error_code(e), message=http_error_message(e))
        except TRANSPORT_ERRORS as e:
            return TransportError(message=str(e) or type(e).__name__)
        return ChatPage.from_response(resp)

    def insert_chat_message(self, live_chat_id: str, text: str) -> dict:
        """Post a text message into a live chat."""
        if not live_chat_id:
            raise ValueError("live_chat_id is required")
        body = {
            "snippet": {
                "liveChatId": live_chat_id,
                "type": "textMessageEvent",
                "textMessageDetails": {"messageText": text},
            }
        }
        return self._youtube.liveChatMessages().insert(part="snippet", body=body).execute()

    def delete_chat_message(self, message_id: str) -> None:
        if not message_id:
            raise ValueError("message_id is required")
        self._youtube.liveChatMessages().delete(id=message_id).execute()


def upload_with_progress(request: Any, emit=print) -> dict:
    """Drive a resumable media request chunk by chunk, reporting progress."""
    emit("Initiation Started")
    response = None
    started = False
    while response is None:
        status, response = request.next_chunk()
        if not started:
            emit("Initiation Completed")
            started = True
        if status is not None:
            emit("Upload in progress")
            emit(f"Upload percentage: {status.progress():.2f}")
    emit("Upload Completed!")
    return response
