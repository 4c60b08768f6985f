import socket
from unittest.mock import MagicMock

import httplib2
import pytest

from chat_models import ChatPage, ServiceError, TransportError
from youtube_client import LIVE_CHAT_FIELDS, YouTubeClient, upload_with_progress


def test_live_chat_id_from_active_broadcast(youtube):
    broadcasts = youtube.liveBroadcasts.return_value.list
    broadcasts.return_value.execute.return_value = {
        "items": [{"snippet": {}}, {"snippet": {"liveChatId": "chat-42"}}]
    }

    assert YouTubeClient(youtube).get_live_chat_id() == "chat-42"
    broadcasts.assert_called_once_with(
        part="snippet",
        fields="items/snippet/liveChatId",
        broadcastType="all",
        broadcastStatus="active",
    )


def test_live_chat_id_from_video(youtube):
    videos = youtube.videos.return_value.list
    videos.return_value.execute.return_value = {
        "items": [{"liveStreamingDetails": {"activeLiveChatId": "chat-7"}}]
    }

    assert YouTubeClient(youtube).get_live_chat_id("vid-1") == "chat-7"
    videos.assert_called_once_with(
        part="liveStreamingDetails",
        fields="items/liveStreamingDetails/activeLiveChatId",
        id="vid-1",
    )
    youtube.liveBroadcasts.assert_not_called()


def test_live_chat_id_none_when_not_live(youtube):
    youtube.videos.return_value.list.return_value.execute.return_value = {
        "items": [{"liveStreamingDetails": {}}]
    }
    assert YouTubeClient(youtube).get_live_chat_id("vid-1") is None


def test_list_chat_messages_returns_page(youtube):
    list_call = youtube.liveChatMessages.return_value.list
    list_call.return_value.execute.return_value = {
        "items": [{"authorDetails": {"displayName": "Alice"}, "snippet": {"displayMessage": "hi"}}],
        "nextPageToken": "T1",
        "pollingIntervalMillis": 5000,
    }

    result = YouTubeClient(youtube).list_chat_messages("chat-1", "T0")

    assert isinstance(result, ChatPage)
    assert result.next_page_token == "T1"
    assert result.polling_interval_millis == 5000
    assert result.messages[0].author.display_name == "Alice"
    list_call.assert_called_once_with(
        liveChatId="chat-1", part="snippet,authorDetails", pageToken="T0", fields=LIVE_CHAT_FIELDS
    )


def test_list_chat_messages_omits_absent_token(youtube):
    list_call = youtube.liveChatMessages.return_value.list
    list_call.return_value.execute.return_value = {"items": []}

    result = YouTubeClient(youtube).list_chat_messages("chat-1")

    assert result == ChatPage(messages=(), next_page_token=None, polling_interval_millis=0)
    assert "pageToken" not in list_call.call_args.kwargs


def test_list_chat_messages_maps_http_error(youtube, http_error):
    youtube.liveChatMessages.return_value.list.return_value.execute.side_effect = http_error(403, "liveChatEnded")

    result = YouTubeClient(youtube).list_chat_messages("chat-1")

    assert result == ServiceError(code=403, message="liveChatEnded")


@pytest.mark.parametrize("exc", [socket.timeout("timed out"), httplib2.ServerNotFoundError("no host")])
def test_list_chat_messages_maps_transport_error(youtube, exc):
    youtube.liveChatMessages.return_value.list.return_value.execute.side_effect = exc

    result = YouTubeClient(youtube).list_chat_messages("chat-1")

    assert isinstance(result, TransportError)
    assert result.message == str(exc)


def test_insert_chat_message_body(youtube):
    insert = youtube.liveChatMessages.return_value.insert
    insert.return_value.execute.return_value = {"id": "msg-1"}

    res = YouTubeClient(youtube).insert_chat_message("chat-1", "hello")

    assert res == {"id": "msg-1"}
    insert.assert_called_once_with(part="snippet", body={
        "snippet": {
            "liveChatId": "chat-1",
            "type": "textMessageEvent",
            "textMessageDetails": {"messageText": "hello"},
        }
    })


def test_delete_chat_message(youtube):
    YouTubeClient(youtube).delete_chat_message("msg-1")
    youtube.liveChatMessages.return_value.delete.assert_called_once_with(id="msg-1")


def test_upload_with_progress_reports_each_chunk():
    status = MagicMock()
    status.progress.return_value = 0.5
    request = MagicMock()
    request.next_chunk.side_effect = [(status, None), (None, {"id": "v1"})]
    lines = []

    assert upload_with_progress(request, emit=lines.append) == {"id": "v1"}
    assert lines == [
        "Initiation Started",
        "Initiation Completed",
        "Upload in progress",
        "Upload percentage: 0.50",
        "Upload Completed!",
    ]
