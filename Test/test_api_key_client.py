from unittest.mock import MagicMock, patch

import pytest
import requests

import rest_channel_searcher
from api_key_client import ApiKeySession, format_channels, mask_key, search_channels
from settings import HTTP_TIMEOUT, YOUTUBE_API_BASE_URL


def _response(payload, status=200):
    resp = MagicMock()
    resp.status_code = status
    resp.json.return_value = payload
    return resp


def test_search_channels_sends_key_and_query():
    with patch.object(requests.Session, "request", return_value=_response({"items": []})) as request:
        with ApiKeySession("AIzaTestKey") as session:
            data = search_channels(session, "Google Developers", order="relevance")

    assert data == {"items": []}
    args, kwargs = request.call_args
    assert args == ("GET", f"{YOUTUBE_API_BASE_URL}/search")
    assert kwargs["params"] == {
        "part": "snippet",
        "type": "channel",
        "q": "Google Developers",
        "maxResults": 5,
        "order": "relevance",
        "key": "AIzaTestKey",
    }
    assert kwargs["timeout"] == HTTP_TIMEOUT


def test_search_channels_raises_on_http_error():
    resp = _response({})
    resp.raise_for_status.side_effect = requests.HTTPError("403 Client Error")
    with patch.object(requests.Session, "request", return_value=resp):
        with ApiKeySession("AIzaTestKey") as session:
            with pytest.raises(requests.HTTPError):
                search_channels(session, "x")


def test_session_requires_key():
    with pytest.raises(ValueError):
        ApiKeySession("")


def test_format_channels_truncates_description():
    data = {"items": [{"snippet": {
        "channelId": "UC_x5XG1OV2P6uZZ5FSM9Ttw",
        "title": "Google for Developers",
        "description": "d" * 150,
        "publishedAt": "2007-08-23T00:34:43Z",
    }}]}

    [block] = format_channels(data)

    assert "--- Channel 1 ---" in block
    assert "Channel ID: UC_x5XG1OV2P6uZZ5FSM9Ttw" in block
    assert "Description: " + "d" * 100 + "..." in block


def test_mask_key():
    assert mask_key("AIzaSyABCDEFGHIJ") == "AIzaSyABCD..."


def test_channel_searcher_reports_http_error(capsys):
    error_response = MagicMock(status_code=403, reason="Forbidden", text='{"error": "quota"}')
    with patch("rest_channel_searcher.load_api_key", return_value="AIzaTestKey123"), \
         patch("rest_channel_searcher.search_channels",
               side_effect=requests.HTTPError(response=error_response)):
        assert rest_channel_searcher.main([]) == 1

    err = capsys.readouterr().err
    assert "HTTP error: 403 Forbidden" in err
    assert '{"error": "quota"}' in err
