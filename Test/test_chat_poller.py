import itertools
import threading

import pytest

from chat_models import AuthorDetails, ChatMessage, ChatPage, ServiceError, SuperChatDetails, TransportError
from chat_poller import ChatPoller, format_message


def author(name="Alice", owner=False, moderator=False, sponsor=False):
    return AuthorDetails(display_name=name, is_chat_owner=owner, is_chat_moderator=moderator, is_chat_sponsor=sponsor)


def message(text, name="Alice"):
    return ChatMessage(author=author(name), display_message=text)


class ScriptedFetch:
    """Replays scripted results and records each (chat id, page token) it was called with."""

    def __init__(self, results):
        self.results = list(results)
        self.calls = []

    def __call__(self, live_chat_id, page_token):
        self.calls.append((live_chat_id, page_token))
        result = self.results.pop(0)
        if isinstance(result, Exception):
            raise result
        return result


class RecordingWait:
    """Records every requested delay; asks the loop to stop after `stop_after` waits."""

    def __init__(self, stop_after=None):
        self.delays = []
        self.stop_after = stop_after

    def __call__(self, seconds):
        self.delays.append(seconds)
        return self.stop_after is not None and len(self.delays) >= self.stop_after


# --- formatting ---

def test_format_owner_and_sponsor():
    out = format_message("hello", author("Alice", owner=True, sponsor=True))
    assert out == "Alice (OWNER, SPONSOR): hello"


def test_format_super_chat_with_empty_message():
    out = format_message("", author("Bob"), SuperChatDetails(amount_display_string="$5.00"))
    assert out == "$5.00SUPERCHAT RECEIVED FROM Bob"


def test_format_is_repeatable():
    a = author("Carol", moderator=True)
    sc = SuperChatDetails(amount_display_string="¥500")
    assert format_message("hi", a, sc) == format_message("hi", a, sc)


@pytest.mark.parametrize("owner,moderator,sponsor", list(itertools.product([False, True], repeat=3)))
def test_role_tags_keep_fixed_order(owner, moderator, sponsor):
    out = format_message("x", author("Dan", owner, moderator, sponsor))
    expected = [tag for tag, on in (("OWNER", owner), ("MODERATOR", moderator), ("SPONSOR", sponsor)) if on]
    if expected:
        assert out == "Dan (" + ", ".join(expected) + "): x"
    else:
        assert out == "Dan: x"


def test_no_super_chat_starts_with_display_name():
    out = format_message("hey", author("Eve"))
    assert out.startswith("Eve")
    assert "SUPERCHAT RECEIVED FROM " not in out


@pytest.mark.parametrize("body", ["", None])
def test_empty_message_has_no_separator(body):
    out = format_message(body, author("Frank", owner=True), SuperChatDetails(amount_display_string="€2.00"))
    assert out == "€2.00SUPERCHAT RECEIVED FROM Frank (OWNER)"
    assert ": " not in out


def test_chat_message_from_resource():
    item = {
        "authorDetails": {"channelId": "UC1", "displayName": "Gina", "isChatOwner": True},
        "snippet": {
            "displayMessage": "gg",
            "superChatDetails": {"amountDisplayString": "$1.00"},
            "publishedAt": "2024-01-01T00:00:00Z",
        },
    }
    msg = ChatMessage.from_resource(item)
    assert msg.author.display_name == "Gina"
    assert msg.author.is_chat_owner and not msg.author.is_chat_sponsor
    assert msg.super_chat_details.amount_display_string == "$1.00"
    assert format_message(msg.display_message, msg.author, msg.super_chat_details) == \
        "$1.00SUPERCHAT RECEIVED FROM Gina (OWNER): gg"


# --- polling loop ---

def test_threads_cursor_and_waits_previous_interval():
    fetch = ScriptedFetch([
        ChatPage(messages=(message("a", "A"),), next_page_token="T1", polling_interval_millis=5000),
        ChatPage(messages=(message("b", "B"),), next_page_token="T2", polling_interval_millis=3000),
        ChatPage(messages=(), next_page_token=None, polling_interval_millis=2000),
    ])
    wait = RecordingWait(stop_after=4)
    lines = []

    poller = ChatPoller(fetch, "chat-1", emit=lines.append, wait=wait)
    assert poller.run() is True

    assert fetch.calls == [("chat-1", None), ("chat-1", "T1"), ("chat-1", "T2")]
    assert wait.delays == [0.0, 5.0, 3.0, 2.0]
    assert lines == [
        "Getting chat messages in 0.000 seconds...",
        "A: a",
        "Getting chat messages in 5.000 seconds...",
        "B: b",
        "Getting chat messages in 3.000 seconds...",
        "Getting chat messages in 2.000 seconds...",
    ]


def test_missing_token_resumes_without_cursor():
    fetch = ScriptedFetch([
        ChatPage(messages=(), next_page_token=None, polling_interval_millis=0),
        ChatPage(messages=(), next_page_token="T9", polling_interval_millis=0),
    ])
    poller = ChatPoller(fetch, "chat-1", emit=lambda line: None, wait=RecordingWait(stop_after=3))
    poller.run()
    assert [token for _, token in fetch.calls] == [None, None]


def test_zero_interval_schedules_immediately():
    fetch = ScriptedFetch([ChatPage(polling_interval_millis=0)])
    wait = RecordingWait(stop_after=2)
    ChatPoller(fetch, "chat-1", emit=lambda line: None, wait=wait).run()
    assert wait.delays == [0.0, 0.0]


def test_exception_on_second_call_stops_loop(capsys):
    fetch = ScriptedFetch([
        ChatPage(messages=(message("first"),), next_page_token="T1", polling_interval_millis=1000),
        RuntimeError("connection reset"),
        ChatPage(),
    ])
    poller = ChatPoller(fetch, "chat-1", emit=lambda line: None, wait=RecordingWait())

    assert poller.run() is False
    assert len(fetch.calls) == 2
    assert isinstance(poller.failure, RuntimeError)
    assert "connection reset" in capsys.readouterr().err


def test_service_error_stops_loop(capsys):
    fetch = ScriptedFetch([ServiceError(code=403, message="liveChatEnded"), ChatPage()])
    poller = ChatPoller(fetch, "chat-1", emit=lambda line: None, wait=RecordingWait())

    assert poller.run() is False
    assert len(fetch.calls) == 1
    assert poller.failure == ServiceError(code=403, message="liveChatEnded")
    assert "HttpError code: 403 : liveChatEnded" in capsys.readouterr().err


def test_transport_error_stops_loop(capsys):
    fetch = ScriptedFetch([TransportError(message="timed out"), ChatPage()])
    poller = ChatPoller(fetch, "chat-1", emit=lambda line: None, wait=RecordingWait())

    assert poller.run() is False
    assert len(fetch.calls) == 1
    assert "IOError: timed out" in capsys.readouterr().err


def test_stop_before_first_fetch():
    fetch = ScriptedFetch([])
    stop = threading.Event()
    stop.set()
    assert ChatPoller(fetch, "chat-1", stop_event=stop).run() is True
    assert fetch.calls == []


def test_start_runs_on_thread_until_stopped():
    poller = None
    calls = []

    def fetch(live_chat_id, page_token):
        calls.append(page_token)
        if len(calls) == 3:
            poller.stop()
        return ChatPage(next_page_token=f"T{len(calls)}", polling_interval_millis=1)

    poller = ChatPoller(fetch, "chat-1", emit=lambda line: None)
    thread = poller.start()
    poller.join(timeout=5)

    assert not thread.is_alive()
    assert poller.stopped
    assert calls == [None, "T1", "T2"]


def test_requires_chat_id():
    with pytest.raises(ValueError):
        ChatPoller(ScriptedFetch([]), "")


def test_failing_emit_stops_loop_and_records_failure(capsys):
    fetch = ScriptedFetch([
        ChatPage(messages=(message("café"),), next_page_token="T1", polling_interval_millis=0),
        ChatPage(),
    ])

    def emit(line):
        if line.startswith("Alice"):
            raise UnicodeEncodeError("ascii", line, 3, 4, "ordinal not in range(128)")

    poller = ChatPoller(fetch, "chat-1", emit=emit, wait=RecordingWait())
    thread = poller.start()
    poller.join(timeout=5)

    assert not thread.is_alive()
    assert isinstance(poller.failure, UnicodeEncodeError)
    assert fetch.calls == [("chat-1", None)]
    assert "Unexpected error while polling chat:" in capsys.readouterr().err


def test_announcement_goes_through_emit(capsys):
    lines = []
    poller = ChatPoller(ScriptedFetch([]), "chat-1", emit=lines.append, wait=RecordingWait(stop_after=1))

    assert poller.run() is True
    assert lines == ["Getting chat messages in 0.000 seconds..."]
    assert capsys.readouterr().out == ""
