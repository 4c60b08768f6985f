# chat_poller.py
"""
Live chat poller.

Waits the interval the server asked for, fetches one page, prints it, and
repeats with the page token it was handed back. The first failed fetch, or
a failure while printing, ends the loop; there is no retry.

  poller = ChatPoller(yt.list_chat_messages, live_chat_id)
  poller.run()          # blocks until stop() or a failure
  poller.start()        # same loop on a daemon thread
"""

import sys
import threading
import traceback
from typing import Callable, List, Optional, Union

from chat_models import (
    AuthorDetails,
    ChatPage,
    FetchResult,
    ServiceError,
    SuperChatDetails,
    TransportError,
)
from sample_runner import safe_print

FetchPage = Callable[[str, Optional[str]], FetchResult]


def format_message(message: Optional[str], author: AuthorDetails,
                   super_chat: Optional[SuperChatDetails] = None) -> str:
    """Build the single display line for a chat message."""
    output = ""
    if super_chat is not None:
        output += super_chat.amount_display_string
        output += "SUPERCHAT RECEIVED FROM "
    output += author.display_name

    roles: List[str] = []
    if author.is_chat_owner:
        roles.append("OWNER")
    if author.is_chat_moderator:
        roles.append("MODERATOR")
    if author.is_chat_sponsor:
        roles.append("SPONSOR")
    if roles:
        output += " (" + ", ".join(roles) + ")"

    if message:
        output += ": " + message
    return output


class ChatPoller:
    def __init__(self, fetch_page: FetchPage, live_chat_id: str,
                 emit: Callable[[str], None] = safe_print,
                 stop_event: Optional[threading.Event] = None,
                 wait: Optional[Callable[[float], bool]] = None):
        """
        fetch_page(live_chat_id, page_token) returns a ChatPage, ServiceError or TransportError.
        wait(seconds) returns True when the loop should stop; it defaults to stop_event.wait.
        """
        if not live_chat_id:
            raise ValueError("live_chat_id is required")
        self.live_chat_id = live_chat_id
        self._fetch_page = fetch_page
        self._emit = emit
        self._stop = stop_event or threading.Event()
        self._wait = wait or self._stop.wait
        self.failure: Optional[Union[ServiceError, TransportError, Exception]] = None
        self._thread: Optional[threading.Thread] = None

    def stop(self):
        self._stop.set()

    @property
    def stopped(self) -> bool:
        return self._stop.is_set()

    def run(self) -> bool:
        """Poll until stopped (returns True) or until a fetch or print fails (returns False)."""
        page_token: Optional[str] = None
        delay_ms = 0

        while not self._stop.is_set():
            try:
                self._emit("Getting chat messages in %.3f seconds..." % (delay_ms * 0.001))
                if self._wait(delay_ms / 1000.0) or self._stop.is_set():
                    return True

                result = self._fetch_page(self.live_chat_id, page_token)
                if isinstance(result, ServiceError):
                    safe_print(f"HttpError code: {result.code} : {result.message}", file=sys.stderr)
                    self.failure = result
                    return False
                if isinstance(result, TransportError):
                    safe_print(f"IOError: {result.message}", file=sys.stderr)
                    self.failure = result
                    return False

                page: ChatPage = result
                for message in page.messages:
                    self._emit(format_message(message.display_message, message.author, message.super_chat_details))
            except Exception as e:
                safe_print("Unexpected error while polling chat:", e, file=sys.stderr)
                traceback.print_exc()
                self.failure = e
                return False

            page_token = page.next_page_token
            delay_ms = max(0, page.polling_interval_millis)

        return True

    def start(self) -> threading.Thread:
        """Run the loop on a daemon thread."""
        if self._thread is not None and self._thread.is_alive():
            return self._thread
        self._thread = threading.Thread(target=self.run, name=f"chat-poller-{self.live_chat_id}", daemon=True)
        self._thread.start()
        return self._thread

    def join(self, timeout: Optional[float] = None):
        if self._thread is not None:
            self._thread.join(timeout)
