# chat_models.py
"""
Read-only views over liveChatMessages.list responses, plus the tagged result
returned by a single retrieval:

  ChatPage          -> the call succeeded
  ServiceError      -> the API answered with an error (code + message)
  TransportError    -> the request never produced an API answer
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class AuthorDetails:
    display_name: str = ""
    channel_id: str = ""
    is_chat_owner: bool = False
    is_chat_moderator: bool = False
    is_chat_sponsor: bool = False
    profile_image_url: str = ""

    @classmethod
    def from_resource(cls, data: Optional[dict]) -> "AuthorDetails":
        data = data or {}
        return cls(
            display_name=data.get("displayName", "") or "",
            channel_id=data.get("channelId", "") or "",
            is_chat_owner=bool(data.get("isChatOwner", False)),
            is_chat_moderator=bool(data.get("isChatModerator", False)),
            is_chat_sponsor=bool(data.get("isChatSponsor", False)),
            profile_image_url=data.get("profileImageUrl", "") or "",
        )


@dataclass(frozen=True)
class SuperChatDetails:
    amount_display_string: str = ""

    @classmethod
    def from_resource(cls, data: Optional[dict]) -> Optional["SuperChatDetails"]:
        if data is None:
            return None
        return cls(amount_display_string=data.get("amountDisplayString", "") or "")


@dataclass(frozen=True)
class ChatMessage:
    author: AuthorDetails
    display_message: str = ""
    super_chat_details: Optional[SuperChatDetails] = None
    published_at: Optional[str] = None

    @classmethod
    def from_resource(cls, item: dict) -> "ChatMessage":
        snippet = item.get("snippet", {}) or {}
        return cls(
            author=AuthorDetails.from_resource(item.get("authorDetails")),
            display_message=snippet.get("displayMessage", "") or "",
            super_chat_details=SuperChatDetails.from_resource(snippet.get("superChatDetails")),
            published_at=snippet.get("publishedAt"),
        )


@dataclass(frozen=True)
class ChatPage:
    messages: Tuple[ChatMessage, ...] = field(default_factory=tuple)
    next_page_token: Optional[str] = None
    polling_interval_millis: int = 0

    @classmethod
    def from_response(cls, resp: dict) -> "ChatPage":
        items: List[dict] = resp.get("items", []) or []
        return cls(
            messages=tuple(ChatMessage.from_resource(it) for it in items),
            next_page_token=resp.get("nextPageToken"),
            polling_interval_millis=int(resp.get("pollingIntervalMillis", 0) or 0),
        )


@dataclass(frozen=True)
class ServiceError:
    code: int
    message: str


@dataclass(frozen=True)
class TransportError:
    message: str


FetchResult = Union[ChatPage, ServiceError, TransportError]
