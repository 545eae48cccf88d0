"""
Chat support conversation.

Keeps the ordered message log for one chat view. The user's message is
appended at once; the canned reply follows after a short delay while
the view shows a typing indicator.
"""

from typing import Callable, List, Optional

from shambago.chat_service.response_engine import generate_response
from shambago.chat_service.schemas import ChatMessage
from shambago.common.deferred import DeferredCallbacks
from shambago.common.logger import get_logger
from shambago.config import settings

logger = get_logger(__name__)

MessageCallback = Callable[[ChatMessage], None]


class ChatConversation:
    """
    Append-only message log with delayed replies.

    Call ``close()`` when the owning view goes away; pending replies are
    dropped and later sends are ignored.
    """

    def __init__(
        self,
        delay_seconds: Optional[float] = None,
        responder: Callable[[str], str] = generate_response,
        on_message: Optional[MessageCallback] = None,
    ):
        self.delay_seconds = (
            settings.CHAT_REPLY_DELAY_SECONDS
            if delay_seconds is None
            else delay_seconds
        )
        self.responder = responder
        self.on_message = on_message
        self._messages: List[ChatMessage] = []
        self._deferred = DeferredCallbacks()

    @property
    def messages(self) -> List[ChatMessage]:
        return list(self._messages)

    @property
    def is_typing(self) -> bool:
        return self._deferred.pending > 0

    @property
    def closed(self) -> bool:
        return self._deferred.closed

    def send(self, text: str) -> Optional[ChatMessage]:
        """
        Append a user message and schedule the reply.

        Must be called from inside a running event loop.

        Returns:
            Optional[ChatMessage]: The appended message, or None if the
            text was blank or the conversation is closed.
        """
        if self.closed:
            logger.warning("Message sent to closed conversation")
            return None

        if not text.strip():
            return None

        message = ChatMessage(text=text, is_from_user=True)
        self._append(message)

        self._deferred.schedule(self.delay_seconds, self._reply, text)
        return message

    def close(self) -> None:
        """Cancel pending replies and refuse further messages."""
        cancelled = self._deferred.cancel_all(close=True)

        logger.debug(
            "Conversation closed",
            extra={"dropped_replies": cancelled},
        )

    def _reply(self, text: str) -> None:
        self._append(ChatMessage(text=self.responder(text), is_from_user=False))

    def _append(self, message: ChatMessage) -> None:
        self._messages.append(message)

        if self.on_message is not None:
            self.on_message(message)
