from collections import deque
from typing import Deque, Dict, List, Optional, Sequence

from langchain_core.chat_history import BaseChatMessageHistory
from langchain_core.messages import BaseMessage


class ConversationHistory(BaseChatMessageHistory):
    """Rolling in-memory transcript of user/assistant turns."""

    def __init__(self, max_turns: Optional[int] = 20):
        self.max_turns = max_turns or None
        maxlen = self.max_turns * 2 if self.max_turns else None
        self._messages: Deque[BaseMessage] = deque(maxlen=maxlen)

    @property
    def messages(self) -> List[BaseMessage]:
        return list(self._messages)

    def add_messages(self, messages: Sequence[BaseMessage]) -> None:
        self._messages.extend(messages)

    def clear(self) -> None:
        self._messages.clear()


class SessionStore:
    """Maps session ids to their own transcript."""

    def __init__(self, max_turns: Optional[int] = 20):
        self.max_turns = max_turns
        self._histories: Dict[str, ConversationHistory] = {}

    def get(self, session_id: str) -> ConversationHistory:
        if session_id not in self._histories:
            self._histories[session_id] = ConversationHistory(max_turns=self.max_turns)
        return self._histories[session_id]

    def sessions(self) -> List[str]:
        return list(self._histories)
