from typing import Optional

from langchain_openai import ChatOpenAI

from rag_assistant.config import Settings, load_settings


def get_chat_model(settings: Optional[Settings] = None) -> ChatOpenAI:
    """Return a fresh chat client with the fixed sampling parameters."""
    settings = settings or load_settings()
    return ChatOpenAI(
        model=settings.chat_model,
        api_key=settings.openai_api_key,
        max_tokens=settings.max_tokens,
        temperature=settings.temperature,
    )
