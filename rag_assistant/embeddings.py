from typing import Optional

from langchain_openai import OpenAIEmbeddings

from rag_assistant.config import Settings, load_settings


def get_embedding_model(settings: Optional[Settings] = None) -> OpenAIEmbeddings:
    """Return a fresh client that turns text into vectors with the configured model."""
    settings = settings or load_settings()
    return OpenAIEmbeddings(
        model=settings.embed_model,
        api_key=settings.openai_api_key,
    )
