"""
Shared fixtures. Nothing here talks to OpenAI or Pinecone: the vector index is
an in-memory store over deterministic fake embeddings and the chat model is a
recording stub.
"""

from typing import Callable, List

import pytest
from langchain_core.embeddings import DeterministicFakeEmbedding
from langchain_core.messages import AIMessage, BaseMessage
from langchain_core.runnables import RunnableLambda
from langchain_core.vectorstores import InMemoryVectorStore

from rag_assistant.config import Settings
from rag_assistant.rag_pipeline import RAGPipeline


ENV_VARS = [
    "OPENAI_API_KEY",
    "OPEN_AI_KEY",
    "PINECONE_API_KEY",
    "PINECONE_INDEX_NAME",
    "EMBED_MODEL",
    "EMBED_DIM",
    "CHAT_MODEL",
    "RETRIEVAL_TOP_K",
    "HISTORY_MAX_TURNS",
    "SESSION_ID",
    "STREAM_RESPONSES",
    "PINECONE_CLOUD",
    "PINECONE_REGION",
    "LOG_LEVEL",
]


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def settings() -> Settings:
    return Settings(
        openai_api_key="sk-test",
        pinecone_api_key="pc-test",
        pinecone_index_name="health-profile",
    )


@pytest.fixture
def embeddings() -> DeterministicFakeEmbedding:
    return DeterministicFakeEmbedding(size=64)


@pytest.fixture
def memory_store(embeddings) -> InMemoryVectorStore:
    return InMemoryVectorStore(embeddings)


def make_recording_model(calls: List[List[BaseMessage]], reply: Callable[[int], str]):
    """Chat model stand-in that records every prompt it receives."""

    def _respond(prompt_value):
        calls.append(prompt_value.to_messages())
        return AIMessage(content=reply(len(calls)))

    return RunnableLambda(_respond)


@pytest.fixture
def model_calls() -> List[List[BaseMessage]]:
    return []


@pytest.fixture
def chat_model(model_calls):
    return make_recording_model(model_calls, lambda n: f"reply {n}")


@pytest.fixture
def pipeline(settings, memory_store, chat_model) -> RAGPipeline:
    return RAGPipeline(settings, vector_store=memory_store, chat_model=chat_model)
