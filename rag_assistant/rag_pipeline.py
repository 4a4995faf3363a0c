import logging
from typing import Iterator, List, Optional

from langchain_core.documents import Document
from langchain_core.output_parsers import StrOutputParser
from langchain_core.runnables import Runnable, RunnableConfig
from langchain_core.runnables.history import RunnableWithMessageHistory
from langchain_core.vectorstores import VectorStore

from rag_assistant import vector_store as vs
from rag_assistant.config import Settings, load_settings
from rag_assistant.conversation import SessionStore
from rag_assistant.data_loader import load_documents
from rag_assistant.llm import get_chat_model
from rag_assistant.prompts import CONTEXT_KEY, HISTORY_KEY, USER_QUERY_KEY, get_prompt_template

logger = logging.getLogger(__name__)


def get_chain_with_history(chat_model: Runnable, store: SessionStore) -> RunnableWithMessageHistory:
    """
    Chain prompt -> chat model -> plain text, wrapped so each session's
    transcript is injected into the prompt and extended after every call.
    """
    runnable = get_prompt_template() | chat_model | StrOutputParser()
    return RunnableWithMessageHistory(
        runnable,
        store.get,
        input_messages_key=USER_QUERY_KEY,
        history_messages_key=HISTORY_KEY,
    )


class RAGPipeline:
    def __init__(
        self,
        settings: Settings,
        vector_store: Optional[VectorStore] = None,
        chat_model: Optional[Runnable] = None,
        store: Optional[SessionStore] = None,
    ):
        self.settings = settings
        self.vector_store = vector_store if vector_store is not None else vs.get_vector_store(settings)
        self.chat_model = chat_model if chat_model is not None else get_chat_model(settings)
        self.store = store if store is not None else SessionStore(max_turns=settings.history_size)
        self.chain = get_chain_with_history(self.chat_model, self.store)

    def ingest(self, documents: Optional[List[Document]] = None) -> List[str]:
        """Upsert documents (the sample profile by default) into the index."""
        records = documents if documents is not None else load_documents()
        return vs.upsert_documents(self.vector_store, records)

    def retrieve(self, question: str, k: Optional[int] = None) -> List[str]:
        """Return top-k document contents relevant to the question."""
        limit = k if k is not None else self.settings.top_k
        return [doc.page_content for doc in vs.fetch_similar(self.vector_store, question, limit=limit)]

    def retrieve_context(self, question: str, k: Optional[int] = None) -> str:
        return "\n".join(self.retrieve(question, k=k))

    def answer(self, question: str, session_id: Optional[str] = None, k: Optional[int] = None) -> str:
        payload, config = self._prepare(question, session_id, k)
        output = self.chain.invoke(payload, config)
        session = config["configurable"]["session_id"]
        logger.debug(
            "Session %s now holds %d messages (%d sessions open)",
            session,
            len(self.store.get(session).messages),
            len(self.store.sessions()),
        )
        return output

    def stream_answer(
        self, question: str, session_id: Optional[str] = None, k: Optional[int] = None
    ) -> Iterator[str]:
        """Yield the reply in chunks; the turn is recorded once the stream is exhausted."""
        payload, config = self._prepare(question, session_id, k)
        yield from self.chain.stream(payload, config)

    def _prepare(self, question: str, session_id: Optional[str], k: Optional[int]):
        context = self.retrieve_context(question, k=k)
        logger.info("Retrieved %d characters of context", len(context))
        payload = {USER_QUERY_KEY: question, CONTEXT_KEY: context}
        config: RunnableConfig = {
            "configurable": {"session_id": session_id or self.settings.session_id}
        }
        return payload, config


def build_pipeline(settings: Optional[Settings] = None) -> RAGPipeline:
    settings = settings or load_settings()
    return RAGPipeline(settings)
