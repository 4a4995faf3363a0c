import logging
import time
from typing import Iterable, List, Optional

from langchain_core.documents import Document
from langchain_core.embeddings import Embeddings
from langchain_core.vectorstores import VectorStore
from langchain_pinecone import PineconeVectorStore
from pinecone import Pinecone, ServerlessSpec

from rag_assistant.config import Settings
from rag_assistant.embeddings import get_embedding_model

logger = logging.getLogger(__name__)

INDEX_READY_POLL_SECONDS = 1.0


def get_client(settings: Settings) -> Pinecone:
    return Pinecone(api_key=settings.pinecone_api_key)


def get_vector_store(
    settings: Settings, embeddings: Optional[Embeddings] = None
) -> PineconeVectorStore:
    """Wrap the configured Pinecone index as a LangChain vector store."""
    index = get_client(settings).Index(settings.pinecone_index_name)
    return PineconeVectorStore(
        index=index,
        embedding=embeddings or get_embedding_model(settings),
    )


def ensure_index(settings: Settings) -> bool:
    """
    Create the serverless index when it does not exist yet.

    Returns True if the index was created by this call.
    """
    client = get_client(settings)
    name = settings.pinecone_index_name
    if name in client.list_indexes().names():
        logger.debug("Index %s already exists", name)
        return False

    logger.info("Creating index %s (dimension=%s)", name, settings.embed_dim)
    client.create_index(
        name=name,
        dimension=settings.embed_dim,
        metric="cosine",
        spec=ServerlessSpec(cloud=settings.pinecone_cloud, region=settings.pinecone_region),
    )
    while not client.describe_index(name).status["ready"]:
        time.sleep(INDEX_READY_POLL_SECONDS)
    return True


def upsert_documents(store: VectorStore, documents: Iterable[Document]) -> List[str]:
    """Embed and insert documents keyed by their id; existing ids are overwritten."""
    records = list(documents)
    if not records:
        return []
    ids = [doc.id for doc in records]
    if any(doc_id is None for doc_id in ids):
        raise ValueError("Every document needs an id to be upserted")
    stored = store.add_documents(records, ids=ids)
    logger.info("Upserted %d documents", len(records))
    return stored


def fetch_similar(store: VectorStore, query: str, limit: int = 5) -> List[Document]:
    """Return up to `limit` documents, most relevant first."""
    results = store.similarity_search(query, k=limit)
    logger.debug("Similarity search returned %d documents", len(results))
    return results
