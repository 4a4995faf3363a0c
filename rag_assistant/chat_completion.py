"""
Thin wrappers around the retrieval-augmented chat pipeline.

The heavy lifting lives in rag_assistant/rag_pipeline.py; these helpers let
scripts seed the index or ask a single question without wiring anything up.
"""

from typing import List, Optional

from rag_assistant import vector_store as vs
from rag_assistant.config import Settings, load_settings
from rag_assistant.rag_pipeline import RAGPipeline, build_pipeline


def seed_documents(
    pipeline: Optional[RAGPipeline] = None,
    settings: Optional[Settings] = None,
    create_index: bool = True,
) -> List[str]:
    settings = pipeline.settings if pipeline else (settings or load_settings())
    # A pipeline built below opens the index, so create it first.
    # A pipeline passed in has already opened it.
    if create_index:
        vs.ensure_index(settings)
    pipe = pipeline or build_pipeline(settings)
    return pipe.ingest()


def answer_with_context(
    question: str,
    pipeline: Optional[RAGPipeline] = None,
    session_id: Optional[str] = None,
    k: Optional[int] = None,
) -> str:
    pipe = pipeline or build_pipeline()
    return pipe.answer(question, session_id=session_id, k=k)
