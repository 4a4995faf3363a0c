import argparse
import logging
import sys
from typing import Callable, List, Optional

import openai

from rag_assistant.chat_completion import seed_documents
from rag_assistant.config import load_settings
from rag_assistant.logging_config import setup_logging
from rag_assistant.rag_pipeline import RAGPipeline, build_pipeline

logger = logging.getLogger(__name__)

EXIT_COMMANDS = {"exit", "quit"}


def parse_chat_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Chat with a health assistant whose answers are grounded in context "
            "retrieved from Pinecone. Type 'exit' or 'quit' to stop."
        )
    )
    return parser.parse_args(argv)


def parse_seed_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Create the Pinecone index if needed and upsert the sample profile documents."
    )
    return parser.parse_args(argv)


def run_chat(
    pipeline: RAGPipeline,
    session_id: str,
    input_fn: Optional[Callable[[str], str]] = None,
    stream: bool = False,
) -> int:
    """Read a line, answer it, print the reply; repeat until an exit command or EOF."""
    read_line = input_fn or input
    while True:
        try:
            user_input = read_line("You: ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if user_input.strip().lower() in EXIT_COMMANDS:
            break

        if stream:
            print("Assistant: ", end="", flush=True)
            for chunk in pipeline.stream_answer(user_input, session_id=session_id):
                print(chunk, end="", flush=True)
            print()
        else:
            output = pipeline.answer(user_input, session_id=session_id)
            print(f"Assistant: {output}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parse_chat_args(argv)
    setup_logging()
    try:
        settings = load_settings()
        setup_logging(settings.log_level)
        pipeline = build_pipeline(settings)
        return run_chat(pipeline, settings.session_id, stream=settings.stream)
    except openai.AuthenticationError as exc:
        logger.exception("Authentication with the chat provider failed")
        print(f"An error occurred: authentication failed ({exc})", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        # Ctrl-C while a turn is in flight ends the session like Ctrl-C at the prompt
        print()
        return 0
    except Exception as exc:
        logger.exception("Chat session aborted")
        print(f"An error occurred: {exc}", file=sys.stderr)
        return 1


def seed(argv: Optional[List[str]] = None) -> int:
    parse_seed_args(argv)
    setup_logging()
    try:
        settings = load_settings()
        setup_logging(settings.log_level)
        ids = seed_documents(settings=settings)
    except Exception as exc:
        logger.exception("Seeding failed")
        print(f"An error occurred: {exc}", file=sys.stderr)
        return 1
    print(f"Seeded {len(ids)} documents into index {settings.pinecone_index_name}.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
