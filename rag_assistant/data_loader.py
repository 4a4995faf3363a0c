from datetime import datetime, timezone
from typing import List, Tuple

from langchain_core.documents import Document


# (id, category, content) for each part of the user's profile
SAMPLE_PROFILE: List[Tuple[str, str, str]] = [
    ("medical-history", "medical", "Patient has a history of hypertension and diabetes."),
    ("dietary-preferences", "dietary", "User prefers vegetarian food, avoids dairy products."),
    ("exercise-routine", "exercise", "User does cardio three times a week and practices yoga."),
    ("personal-goals", "personal", "User's goal is to lose 10 pounds in 3 months."),
]


def load_documents() -> List[Document]:
    """
    Build the sample context documents used to seed the index.

    Each document is keyed by a stable id so re-seeding overwrites instead of
    duplicating.
    """
    updated_at = datetime.now(timezone.utc).isoformat()
    return [
        Document(
            id=doc_id,
            page_content=content,
            metadata={"category": category, "updatedAt": updated_at},
        )
        for doc_id, category, content in SAMPLE_PROFILE
    ]
