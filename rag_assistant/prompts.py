from langchain_core.prompts import ChatPromptTemplate, MessagesPlaceholder

HISTORY_KEY = "history"
USER_QUERY_KEY = "input"
CONTEXT_KEY = "context"

SYSTEM_PROMPT = (
    "You are a dedicated medical assistant, focused on providing personalized advice "
    "related to health, nutrition, and exercise. Each response should be tailored to "
    "the provided context: {context}. Offer clear, actionable recommendations without "
    "any unnecessary explanations"
)


def get_prompt_template() -> ChatPromptTemplate:
    """System instruction with retrieved context, prior turns, then the new user message."""
    return ChatPromptTemplate.from_messages(
        [
            ("system", SYSTEM_PROMPT),
            MessagesPlaceholder(HISTORY_KEY),
            ("user", "{" + USER_QUERY_KEY + "}"),
        ]
    )
