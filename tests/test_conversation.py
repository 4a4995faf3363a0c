from langchain_core.messages import AIMessage, HumanMessage

from rag_assistant.conversation import ConversationHistory, SessionStore


def add_turn(history, user, assistant):
    history.add_messages([HumanMessage(content=user), AIMessage(content=assistant)])


class TestConversationHistory:
    def test_turns_are_stored_in_order(self):
        history = ConversationHistory(max_turns=5)
        add_turn(history, "Hi", "Hello!")
        add_turn(history, "How are you?", "Fine.")

        assert [type(m) for m in history.messages] == [HumanMessage, AIMessage] * 2
        assert [m.content for m in history.messages] == ["Hi", "Hello!", "How are you?", "Fine."]

    def test_oldest_turns_are_dropped_past_the_limit(self):
        history = ConversationHistory(max_turns=2)
        for n in range(3):
            add_turn(history, f"q{n}", f"a{n}")

        assert [m.content for m in history.messages] == ["q1", "a1", "q2", "a2"]

    def test_zero_limit_keeps_everything(self):
        history = ConversationHistory(max_turns=0)
        for n in range(50):
            add_turn(history, f"q{n}", f"a{n}")

        assert len(history.messages) == 100

    def test_single_message_api_is_supported(self):
        history = ConversationHistory()
        history.add_user_message("Hi")
        history.add_ai_message("Hello!")

        assert [(type(m), m.content) for m in history.messages] == [
            (HumanMessage, "Hi"),
            (AIMessage, "Hello!"),
        ]

    def test_clear(self):
        history = ConversationHistory()
        add_turn(history, "Hi", "Hello!")
        history.clear()

        assert history.messages == []


class TestSessionStore:
    def test_same_id_returns_same_history(self):
        store = SessionStore()

        assert store.get("1") is store.get("1")

    def test_different_ids_are_isolated(self):
        store = SessionStore()
        add_turn(store.get("alice"), "Hi", "Hello Alice")

        assert store.get("bob").messages == []
        assert [m.content for m in store.get("alice").messages] == ["Hi", "Hello Alice"]
        assert sorted(store.sessions()) == ["alice", "bob"]

    def test_limit_is_applied_to_new_histories(self):
        store = SessionStore(max_turns=3)

        assert store.get("1").max_turns == 3
        assert store.sessions() == ["1"]
