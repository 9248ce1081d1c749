"""Unit tests for the wire codec."""

from cogbridge.core.codec import build_chat_request, build_embeddings_request
from cogbridge.models.schemas import ChatRequest, EmbeddingsRequest, Message, Model


class TestBuildChatRequest:
    """Test suite for build_chat_request."""

    def _make_request(self, **kwargs) -> ChatRequest:
        return ChatRequest(
            messages=[Message(role="user", content="Hello, OpenCog!")],
            **kwargs,
        )

    def test_minimal_body(self, model: Model):
        body = build_chat_request(self._make_request(), model)
        assert body == {
            "model": "opencog-chat",
            "messages": [{"role": "user", "content": "Hello, OpenCog!"}],
        }

    def test_optional_fields_omitted(self, model: Model):
        body = build_chat_request(self._make_request(stream=False), model)
        for key in ("temperature", "top_p", "max_tokens", "stream", "tools"):
            assert key not in body

    def test_optional_fields_included(self, limited_model: Model, pln_function):
        req = self._make_request(
            temperature=0.7, top_p=0.9, stream=True, functions=[pln_function]
        )
        body = build_chat_request(req, limited_model)
        assert body["model"] == "opencog-reasoning"
        assert body["max_tokens"] == 1000
        assert body["temperature"] == 0.7
        assert body["top_p"] == 0.9
        assert body["stream"] is True
        assert body["tools"] == [{"type": "function", "function": pln_function}]

    def test_zero_temperature_is_sent(self, model: Model):
        body = build_chat_request(self._make_request(temperature=0.0), model)
        assert body["temperature"] == 0.0

    def test_max_tokens_needs_policy(self):
        m = Model(name="m", max_output_tokens=512)
        body = build_chat_request(self._make_request(), m)
        assert "max_tokens" not in body

    def test_tools_keep_order(self, model: Model):
        fns = [{"name": "a"}, {"name": "b"}, {"name": "c"}]
        body = build_chat_request(self._make_request(functions=fns), model)
        assert [t["function"]["name"] for t in body["tools"]] == ["a", "b", "c"]

    def test_empty_function_list_omitted(self, model: Model):
        body = build_chat_request(self._make_request(functions=[]), model)
        assert "tools" not in body

    def test_extra_message_fields_dropped(self, model: Model):
        req = ChatRequest(
            messages=[
                Message(role="system", content="You are an OpenCog reasoning assistant."),
                Message(role="assistant", content="ok", name="cog", tool_call_id="x"),
            ]
        )
        body = build_chat_request(req, model)
        assert body["messages"] == [
            {"role": "system", "content": "You are an OpenCog reasoning assistant."},
            {"role": "assistant", "content": "ok"},
        ]


class TestBuildEmbeddingsRequest:
    """Test suite for build_embeddings_request."""

    def test_body(self):
        m = Model(name="opencog-embed")
        body = build_embeddings_request(EmbeddingsRequest(texts=["a", "b"]), m)
        assert body == {"input": ["a", "b"], "model": "opencog-embed"}

    def test_uses_real_name(self, limited_model: Model):
        body = build_embeddings_request(EmbeddingsRequest(texts=["x"]), limited_model)
        assert body["model"] == "opencog-reasoning"
        assert set(body) == {"input", "model"}
