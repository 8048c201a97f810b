import pytest
from prompt_toolkit.document import Document

from argwright.completer import ArgumentCompleter
from argwright.parser import ArgumentRegistry


@pytest.fixture
def completer():
    registry = ArgumentRegistry()
    registry.named("spell", type=str, default="AETHERWARP").match(r"[A-Z]+")
    return ArgumentCompleter(registry)


def test_lcp_completions(completer, monkeypatch):
    monkeypatch.setattr(
        completer, "suggest_next", lambda args, stub: ["AETHERWARP", "AETHERZOOM"]
    )
    results = list(completer.get_completions(Document("--spell A"), None))
    assert results[0].text == "AETHER"
    assert any(c.text == "AETHERWARP" for c in results)
    assert any(c.text == "AETHERZOOM" for c in results)


def test_lcp_completions_space(completer):
    suggestions = ["London", "New York", "San Francisco"]
    stub = "N"
    completions = list(completer._yield_lcp_completions(suggestions, stub))
    assert [c.text for c in completions] == ['"New York"']


def test_lcp_completions_no_shared_prefix(completer):
    suggestions = ["alpha", "beta", "gamma"]
    completions = list(completer._yield_lcp_completions(suggestions, ""))
    assert [c.text for c in completions] == ["alpha", "beta", "gamma"]


def test_lcp_completions_no_match(completer):
    assert not list(completer._yield_lcp_completions(["alpha"], "z"))
