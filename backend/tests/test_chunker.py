"""Tests for the sentence-aligned chunker."""

from app.features.knowledge.chunker import (
    CHARS_PER_TOKEN,
    split_sentences,
    split_text_into_chunks,
)


def _sentence(length: int, fill: str = "a") -> str:
    # `length` characters ending with a full stop
    return fill * (length - 1) + "."


def test_empty_text_yields_no_chunks():
    assert split_text_into_chunks("") == []


def test_whitespace_only_yields_no_chunks():
    assert split_text_into_chunks("   \n\t ") == []


def test_single_short_sentence():
    assert split_text_into_chunks("Hello world.", 500) == ["Hello world."]


def test_sentences_split_after_terminal_punctuation():
    sentences = split_sentences("Is it? Yes! It is.  Done")
    assert sentences == ["Is it?", "Yes!", "It is.", "Done"]


def test_abbreviation_without_whitespace_is_not_a_boundary():
    assert split_sentences("Version 2.5 shipped.") == ["Version 2.5 shipped."]


def test_each_oversized_pair_gets_its_own_chunk():
    sentences = [_sentence(300, c) for c in "abc"]
    chunks = split_text_into_chunks(" ".join(sentences), max_tokens=100)
    assert chunks == sentences


def test_short_sentences_share_a_chunk():
    text = "One. Two. Three."
    assert split_text_into_chunks(text, max_tokens=100) == ["One. Two. Three."]


def test_oversized_single_sentence_is_kept_whole():
    long_sentence = _sentence(1000)
    chunks = split_text_into_chunks(f"Intro. {long_sentence} Outro.", max_tokens=50)
    assert chunks == ["Intro.", long_sentence, "Outro."]


def test_chunks_respect_limit_unless_single_oversized_sentence():
    sentences = [_sentence(n) for n in (50, 120, 30, 260, 90, 10, 45, 700, 15)]
    max_tokens = 60
    max_chars = max_tokens * CHARS_PER_TOKEN

    chunks = split_text_into_chunks(" ".join(sentences), max_tokens=max_tokens)

    for chunk in chunks:
        if len(chunk) > max_chars:
            assert chunk in sentences


def test_rejoining_chunks_reconstructs_sentence_sequence():
    text = (
        "The Constitution came into force in 1950. It replaced the Government of India Act! "
        "Who drafted it? The drafting committee was chaired by Ambedkar. "
        "Parliament can amend most provisions. Some amendments need state ratification."
    )
    chunks = split_text_into_chunks(text, max_tokens=20)

    assert len(chunks) > 1
    rejoined = [s for chunk in chunks for s in split_sentences(chunk)]
    assert rejoined == split_sentences(text)


def test_default_budget_is_500_tokens():
    sentences = [_sentence(1000, c) for c in "ab"]
    # buffer holds "<sentence> " (1001 chars); adding 1000 more exceeds 2000
    assert split_text_into_chunks(" ".join(sentences)) == sentences
