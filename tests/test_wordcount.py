import io

from practica.wordcount import count_words, format_counts, main, word_lengths


def test_count_words_skips_excluded_and_sorts():
    counts = count_words(["b", "a", "the", "a", "and"])
    assert counts == {"a": 2, "b": 1}
    assert list(counts) == sorted(counts)


def test_count_words_stops_at_end_mark():
    assert count_words(["x", "-1", "y"]) == {"x": 1}


def test_count_words_custom_exclude():
    counts = count_words(["the", "cat"], exclude={"cat"})
    assert "cat" not in counts
    assert counts["the"] == 1


def test_format_counts_pluralises():
    lines = format_counts({"y": 3, "x": 1})
    assert lines == ["x occurs 1 time", "y occurs 3 times"]


def test_word_lengths_preserves_order():
    pairs = word_lengths(["hello", "C++"])
    assert [word for word, _ in pairs] == ["hello", "C++"]
    assert pairs[1] == ("C++", 3)


def test_main_prints_counts(monkeypatch, capsys):
    text = "apple or pear\napple -1 pear pear\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    expected = format_counts(count_words(text.split()))
    assert capsys.readouterr().out == "\n".join(expected) + "\n"