from pathlib import Path

import pytest

from littlesearch.engine import SearchEngine, load_keywords
from littlesearch.errors import InputUnavailableError
from littlesearch.posting import Occurrence

NOISE = ["the", "a", "and", "is"]

DOCS = [
    ("The rain is wet. Rain, rain, go away!".split(), "weather.txt"),
    ("A dog and a cat. The dog sleeps.".split(), "pets.txt"),
    ("Rain makes the dog sleep; dog dreams.".split(), "mixed.txt"),
]


@pytest.fixture
def engine() -> SearchEngine:
    engine = SearchEngine()
    engine.make_index(DOCS, NOISE)
    return engine


def _is_descending(occs: list[Occurrence]) -> bool:
    return all(a.frequency >= b.frequency for a, b in zip(occs, occs[1:]))


def test_load_keywords_counts_per_document() -> None:
    kws = load_keywords("Rain rain. RAIN! can't the sun".split(), "d1", {"the"})
    assert kws == {"rain": Occurrence("d1", 3), "sun": Occurrence("d1", 1)}


def test_load_keywords_empty() -> None:
    assert load_keywords([], "d1") == {}


def test_make_index_builds_descending_lists(engine: SearchEngine) -> None:
    assert engine.keywords_index.get_occurrences("rain") == [
        Occurrence("weather.txt", 3),
        Occurrence("mixed.txt", 1),
    ]
    assert engine.keywords_index.get_occurrences("dog") == [
        Occurrence("pets.txt", 2),
        Occurrence("mixed.txt", 2),
    ]
    for keyword in engine.keywords_index.keywords():
        assert _is_descending(engine.keywords_index.get_occurrences(keyword))


def test_noise_words_not_indexed(engine: SearchEngine) -> None:
    for word in NOISE:
        assert word not in engine.keywords_index
    assert engine.get_keyword("The") is None
    assert engine.get_keyword("Dog.") == "dog"


def test_noise_words_replaced_on_rebuild(engine: SearchEngine) -> None:
    engine.make_index([], ["dog"])
    assert engine.noise_words == {"dog"}


def test_top5search(engine: SearchEngine) -> None:
    assert engine.top5search("rain", "sleeps") == ["weather.txt", "mixed.txt", "pets.txt"]
    assert engine.top5search("cat", "missing") == ["pets.txt"]
    assert engine.top5search("missing1", "missing2") is None


def test_same_keyword_twice_deduplicates(engine: SearchEngine) -> None:
    assert engine.top5search("rain", "rain") == ["weather.txt", "mixed.txt"]


def test_rebuild_doubles_frequencies(engine: SearchEngine) -> None:
    before = {
        kw: sum(o.frequency for o in engine.keywords_index.get_occurrences(kw))
        for kw in engine.keywords_index.keywords()
    }
    engine.make_index(DOCS, NOISE)
    for kw, total in before.items():
        occs = engine.keywords_index.get_occurrences(kw)
        assert sum(o.frequency for o in occs) == 2 * total
        assert _is_descending(occs)
    assert engine.top5search("rain", "rain") == ["weather.txt", "mixed.txt"]


def test_failed_document_keeps_earlier_merges() -> None:
    def unreadable():
        raise InputUnavailableError("gone.txt")
        yield  # pragma: no cover

    def documents():
        yield ["alpha", "beta"], "ok.txt"
        yield unreadable(), "gone.txt"
        yield ["gamma"], "never.txt"

    engine = SearchEngine()
    with pytest.raises(InputUnavailableError):
        engine.make_index(documents(), [])
    assert "alpha" in engine.keywords_index
    assert "gamma" not in engine.keywords_index


def test_load_keywords_from_document(tmp_path: Path) -> None:
    doc = tmp_path / "doc.txt"
    doc.write_text("Stars, stars.\nMoon!\n", encoding="utf-8")
    engine = SearchEngine()
    kws = engine.load_keywords_from_document(doc)
    assert kws == {"stars": Occurrence(str(doc), 2), "moon": Occurrence(str(doc), 1)}
