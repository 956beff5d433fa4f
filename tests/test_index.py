"""
Tests for the inverted index: term frequencies, metadata, IDF and rejections.
"""

import math

import numpy as np
import pytest

from search_server.document import DocumentStatus
from search_server.errors import (
    DuplicateDocumentId,
    InvalidDocument,
    InvalidDocumentId,
    UnknownDocumentId,
    UnknownWord,
)
from search_server.index import InvertedIndex


@pytest.fixture
def index():
    inverted_index = InvertedIndex()
    inverted_index.add_document(0, "white cat fashionable collar".split(), DocumentStatus.ACTUAL, [8, -3])
    inverted_index.add_document(1, "fluffy cat fluffy tail".split(), DocumentStatus.ACTUAL, [7, 2, 7])
    inverted_index.add_document(3, "well-groomed starling eugene".split(), DocumentStatus.BANNED, [9])
    return inverted_index


def test_term_frequencies_are_normalized(index):
    assert index.get_word_frequencies(1) == pytest.approx({"fluffy": 0.5, "cat": 0.25, "tail": 0.25})
    for document_id in index.document_ids:
        assert math.isclose(sum(index.get_word_frequencies(document_id).values()), 1.0)


def test_postings(index):
    assert index.get_postings("cat") == pytest.approx({0: 0.25, 1: 0.25})
    assert index.get_postings("parrot") == {}
    assert index.document_frequency("cat") == 2
    assert index.document_frequency("parrot") == 0


def test_metadata(index):
    data = index.get_document(3)
    assert data.rating == 9
    assert data.status is DocumentStatus.BANNED
    assert len(index) == index.document_count == 3
    assert 3 in index
    assert 2 not in index
    assert list(index.document_ids) == [0, 1, 3]


def test_inverse_document_frequency(index):
    idf = index.inverse_document_frequency(["cat", "fluffy"])
    assert np.allclose(idf, [math.log(3 / 2), math.log(3)])
    assert index.inverse_document_frequency([]).size == 0


def test_inverse_document_frequency_requires_indexed_words(index):
    with pytest.raises(UnknownWord, match="parrot"):
        index.inverse_document_frequency(["cat", "parrot"])


def test_lookups_are_read_only(index):
    with pytest.raises(TypeError):
        index.get_postings("cat")[0] = 1.0
    with pytest.raises(TypeError):
        index.get_word_frequencies(1)["cat"] = 1.0
    with pytest.raises(TypeError):
        index.get_postings("parrot")[0] = 1.0
    with pytest.raises(AttributeError):
        index.get_document(1).rating = 10

    assert index.get_postings("cat") == pytest.approx({0: 0.25, 1: 0.25})
    assert index.get_word_frequencies(1)["cat"] == pytest.approx(0.25)
    assert index.get_postings("parrot") == {}


def test_unknown_document(index):
    with pytest.raises(UnknownDocumentId):
        index.get_document(42)


def test_negative_id_is_rejected(index):
    with pytest.raises(InvalidDocumentId):
        index.add_document(-1, ["cat"], DocumentStatus.ACTUAL, [])
    assert len(index) == 3
    assert -1 not in index.get_postings("cat")


def test_duplicate_id_is_rejected_without_changes(index):
    with pytest.raises(DuplicateDocumentId):
        index.add_document(1, ["cat", "dog"], DocumentStatus.BANNED, [1])
    assert index.get_postings("cat")[1] == pytest.approx(0.25)
    assert index.get_postings("dog") == {}
    assert index.get_document(1).status is DocumentStatus.ACTUAL


def test_empty_document_is_rejected(index):
    with pytest.raises(InvalidDocument):
        index.add_document(7, [], DocumentStatus.ACTUAL, [5])
    assert 7 not in index
    assert len(index) == 3
