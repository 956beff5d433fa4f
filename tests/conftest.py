import pytest

from search_server import DocumentStatus, SearchServer

STOP_WORDS = "and in on"

SEED_CORPUS = [
    (0, "white cat and fashionable collar", DocumentStatus.ACTUAL, [8, -3]),
    (1, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7]),
    (2, "well-groomed dog expressive eyes", DocumentStatus.ACTUAL, [5, -12, 2, 1]),
    (3, "well-groomed starling eugene", DocumentStatus.BANNED, [9]),
]


@pytest.fixture
def server():
    """Search server seeded with the four-document demonstration corpus."""
    search_server = SearchServer(STOP_WORDS)
    for document_id, text, status, ratings in SEED_CORPUS:
        search_server.add_document(document_id, text, status, ratings)
    return search_server
