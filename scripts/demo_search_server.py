#!/usr/bin/env python3
"""
Seed a small corpus and print the results of the three demonstration queries.

Usage:
    python scripts/demo_search_server.py [--query "<words>"] [--verbose]

Examples:
    python scripts/demo_search_server.py
    python scripts/demo_search_server.py --query "fluffy cat -tail" --verbose
"""

from __future__ import annotations

import argparse
import logging

from search_server import DocumentStatus, SearchServer, format_document
from search_server.logging_config import setup_logging

STOP_WORDS = "and in on"

CORPUS = [
    (0, "white cat and fashionable collar", DocumentStatus.ACTUAL, [8, -3]),
    (1, "fluffy cat fluffy tail", DocumentStatus.ACTUAL, [7, 2, 7]),
    (2, "well-groomed dog expressive eyes", DocumentStatus.ACTUAL, [5, -12, 2, 1]),
    (3, "well-groomed starling eugene", DocumentStatus.BANNED, [9]),
]


def build_server() -> SearchServer:
    server = SearchServer(STOP_WORDS)
    for document_id, text, status, ratings in CORPUS:
        server.add_document(document_id, text, status, ratings)
    return server


def main():
    parser = argparse.ArgumentParser(description="Search server demonstration")
    parser.add_argument("--query", default="fluffy well-groomed cat", help="Query to run")
    parser.add_argument("--verbose", action="store_true", help="Log indexing and ranking details")

    args = parser.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)

    server = build_server()

    print("ACTUAL by default:")
    for document in server.find_top_documents(args.query):
        print(format_document(document))

    print("BANNED:")
    for document in server.find_top_documents(args.query, DocumentStatus.BANNED):
        print(format_document(document))

    print("Even ids:")
    for document in server.find_top_documents(
        args.query, lambda document_id, status, rating: document_id % 2 == 0
    ):
        print(format_document(document))


if __name__ == "__main__":
    main()
