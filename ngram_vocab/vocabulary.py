# ngram_vocab/vocabulary.py
"""
Vocabulary module.

Streams tokenized documents into a term table:
 - n-grams of every configured order are treated uniformly as terms
 - each new term gets the next dense id (0, 1, 2, ...)
 - global count: every occurrence, repeats within a document included
 - document count: at most +1 per document, however often the term repeats

The table only grows. It is read back with export_statistics(), which
returns numpy columns sorted by term id.
"""

import dataclasses
import logging
import threading
from collections.abc import Mapping, Set as AbstractSet
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Set

import numpy as np
import pandas as pd

from .lexicon import Lexicon
from .ngrams import iter_ngrams, validate_bounds

logger = logging.getLogger(__name__)

STAT_COLUMNS = ("term", "term_id", "term_count", "doc_count")


@dataclass
class TermStat:
    term_id: int
    # occurrences in the whole corpus
    global_count: int = 1
    # documents containing the term
    document_count: int = 0


class Vocabulary:
    """
    Single-pass n-gram vocabulary over a corpus.

    Parameters:
        ngram_min : int
            Smallest n-gram order, >= 1.
        ngram_max : int
            Largest n-gram order, >= ngram_min.
        delimiter : str
            Joins the tokens of multi-token n-grams.

    One instance per corpus. Writers are serialized by an internal lock,
    so ids always follow the order in which documents were accepted.
    """
    def __init__(self, ngram_min: int = 1, ngram_max: int = 1, delimiter: str = "_"):
        ngram_min, ngram_max = validate_bounds(ngram_min, ngram_max)
        if not isinstance(delimiter, str):
            raise TypeError(f"delimiter must be a str, got {delimiter!r}")

        self._ngram_min = ngram_min
        self._ngram_max = ngram_max
        self._delimiter = delimiter

        # term -> id; stats are indexed by that id
        self._lexicon = Lexicon()
        self._stats: List[TermStat] = []

        self._document_count = 0
        self._token_count = 0

        # Ids of the distinct terms of the document being inserted
        self._document_terms: Set[int] = set()

        self._lock = threading.RLock()

        logger.debug(
            "Vocabulary created: ngram_min=%d ngram_max=%d delimiter=%r",
            ngram_min, ngram_max, delimiter,
        )

    # --- Configuration --- #

    @property
    def ngram_min(self) -> int:
        return self._ngram_min

    @property
    def ngram_max(self) -> int:
        return self._ngram_max

    @property
    def delimiter(self) -> str:
        return self._delimiter

    # --- Ingestion --- #

    def insert_terms(self, terms: Iterable[str]) -> None:
        """
        Count already generated terms: lookup-or-create, bump global and
        token counts, and remember each distinct term for the current
        document. Document counts are settled by insert_document.
        """
        terms = self._check_tokens(terms)
        with self._lock:
            self._count_terms(terms)

    def insert_document(self, tokens: Sequence[str]) -> None:
        """
        Add one tokenized document. An empty document still counts as a
        document, it just contributes no terms.

        Any ordered iterable of str works; it is read once, up front, so a
        rejected document leaves the vocabulary untouched.
        """
        tokens = self._check_tokens(tokens)
        with self._lock:
            self._document_count += 1
            self._document_terms.clear()
            self._count_terms(
                iter_ngrams(tokens, self._ngram_min, self._ngram_max, self._delimiter)
            )
            for term_id in self._document_terms:
                self._stats[term_id].document_count += 1
            self._document_terms.clear()

    def _count_terms(self, terms: Iterable[str]) -> None:
        # Caller holds the lock; terms are already checked
        for term in terms:
            term_id = self._lexicon.lookup(term)
            if term_id is None:
                term_id = self._lexicon.get_id(term)
                self._stats.append(TermStat(term_id))
            else:
                self._stats[term_id].global_count += 1
            self._document_terms.add(term_id)
            self._token_count += 1

    def insert_document_batch(self, documents: Iterable[Sequence[str]]) -> None:
        """
        Insert documents strictly in order. The lock is held for the whole
        batch, so no other writer can interleave with it.
        """
        with self._lock:
            inserted = 0
            for tokens in documents:
                self.insert_document(tokens)
                inserted += 1
            logger.debug(
                "Inserted batch of %d documents (vocabulary size %d)",
                inserted, len(self._lexicon),
            )

    # --- Getters --- #

    @property
    def document_count(self) -> int:
        return self._document_count

    @property
    def token_count(self) -> int:
        return self._token_count

    @property
    def vocabulary_size(self) -> int:
        return len(self._lexicon)

    def __len__(self) -> int:
        return len(self._lexicon)

    def __contains__(self, term: str) -> bool:
        return term in self._lexicon

    def get_stat(self, term: str) -> Optional[TermStat]:
        """
        Returns a copy of the term's record, or None for an unseen term.
        """
        with self._lock:
            term_id = self._lexicon.lookup(term)
            if term_id is None:
                return None
            return dataclasses.replace(self._stats[term_id])

    def get_term(self, term_id: int) -> Optional[str]:
        return self._lexicon.get_term(term_id)

    # --- Export --- #

    def export_statistics(self) -> Dict[str, np.ndarray]:
        """
        Column table with one row per term, sorted by term_id ascending:
            term (object), term_id, term_count, doc_count (int64)
        The arrays are fresh copies.
        """
        with self._lock:
            n = len(self._lexicon)
            terms = np.empty(n, dtype=object)
            terms[:] = self._lexicon.terms
            return {
                "term": terms,
                "term_id": np.fromiter(
                    (s.term_id for s in self._stats), dtype=np.int64, count=n
                ),
                "term_count": np.fromiter(
                    (s.global_count for s in self._stats), dtype=np.int64, count=n
                ),
                "doc_count": np.fromiter(
                    (s.document_count for s in self._stats), dtype=np.int64, count=n
                ),
            }

    def to_frame(self) -> pd.DataFrame:
        """
        export_statistics() as a DataFrame.
        """
        return pd.DataFrame(self.export_statistics(), columns=list(STAT_COLUMNS))

    def _check_tokens(self, tokens) -> List[str]:
        """
        Read tokens into a list, rejecting anything that cannot be counted
        in a deterministic order.
        """
        # A bare string would be split into characters
        if isinstance(tokens, (str, bytes)):
            raise TypeError("a document must be a sequence of tokens, not a string")
        # Unordered containers would make id assignment depend on hashing
        if isinstance(tokens, (AbstractSet, Mapping)):
            raise TypeError(
                f"tokens must be ordered, got {type(tokens).__name__}"
            )
        tokens = list(tokens)
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError(f"tokens must be str, got {token!r}")
        return tokens
