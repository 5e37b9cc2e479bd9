# ngram_vocab/ngrams.py
"""
N-gram module.

Turns an already tokenized document into the sequence of its n-grams.
Every order between ngram_min and ngram_max is produced, with the tokens
of a multi-token n-gram joined by a delimiter.

Emission order matters, since the vocabulary hands out term ids in the
order terms are first seen. For each start position the windows grow one
token at a time, so for tokens [a, b, c, d], ngram_min=1, ngram_max=2:

    a  a_b  b  b_c  c  c_d  d
"""

import operator
from typing import Iterator, List, Sequence, Tuple


def validate_bounds(ngram_min: int, ngram_max: int) -> Tuple[int, int]:
    """
    Check the n-gram order range, raising on a bad configuration.
    Integer-like values (numpy integers included) come back as plain ints.
    """
    bounds = []
    for name, value in (("ngram_min", ngram_min), ("ngram_max", ngram_max)):
        # bool is an int subclass, but True/False are never meant as orders
        if isinstance(value, bool):
            raise TypeError(f"{name} must be an int, got {value!r}")
        try:
            bounds.append(operator.index(value))
        except TypeError:
            raise TypeError(f"{name} must be an int, got {value!r}") from None
    ngram_min, ngram_max = bounds
    if ngram_min < 1:
        raise ValueError(f"ngram_min must be >= 1, got {ngram_min}")
    if ngram_min > ngram_max:
        raise ValueError(
            f"ngram_min ({ngram_min}) must not exceed ngram_max ({ngram_max})"
        )
    return ngram_min, ngram_max


def iter_ngrams(
    tokens: Sequence[str],
    ngram_min: int = 1,
    ngram_max: int = 1,
    delimiter: str = "_",
) -> Iterator[str]:
    """
    Lazily yield the n-grams of tokens, start position by start position.

    Bounds are not validated here; use generate_ngrams or validate_bounds
    for that.
    """
    length = len(tokens)
    for start in range(length):
        gram = tokens[start]
        order = 1
        while True:
            if order >= ngram_min:
                yield gram
            if order == ngram_max or start + order >= length:
                break
            gram = gram + delimiter + tokens[start + order]
            order += 1


def generate_ngrams(
    tokens: Sequence[str],
    ngram_min: int = 1,
    ngram_max: int = 1,
    delimiter: str = "_",
) -> List[str]:
    """
    Build the list of all n-grams of order ngram_min..ngram_max.

    Parameters
    ----------
    tokens : Sequence[str]
        One document, already tokenized. May be empty.
    ngram_min, ngram_max : int
        Inclusive order range, 1 <= ngram_min <= ngram_max.
    delimiter : str
        Joins the tokens of a multi-token n-gram.

    Returns
    -------
    List[str]
        The n-grams in emission order. Empty when the document has fewer
        than ngram_min tokens; windows that would run past the end are
        simply not produced.
    """
    ngram_min, ngram_max = validate_bounds(ngram_min, ngram_max)
    return list(iter_ngrams(tokens, ngram_min, ngram_max, delimiter))
