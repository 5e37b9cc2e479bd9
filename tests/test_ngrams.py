# ======================================================
# tests/test_ngrams.py
# ======================================================
# Here, we are testing n-gram generation to ensure:
#   - n-grams come out start position by start position
#   - short documents are truncated, never an error
#   - bad order ranges are rejected up front
# ======================================================

import unittest
import numpy as np

from ngram_vocab.ngrams import generate_ngrams, iter_ngrams, validate_bounds


class TestNgrams(unittest.TestCase):

    def test_unigrams_and_bigrams_order(self):
        # here, we are checking the exact emission order for orders 1..2
        out = generate_ngrams(["a", "b", "c", "d"], ngram_min=1, ngram_max=2)
        self.assertEqual(out, ["a", "a_b", "b", "b_c", "c", "c_d", "d"])

    def test_bigrams_and_trigrams_truncate_at_end(self):
        # here, we are checking that windows running off the end are dropped
        out = generate_ngrams(["a", "b", "c"], ngram_min=2, ngram_max=3)
        self.assertEqual(out, ["a_b", "a_b_c", "b_c"])

    def test_unigrams_only(self):
        out = generate_ngrams(["x", "y", "x"])
        self.assertEqual(out, ["x", "y", "x"])

    def test_three_orders(self):
        out = generate_ngrams(["a", "b", "c", "d"], ngram_min=1, ngram_max=3)
        self.assertEqual(
            out, ["a", "a_b", "a_b_c", "b", "b_c", "b_c_d", "c", "c_d", "d"]
        )

    def test_document_shorter_than_min(self):
        # here, we are checking that too short documents give no n-grams
        self.assertEqual(generate_ngrams(["a", "b"], ngram_min=3, ngram_max=4), [])

    def test_document_between_min_and_max(self):
        # here, we are checking a length that is >= min but < max
        out = generate_ngrams(["a", "b"], ngram_min=1, ngram_max=5)
        self.assertEqual(out, ["a", "a_b", "b"])

    def test_empty_document(self):
        self.assertEqual(generate_ngrams([], ngram_min=1, ngram_max=3), [])

    def test_custom_delimiter(self):
        out = generate_ngrams(["new", "york", "city"], 2, 3, delimiter=" ")
        self.assertEqual(out, ["new york", "new york city", "york city"])

    def test_count_matches_bound(self):
        # here, we are checking the total against sum over orders of (L - k + 1)
        tokens = [str(i) for i in range(10)]
        out = generate_ngrams(tokens, ngram_min=2, ngram_max=4)
        self.assertEqual(len(out), 9 + 8 + 7)

    def test_iter_is_lazy(self):
        gen = iter_ngrams(["a", "b"], 1, 2)
        self.assertEqual(next(gen), "a")
        self.assertEqual(list(gen), ["a_b", "b"])

    def test_integer_like_bounds(self):
        # here, we are checking that numpy integers work as orders
        out = generate_ngrams(["a", "b", "c"], np.int64(2), np.int64(3))
        self.assertEqual(out, ["a_b", "a_b_c", "b_c"])
        self.assertEqual(validate_bounds(np.int32(1), 4), (1, 4))

    def test_invalid_bounds(self):
        # here, we are checking that configuration errors fail fast
        self.assertRaises(ValueError, generate_ngrams, ["a"], 0, 1)
        self.assertRaises(ValueError, generate_ngrams, ["a"], 3, 2)
        self.assertRaises(TypeError, generate_ngrams, ["a"], 1.0, 2)
        self.assertRaises(TypeError, generate_ngrams, ["a"], True, 2)


if __name__ == "__main__":
    unittest.main()
