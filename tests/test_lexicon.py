# ======================================================
# tests/test_lexicon.py
# ======================================================
# Here, we are testing the Lexicon to ensure:
#   - ids are dense and follow first sighting
#   - known terms keep their id
#   - unknown ids and terms are reported as None
# ======================================================

import unittest
from ngram_vocab.lexicon import Lexicon


class TestLexicon(unittest.TestCase):

    def setUp(self):
        self.lexicon = Lexicon()

    def test_ids_follow_first_sighting(self):
        self.assertEqual(self.lexicon.get_id("b"), 0)
        self.assertEqual(self.lexicon.get_id("a"), 1)
        self.assertEqual(self.lexicon.get_id("b"), 0)
        self.assertEqual(self.lexicon.get_id("c"), 2)
        self.assertEqual(len(self.lexicon), 3)
        self.assertEqual(list(self.lexicon), ["b", "a", "c"])

    def test_lookup_does_not_assign(self):
        self.assertIsNone(self.lexicon.lookup("a"))
        self.assertEqual(len(self.lexicon), 0)
        self.lexicon.get_id("a")
        self.assertEqual(self.lexicon.lookup("a"), 0)
        self.assertIn("a", self.lexicon)
        self.assertNotIn("z", self.lexicon)

    def test_get_term(self):
        self.lexicon.get_id("a")
        self.lexicon.get_id("b")
        self.assertEqual(self.lexicon.get_term(1), "b")
        # here, we are checking that out of range ids give None, not an error
        self.assertIsNone(self.lexicon.get_term(2))
        self.assertIsNone(self.lexicon.get_term(-1))


if __name__ == "__main__":
    unittest.main()
