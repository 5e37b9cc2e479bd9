from typing import Iterator, Optional


class Lexicon:
    """
    Dense term <-> id mapping. Ids start at 0 and follow first sighting.
    """
    def __init__(self):
        self.next_id: int = 0
        self.term_to_id: dict[str, int] = dict()
        self.terms: list[str] = list()

    def get_id(self, term: str) -> int:
        if term in self.term_to_id:
            return self.term_to_id[term]

        term_id = self.next_id
        self.term_to_id[term] = term_id
        self.next_id += 1

        self.terms.append(term)
        return term_id

    def lookup(self, term: str) -> Optional[int]:
        # Same as get_id, but never assigns
        return self.term_to_id.get(term)

    def get_term(self, term_id: int) -> Optional[str]:
        if term_id < 0 or term_id >= len(self.terms):
            return None
        return self.terms[term_id]

    def __contains__(self, term: str) -> bool:
        return term in self.term_to_id

    def __len__(self) -> int:
        return self.next_id

    def __iter__(self) -> Iterator[str]:
        # Terms in id order
        return iter(self.terms)
