# ======================================================
# run_demo.py
# ======================================================
import glob
import logging
import os
import sys

from ngram_vocab.vocabulary import Vocabulary


def read_documents(paths):
    """
    One document per file. Tokenizing is the caller's job, so this just
    lowercases and splits on whitespace.
    """
    for path in paths:
        with open(path, "r", encoding="utf8", errors="ignore") as f:
            yield f.read().lower().split()


def build_vocabulary_from_sample(sample_dir):
    print("=== Building the n-gram vocabulary from sample documents ===")

    paths = sorted(glob.glob(os.path.join(sample_dir, "*.txt")))

    # If no documents are found, warn the user.
    if not paths:
        print(f"No sample docs found in {sample_dir}.")
        return None

    vocab = Vocabulary(ngram_min=1, ngram_max=2)
    vocab.insert_document_batch(read_documents(paths))

    print(f"Ingested {vocab.document_count} documents.")
    print(f"Ingested {vocab.token_count} n-gram tokens.")
    print(f"Vocabulary size: {vocab.vocabulary_size} unique terms.")

    return vocab


def demo_statistics(vocab, top=10):
    frame = vocab.to_frame()

    print(f"=== Top {top} terms by corpus count ===")
    for row in frame.nlargest(top, "term_count").itertuples(index=False):
        print(f"{row.term_id}\t{row.term}\t{row.term_count}\t{row.doc_count}")

    print(f"=== Top {top} bigrams by document count ===")
    bigrams = frame[frame["term"].str.contains(vocab.delimiter, regex=False)]
    for row in bigrams.nlargest(top, "doc_count").itertuples(index=False):
        print(f"{row.term_id}\t{row.term}\t{row.term_count}\t{row.doc_count}")


if __name__ == "__main__":
    logging.basicConfig(
        level=os.environ.get("NGRAM_VOCAB_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    sample_dir = sys.argv[1] if len(sys.argv) > 1 else os.path.join("data", "sample_docs")
    vocab = build_vocabulary_from_sample(sample_dir)

    if vocab:
        demo_statistics(vocab)
