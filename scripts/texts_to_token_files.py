# scripts/texts_to_token_files.py
# Here, we are converting a CSV of texts into one text file per document.
# This ensures compatibility with run_demo.py (each .txt = one document).

import os
import sys

import pandas as pd

# here, we are defining input and output paths
raw_csv = sys.argv[1] if len(sys.argv) > 1 else "data/raw/texts.csv"
out_dir = sys.argv[2] if len(sys.argv) > 2 else "data/sample_docs"
os.makedirs(out_dir, exist_ok=True)

print(f"=== Loading texts from {raw_csv} ===")
df = pd.read_csv(raw_csv, encoding="utf8", low_memory=False)

# here, we are picking the text column
cols = df.columns
text_col = next((c for c in ("text", "Text", "Plot", "plot") if c in cols), cols[-1])

count = 0
for i, text in enumerate(df[text_col].fillna("").astype(str)):
    text = text.strip()
    if not text:
        continue
    fname = f"doc_{i+1:05d}.txt"
    with open(os.path.join(out_dir, fname), "w", encoding="utf8", errors="ignore") as f:
        f.write(text)
    count += 1

print(f" Created {count} individual .txt documents in {out_dir}")
print("You can now run 'python run_demo.py' to build the vocabulary.")
