import argparse
import sys
from typing import List, Optional

from tqdm import tqdm

from bbow.bag import WordBag
from bbow.config import BbowConfig
from bbow.io import document_text, read_jsonl, read_text

def main(argv: Optional[List[str]] = None) -> int:
    cfg = BbowConfig()
    ap = argparse.ArgumentParser(description="Count words in a text file or a JSONL corpus.")
    src = ap.add_mutually_exclusive_group(required=True)
    src.add_argument("--text", help="Plain UTF-8 text file")
    src.add_argument("--corpus", help="JSONL corpus; fields from BBOW_TEXT_FIELDS (default title,text)")
    ap.add_argument("--top", type=int, default=cfg.top_n, help="How many of the most frequent words to print")
    ap.add_argument("--show_ownership", action="store_true", help="List every word with borrowed/owned key storage")
    args = ap.parse_args(argv)

    bag = WordBag()
    try:
        if args.text:
            texts = [read_text(args.text)]
        else:
            texts = [document_text(row, cfg.text_fields) for row in read_jsonl(args.corpus)]
    except UnicodeDecodeError as e:
        print(f"[build_bbow] cannot decode input as UTF-8: {e}", file=sys.stderr)
        return 2

    for text in tqdm(texts, desc="Counting words", disable=len(texts) < 2):
        bag.extend_from_text(text)

    print(f"[build_bbow] docs={len(texts)} distinct={bag.count()} total={bag.total()}")
    for word, n in bag.most_common(args.top):
        print(f"{word}\t{n}")
    if args.show_ownership:
        for word, kind in bag.ownership():
            print(f"{kind}\t{word}")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
