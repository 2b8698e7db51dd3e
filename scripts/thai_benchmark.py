"""Compare universal, dictionary and heuristic segmentation on Thai sentences.

    python scripts/thai_benchmark.py [--dictionary PATH] [--repeat N]
"""

import argparse
import time
from pathlib import Path

import pandas as pd

from spatular.core.tokenization.config import TokenizationConfig
from spatular.core.tokenization.tokenizer import DefaultTokenizer

SAMPLE_DICTIONARY = (
    Path(__file__).resolve().parents[1]
    / "spatular"
    / "data"
    / "dictionaries"
    / "thai-sample.txt"
)

THAI_SENTENCES = {
    "Simple greeting": "สวัสดีครับ ผมชื่อโทมัส",
    "Basic statement": "วันนี้อากาศดีมาก",
    "Technical content": "การประมวลผลภาษาธรรมชาติเป็นสาขาหนึ่งของปัญญาประดิษฐ์",
    "Mixed Thai-English": "ผมทำงานเป็น software engineer ที่บริษัทในกรุงเทพฯ",
    "News headline": "นายกรัฐมนตรีประกาศมาตรการใหม่เพื่อกระตุ้นเศรษฐกิจ",
    "Numbers": "ประชากรของประเทศไทยมีประมาณ 70 ล้านคนในปี 2023",
    "Long sentence": (
        "การพัฒนาระบบประมวลผลภาษาไทยมีความท้าทายเนื่องจากลักษณะเฉพาะของภาษาไทย"
        "ที่ไม่มีการแบ่งคำด้วยช่องว่างและมีความกำกวมในการตัดคำ"
    ),
}

parser = argparse.ArgumentParser(description="Thai tokenization benchmark")
parser.add_argument(
    "--dictionary",
    type=str,
    default=str(SAMPLE_DICTIONARY),
    help="Word list, one word per line",
)
parser.add_argument("--repeat", type=int, default=100, help="Runs per sentence")
parser.add_argument(
    "--show-tokens", action="store_true", help="Print the tokens of every method"
)


def _timed(tokenizer: DefaultTokenizer, text: str, repeat: int):
    started = time.perf_counter()
    for _ in range(repeat):
        tokens = tokenizer.tokenize(text)
    elapsed_us = (time.perf_counter() - started) / repeat * 1_000_000
    return tokens, elapsed_us


def run(dictionary: str, repeat: int, show_tokens: bool) -> pd.DataFrame:
    tokenizers = {
        "universal": DefaultTokenizer(),
        "dictionary": DefaultTokenizer(TokenizationConfig(language="th")),
        "heuristic": DefaultTokenizer(TokenizationConfig(language="th")),
    }
    words = tokenizers["dictionary"].load_dictionary(dictionary)
    print(f"Loaded {words} words from {dictionary}\n")

    rows = []
    for name, text in THAI_SENTENCES.items():
        for method, tokenizer in tokenizers.items():
            tokens, micros = _timed(tokenizer, text, repeat)
            rows.append(
                {"case": name, "method": method, "tokens": len(tokens), "us": micros}
            )
            if show_tokens:
                print(f"[{name}] {method}: {tokens}")

    return pd.DataFrame(rows)


if __name__ == "__main__":
    args = parser.parse_args()
    df = run(args.dictionary, args.repeat, args.show_tokens)
    table = df.pivot(index="case", columns="method", values=["tokens", "us"])
    print(table.round(1).to_string())
