"""
Parse the extracted text of a receipt and show what was recognised.

Usage:
    python examples/01_parse_receipt.py receipt.txt
    pdftotext comprovante.pdf - | python examples/01_parse_receipt.py
    python examples/01_parse_receipt.py receipt.txt --json
"""
import argparse
import json
import logging
import sys

from natron import parse_receipt

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")

if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Classify receipt text")
    parser.add_argument("path", nargs="?", help="Text file with the receipt contents (default: stdin)")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    args = parser.parse_args()

    if args.path:
        with open(args.path, encoding="utf-8") as f:
            text = f.read()
    else:
        text = sys.stdin.read()

    receipt = parse_receipt(text)

    if args.json:
        print(json.dumps(receipt.to_dict(), ensure_ascii=False, indent=2))
    else:
        print(f"Amount:        {receipt.amount if receipt.amount is not None else '?'}")
        print(f"Date:          {receipt.date.isoformat() if receipt.date else '?'}")
        print(f"Establishment: {receipt.establishment or '-'}")
        print(f"Category:      {receipt.category} / {receipt.subcategory} ({receipt.category_type})")

    if receipt.missing_fields:
        print(f"Needs confirmation: {', '.join(receipt.missing_fields)}", file=sys.stderr)
