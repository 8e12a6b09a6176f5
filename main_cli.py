#!/usr/bin/env python3
"""
Main CLI Entry Point
Look up words in the Oxford Learner's Dictionary, one at a time or in batches
"""

import argparse
import json
import sys
from pathlib import Path

from core.config import LookupConfig, setup_logging


def main(argv=None):
    parser = argparse.ArgumentParser(description="Oxford Learner's Dictionary lookup")
    parser.add_argument('--word', help='Single word or phrase to look up')
    parser.add_argument('--hint', choices=['n', 'v', 'adj', 'adv'],
                        help='Part-of-speech hint for --word')
    parser.add_argument('--words-file', type=Path,
                        help='File with one word per line, optionally "word (n|v|adj|adv)"')
    parser.add_argument('--delay', type=float, default=None,
                        help='Seconds to wait between batch lookups')
    parser.add_argument('--store', type=Path, default=LookupConfig.get_store_path(),
                        help='Write batch results to this JSON file')
    parser.add_argument('--json', action='store_true', help='Print JSON instead of text')
    parser.add_argument('--log-level', default=None, help='Logging level (default: INFO)')

    args = parser.parse_args(argv)
    if not args.word and not args.words_file:
        parser.print_help()
        return 0

    setup_logging(args.log_level)

    from core.batch_runner import BatchRunner
    from core.dictionary_lookup import DictionaryLookup
    from core.models import LookupResult, format_entry
    from core.result_store import JsonFileResultStore

    try:
        lookup = DictionaryLookup()

        if args.word:
            entry = lookup.lookup(args.word, args.hint)
            result = LookupResult(
                successes=[entry] if entry else [],
                not_found=[] if entry else [args.word],
            )
        else:
            lines = args.words_file.read_text(encoding='utf-8').splitlines()
            store = JsonFileResultStore(args.store) if args.store else None
            runner = BatchRunner(lookup, delay_seconds=args.delay, store=store)
            print(f"[INFO] Looking up {len(lines)} lines from {args.words_file}")
            result = runner.run_batch(lines)

        if args.json:
            print(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        else:
            for entry in result.successes:
                print(format_entry(entry))
                print()
            if result.not_found:
                print(f"[WARN] Not found: {', '.join(result.not_found)}")
            print(f"[OK] Found {len(result.successes)} | Not found {len(result.not_found)}")

        return 0 if result.successes or not result.not_found else 1

    except Exception as e:
        print(f"[ERROR] {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
