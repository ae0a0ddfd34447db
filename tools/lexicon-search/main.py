import argparse
import logging
import sys
from aggregate import search_all
from corpus import convert_file, load_corpus
from custom_words import JsonFileStore, import_translate_csv
from errors import LexiconSearchError
from navigation import navigation_link
from normalize import decode_escapes
from settings import load_settings

SECTION_TITLES = {
    "vocabulary": "Vocabulary",
    "numbers": "Numbers",
    "dates": "Dates",
    "my_words": "My Words",
    "tenses": "Tenses",
    "cases": "Cases",
}

def cmd_search(args) -> int:
    settings = load_settings(args.config)
    store = JsonFileStore(args.store or settings.store_path)
    corpus = load_corpus(args.data_dir, settings)

    result = search_all(
        args.query,
        corpus.vocabulary,
        corpus.numbers,
        corpus.dates,
        corpus.conjugations,
        corpus.declensions,
        store=store,
        settings=settings,
    )

    if args.format == "json":
        print(result.model_dump_json(indent=2))
        return 0

    if result.total_results == 0:
        print(f"🔍 No results for '{args.query}'.")
        return 0

    print(f"🔍 {result.total_results} results for '{args.query}'")
    for field, title in SECTION_TITLES.items():
        section = getattr(result, field)
        if not section:
            continue
        print(f"\n{title} ({len(section)})")
        for item in section:
            line = f"  {decode_escapes(item.title)}  ·  {decode_escapes(item.subtitle)}"
            if args.links:
                line += f"  → {navigation_link(item)}"
            print(line)
    return 0

def cmd_convert(args) -> int:
    count = convert_file(args.src, args.dst)
    print(f"✅ Converted {count} records from {args.src} to {args.dst}")
    return 0

def cmd_import_csv(args) -> int:
    settings = load_settings(args.config)
    store = JsonFileStore(args.store or settings.store_path)
    with open(args.file, 'r', encoding='utf-8') as f:
        result = import_translate_csv(store, f.read(), settings.custom_words_key)

    for error in result.errors:
        print(f"⚠️  {error}")
    print(f"✅ Imported {result.successful_rows}/{result.total_rows} rows into {store.path}")
    return 0 if result.successful_rows else 1

def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="main.py", description="Polish flashcard corpus search.")
    ap.add_argument("--config", default=None, help="Search config YAML (default: config/search.yaml).")
    ap.add_argument("-v", "--verbose", action="store_true")
    sub = ap.add_subparsers(dest="command", required=True)

    sp = sub.add_parser("search", help="Search every dataset.")
    sp.add_argument("query")
    sp.add_argument("--data-dir", default="data")
    sp.add_argument("--store", default=None, help="Key-value store holding custom words.")
    sp.add_argument("--format", choices=["text", "json"], default="text")
    sp.add_argument("--links", action="store_true", help="Print the deep link of each result.")
    sp.set_defaults(func=cmd_search)

    cp = sub.add_parser("convert", help="Convert an object-literal resource to strict JSON.")
    cp.add_argument("src")
    cp.add_argument("dst")
    cp.set_defaults(func=cmd_convert)

    ip = sub.add_parser("import-csv", help="Import a Google Translate CSV as custom words.")
    ip.add_argument("file")
    ip.add_argument("--store", default=None)
    ip.set_defaults(func=cmd_import_csv)

    return ap

def main(argv=None) -> int:
    args = build_argparser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except FileNotFoundError as e:
        print(f"❌ File not found: {e.filename}")
    except LexiconSearchError as e:
        print(f"❌ {e}")
    return 1

if __name__ == "__main__":
    sys.exit(main())
