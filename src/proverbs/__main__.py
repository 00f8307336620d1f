from __future__ import annotations
import argparse, json, logging
from proverbs import Engine, LoadError
from proverbs.config import DEFAULT_LIMIT, DEFAULT_PAGE
from proverbs.models import SearchResult

log = logging.getLogger(__name__)

def _print_result(res: SearchResult, as_json: bool) -> None:
    if as_json:
        print(json.dumps(res.to_dict(), ensure_ascii=False, indent=2))
        return
    if not res.proverbs:
        print(f"(no matches on page {res.current_page}, total={res.total_results})"); return
    print(f"total={res.total_results} page={res.current_page}")
    print("#    Theme                Proverb / Translation")
    for p in res.proverbs:
        print(f"{p.id:<4} {p.theme:<20} {p.source_text}")
        print(f"{'':<25} {p.translated_text}")

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Proverb search CLI (Engine-backed)")
    p.add_argument("--data", default=None, help="JSON collection (default: packaged proverbs.json)")
    p.add_argument("--q", default=None, help="Single search to run once")
    p.add_argument("--theme", default=None, help="Theme filter (substring, 'tous' = all)")
    p.add_argument("--page", default=str(DEFAULT_PAGE), help="0-based page index")
    p.add_argument("--limit", default=str(DEFAULT_LIMIT), help="Page size")
    p.add_argument("--themes", action="store_true", help="List known themes")
    p.add_argument("--repl", action="store_true", help="Interactive loop after load")
    p.add_argument("--json", action="store_true", help="Emit the API JSON payload")
    p.add_argument("--verbose", action="store_true")

    args = p.parse_args(argv)

    eng = Engine()
    try:
        try:
            eng.load(args.data, verbose=args.verbose)
        except LoadError as e:
            log.error("Cannot load proverbs: %s", e)
            raise

        def run_query(q: str | None):
            res = eng.query(search=q, theme=args.theme, page=args.page, limit=args.limit)
            _print_result(res, args.json)

        if args.themes:
            for t in eng.themes():
                print(t)

        if args.q is not None or not (args.repl or args.themes):
            run_query(args.q)

        if args.repl:
            print("Type a search (empty line to exit).")
            while True:
                try:
                    q = input("> ").strip()
                except (EOFError, KeyboardInterrupt):
                    break
                if not q:
                    break
                run_query(q)

        return 0
    finally:
        eng.shutdown()

if __name__ == "__main__":
    raise SystemExit(main())
