"""Command-line entry point: generate a landing page from a prompt"""
import argparse
import logging
import sys
from pathlib import Path
from landing_synth.core.config import settings
from landing_synth.core.engine import build_page
from landing_synth.core.extractor import extract
from landing_synth.models.errors import ApplicationError


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate a landing page HTML document from a text prompt")
    parser.add_argument('prompt', type=str, help="Description of the landing page")
    parser.add_argument('-o', '--output', type=Path, help="Write the HTML to this file instead of stdout")
    parser.add_argument('--signals', action='store_true', help="Print the extracted design signals as JSON and exit")
    parser.add_argument('-v', '--verbose', action='store_true', help="Log pipeline details to stderr")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level.upper(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    if not args.prompt.strip():
        parser.error("prompt must not be blank")

    if args.signals:
        print(extract(args.prompt).model_dump_json(indent=2))
        return 0

    try:
        page = build_page(args.prompt)
    except ApplicationError as e:
        print(f"ERROR: {e.message}", file=sys.stderr)
        if e.hint:
            print(f"   {e.hint}", file=sys.stderr)
        return 1

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(page.html, encoding='utf-8')
        print(f"OK Wrote {args.output} ({len(page.html)} chars, product '{page.signals.product_name}')", file=sys.stderr)
    else:
        sys.stdout.write(page.html)

    return 0


if __name__ == "__main__":
    sys.exit(main())
