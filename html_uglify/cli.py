#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
from pathlib import Path

from html_uglify import __version__
from html_uglify.config import WhitelistError, load_whitelist
from html_uglify.lookup import CLASS, ID
from html_uglify.markup import parse_html
from html_uglify.uglify import HTMLUglify


def parse_args(argv=None):
    ap = argparse.ArgumentParser(description='Rewrite class and id names in an HTML file to short generated names')
    ap.add_argument('input', help='HTML file to process')
    ap.add_argument('--output', help='Write the result here instead of overwriting INPUT')
    ap.add_argument('--whitelist', action='append', help='Selector to keep as-is, e.g. #main or .js-hook (can be repeated; fallback: env HTML_UGLIFY_WHITELIST)')
    ap.add_argument('--dry-run', action='store_true', help='Report only; do not write any file')
    ap.add_argument('--backup', action='store_true', help='Write INPUT.uglify.bak before overwriting INPUT')
    ap.add_argument('--verbose', action='store_true', help='Enable debug logging')
    ap.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return ap.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s %(name)s: %(message)s')

    try:
        whitelist = load_whitelist(args.whitelist)
    except WhitelistError as e:
        raise SystemExit(str(e))

    html_path = Path(args.input)
    if not html_path.exists():
        raise SystemExit(f'{html_path} not found')

    src = html_path.read_text(encoding='utf-8')
    tree, lookups = HTMLUglify(whitelist).rewrite(parse_html(src))
    out = str(tree)
    ids, classes = len(lookups.mapping(ID)), len(lookups.mapping(CLASS))

    if args.dry_run:
        print(f"[UGLIFY] ids={ids} classes={classes} (dry-run)")
        return

    out_path = Path(args.output) if args.output else html_path
    if args.backup and out_path == html_path:
        bak = html_path.with_suffix(html_path.suffix + '.uglify.bak')
        if not bak.exists():
            bak.write_text(src, encoding='utf-8')
    out_path.write_text(out, encoding='utf-8')
    print(f"[UGLIFY] ids={ids} classes={classes} -> {out_path}")


if __name__ == '__main__':
    main()
