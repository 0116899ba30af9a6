#!/usr/bin/env python3
"""
Rename class / id names of an HTML file to short generated names.

This is a thin wrapper around html_uglify/cli.py so you can run:

  python uglify_html.py path/to/index.html --whitelist '#app' --backup

Flags pass-through to the underlying tool:
  --output PATH       Write to PATH instead of overwriting the input
  --whitelist SEL     Keep #id / .class unchanged (repeatable; env HTML_UGLIFY_WHITELIST)
  --dry-run           Report counts only
  --backup            Create .uglify.bak before overwriting the input
  --verbose           Debug logging
"""

from html_uglify.cli import main


if __name__ == "__main__":
    main()
