#!/usr/bin/env python3
# tools/rebase_paths.py - serve the build from a subpath (no HTML parsing)

import re
from pathlib import Path

TARGET = Path("build") / "index.html"
BASE_PATH = "/test_physic_engine"

# greedy, stops at the last " on the line
HREF_RE = re.compile(r'href="(.*)"')
# any run without a quote, newlines included
QUOTED_RE = re.compile(r"'([^']*)'")

# ---------- Rewriters ----------

def rebase_href_attributes(html: str, prefix: str) -> tuple[str, int]:
    return HREF_RE.subn(lambda m: f'href="{prefix}{m.group(1)}"', html)

def rebase_quoted_literals(html: str, prefix: str) -> tuple[str, int]:
    return QUOTED_RE.subn(lambda m: f"'{prefix}{m.group(1)}'", html)

def _rebase(html: str, prefix: str) -> tuple[str, int, int]:
    # quoted pass runs over the href pass output
    html, hrefs = rebase_href_attributes(html, prefix)
    html, quoted = rebase_quoted_literals(html, prefix)
    return html, hrefs, quoted

def rebase_document(html: str, prefix: str = BASE_PATH) -> str:
    """
    Prefix every href="..." value, then every '...' literal of the result.
    Not idempotent: a second run prefixes again.
    """
    return _rebase(html, prefix)[0]

def rebase_file(path: Path = TARGET, prefix: str = BASE_PATH) -> tuple[int, int]:
    """Rewrite path in place; returns (href count, quoted literal count)."""
    html, hrefs, quoted = _rebase(path.read_text(encoding="utf-8"), prefix)
    path.write_text(html, encoding="utf-8")
    return hrefs, quoted

def main():
    if not TARGET.exists():
        raise SystemExit(f"Missing build output: {TARGET}")

    rebase_file(TARGET, BASE_PATH)

if __name__ == "__main__":
    main()
