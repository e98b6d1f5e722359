"""Campaign tracking for markup links: rewrites `[text](url)` targets, never the text"""

import re
from urllib.parse import urlencode


LINK_RE = re.compile(r'(?<!!)\[([^\[\]]*)\]\(([^()\s]*)\)')
TRACKED_MARKER = "utm_source="
FENCE = "```"
CODE_SPAN_RE = re.compile(r"(`+).*?(?<!`)\1(?!`)")


def campaign_name(context: str) -> str:
    """Lowercase, alphanumeric, hyphen-joined campaign id derived from a title."""
    text = re.sub(r'[^a-z0-9\s]', '', context.lower()).strip()
    return re.sub(r'\s+', '-', text)


def tracking_params(context: str, source: str = "guide", medium: str = "pdf") -> str:
    """Return the tracking query string (no leading `?`)."""
    return urlencode({
        "utm_source": source,
        "utm_medium": medium,
        "utm_campaign": campaign_name(context),
    })


def track_url(url: str, params: str) -> str:
    """Append params to url, keeping any `#fragment` last. Already-tracked URLs are returned as-is."""
    if not url or TRACKED_MARKER in url:
        return url
    base, hash_, fragment = url.partition('#')
    sep = '&' if '?' in base else '?'
    return f"{base}{sep}{params}{hash_}{fragment}"


def _track_outside_code_spans(line: str, sub) -> str:
    out, pos = [], 0
    for m in CODE_SPAN_RE.finditer(line):
        out.append(LINK_RE.sub(sub, line[pos:m.start()]))
        out.append(m.group(0))
        pos = m.end()
    out.append(LINK_RE.sub(sub, line[pos:]))
    return ''.join(out)


def add_tracking(text: str, context: str, source: str = "guide", medium: str = "pdf") -> str:
    """Add tracking params to every well-formed markup link in text.

    Malformed pairs (empty target, whitespace in the target, nested brackets)
    don't match and pass through untouched, as does all non-link text.
    Image targets (`![alt](src)`) are assets, not links, and are left alone.
    Code is kept verbatim: fenced blocks (fence lines included) and backtick
    code spans are never rewritten.
    """
    params = tracking_params(context, source, medium)

    def _sub(m: re.Match) -> str:
        label, url = m.group(1), m.group(2)
        return f"[{label}]({track_url(url, params)})"

    out: list[str] = []
    in_fence = False
    for line in text.splitlines(keepends=True):
        if line.strip().startswith(FENCE):
            in_fence = not in_fence
            out.append(line)
        elif in_fence:
            out.append(line)
        else:
            out.append(_track_outside_code_spans(line, _sub))
    return ''.join(out)
