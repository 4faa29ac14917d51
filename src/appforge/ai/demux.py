import re

_STYLE_PATTERN = re.compile(r"<style[^>]*>(.*?)</style>", re.IGNORECASE | re.DOTALL)
_SCRIPT_PATTERN = re.compile(r"<script[^>]*>(.*?)</script>", re.IGNORECASE | re.DOTALL)


def parse_code_into_files(code: str) -> dict[str, str]:
    """Split a single generated HTML document into named files.

    ``index.html`` always holds the full input. The first ``<style>`` and
    the first ``<script>`` block, when present and non-empty, are also
    copied out into ``styles.css`` and ``script.js``; later blocks are not
    merged in.
    """
    files = {"index.html": code}

    css_match = _STYLE_PATTERN.search(code)
    if css_match and css_match.group(1):
        files["styles.css"] = css_match.group(1).strip()

    js_match = _SCRIPT_PATTERN.search(code)
    if js_match and js_match.group(1):
        files["script.js"] = js_match.group(1).strip()

    return files
