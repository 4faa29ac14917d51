from appforge.ai import parse_code_into_files

PAGE = """<html>
<head><STYLE type="text/css">
  body { margin: 0; }
</STYLE></head>
<body>
<script>
  console.log('one');
</script>
<script>console.log('two');</script>
</body>
</html>"""


def test_plain_markup_only_yields_index():
    assert parse_code_into_files("<h1>Hi</h1>") == {"index.html": "<h1>Hi</h1>"}


def test_extracts_style_and_script():
    code = "<style>body{}</style><script>go()</script>"

    assert parse_code_into_files(code) == {
        "index.html": code,
        "styles.css": "body{}",
        "script.js": "go()",
    }


def test_case_insensitive_and_first_match_only():
    files = parse_code_into_files(PAGE)

    assert files["index.html"] == PAGE
    assert files["styles.css"] == "body { margin: 0; }"
    assert files["script.js"] == "console.log('one');"


def test_empty_blocks_are_skipped():
    files = parse_code_into_files("<style></style><script src='x.js'></script>")
    assert set(files) == {"index.html"}


def test_is_deterministic():
    assert parse_code_into_files(PAGE) == parse_code_into_files(PAGE)
