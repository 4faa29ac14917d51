from appforge.ai import AIResponseParser


class TestParse:
    def test_extracts_single_fenced_block(self):
        text = "Here it is:\n```html\n<div></div>\n```"

        response = AIResponseParser.parse(text)

        assert response.text == text
        assert response.code == "<div></div>"
        assert response.ok

    def test_joins_multiple_blocks_with_blank_line(self):
        text = "```html\n<p>a</p>\n```\nthen\n```css\np { color: red; }\n```"

        assert AIResponseParser.parse(text).code == "<p>a</p>\n\np { color: red; }"

    def test_block_without_language_hint(self):
        assert AIResponseParser.parse("```\nconst x = 1;\n```").code == "const x = 1;"

    def test_no_fence_means_no_code(self):
        response = AIResponseParser.parse("I cannot help with that.")

        assert response.code is None
        assert response.error is None

    def test_empty_block_is_empty_string(self):
        assert AIResponseParser.parse("```\n```").code == ""

    def test_only_one_trailing_newline_removed(self):
        assert AIResponseParser.parse("```js\nx()\n\n```").code == "x()\n"

    def test_language_hint_must_end_line(self):
        # text right after the fence on the same line is code, not a hint
        assert AIResponseParser.parse("```x = 1```").code == "x = 1"

    def test_crlf_line_endings(self):
        response = AIResponseParser.parse("Here:\r\n```html\r\n<div></div>\r\n```\r\n")
        assert response.code == "<div></div>"

    def test_unclosed_fence_is_ignored(self):
        assert AIResponseParser.parse("```html\n<div>").code is None


class TestFailure:
    def test_default_message(self):
        response = AIResponseParser.failure()

        assert not response.ok
        assert response.error == "Failed to generate content"
        assert response.code is None

    def test_custom_message(self):
        assert AIResponseParser.failure("quota exceeded").error == "quota exceeded"
