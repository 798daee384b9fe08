from script.fetch_wordlist import extract_words


def test_extract_words_from_plain_text():
    body = "crane\nslate\nCRANE\ntoolong\nab\nplant\n"
    assert extract_words(body) == ["CRANE", "SLATE", "PLANT"]


def test_extract_words_from_html():
    body = (
        "<html><body><h1>Words</h1><ul>"
        "<li>Crane</li><li>brick</li><li>x1234</li><li>Words</li>"
        "</ul><script>var a = 1;</script></body></html>"
    )
    words = extract_words(body, "text/html; charset=utf-8")
    assert words[:2] == ["WORDS", "CRANE"]
    assert "BRICK" in words
