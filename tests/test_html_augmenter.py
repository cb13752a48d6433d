"""
Augmentation path: translated sibling after every block.
"""

import threading

from bs4 import BeautifulSoup

import engine.html_augmenter as html_augmenter
from engine.config import EngineConfig
from engine.errors import ParseFailure
from engine.html_augmenter import HtmlAugmenter
from tests.conftest import FakeTranslator

PLAIN = EngineConfig(target_language="fr", translation_style="")


def test_code_block_passes_through_without_translation(translator):
    html = "<pre>x=1</pre>"
    assert HtmlAugmenter(translator, PLAIN).translate_html(html) == html
    assert translator.calls == []


def test_translation_sibling_follows_original(translator):
    out = HtmlAugmenter(translator, PLAIN).translate_html("<p>hello</p>")
    assert out == '<p>hello</p><p class="translation">[fr] hello</p>'
    assert translator.calls == [("hello", "fr")]


def test_sibling_copies_attributes_and_appends_marker(translator):
    out = HtmlAugmenter(translator, EngineConfig()).translate_html(
        '<h2 id="intro" class="lead" style="color: red">Intro</h2>'
    )
    original, sibling = BeautifulSoup(out, "html.parser").find_all("h2")

    assert original.get("class") == ["lead"]
    assert sibling["id"] == "intro"
    assert sibling.get("class") == ["lead", "translation"]
    assert sibling["style"].startswith("color: red; color: #555;")
    assert sibling.get_text() == "[zh-CN] Intro"


def test_translated_text_is_escaped():
    class Echo:
        def translate(self, text, target_lang):
            return "a < b & c"

    out = HtmlAugmenter(Echo(), PLAIN).translate_html("<p>x</p>")
    assert out.endswith('<p class="translation">a &lt; b &amp; c</p>')


def test_failed_block_keeps_original_only():
    translator = FakeTranslator(fail_on={"bad"})
    augmenter = HtmlAugmenter(translator, PLAIN)

    out = augmenter.translate_html("<p>good</p><p>bad</p><p>fine</p>")

    assert out == (
        '<p>good</p><p class="translation">[fr] good</p>'
        "<p>bad</p>"
        '<p>fine</p><p class="translation">[fr] fine</p>'
    )
    assert augmenter.translated_blocks == 2
    assert augmenter.failed_blocks == 1


def test_empty_translation_is_skipped():
    class Blank:
        def translate(self, text, target_lang):
            return "   "

    assert HtmlAugmenter(Blank(), PLAIN).translate_html("<p>x</p>") == "<p>x</p>"


def test_div_is_translated_as_a_block(translator):
    out = HtmlAugmenter(translator, PLAIN).translate_html("<div>text <b>bold</b></div>")
    assert out == '<div>text <b>bold</b></div><div class="translation">[fr] text bold</div>'


def test_nested_blocks_translated_once_with_outer_block(translator):
    HtmlAugmenter(translator, PLAIN).translate_html("<blockquote><p>a</p><p>b</p></blockquote>")
    assert translator.calls == [("ab", "fr")]


def test_container_wrappers_are_not_reemitted(translator):
    out = HtmlAugmenter(translator, PLAIN).translate_html("<ul><li>a</li><li>b</li></ul>")
    assert out == (
        '<li>a</li><li class="translation">[fr] a</li>'
        '<li>b</li><li class="translation">[fr] b</li>'
    )


def test_text_outside_blocks_passes_through(translator):
    out = HtmlAugmenter(translator, PLAIN).translate_html("Hello <b>world</b> &amp; more")
    assert out == "Hello world &amp; more"
    assert translator.calls == []


def test_inline_code_not_sent_for_translation(translator):
    HtmlAugmenter(translator, PLAIN).translate_html("<p>Run <code>make</code> now</p>")
    assert translator.calls == [("Run  now", "fr")]


def test_block_with_only_code_is_not_translated(translator):
    out = HtmlAugmenter(translator, PLAIN).translate_html("<p><code>x = 1</code></p>")
    assert out == "<code>x = 1</code>"
    assert translator.calls == []


def test_cancel_stops_further_calls():
    cancel = threading.Event()
    translator = FakeTranslator(on_call=lambda text: cancel.set())
    augmenter = HtmlAugmenter(translator, PLAIN, cancel=cancel)

    out = augmenter.translate_html("<p>one</p><p>two</p><p>three</p>")

    assert len(translator.calls) == 1
    assert out == '<p>one</p><p class="translation">[fr] one</p><p>two</p>'


def test_parse_failure_falls_back_to_plain_text(monkeypatch, translator):
    def reject(html):
        raise ParseFailure("PARSE ERROR: rejected")

    monkeypatch.setattr(html_augmenter, "parse_fragment", reject)
    config = EngineConfig(target_language="fr", fallback_marker="[T] ")

    out = HtmlAugmenter(translator, config).translate_html("Some prose.\n\nx = 1\ny = 2")

    assert out == "Some prose.\n\n[T] [fr] Some prose.\n\nx = 1\ny = 2\n\n"
    assert translator.calls == [("Some prose.", "fr")]


def test_bytes_input_is_parsed_as_markup(translator):
    out = HtmlAugmenter(translator, PLAIN).translate_html(b"<p>hello</p>")
    assert out == '<p>hello</p><p class="translation">[fr] hello</p>'


def test_deeply_nested_markup(translator):
    depth = 1200
    html = "<span>" * depth + "<p>deep</p>" + "</span>" * depth

    out = HtmlAugmenter(translator, PLAIN).translate_html(html)

    assert out == '<p>deep</p><p class="translation">[fr] deep</p>'
    assert translator.calls == [("deep", "fr")]


def test_childless_ignored_elements_are_not_emitted(translator):
    # <img>, <br> and <hr> carry no text and are dropped, like wrapper tags
    out = HtmlAugmenter(translator, PLAIN).translate_html('<p>a</p><img src="x.png"><br><hr>')
    assert out == '<p>a</p><p class="translation">[fr] a</p>'
