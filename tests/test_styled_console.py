import pytest

from hashoff.color import Color
from hashoff.styled_console import DEFAULT_FONT_SIZE, Style, StyledConsole, TextStyle


def test_consecutive_writes_form_one_block():
    console = StyledConsole()
    console.write("hello ")
    console.write("world")
    assert console.blocks == ((Style(), "hello world"),)


def test_set_style_splits_blocks():
    console = StyledConsole()
    console.write("a")
    console.set_style(Color.RED, TextStyle.BOLD, 14)
    console.write("b")
    blocks = console.blocks
    assert [text for _, text in blocks] == ["a", "b"]
    assert blocks[1][0] == Style(Color.RED, TextStyle.BOLD, 14)


def test_empty_write_adds_no_block():
    console = StyledConsole()
    console.write("")
    console.set_style(Color.BLUE)
    assert console.blocks == ()


def test_render_contains_style_and_escaped_text():
    console = StyledConsole()
    console.set_style(Color.RED, TextStyle.BOLD_ITALIC, 12)
    console.write('<b> & "x"')
    document = console.render_html()
    assert "color:#ff0000;" in document
    assert "font-weight:bold;" in document
    assert "font-style:italic;" in document
    assert "font-size:12pt;" in document
    assert "&lt;b&gt; &amp; &quot;x&quot;" in document
    assert "<b>" not in document
    assert document.index("<pre>") < document.index("<span") < document.index("</pre>")


def test_normal_text_has_no_weight_or_italics():
    console = StyledConsole()
    console.write("plain")
    document = console.render_html()
    assert "font-weight" not in document
    assert "font-style" not in document
    assert f"font-size:{DEFAULT_FONT_SIZE}pt;" in document


def test_styled_restores_previous_style():
    console = StyledConsole()
    console.set_style(Color.BLUE, TextStyle.ITALIC, 20)
    before = console.style
    with console.styled(Color.GREEN):
        assert console.style == Style(Color.GREEN, TextStyle.ITALIC, 20)
        console.write("inner")
    console.write("outer")
    assert console.style == before
    assert console.blocks == ((Style(Color.GREEN, TextStyle.ITALIC, 20), "inner"), (before, "outer"))


def test_styled_restores_on_exception():
    console = StyledConsole()
    before = console.style
    with pytest.raises(RuntimeError):
        with console.styled(Color.RED, TextStyle.BOLD, 30):
            console.write("boom")
            raise RuntimeError("fail")
    assert console.style == before
    assert console.blocks[0] == (Style(Color.RED, TextStyle.BOLD, 30), "boom")


def test_clear_discards_everything():
    console = StyledConsole()
    console.write("one")
    console.set_style(Color.RED)
    console.write("two")
    console.clear()
    assert console.blocks == ()
    assert "<span" not in console.render_html()


def test_flush_calls_update_hook():
    seen = []
    console = StyledConsole()
    console.on_update = seen.append
    console.write("text")
    document = console.flush()
    assert seen == [document]
    assert ">text</span>" in document


def test_bold_or_italic_renders_both_effects():
    console = StyledConsole()
    console.set_style(Color.BLACK, TextStyle.BOLD | TextStyle.ITALIC, 11)
    console.write("both")
    assert console.style.font_style == TextStyle.BOLD_ITALIC
    document = console.render_html()
    assert "font-weight:bold;font-style:italic;" in document