# topmark:header:start
#
#   project      : Chalkup
#   file         : test_renderer_properties.py
#   file_relpath : tests/rendering/test_renderer_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the markup renderer.

Properties:
1) text without a begin token is returned unchanged;
2) text whose last token is unterminated is returned unchanged;
3) well-formed tokens are replaced while the surrounding text is kept;
4) a named style renders exactly like its codes written inline.
"""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st

from chalkup.rendering.renderer import MarkupRenderer
from tests.strategies_chalkup import (
    s_code_list,
    s_plain_text,
    s_style_name,
    s_token_text,
)

RENDERER = MarkupRenderer.from_formats(["ansi"])


@given(text=s_plain_text())
def test_identity_without_begin_token(text: str) -> None:
    """render(x) == x when x contains no begin token."""
    assert RENDERER.render(text) == text


@given(prefix=s_plain_text(), codes=s_code_list(), inner=s_token_text())
def test_identity_when_token_is_unterminated(prefix: str, codes: list[str], inner: str) -> None:
    """A begin token with no end token after it leaves the input untouched."""
    text = f"{prefix}@|{','.join(codes)} {inner}"
    assert RENDERER.render(text) == text


@settings(max_examples=50)
@given(
    before=s_plain_text(),
    after=s_plain_text(),
    codes=s_code_list(),
    inner=s_token_text(),
)
def test_token_replacement_keeps_surroundings(
    before: str,
    after: str,
    codes: list[str],
    inner: str,
) -> None:
    """Only the token is rewritten; text around it is copied verbatim."""
    code_list = ",".join(codes)
    rendered_token = RENDERER.render(f"@|{code_list} {inner}|@")
    assert RENDERER.render(f"{before}@|{code_list} {inner}|@{after}") == (
        before + rendered_token + after
    )


@settings(max_examples=50)
@given(name=s_style_name(), codes=s_code_list(), inner=s_token_text())
def test_named_style_equivalent_to_inline_codes(name: str, codes: list[str], inner: str) -> None:
    """Style=a,b renders exactly as a,b."""
    code_list = ",".join(codes)
    renderer = MarkupRenderer.from_formats(["ansi", f"{name}={code_list}"])
    assert renderer.render(f"@|{name} {inner}|@") == renderer.render(f"@|{code_list} {inner}|@")


@given(texts=st.lists(s_token_text(), min_size=1, max_size=5))
def test_stripped_output_is_concatenated_text(texts: list[str]) -> None:
    """With color disabled, the output is the plain inner text."""
    renderer = MarkupRenderer(enable_color=False)
    markup = "".join(f"@|bold {t}|@" for t in texts)
    assert renderer.render(markup) == "".join(texts)
