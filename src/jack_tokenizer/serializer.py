"""
Token Report Serializer
=======================

Renders a token sequence in the XML-like report format:

    <tokens>
    <keyword> class </keyword>
    <identifier> Main </identifier>
    <symbol> { </symbol>
    <symbol> &lt; </symbol>
    <stringConstant> hi </stringConstant>
    <integerConstant> 7 </integerConstant>
    </tokens>

Only symbol payloads are escaped. Escaping is a rendering step: the
tokens themselves always keep their raw characters.
"""

from typing import Iterable

from jack_tokenizer.tokens import Token, TokenKind

TOKENS_TAG = "tokens"

SYMBOL_ENTITIES: dict[str, str] = {
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "&": "&amp;",
}


def escape_symbol(char: str) -> str:
    """Return the report form of a symbol character."""
    return SYMBOL_ENTITIES.get(char, char)


def render_token(token: Token) -> str:
    """Render one token as '<tag> value </tag>'."""
    tag = token.kind.tag
    if token.kind is TokenKind.SYMBOL:
        text = escape_symbol(token.value)
    else:
        text = token.text
    return f"<{tag}> {text} </{tag}>"


def render(tokens: Iterable[Token]) -> str:
    """
    Render a token sequence as a complete report.

    Args:
        tokens: Any finite sequence of tokens

    Returns:
        The report text, one line per token, ending with a newline
    """
    lines = [f"<{TOKENS_TAG}>"]
    lines.extend(render_token(token) for token in tokens)
    lines.append(f"</{TOKENS_TAG}>")
    return "\n".join(lines) + "\n"
