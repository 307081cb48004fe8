# Language configuration module (Pygments-backed parser collaborator)

import logging
from typing import Iterator, Optional

from pygments.lexers import get_lexer_by_name, get_lexer_for_filename, guess_lexer
from pygments.token import (
    Comment,
    Error,
    Generic,
    Keyword,
    Name,
    Number,
    Operator,
    Punctuation,
    String,
    Token,
)
from pygments.util import ClassNotFound

from .events import HighlightEnd, HighlightEvent, HighlightStart, Source
from .exceptions import HighlighterInitError

logger = logging.getLogger(__name__)

# Pygments token type -> highlight scope. Lookups walk up the token hierarchy,
# so only the most specific types that differ from their parent are listed.
TOKEN_SCOPES = {
    Keyword: "keyword",
    Keyword.Constant: "constant.builtin",
    Keyword.Declaration: "keyword.function",
    Keyword.Namespace: "keyword.import",
    Keyword.Pseudo: "keyword.directive",
    Keyword.Reserved: "keyword",
    Keyword.Type: "type.builtin",
    Name: "variable",
    Name.Attribute: "property",
    Name.Builtin: "function.builtin",
    Name.Builtin.Pseudo: "variable.builtin",
    Name.Class: "type",
    Name.Constant: "constant",
    Name.Decorator: "attribute",
    Name.Entity: "character.special",
    Name.Exception: "type",
    Name.Function: "function",
    Name.Function.Magic: "function.builtin",
    Name.Label: "label",
    Name.Namespace: "module",
    Name.Other: "variable",
    Name.Property: "property",
    Name.Tag: "tag",
    Name.Variable: "variable",
    Name.Variable.Class: "variable.member",
    Name.Variable.Global: "variable",
    Name.Variable.Instance: "variable.member",
    Name.Variable.Magic: "variable.builtin",
    String: "string",
    String.Affix: "string.special",
    String.Char: "character",
    String.Delimiter: "punctuation.delimiter",
    String.Doc: "string.documentation",
    String.Escape: "string.escape",
    String.Interpol: "punctuation.special",
    String.Other: "string.special",
    String.Regex: "string.regexp",
    String.Symbol: "string.special.symbol",
    Number: "number",
    Number.Float: "number.float",
    Comment: "comment",
    Comment.Hashbang: "keyword.directive",
    Comment.Preproc: "keyword.directive",
    Comment.PreprocFile: "string.special.path",
    Comment.Special: "comment.documentation",
    Operator: "operator",
    Operator.Word: "keyword.operator",
    Punctuation: "punctuation.delimiter",
    Generic.Deleted: "diff.minus",
    Generic.Emph: "markup.italic",
    Generic.Error: "error",
    Generic.Heading: "markup.heading.1",
    Generic.Inserted: "diff.plus",
    Generic.Prompt: "punctuation.special",
    Generic.Strong: "markup.strong",
    Generic.Subheading: "markup.heading.2",
    Generic.Traceback: "error",
    Error: "error",
}


def scope_for_token(token_type) -> Optional[str]:
    """Map a Pygments token type to a highlight scope, or None for plain text."""
    while token_type is not Token:
        scope = TOKEN_SCOPES.get(token_type)
        if scope is not None:
            return scope
        token_type = token_type.parent
    return None


# Options that keep the lexer from rewriting the source (needed for lossless output)
LEXER_OPTIONS = {"stripnl": False, "stripall": False, "ensurenl": False, "tabsize": 0}


class Language:
    """
    Language configuration handed to the highlighter.

    Args:
        id_name: Identifier used in CSS classes and specialized scopes (e.g. "rust")
        lexer_name: Pygments lexer alias, None for plain text
    """

    def __init__(self, id_name: str, lexer_name: Optional[str] = None):
        self.id_name = id_name
        self.lexer_name = lexer_name

    def __repr__(self):
        return f"Language({self.id_name!r})"

    def __eq__(self, other):
        if not isinstance(other, Language):
            return NotImplemented
        return self.id_name == other.id_name and self.lexer_name == other.lexer_name

    def __hash__(self):
        return hash((self.id_name, self.lexer_name))

    @classmethod
    def from_name(cls, name: str) -> "Language":
        """
        Look up a language by Pygments alias.

        Raises:
            HighlighterInitError: no lexer is registered under that name
        """
        if name.lower() in ("plaintext", "text", "txt"):
            return PLAINTEXT
        try:
            lexer = get_lexer_by_name(name.lower())
        except ClassNotFound as exc:
            raise HighlighterInitError(name, str(exc)) from exc
        return cls._from_lexer(lexer)

    @classmethod
    def _from_lexer(cls, lexer) -> "Language":
        alias = lexer.aliases[0] if lexer.aliases else lexer.name.lower()
        if alias == "text":
            return PLAINTEXT
        return cls(alias, alias)

    @classmethod
    def guess(cls, lang_or_file: Optional[str], source: str = "") -> "Language":
        """
        Detect a language from a name, a file name, or the source itself.

        Never fails: anything unrecognized is treated as plain text.

        Args:
            lang_or_file: Language alias ("rust"), file name ("main.rs") or None
            source: Source text, used when the name is absent or a file name is ambiguous

        Returns:
            Language instance
        """
        if lang_or_file:
            try:
                return cls.from_name(lang_or_file)
            except HighlighterInitError:
                pass
            try:
                return cls._from_lexer(get_lexer_for_filename(lang_or_file, source))
            except ClassNotFound:
                logger.warning("Unknown language %r, highlighting as plain text", lang_or_file)
                return PLAINTEXT

        if source.strip():
            try:
                language = cls._from_lexer(guess_lexer(source))
                logger.debug("Guessed language %r from source", language.id_name)
                return language
            except ClassNotFound:
                pass
        return PLAINTEXT

    def lexer(self):
        if self.lexer_name is None:
            return None
        try:
            return get_lexer_by_name(self.lexer_name, **LEXER_OPTIONS)
        except ClassNotFound as exc:
            raise HighlighterInitError(self.id_name, str(exc)) from exc

    def highlight_events(self, source: str) -> Iterator[HighlightEvent]:
        """
        Produce the nested highlight event stream for a source text.

        The lexer is created eagerly, so an unusable language fails here with
        HighlighterInitError rather than on first iteration.
        """
        lexer = self.lexer()
        if lexer is None:
            return iter([Source(0, len(source))] if source else [])
        return self._lex(lexer, source)

    def _lex(self, lexer, source: str) -> Iterator[HighlightEvent]:
        cursor = 0
        length = len(source)

        for index, token_type, value in lexer.get_tokens_unprocessed(source):
            if not value or cursor >= length:
                continue
            # Text the lexer skipped over is emitted unstyled
            if index > cursor:
                yield Source(cursor, min(index, length))
                cursor = min(index, length)
            start = cursor
            end = min(max(index, cursor) + len(value), length)
            if end <= start:
                continue
            cursor = end

            scope = scope_for_token(token_type)
            if scope is None:
                yield Source(start, end)
            else:
                yield HighlightStart(scope, self.id_name)
                yield Source(start, end)
                yield HighlightEnd()

        if cursor < length:
            yield Source(cursor, length)


PLAINTEXT = Language("plaintext")
