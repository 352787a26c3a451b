"""Pygments lexer for the Groovy shell language."""

import re

from pygments.lexer import RegexLexer, include, words
from pygments.token import Comment, Error, Keyword, Name, Number, Operator, Punctuation, String, Whitespace


class GroovyShellLexer(RegexLexer):
    """Lexer used both for completion tokenizing and REPL highlighting.

    Unterminated quotes are deliberately left unmatched so that Pygments
    emits an ``Error`` token at the opening quote.
    """

    name = "Groovy Shell"
    aliases = ["groovysh"]
    filenames = ["*.groovy"]

    flags = re.MULTILINE | re.DOTALL

    DECLARATION_KEYWORDS = ("import", "class", "interface", "enum", "package")
    TYPE_KEYWORDS = (
        "def",
        "void",
        "boolean",
        "byte",
        "char",
        "short",
        "int",
        "float",
        "long",
        "double",
    )
    CONSTANT_KEYWORDS = ("true", "false", "null")
    RESERVED_KEYWORDS = (
        "abstract",
        "as",
        "assert",
        "break",
        "case",
        "catch",
        "continue",
        "default",
        "do",
        "else",
        "extends",
        "final",
        "finally",
        "for",
        "if",
        "implements",
        "in",
        "instanceof",
        "new",
        "private",
        "protected",
        "public",
        "return",
        "static",
        "super",
        "switch",
        "synchronized",
        "this",
        "throw",
        "throws",
        "transient",
        "try",
        "volatile",
        "while",
    )

    tokens = {
        "root": [
            (r"\n", Whitespace),
            (r"[^\S\n]+", Whitespace),
            (r"//[^\n]*", Comment.Single),
            (r"/\*.*?\*/", Comment.Multiline),
            # comment still open at the end of the buffer
            (r"/\*(?:(?!\*/).)*\Z", Error),
            (r'""".*?"""', String.Double),
            (r"'''.*?'''", String.Single),
            (r'"(?:\\.|[^"\\\n])*"', String.Double),
            (r"'(?:\\.|[^'\\\n])*'", String.Single),
            # interpolated string that is still open at the cursor
            (r'"(?=(?:\\.|\$(?!\{)|[^"\\\n$])*\$\{)', String.Interpol, "gstring"),
            (words(DECLARATION_KEYWORDS, suffix=r"\b"), Keyword.Declaration),
            (words(TYPE_KEYWORDS, suffix=r"\b"), Keyword.Type),
            (words(CONSTANT_KEYWORDS, suffix=r"\b"), Keyword.Constant),
            (words(RESERVED_KEYWORDS, suffix=r"\b"), Keyword),
            (r"[A-Za-z_$][\w$]*", Name),
            (r"[0-9]+\.[0-9]+(?:[eE][+-]?[0-9]+)?[fdgFDG]?", Number.Float),
            (r"0[xX][0-9a-fA-F]+[lL]?", Number.Hex),
            (r"[0-9]+[lLgGiI]?", Number.Integer),
            (r"\.", Punctuation),
            (r"[~^*!%&\[\](){}<>|+=:;,/?@-]", Operator),
        ],
        "gstring": [
            (r'"', String.Interpol, "#pop"),
            (r"\$\{", String.Interpol, "interpolation"),
            (r'(?:\\.|[^"\\\n$])+', String.Double),
            (r"\$", String.Double),
        ],
        "interpolation": [
            (r"\}", String.Interpol, "#pop"),
            include("root"),
        ],
    }
