"""Tests for token classification of Swift source."""

from pygments.lexers import TextLexer
from pygments.token import Comment, Keyword, Name, String, Text

from sortlint.source.syntax import SyntaxKind, SyntaxMap, SyntaxToken, classify_token


class TestClassifyToken:
    def test_token_families(self):
        """Test mapping of pygments token families onto syntax kinds."""
        assert classify_token(Comment.Single) is SyntaxKind.COMMENT
        assert classify_token(Comment.Multiline) is SyntaxKind.COMMENT
        assert classify_token(String.Double) is SyntaxKind.STRING
        assert classify_token(Keyword.Declaration) is SyntaxKind.KEYWORD
        assert classify_token(Name.Namespace) is SyntaxKind.IDENTIFIER
        assert classify_token(Text) is SyntaxKind.OTHER


class TestSyntaxMap:
    def test_line_comment_detected(self):
        """Test that an import inside a line comment overlaps a comment token."""
        text = "// import Foo\nimport Bar"
        syntax_map = SyntaxMap.from_text(text)

        assert syntax_map.overlaps(3, 13, [SyntaxKind.COMMENT])
        assert not syntax_map.overlaps(14, 24, [SyntaxKind.COMMENT, SyntaxKind.STRING])

    def test_block_comment_detected(self):
        """Test that block comments are classified as comments."""
        text = "/* import Foo */\nimport Bar"
        syntax_map = SyntaxMap.from_text(text)

        start = text.index("import Foo")
        assert syntax_map.overlaps(start, start + 10, [SyntaxKind.COMMENT])

    def test_string_literal_detected(self):
        """Test that string literal contents are classified as strings."""
        text = 'let s = "import Foo"\nimport Bar'
        syntax_map = SyntaxMap.from_text(text)

        start = text.index("import Foo")
        assert syntax_map.overlaps(start, start + 10, [SyntaxKind.STRING])
        bar = text.index("import Bar")
        assert not syntax_map.overlaps(bar, bar + 10, [SyntaxKind.STRING])

    def test_offsets_survive_leading_newlines(self):
        """Test that leading and trailing newlines do not shift token offsets."""
        text = "\n\n// note\n"
        syntax_map = SyntaxMap.from_text(text)

        comment_tokens = [t for t in syntax_map.tokens if t.kind is SyntaxKind.COMMENT]
        assert comment_tokens
        assert comment_tokens[0].offset == 2

    def test_whitespace_not_recorded(self):
        """Test that whitespace-only tokens are dropped."""
        syntax_map = SyntaxMap.from_text("import Foo\n   \nimport Bar")
        assert all(token.length > 0 for token in syntax_map.tokens)
        assert syntax_map.tokens_in(10, 15) == []

    def test_custom_lexer(self):
        """Test building a map with another pygments lexer."""
        syntax_map = SyntaxMap.from_text("import Foo", lexer=TextLexer())
        assert syntax_map.kinds_in(0, 10) == [SyntaxKind.OTHER]

    def test_empty_map_excludes_nothing(self):
        """Test that an empty map never reports overlaps."""
        syntax_map = SyntaxMap.empty()
        assert syntax_map.tokens == []
        assert not syntax_map.overlaps(0, 100, list(SyntaxKind))

    def test_tokens_in_includes_token_started_before_range(self):
        """Test that a token starting before the range still counts."""
        syntax_map = SyntaxMap([
            SyntaxToken(0, 10, SyntaxKind.COMMENT),
            SyntaxToken(11, 3, SyntaxKind.IDENTIFIER),
        ])
        assert syntax_map.kinds_in(5, 6) == [SyntaxKind.COMMENT]
        assert syntax_map.kinds_in(5, 12) == [SyntaxKind.COMMENT, SyntaxKind.IDENTIFIER]
        assert syntax_map.kinds_in(10, 11) == []
