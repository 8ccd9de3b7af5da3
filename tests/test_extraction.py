"""Tests for import declaration extraction."""

import pytest

from sortlint.imports.extraction import Declaration, extract_declarations
from sortlint.source.syntax import SyntaxMap
from sortlint.text.spans import Span


class TestExtractDeclarations:
    def test_no_imports(self):
        """Test that text without imports yields an empty list."""
        assert extract_declarations("let x = 1\n") == []
        assert extract_declarations("") == []

    def test_document_order_and_spans(self):
        """Test module names and spans of simple imports."""
        text = "import AAA\nimport ZZZ\nimport BBB"
        declarations = extract_declarations(text)

        assert [d.module for d in declarations] == ["AAA", "ZZZ", "BBB"]
        assert [d.span for d in declarations] == [Span(7, 3), Span(18, 3), Span(29, 3)]
        for declaration in declarations:
            assert declaration.span.text_in(text) == declaration.module

    def test_declaration_immutable(self):
        """Test that Declaration is immutable."""
        declaration = Declaration(module="Foo", span=Span(7, 3))
        with pytest.raises(AttributeError):
            declaration.module = "Bar"  # type: ignore

    def test_extra_whitespace_stays_in_span(self):
        """Test that the span keeps a fixed prefix while the module is stripped."""
        text = "import   Foundation"
        declarations = extract_declarations(text)

        assert len(declarations) == 1
        declaration = declarations[0]
        assert declaration.module == "Foundation"
        assert declaration.span == Span(7, 12)
        assert declaration.span.text_in(text) == "  Foundation"

    def test_tab_separator(self):
        """Test that any whitespace character may follow the keyword."""
        declarations = extract_declarations("import\tUIKit")
        assert declarations == [Declaration(module="UIKit", span=Span(7, 5))]

    def test_dotted_paths_ignored(self):
        """Test that dotted module paths do not match at all."""
        text = "import Foo.Bar\nimport Baz"
        assert [d.module for d in extract_declarations(text)] == ["Baz"]

    def test_keyword_must_stand_alone(self):
        """Test that identifiers ending in 'import' are not imports."""
        text = "reimport Foo\n_import Bar\nimport Baz"
        assert [d.module for d in extract_declarations(text)] == ["Baz"]

    @pytest.mark.parametrize("kind", ["typealias", "struct", "class", "enum", "protocol", "let", "var", "func"])
    def test_kind_qualified_imports_ignored(self, kind):
        """Test that an import kind is never taken for a module name."""
        text = f"import {kind} Foundation.Date\nimport Alamofire\n"
        offset = len(f"import {kind} Foundation.Date\nimport ")
        assert extract_declarations(text) == [Declaration(module="Alamofire", span=Span(offset, 9))]

    def test_attributed_import_still_matches(self):
        """Test that an attribute before the keyword does not hide the import."""
        text = "@testable import MyApp\nimport XCTest"
        assert [d.module for d in extract_declarations(text)] == ["MyApp", "XCTest"]

    def test_imports_in_comments_ignored(self):
        """Test that commented-out imports are skipped."""
        text = "import AAA\n// import ZZZ\n/* import YYY */\nimport BBB"
        assert [d.module for d in extract_declarations(text)] == ["AAA", "BBB"]

    def test_imports_in_strings_ignored(self):
        """Test that imports inside string literals are skipped."""
        text = 'import AAA\nlet code = "import ZZZ"\nimport BBB'
        assert [d.module for d in extract_declarations(text)] == ["AAA", "BBB"]

    def test_empty_syntax_map_matches_raw_text(self):
        """Test that without classification every textual match counts."""
        text = "import AAA\n// import ZZZ"
        declarations = extract_declarations(text, SyntaxMap.empty())
        assert [d.module for d in declarations] == ["AAA", "ZZZ"]

    def test_unicode_identifiers(self):
        """Test that non-ASCII identifiers are extracted."""
        text = "import Ñandú\nimport Éclair"
        assert [d.module for d in extract_declarations(text)] == ["Ñandú", "Éclair"]
