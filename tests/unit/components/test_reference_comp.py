"""
Unit tests for nozombie.components.usage.reference_comp module.
"""

import pytest

from nozombie.components.usage.reference_comp import is_imported, reference_pattern


class TestIsImported:
    """Tests for is_imported function."""

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "content",
        [
            "import Foo from './Foo';",
            "import Foo, { useFoo } from './Foo';",
            "import { Foo } from './components';",
            "import { Bar as Foo } from './Bar';",
            "import type { Foo } from './types';",
            "export { Foo } from './Foo';",
            "export { default as Foo } from './Foo';",
            "const Foo = require('./Foo');",
            "const { Foo, Bar } = require('./components');",
            "return <Foo />;",
            "return <Foo.Item key={1} />;",
            "<Foo>\n  child\n</Foo>",
        ],
    )
    def test_detects_reference(self, content: str) -> None:
        assert is_imported("Foo", content) is True

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "content",
        [
            "",
            "export default function Foo() { return <div />; }",
            "function Foo() {}\nexport { Foo };",
            "import FooBar from './FooBar';",
            "import { FooBar } from './FooBar';",
            "return <FooBar />;",
            "const label = 'Foo';",
        ],
    )
    def test_ignores_non_references(self, content: str) -> None:
        assert is_imported("Foo", content) is False

    @pytest.mark.unit
    def test_empty_name_never_matches(self) -> None:
        assert is_imported("", "import X from 'x';") is False

    @pytest.mark.unit
    def test_names_with_dollar_are_escaped(self) -> None:
        assert is_imported("$Modal", "import $Modal from './modal';") is True
        assert is_imported("$Modal", "import $ModalX from './modal';") is False


class TestReferencePattern:
    """Tests for reference_pattern caching."""

    @pytest.mark.unit
    def test_pattern_is_cached_per_name(self) -> None:
        assert reference_pattern("Foo") is reference_pattern("Foo")
        assert reference_pattern("Foo") is not reference_pattern("Bar")
