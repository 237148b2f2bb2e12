"""
Pagewright Generator — Target Registry and Totality Tests

Every node kind (and every palette preset) must export on every target
without raising, and the same tree must always give the same text.
"""

import pytest

from pagewright.codegen import GeneratedSource, GenerateOptions, UnknownTarget, available_targets, generate, get_target
from pagewright.kernel.factory import PRESETS, create_node
from pagewright.kernel.ids import sequential_ids
from pagewright.kernel.tree import insert
from pagewright.kernel.types import NODE_KINDS, Library, initial_canvas

TARGETS = ["react", "flutter"]


def single_node_page(kind, library=Library.RADIX):
    node = create_node(kind, "root", library, id_factory=sequential_ids(kind))
    return insert(initial_canvas(), "root", node)


def full_palette_page():
    ids = sequential_ids("p")
    tree = initial_canvas()
    for library in Library:
        for kind in sorted(NODE_KINDS | PRESETS):
            tree = insert(tree, "root", create_node(kind, "root", library, id_factory=ids))
    return tree


# ============================================================================
# Registry
# ============================================================================


class TestRegistry:
    def test_available_targets_sorted(self):
        assert [t.name for t in available_targets()] == ["flutter", "react"]

    @pytest.mark.parametrize(
        "name,expected",
        [("react", "react"), ("TSX", "react"), ("nextjs", "react"), (" dart ", "flutter"), ("mobile", "flutter")],
    )
    def test_aliases(self, name, expected):
        assert get_target(name).name == expected

    def test_unknown_target(self):
        with pytest.raises(UnknownTarget) as exc_info:
            generate("vue", initial_canvas())
        assert exc_info.value.name == "vue"
        assert "flutter, react" in str(exc_info.value)

    def test_describe(self):
        assert get_target("react").describe() == {
            "name": "react",
            "filename": "page.tsx",
            "aliases": ["web", "nextjs", "tsx"],
        }


# ============================================================================
# Totality
# ============================================================================


class TestTotality:
    @pytest.mark.parametrize("target", TARGETS)
    @pytest.mark.parametrize("kind", sorted(NODE_KINDS | PRESETS))
    @pytest.mark.parametrize("library", list(Library))
    def test_every_kind_exports(self, target, kind, library):
        result = generate(target, single_node_page(kind, library))
        assert result.source
        assert "Unsupported component" not in result.source

    @pytest.mark.parametrize("target", TARGETS)
    def test_full_palette_exports(self, target):
        result = generate(target, full_palette_page())
        assert result.source.count("Unsupported component") == 0


# ============================================================================
# Determinism and purity
# ============================================================================


class TestDeterminism:
    @pytest.mark.parametrize("target", TARGETS)
    def test_same_tree_same_output(self, target):
        tree = full_palette_page()
        assert generate(target, tree) == generate(target, tree)

    @pytest.mark.parametrize("target", TARGETS)
    def test_tree_is_not_mutated(self, target):
        tree = full_palette_page()
        snapshot = tree.to_dict()
        generate(target, tree)
        assert tree.to_dict() == snapshot


# ============================================================================
# Options and result
# ============================================================================


class TestOptions:
    def test_defaults(self):
        options = GenerateOptions()
        assert (options.component_name, options.widget_name, options.app_title) == ("Page", "MyPage", "Generated App")

    @pytest.mark.parametrize("name", ["page", "My Page", "1Page", "", "Page\n"])
    def test_rejects_bad_identifiers(self, name):
        with pytest.raises(ValueError):
            GenerateOptions(component_name=name)

    def test_result_shape(self):
        result = generate("web", initial_canvas())
        assert isinstance(result, GeneratedSource)
        assert result.to_dict() == {"target": "react", "filename": "page.tsx", "source": result.source}
