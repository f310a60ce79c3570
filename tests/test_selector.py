"""Tests for selectors, specificity and rule groups."""

from render_engine.css.selector import RuleGroup, Selector, Specificity
from render_engine.css.values import StringValue


class TestSpecificity:
    def test_equality(self):
        assert Specificity(1, 1, 1) == Specificity(1, 1, 1)
        assert Specificity(1, 1, 1) != Specificity(2, 1, 1)

    def test_id_beats_everything_else(self):
        assert Specificity(1, 0, 0) > Specificity(0, 1000, 1000)

    def test_class_beats_tags(self):
        assert Specificity(0, 1, 0) > Specificity(0, 0, 1000)

    def test_tag_beats_nothing(self):
        assert Specificity(0, 0, 1) > Specificity(0, 0, 0)

    def test_total_order_matches_tuples(self):
        triples = [(0, 0, 0), (0, 0, 1), (0, 1, 0), (0, 2, 1), (1, 0, 0), (1, 0, 1), (1, 3, 0)]
        for a in triples:
            for b in triples:
                sa, sb = Specificity(*a), Specificity(*b)
                assert (sa < sb) == (a < b)
                assert (sa == sb) == (a == b)
                assert (sa > sb) == (a > b)

    def test_sorting(self):
        values = [Specificity(0, 1, 0), Specificity(1, 0, 0), Specificity(0, 0, 1)]
        assert sorted(values) == [Specificity(0, 0, 1), Specificity(0, 1, 0), Specificity(1, 0, 0)]


class TestSelectorBuilder:
    def test_chaining(self):
        selector = Selector().with_tag("p").with_id("intro").with_class("a").with_attr("lang", "en")
        assert selector.tag == "p"
        assert selector.id == "intro"
        assert selector.classes == {"a"}
        assert dict(selector.attrs) == {"lang": "en"}

    def test_builder_returns_new_selector(self):
        base = Selector().with_tag("p")
        extended = base.with_class("a")
        assert base.classes == frozenset()
        assert extended.classes == {"a"}

    def test_class_order_and_duplicates_irrelevant(self):
        one = Selector().with_class("a").with_class("b")
        two = Selector().with_class("b").with_class("a").with_class("b")
        assert one == two
        assert hash(one) == hash(two)

    def test_attr_overwrite(self):
        selector = Selector().with_attr("type", "text").with_attr("type", "button")
        assert dict(selector.attrs) == {"type": "button"}

    def test_is_empty(self):
        assert Selector().is_empty()
        assert not Selector().with_class("a").is_empty()

    def test_str(self):
        selector = Selector().with_tag("button").with_id("go").with_class("b").with_class("a").with_attr("x", "1")
        assert str(selector) == 'button#go.a.b[x="1"]'


class TestSelectorSpecificity:
    def test_tag_only(self):
        assert Selector().with_tag("p").specificity() == Specificity(0, 0, 1)

    def test_id(self):
        assert Selector().with_id("x").specificity() == Specificity(1, 0, 0)

    def test_classes_and_attrs_share_middle_term(self):
        selector = Selector().with_tag("a").with_class("x").with_class("y").with_attr("href", "/")
        assert selector.specificity() == Specificity(0, 3, 1)

    def test_duplicate_class_counts_once(self):
        assert Selector().with_class("x").with_class("x").specificity() == Specificity(0, 1, 0)


class TestRuleGroup:
    def test_equality(self):
        one = RuleGroup([Selector().with_tag("p")], {"color": StringValue("red")})
        two = RuleGroup([Selector().with_tag("p")], {"color": StringValue("red")})
        assert one == two

    def test_copies_declarations(self):
        declarations = {"color": StringValue("red")}
        group = RuleGroup([Selector().with_tag("p")], declarations)
        declarations["color"] = StringValue("blue")
        assert group.declarations["color"] == StringValue("red")
