"""TemplateExpander tests: combinations, pruning, alternatives."""

import pytest

from pubsub_notifier.domain.expander import TemplateExpander
from pubsub_notifier.domain.resolver import OMIT
from pubsub_notifier.domain.template import SKIP, TENANT, Alternatives, field_ref, parse_template
from pubsub_notifier.errors import TemplateError

from helpers import make_notification

expander = TemplateExpander()


def _expand(raw_template, notification):
    return expander.expand(parse_template(raw_template), notification)


class TestBasics:
    def test_empty_template_yields_one_empty_sequence(self):
        assert expander.expand([], make_notification()) == [()]

    def test_literal_only_yields_one_sequence(self):
        assert _expand(["a", "b"], make_notification()) == [("a", "b")]

    def test_field_value_substituted(self):
        n = make_notification("destroy", data={"id": 50})
        assert _expand(["foo", field_ref("id")], n) == [("foo", 50)]


class TestUpdateCombinations:
    def test_changed_field_yields_two_branches_before_first(self):
        n = make_notification("update", data={"name": "B"}, previous_data={"name": "A"})
        assert _expand(["bar", field_ref("name")], n) == [("bar", "A"), ("bar", "B")]

    def test_unchanged_field_yields_one_branch(self):
        n = make_notification("update", data={"name": "A"}, previous_data={"name": "A"})
        assert _expand(["bar", field_ref("name")], n) == [("bar", "A")]

    def test_every_combination_of_two_changed_fields(self):
        n = make_notification(
            "update",
            data={"a": 2, "b": "y"},
            previous_data={"a": 1, "b": "x"},
        )
        assert _expand([field_ref("a"), field_ref("b")], n) == [
            (1, "x"),
            (1, "y"),
            (2, "x"),
            (2, "y"),
        ]


class TestPruning:
    def test_missing_field_prunes_whole_template(self):
        assert _expand(["foo", field_ref("id")], make_notification(data={})) == []

    def test_missing_tenant_prunes_only_its_branch(self):
        n = make_notification(data={"team_id": 1})
        sequences = _expand([[field_ref("team_id"), TENANT], "updated"], n)
        assert sequences == [(1, "updated")]

    def test_skip_keeps_branch_with_omit(self):
        n = make_notification(data={})
        assert _expand(["updated", SKIP], n) == [("updated", OMIT)]

    def test_skip_differs_from_pruned_branch(self):
        n = make_notification(data={})
        with_skip = _expand(["updated", [field_ref("id"), SKIP]], n)
        without_skip = _expand(["updated", [field_ref("id")]], n)
        assert with_skip == [("updated", OMIT)]
        assert without_skip == []


class TestAlternatives:
    def test_k_alternatives_yield_k_sequences(self):
        n = make_notification(data={})
        assert len(_expand([["a", "b", "c"], "x"], n)) == 3

    def test_nested_alternatives(self):
        n = make_notification(data={"id": 7})
        sequences = _expand([["a", ["b", field_ref("id")]]], n)
        assert sequences == [("a",), ("b",), (7,)]

    def test_tenant_and_skip_combinations(self):
        n = make_notification(
            "update",
            data={"team_id": 1, "id": 50},
            tenant="org_1",
        )
        sequences = _expand([[field_ref("team_id"), TENANT], "updated", [field_ref("id"), SKIP]], n)
        assert sequences == [
            (1, "updated", 50),
            (1, "updated", OMIT),
            ("org_1", "updated", 50),
            ("org_1", "updated", OMIT),
        ]

    def test_alternatives_node_accepts_raw_options(self):
        node = Alternatives(options=["a", {"field": "id"}])
        n = make_notification(data={"id": 3})
        assert expander.expand([node], n) == [("a",), (3,)]


class TestMalformed:
    def test_unknown_node_fails_fast(self):
        with pytest.raises(TemplateError):
            expander.expand(["not-a-node"], make_notification())

    def test_deterministic(self):
        n = make_notification("update", data={"a": 2}, previous_data={"a": 1}, tenant="t")
        template = parse_template([[field_ref("a"), TENANT], "x"])
        assert expander.expand(template, n) == expander.expand(template, n)
