"""TopicRenderer tests: joining, prefixing, dedup and the literal fast path."""

from pubsub_notifier.domain.publication import Publication
from pubsub_notifier.domain.renderer import TopicRenderer
from pubsub_notifier.domain.resolver import OMIT
from pubsub_notifier.domain.template import SKIP, TENANT, field_ref

from helpers import make_notification

renderer = TopicRenderer()


class TestRender:
    def test_joins_with_colon_and_prefix(self):
        assert renderer.render([("foo", 50)], "post") == ["post:foo:50"]

    def test_empty_prefix_adds_no_delimiter(self):
        assert renderer.render([("foo", 50)], "") == ["foo:50"]
        assert renderer.render([("foo", 50)], None) == ["foo:50"]

    def test_omit_markers_dropped(self):
        assert renderer.render([("a", OMIT, "b"), ("a", OMIT)]) == ["a:b", "a"]

    def test_duplicates_removed(self):
        assert renderer.render([("a", 1), ("a", "1"), ("b",)]) == ["a:1", "b"]


class TestTopicsFor:
    def test_literal_fast_path(self):
        publication = Publication.publish_all("create", "created")
        assert publication.is_literal
        assert renderer.topics_for(publication, make_notification()) == ["created"]

    def test_literal_fast_path_ignores_data(self):
        publication = Publication.publish_all("update", "updated")
        n = make_notification("update", data={"id": 1}, previous_data={"id": 2})
        assert renderer.topics_for(publication, n) == ["updated"]

    def test_alternatives_rendering_equal_are_deduplicated(self):
        publication = Publication.publish_all("create", [[field_ref("a"), field_ref("b")]])
        n = make_notification(data={"a": "same", "b": "same"})
        assert renderer.topics_for(publication, n) == ["same"]

    def test_tenant_and_skip_scenario(self):
        publication = Publication.publish_all(
            "update", [[field_ref("team_id"), TENANT], "updated", [field_ref("id"), SKIP]]
        )
        n = make_notification("update", data={"team_id": 1, "id": 50}, tenant="org_1")
        assert set(renderer.topics_for(publication, n)) == {
            "1:updated:50",
            "1:updated",
            "org_1:updated:50",
            "org_1:updated",
        }

    def test_idempotent(self):
        publication = Publication.publish("update", ["bar", field_ref("name")])
        n = make_notification("update", data={"name": "B"}, previous_data={"name": "A"})
        assert renderer.topics_for(publication, n) == renderer.topics_for(publication, n)

    def test_int_to_float_update_renders_both(self):
        publication = Publication.publish("update", [field_ref("x")])
        n = make_notification("update", data={"x": 1.0}, previous_data={"x": 1})
        assert renderer.topics_for(publication, n) == ["1", "1.0"]
