"""RuleMatcher tests: name filters, type filters, and both together."""

from pubsub_notifier.domain.matcher import RuleMatcher
from pubsub_notifier.domain.notification import ActionType
from pubsub_notifier.domain.publication import Publication

from helpers import make_notification

matcher = RuleMatcher()


class TestMatchByName:
    def test_exact_name_matches(self):
        rule = Publication.publish("publish_post", "published")
        assert matcher.matches(rule, make_notification("publish_post", type="update"))

    def test_other_name_does_not_match(self):
        rule = Publication.publish("publish_post", "published")
        assert not matcher.matches(rule, make_notification("archive_post", type="update"))

    def test_name_rule_ignores_type_when_unset(self):
        rule = Publication.publish("create", "created")
        assert matcher.matches(rule, make_notification("create", type="create"))
        assert matcher.matches(rule, make_notification("create", type="action"))

    def test_type_narrows_shared_name(self):
        rule = Publication(action="touch", type=ActionType.update, topic="touched")
        assert matcher.matches(rule, make_notification("touch", type="update"))
        assert not matcher.matches(rule, make_notification("touch", type="action"))


class TestMatchByType:
    def test_type_rule_matches_any_name_of_that_type(self):
        rule = Publication.publish_all("update", "updated")
        assert matcher.matches(rule, make_notification("rename", type="update"))
        assert matcher.matches(rule, make_notification("archive", type="update"))

    def test_type_rule_rejects_other_types(self):
        rule = Publication.publish_all("update", "updated")
        assert not matcher.matches(rule, make_notification("create"))


class TestSelect:
    def test_name_and_type_rules_both_fire(self):
        by_name = Publication.publish("update", "by_name")
        by_type = Publication.publish_all("update", "by_type")
        other = Publication.publish("destroy", "gone")
        selected = matcher.select([by_name, other, by_type], make_notification("update"))
        assert selected == [by_name, by_type]

    def test_no_rules(self):
        assert matcher.select([], make_notification()) == []
