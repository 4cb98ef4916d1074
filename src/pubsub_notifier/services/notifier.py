"""PubSubNotifier: broadcasts a notification on every topic its rules yield."""

from __future__ import annotations

from typing import Any, Callable

from ..domain.matcher import RuleMatcher
from ..domain.notification import Notification
from ..domain.publication import NotifierConfig, Publication, PubSubConfig
from ..domain.renderer import TopicRenderer
from ..models.broadcast import BroadcastEnvelope, Dispatch, plain_envelope
from ..observability import record_broadcast
from ..ports.broadcaster import Broadcaster


class PubSubNotifier:
    """Orchestrates matching, topic expansion and the broadcast calls.

    ``typed_envelope`` picks the payload shape for named transports once,
    at construction: a ``BroadcastEnvelope`` model or a plain dict.
    """

    def __init__(
        self,
        config: NotifierConfig,
        broadcaster: Broadcaster,
        matcher: RuleMatcher | None = None,
        renderer: TopicRenderer | None = None,
        typed_envelope: bool = True,
        logger: Any = None,
    ) -> None:
        self._config = config
        self._broadcaster = broadcaster
        self._matcher = matcher or RuleMatcher()
        self._renderer = renderer or TopicRenderer()
        self._envelope: Callable[[str, str, Notification], Any] = (
            self._typed_envelope if typed_envelope else plain_envelope
        )
        self._logger = logger

    @staticmethod
    def _typed_envelope(topic: str, event: str, notification: Notification) -> BroadcastEnvelope:
        return BroadcastEnvelope(topic=topic, event=event, payload=notification)

    def notify(self, notification: Notification) -> list[Dispatch]:
        """Broadcast ``notification`` on every matching topic.

        Sink errors propagate unchanged; topics after the failing one are
        not attempted.
        """
        resource = self._config.for_resource(notification.resource_type)
        if resource is None:
            if self._logger:
                self._logger.debug(
                    "notify_skipped",
                    extra={"resource_type": notification.resource_type},
                )
            return []

        publications = self._matcher.select(resource.publications, notification)
        if self._logger:
            self._logger.info(
                "notify_start",
                extra={
                    "resource_type": notification.resource_type,
                    "action": notification.action.name,
                    "publications_count": len(publications),
                },
            )

        dispatched: list[Dispatch] = []
        for publication in publications:
            dispatched.extend(self._publish(resource, publication, notification))

        if self._logger:
            self._logger.info(
                "notify_done",
                extra={
                    "resource_type": notification.resource_type,
                    "action": notification.action.name,
                    "broadcasts_count": len(dispatched),
                },
            )
        return dispatched

    def topics(self, notification: Notification) -> list[str]:
        """Prefixed topics ``notify`` would broadcast on, without broadcasting."""
        resource = self._config.for_resource(notification.resource_type)
        if resource is None:
            return []
        topics: list[str] = []
        for publication in self._matcher.select(resource.publications, notification):
            for topic in self._renderer.topics_for(publication, notification):
                topics.append(self._renderer.apply_prefix(topic, resource.prefix))
        return topics

    def _publish(
        self,
        resource: PubSubConfig,
        publication: Publication,
        notification: Notification,
    ) -> list[Dispatch]:
        event = publication.event or str(notification.action.name)
        dispatched: list[Dispatch] = []
        for topic in self._renderer.topics_for(publication, notification):
            prefixed_topic = self._renderer.apply_prefix(topic, resource.prefix)
            args = self._broadcast_args(resource, topic, prefixed_topic, event, notification)
            args += publication.dispatcher_args
            try:
                self._broadcaster.broadcast(*args)
            except Exception as e:
                record_broadcast(
                    notification.resource_type,
                    prefixed_topic,
                    event,
                    error=str(e),
                    logger=self._logger,
                )
                raise
            record_broadcast(notification.resource_type, prefixed_topic, event, logger=self._logger)
            dispatched.append(Dispatch(topic=prefixed_topic, event=event, args=args))
        return dispatched

    def _broadcast_args(
        self,
        resource: PubSubConfig,
        topic: str,
        prefixed_topic: str,
        event: str,
        notification: Notification,
    ) -> tuple[Any, ...]:
        if resource.name is None:
            return (prefixed_topic, event, notification)
        return (resource.name, prefixed_topic, self._envelope(topic, event, notification))
