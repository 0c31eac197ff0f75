"""Unit tests for the immediate Dispatcher, ListenerContainer and EventHandler."""

from __future__ import annotations

import dataclasses
from typing import Any
from unittest.mock import MagicMock

import pytest

from commitflow.application.events import (
    Dispatcher,
    EventHandler,
    ListenerContainer,
    ListenerTiming,
)
from commitflow.application.pipeline import Middleware, Next, PipeContainer
from commitflow.application.uow import DispatchAfterCommit, DispatchBeforeCommit
from commitflow.kernel.ddd import DomainEvent, OccursImmediately
from commitflow.kernel.errors import (
    ContractError,
    InvalidArgumentError,
    UnresolvedBindingError,
)


# ---------------------------------------------------------------------------
# Events and listeners used across tests
# ---------------------------------------------------------------------------


@dataclasses.dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    order_id: str = "o-1"


@dataclasses.dataclass(frozen=True)
class StockReserved(DomainEvent, OccursImmediately):
    sku: str = "sku-1"


class RecordingListener:
    def __init__(self, name: str, record: list[tuple[str, DomainEvent]]) -> None:
        self.name = name
        self.record = record

    def handle(self, event: DomainEvent) -> None:
        self.record.append((self.name, event))


class BeforeCommitListener(RecordingListener, DispatchBeforeCommit):
    pass


class AfterCommitListener(RecordingListener, DispatchAfterCommit):
    pass


class ConfusedListener(RecordingListener, DispatchBeforeCommit, DispatchAfterCommit):
    pass


class NotAListener:
    pass


def listener_mock(**kwargs: Any) -> MagicMock:
    """A callable mock with no ``handle`` attribute."""
    return MagicMock(spec=[], **kwargs)


# ---------------------------------------------------------------------------
# ListenerContainer
# ---------------------------------------------------------------------------


class TestListenerContainer:
    def test_resolves_bound_listener(self) -> None:
        listener = RecordingListener("a", [])
        container = ListenerContainer()
        container.bind("a", lambda: listener)
        assert container.get("a") is listener

    def test_factory_runs_on_every_get(self) -> None:
        factory = MagicMock(side_effect=lambda: RecordingListener("a", []))
        container = ListenerContainer()
        container.bind("a", factory)
        first = container.get("a")
        second = container.get("a")
        assert first is not second
        assert factory.call_count == 2

    def test_unknown_name_raises_with_name(self) -> None:
        with pytest.raises(UnresolvedBindingError, match="Missing.Listener") as exc_info:
            ListenerContainer().get("Missing.Listener")
        assert exc_info.value.name == "Missing.Listener"
        assert isinstance(exc_info.value, ContractError)

    @pytest.mark.parametrize("value", [None, "listener", 42])
    def test_binding_to_non_object_raises(self, value: Any) -> None:
        container = ListenerContainer()
        container.bind("bad", lambda: value)
        with pytest.raises(ContractError, match="bad"):
            container.get("bad")


# ---------------------------------------------------------------------------
# EventHandler
# ---------------------------------------------------------------------------


class TestEventHandler:
    def test_timing_from_markers(self) -> None:
        assert EventHandler(RecordingListener("a", [])).timing is ListenerTiming.IMMEDIATE
        assert EventHandler(BeforeCommitListener("b", [])).timing is ListenerTiming.BEFORE_COMMIT
        assert EventHandler(AfterCommitListener("c", [])).timing is ListenerTiming.AFTER_COMMIT

    def test_both_markers_rejected(self) -> None:
        with pytest.raises(ContractError, match="ConfusedListener"):
            EventHandler(ConfusedListener("x", []))

    def test_invokes_handle(self) -> None:
        record: list[tuple[str, DomainEvent]] = []
        event = OrderPlaced()
        EventHandler(RecordingListener("a", record))(event)
        assert record == [("a", event)]

    def test_invokes_callable(self) -> None:
        fn = listener_mock()
        event = OrderPlaced()
        EventHandler(fn)(event)
        fn.assert_called_once_with(event)

    def test_object_without_handle_rejected(self) -> None:
        with pytest.raises(ContractError, match="NotAListener"):
            EventHandler(NotAListener())

    def test_listener_class_rejected(self) -> None:
        with pytest.raises(ContractError, match="RecordingListener"):
            EventHandler(RecordingListener)


# ---------------------------------------------------------------------------
# Dispatcher
# ---------------------------------------------------------------------------


class TestDispatcher:
    def test_invokes_listeners_in_registration_order(self) -> None:
        record: list[tuple[str, DomainEvent]] = []
        container = ListenerContainer()
        container.bind("L1", lambda: RecordingListener("L1", record))
        container.bind("L3", lambda: RecordingListener("L3", record))

        dispatcher = Dispatcher(container)
        dispatcher.listen(StockReserved, ["L1", lambda e: record.append(("L2", e)), "L3"])

        event = StockReserved()
        dispatcher.dispatch(event)

        assert record == [("L1", event), ("L2", event), ("L3", event)]

    def test_non_immediate_events_are_dispatched_now(self) -> None:
        fn = listener_mock()
        dispatcher = Dispatcher()
        dispatcher.listen(OrderPlaced, fn)
        event = OrderPlaced()
        dispatcher.dispatch(event)
        fn.assert_called_once_with(event)

    def test_listen_accumulates(self) -> None:
        calls: list[str] = []
        dispatcher = Dispatcher()
        dispatcher.listen(OrderPlaced, lambda e: calls.append("a"))
        dispatcher.listen(OrderPlaced, [lambda e: calls.append("b"), lambda e: calls.append("c")])
        dispatcher.dispatch(OrderPlaced())
        assert calls == ["a", "b", "c"]

    def test_listener_objects_can_be_attached_directly(self) -> None:
        record: list[tuple[str, DomainEvent]] = []
        dispatcher = Dispatcher()
        dispatcher.listen(OrderPlaced, RecordingListener("direct", record))
        event = OrderPlaced()
        dispatcher.dispatch(event)
        assert record == [("direct", event)]

    def test_listeners_bound_to_exact_event_type(self) -> None:
        fn = listener_mock()
        dispatcher = Dispatcher()
        dispatcher.listen(OrderPlaced, fn)
        dispatcher.dispatch(StockReserved())
        fn.assert_not_called()

    def test_no_listeners_never_consults_container(self) -> None:
        container = MagicMock(spec=ListenerContainer)
        Dispatcher(container).dispatch(OrderPlaced())
        container.get.assert_not_called()

    @pytest.mark.parametrize("listener", ["", 42, None, NotAListener()])
    def test_listen_rejects_invalid_references(self, listener: Any) -> None:
        with pytest.raises(InvalidArgumentError):
            Dispatcher().listen(OrderPlaced, listener)

    @pytest.mark.parametrize("listener_class", [RecordingListener, AfterCommitListener])
    def test_listen_rejects_listener_classes(self, listener_class: type) -> None:
        dispatcher = Dispatcher()
        with pytest.raises(InvalidArgumentError, match="not a class"):
            dispatcher.listen(OrderPlaced, listener_class)

    def test_container_binding_to_a_class_fails_before_any_listener_runs(self) -> None:
        first = listener_mock()
        container = ListenerContainer()
        container.bind("by_class", lambda: RecordingListener)
        dispatcher = Dispatcher(container)
        dispatcher.listen(OrderPlaced, [first, "by_class"])

        with pytest.raises(ContractError, match="RecordingListener"):
            dispatcher.dispatch(OrderPlaced())
        first.assert_not_called()

    def test_unresolved_listener_name_raises(self) -> None:
        dispatcher = Dispatcher(ListenerContainer())
        dispatcher.listen(OrderPlaced, "Unknown")
        with pytest.raises(UnresolvedBindingError, match="Unknown"):
            dispatcher.dispatch(OrderPlaced())

    def test_named_listener_without_container_raises(self) -> None:
        dispatcher = Dispatcher()
        dispatcher.listen(OrderPlaced, "Named")
        with pytest.raises(ContractError):
            dispatcher.dispatch(OrderPlaced())

    def test_malformed_listener_fails_before_any_listener_runs(self) -> None:
        first = listener_mock()
        container = ListenerContainer()
        container.bind("bad", NotAListener)

        dispatcher = Dispatcher(container)
        dispatcher.listen(OrderPlaced, [first, "bad"])

        with pytest.raises(ContractError, match="NotAListener"):
            dispatcher.dispatch(OrderPlaced())
        first.assert_not_called()

    def test_dual_marker_listener_fails_before_any_listener_runs(self) -> None:
        first = listener_mock()
        dispatcher = Dispatcher()
        dispatcher.listen(StockReserved, [first, ConfusedListener("x", [])])

        with pytest.raises(ContractError):
            dispatcher.dispatch(StockReserved())
        first.assert_not_called()

    def test_markers_ignored_by_immediate_dispatcher(self) -> None:
        record: list[tuple[str, DomainEvent]] = []
        dispatcher = Dispatcher()
        dispatcher.listen(OrderPlaced, [BeforeCommitListener("b", record), AfterCommitListener("a", record)])
        event = OrderPlaced()
        dispatcher.dispatch(event)
        assert record == [("b", event), ("a", event)]

    def test_listener_errors_propagate(self) -> None:
        error = RuntimeError("listener failed")
        second = listener_mock()
        dispatcher = Dispatcher()
        dispatcher.listen(OrderPlaced, [listener_mock(side_effect=error), second])

        with pytest.raises(RuntimeError) as exc_info:
            dispatcher.dispatch(OrderPlaced())
        assert exc_info.value is error
        second.assert_not_called()


# ---------------------------------------------------------------------------
# Dispatcher middleware
# ---------------------------------------------------------------------------


class TestDispatcherMiddleware:
    def test_middleware_wraps_listeners(self) -> None:
        record: list[str] = []

        def outer(event: DomainEvent, next_: Next) -> Any:
            record.append("outer:before")
            next_(event)
            record.append("outer:after")

        class Inner(Middleware):
            def __call__(self, request: Any, next_: Next) -> Any:
                record.append("inner:before")
                result = next_(request)
                record.append("inner:after")
                return result

        dispatcher = Dispatcher()
        dispatcher.listen(OrderPlaced, lambda e: record.append("listener"))
        dispatcher.through([outer, Inner()])
        dispatcher.dispatch(OrderPlaced())

        assert record == ["outer:before", "inner:before", "listener", "inner:after", "outer:after"]

    def test_middleware_can_replace_event(self) -> None:
        replacement = OrderPlaced(order_id="o-2")
        fn = listener_mock()
        dispatcher = Dispatcher()
        dispatcher.listen(OrderPlaced, fn)
        dispatcher.through([lambda event, next_: next_(replacement)])
        dispatcher.dispatch(OrderPlaced())
        fn.assert_called_once_with(replacement)

    def test_middleware_can_short_circuit(self) -> None:
        fn = listener_mock()
        dispatcher = Dispatcher()
        dispatcher.listen(OrderPlaced, fn)
        dispatcher.through([lambda event, next_: None])
        dispatcher.dispatch(OrderPlaced())
        fn.assert_not_called()

    def test_named_middleware_resolved_from_pipe_container(self) -> None:
        record: list[str] = []
        pipes = PipeContainer()
        pipes.bind("trace", lambda: lambda event, next_: (record.append("trace"), next_(event))[1])

        dispatcher = Dispatcher(middleware=pipes)
        dispatcher.listen(OrderPlaced, lambda e: record.append("listener"))
        dispatcher.through(["trace"])
        dispatcher.dispatch(OrderPlaced())

        assert record == ["trace", "listener"]

    def test_through_replaces_chain(self) -> None:
        record: list[str] = []
        dispatcher = Dispatcher()
        dispatcher.through([lambda e, n: record.append("first")])
        dispatcher.through([lambda e, n: (record.append("second"), n(e))[1]])
        dispatcher.dispatch(OrderPlaced())
        assert record == ["second"]
