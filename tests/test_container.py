"""Tests for service lookup with legacy-id fallback."""

from __future__ import annotations

from jinjawire.container import ServiceLocator, resolve_service, service_name
from jinjawire.helpers import LEGACY_SERVER_URL_HELPER, ServerUrlHelper

from tests.doubles import RecordingContainer


class TestResolveService:
    def test_prefers_current_id(self):
        current, legacy = object(), object()
        container = RecordingContainer(
            {ServerUrlHelper: current, LEGACY_SERVER_URL_HELPER: legacy}
        )
        assert resolve_service(container, ServerUrlHelper, LEGACY_SERVER_URL_HELPER) is current
        assert container.has_calls == [ServerUrlHelper]
        assert container.get_calls == [ServerUrlHelper]

    def test_falls_back_to_legacy_id(self):
        legacy = object()
        container = RecordingContainer({LEGACY_SERVER_URL_HELPER: legacy})
        assert resolve_service(container, ServerUrlHelper, LEGACY_SERVER_URL_HELPER) is legacy
        assert container.has_calls == [ServerUrlHelper, LEGACY_SERVER_URL_HELPER]
        assert container.get_calls == [LEGACY_SERVER_URL_HELPER]

    def test_returns_none_when_absent(self):
        container = RecordingContainer()
        assert resolve_service(container, ServerUrlHelper, LEGACY_SERVER_URL_HELPER) is None
        assert container.has_calls == [ServerUrlHelper, LEGACY_SERVER_URL_HELPER]
        assert container.get_calls == []

    def test_any_number_of_candidates(self):
        container = RecordingContainer({"third": 3})
        assert resolve_service(container, "first", "second", "third") == 3

    def test_falsy_service_is_still_resolved(self):
        container = RecordingContainer({"empty": {}})
        assert resolve_service(container, "empty") == {}


class TestServiceName:
    def test_class_ids_render_dotted_path(self):
        assert service_name(ServerUrlHelper) == "jinjawire.helpers.ServerUrlHelper"

    def test_string_ids_render_verbatim(self):
        assert service_name("config") == "config"


def test_recording_container_satisfies_protocol():
    assert isinstance(RecordingContainer(), ServiceLocator)
