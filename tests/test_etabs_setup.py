"""Tests for session setup and configuration.

Covers:
  - Attaching (local and remote) and launching a new instance
  - Connection failures and the minimum-version check
  - Idempotent dispose, dispose hooks, closed-session behaviour
  - A failing dispose hook still releases the engine handle
  - ConnectionOptions.from_env
"""

import logging

import pytest

from etabs_client import (
    ConnectionOptions,
    CreationMode,
    EngineNotAvailableError,
    EngineSession,
    EtabsModel,
    SessionClosedError,
    SessionState,
    UnexpectedError,
    VersionUnsupportedError,
)

from .fake_engine import FakeCOMException, FakeEtabsObject, FakeHelper, FakeSapModel, make_api


# ======================================================================
# Connect / create
# ======================================================================

class TestConnect:
    def test_attach_reads_version(self, api, helper, etabs_object):
        session = EngineSession.connect(api=api)
        assert session.is_connected
        assert session.mode is CreationMode.ATTACHED
        assert session.version == "22.1.0"
        assert session.version_number == pytest.approx(22.1)
        assert session.api_version == 1.0
        assert helper.requests == [("GetObject", "CSI.ETABS.API.ETABSObject")]
        assert session.sap_model is etabs_object.SapModel

    def test_remote_attach_uses_host(self, api, helper):
        EngineSession.connect(ConnectionOptions(remote=True, remote_computer="calc-01"), api=api)
        assert helper.requests == [("GetObjectHost", "calc-01", "CSI.ETABS.API.ETABSObject")]

    def test_com_failure_is_engine_not_available(self):
        cause = FakeCOMException("no instance")
        api = make_api(FakeHelper(error=cause))
        with pytest.raises(EngineNotAvailableError) as info:
            EngineSession.connect(api=api)
        assert info.value.__cause__ is cause
        assert info.value.operation == "Connect"

    def test_no_object_is_engine_not_available(self):
        with pytest.raises(EngineNotAvailableError):
            EngineSession.connect(api=make_api(FakeHelper(None)))

    def test_old_version_is_refused(self):
        etabs = FakeEtabsObject(FakeSapModel(version="21.0.3", version_number=21.03))
        with pytest.raises(VersionUnsupportedError) as info:
            EngineSession.connect(api=make_api(FakeHelper(etabs)))
        assert info.value.detected_version == "21.0.3"
        assert info.value.required_version == "22"

    def test_minimum_version_is_configurable(self):
        etabs = FakeEtabsObject(FakeSapModel(version="21.0.3", version_number=21.03))
        session = EngineSession.connect(ConnectionOptions(minimum_version=21), api=make_api(FakeHelper(etabs)))
        assert session.version == "21.0.3"

    def test_version_call_failure(self, sap_model, api):
        sap_model.fail_next("SapModel.GetVersion", 1)
        with pytest.raises(EngineNotAvailableError) as info:
            EngineSession.connect(api=api)
        assert info.value.operation == "GetVersion"

    def test_create_new_starts_application(self, api, helper, etabs_object):
        session = EngineSession.create_new(api=api)
        assert session.mode is CreationMode.CREATED
        assert etabs_object.started
        assert helper.requests == [("CreateObjectProgID", "CSI.ETABS.API.ETABSObject")]

    def test_create_new_with_program_path(self, api, helper):
        EngineSession.create_new(ConnectionOptions(program_path=r"C:\ETABS\ETABS.exe"), api=api)
        assert helper.requests == [("CreateObject", r"C:\ETABS\ETABS.exe")]

    def test_create_new_without_start(self, api, etabs_object):
        EngineSession.create_new(ConnectionOptions(start_application=False), api=api)
        assert not etabs_object.started


# ======================================================================
# Dispose
# ======================================================================

class TestDispose:
    def test_dispose_is_idempotent(self, session):
        calls = []
        session.add_dispose_hook(calls.append)
        session.dispose()
        session.dispose()
        assert calls == [session]
        assert session.state is SessionState.DISCONNECTED
        assert session.is_disposed

    def test_failing_hook_still_releases_the_handle(self, session, caplog):
        calls = []

        def broken(s):
            raise RuntimeError("hook exploded")

        session.add_dispose_hook(broken)
        session.add_dispose_hook(calls.append)
        with caplog.at_level(logging.WARNING, logger="etabs_client"):
            session.dispose()
        assert calls == [session]
        assert session.is_disposed
        assert session._sap_model is None
        assert "hook exploded" in caplog.text
        with pytest.raises(SessionClosedError):
            session.sap_model

    def test_hook_added_after_dispose_is_refused(self, session):
        session.dispose()
        with pytest.raises(SessionClosedError):
            session.add_dispose_hook(lambda s: None)

    def test_sap_model_after_dispose(self, session):
        session.dispose()
        with pytest.raises(SessionClosedError):
            session.sap_model
        with pytest.raises(SessionClosedError):
            session.etabs_object

    def test_attached_session_leaves_etabs_running(self, session, etabs_object):
        session.dispose()
        assert not etabs_object.exited

    def test_created_session_closes_etabs(self, api, etabs_object):
        session = EngineSession.create_new(api=api)
        session.dispose()
        assert etabs_object.exited

    def test_close_application_override(self, session, etabs_object):
        session.dispose(close_application=True)
        assert etabs_object.exited

    def test_context_manager(self, api):
        with EngineSession.connect(api=api) as session:
            assert session.is_connected
        assert session.is_disposed

    def test_manager_call_after_close(self, model):
        points = model.points
        model.close()
        with pytest.raises(SessionClosedError):
            points.count()
        with pytest.raises(SessionClosedError):
            model.frames

    def test_closed_session_error_names_the_operation(self, model):
        frames = model.frames
        model.session.dispose()
        with pytest.raises(SessionClosedError) as info:
            frames.set_section("F1", "COL400")
        assert info.value.operation == "SetSection"
        assert "[SetSection]" in str(info.value)

    def test_facade_context_manager(self, api):
        with EtabsModel.connect(api=api) as model:
            assert model.points.count() == 0
        assert model.session.is_disposed


# ======================================================================
# Helpers
# ======================================================================

class TestSessionHelpers:
    def test_is_alive(self, session, sap_model):
        assert session.is_alive()
        sap_model.raise_next("SapModel.GetModelFilename", RuntimeError("gone"))
        assert not session.is_alive()
        session.dispose()
        assert not session.is_alive()

    def test_engine_enum(self, session):
        assert session.engine_enum("eUnits", 6) == 6

    def test_engine_enum_unknown_type(self, session):
        with pytest.raises(UnexpectedError):
            session.engine_enum("eNoSuchEnum", 1)

    def test_list_running_instances_off_windows(self, monkeypatch):
        monkeypatch.setattr("etabs_client.common.etabs_setup.os.name", "posix")
        assert EngineSession.list_running_instances() == []
        assert not EngineSession.is_running()


class TestConnectionOptions:
    def test_defaults(self):
        opts = ConnectionOptions.from_env({})
        assert opts.progid == "CSI.ETABS.API.ETABSObject"
        assert opts.remote is False
        assert opts.minimum_version == 22

    def test_environment_overrides(self):
        opts = ConnectionOptions.from_env({
            "ETABS_REMOTE": "yes",
            "ETABS_REMOTE_COMPUTER": "calc-02",
            "ETABS_MIN_VERSION": "23",
            "ETABS_STARTUP_WAIT": "2.5",
            "ETABS_START_APPLICATION": "0",
            "ETABS_PROGRAM_PATH": r"D:\ETABS\ETABS.exe",
        })
        assert opts.remote is True
        assert opts.remote_computer == "calc-02"
        assert opts.minimum_version == 23
        assert opts.startup_wait_seconds == 2.5
        assert opts.start_application is False
        assert opts.program_path == r"D:\ETABS\ETABS.exe"
