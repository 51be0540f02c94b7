"""Tests for the error taxonomy.

Covers:
  - Message formatting with operation and return code
  - Cause chaining through __cause__
  - Transport-neutral to_dict payload
  - error_for_code and normalize
"""

import pytest

from etabs_client.common.exceptions import (
    KNOWN_CODES,
    CallStage,
    EngineNotAvailableError,
    EngineRejectedError,
    EtabsError,
    InvalidArgumentError,
    MarshallingError,
    SessionClosedError,
    SessionUnavailableError,
    UnexpectedError,
    VersionUnsupportedError,
    error_for_code,
    normalize,
)


# ======================================================================
# Formatting and attributes
# ======================================================================

class TestEtabsError:
    def test_message_includes_operation_and_code(self):
        err = EngineRejectedError("SetReleases failed", operation="SetReleases", code=7)
        assert str(err) == "[SetReleases] SetReleases failed (Return code: 7)"
        assert err.stage is CallStage.INVOKING

    def test_message_without_operation(self):
        assert str(EtabsError("boom")) == "boom"

    def test_invalid_argument_names_parameter(self):
        err = InvalidArgumentError("cannot be null or empty", operation="SetSection", parameter="name", value="")
        assert err.parameter == "name"
        assert err.value == ""
        assert "Invalid parameter 'name'" in err.message
        assert err.stage is CallStage.VALIDATING
        assert err.code is None

    def test_cause_is_chained(self):
        cause = KeyError("x")
        err = MarshallingError("bad outputs", operation="GetPoints", cause=cause)
        assert err.__cause__ is cause
        assert err.cause is cause
        assert err.stage is CallStage.EXTRACTING

    def test_session_errors_share_a_base(self):
        for err in (EngineNotAvailableError(), SessionClosedError(), VersionUnsupportedError("21.0", "22")):
            assert isinstance(err, SessionUnavailableError)
            assert err.kind == "SessionUnavailable"

    def test_version_error_keeps_versions(self):
        err = VersionUnsupportedError("21.0.0", "22")
        assert err.detected_version == "21.0.0"
        assert err.required_version == "22"
        assert "21.0.0" in str(err)


class TestToDict:
    def test_engine_rejection_payload(self):
        payload = EngineRejectedError("AddByPoint failed", operation="AddByPoint", code=1).to_dict()
        assert payload["success"] is False
        assert payload["error"] == {
            "kind": "EngineRejected",
            "operation": "AddByPoint",
            "stage": "Invoking",
            "code": 1,
            "message": "AddByPoint failed",
            "cause": None,
        }

    def test_cause_is_rendered(self):
        err = UnexpectedError("wrapped", operation="Count", cause=RuntimeError("COM went away"))
        assert err.to_dict()["error"]["cause"] == "RuntimeError: COM went away"


# ======================================================================
# Helpers
# ======================================================================

class TestErrorForCode:
    def test_builds_engine_rejected(self):
        err = error_for_code("SetSection", 3)
        assert isinstance(err, EngineRejectedError)
        assert err.operation == "SetSection"
        assert err.code == 3

    def test_known_code_detail_is_appended(self, monkeypatch):
        monkeypatch.setitem(KNOWN_CODES, 42, "object is locked")
        assert "object is locked" in error_for_code("Delete", 42).message


class TestNormalize:
    def test_etabs_error_passes_through(self):
        err = InvalidArgumentError("bad")
        assert normalize(err, "SetSection", CallStage.VALIDATING) is err
        assert err.operation == "SetSection"

    def test_filled_operation_appears_in_message(self):
        err = normalize(SessionClosedError(), "GetNameList", CallStage.NOT_STARTED)
        assert err.operation == "GetNameList"
        assert str(err) == "[GetNameList] The ETABS session has been disposed."

    def test_existing_operation_is_kept(self):
        err = MarshallingError("bad", operation="GetPoints")
        assert normalize(err, "Other", CallStage.EXTRACTING).operation == "GetPoints"

    def test_foreign_exception_is_wrapped(self):
        cause = ValueError("nope")
        err = normalize(cause, "Count", CallStage.INVOKING)
        assert isinstance(err, UnexpectedError)
        assert err.__cause__ is cause
        assert err.stage is CallStage.INVOKING

    def test_wrapped_error_is_raisable(self):
        with pytest.raises(UnexpectedError):
            raise normalize(OSError("disk"), "Save", CallStage.INVOKING)
