"""Tests for applying uploaded step programs in the editor."""

import json

import pytest

from lyocalc.storage.step_io import StepImportError
from lyocalc.ui.steps import IMPORTED_FILE_KEY, import_uploaded_steps


class _Upload:
    def __init__(self, file_id, payload):
        self.file_id = file_id
        self._payload = payload

    def getvalue(self):
        return self._payload


def _program_upload(file_id, durations):
    steps = [{"temperature": -10, "pressure": 0.2, "duration": d} for d in durations]
    return _Upload(file_id, json.dumps(steps).encode("utf-8"))


class TestImportUploadedSteps:
    def test_nothing_uploaded(self):
        assert import_uploaded_steps(None, {}) is None

    def test_first_upload_imported(self):
        state = {}
        steps = import_uploaded_steps(_program_upload("a", [60, 30]), state)
        assert [s.duration for s in steps] == [60.0, 30.0]
        assert state[IMPORTED_FILE_KEY] == "a"

    def test_same_file_applied_once(self):
        state = {}
        upload = _program_upload("a", [60])
        assert import_uploaded_steps(upload, state) is not None
        # later reruns keep the file in the uploader; edits must survive
        assert import_uploaded_steps(upload, state) is None
        assert import_uploaded_steps(upload, state) is None

    def test_new_file_imported(self):
        state = {}
        import_uploaded_steps(_program_upload("a", [60]), state)
        steps = import_uploaded_steps(_program_upload("b", [15]), state)
        assert [s.duration for s in steps] == [15.0]

    def test_cleared_uploader_forgets_file(self):
        state = {}
        upload = _program_upload("a", [60])
        import_uploaded_steps(upload, state)
        import_uploaded_steps(None, state)
        assert IMPORTED_FILE_KEY not in state
        assert import_uploaded_steps(upload, state) is not None

    def test_invalid_file_reported_once(self):
        state = {}
        upload = _Upload("bad", b"{not json")
        with pytest.raises(StepImportError):
            import_uploaded_steps(upload, state)
        assert import_uploaded_steps(upload, state) is None

    def test_non_utf8_file(self):
        with pytest.raises(StepImportError):
            import_uploaded_steps(_Upload("bin", b"\xff\xfe\x00"), {})
