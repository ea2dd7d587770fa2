"""Tests for configuration storage and step import/export."""

import json

import pytest

from lyocalc.models.constants import DEFAULT_STEPS
from lyocalc.models.drying_step import new_step
from lyocalc.models.settings import FreezeDryerSettings, normalize_settings
from lyocalc.storage.config_store import (
    ANONYMOUS_OWNER,
    STORE_PATH_ENV,
    ConfigurationStore,
    default_store_path,
)
from lyocalc.storage.step_io import StepImportError, export_steps, import_steps


@pytest.fixture
def store(tmp_path):
    return ConfigurationStore(tmp_path / "configs.json")


@pytest.fixture
def settings():
    return normalize_settings({"hashPerTray": 0.2, "numberOfTrays": 2}, DEFAULT_STEPS)


class TestConfigurationStore:
    def test_empty_store(self, store):
        assert store.list_configurations("user-1") == []

    def test_save_and_list(self, store, settings):
        record = store.save_configuration("user-1", "Batch A", settings, settings.steps)
        records = store.list_configurations("user-1")
        assert len(records) == 1
        assert records[0]["id"] == record["id"]
        assert records[0]["name"] == "Batch A"
        assert records[0]["createdAt"] == records[0]["updatedAt"]
        assert "steps" not in records[0]["settings"]

    def test_load_round_trip(self, store, settings):
        record = store.save_configuration("user-1", "Batch A", settings, settings.steps)
        loaded, steps = store.load_configuration("user-1", record["id"])
        assert isinstance(loaded, FreezeDryerSettings)
        assert loaded == settings
        assert [s.id for s in steps] == [s.id for s in settings.steps]

    def test_update_in_place(self, store, settings):
        record = store.save_configuration("user-1", "Batch A", settings, settings.steps)
        changed = settings.with_updates(number_of_trays=4)
        store.save_configuration("user-1", "Batch A v2", changed, changed.steps, config_id=record["id"])
        records = store.list_configurations("user-1")
        assert len(records) == 1
        assert records[0]["name"] == "Batch A v2"
        assert records[0]["createdAt"] == record["createdAt"]
        assert records[0]["settings"]["numberOfTrays"] == 4

    def test_unknown_config_id_appends(self, store, settings):
        store.save_configuration("user-1", "A", settings, settings.steps)
        store.save_configuration("user-1", "B", settings, settings.steps, config_id="missing")
        assert len(store.list_configurations("user-1")) == 2

    def test_owners_isolated(self, store, settings):
        store.save_configuration("user-1", "A", settings, settings.steps)
        store.save_configuration(None, "Anon", settings, settings.steps)
        assert len(store.list_configurations("user-1")) == 1
        assert store.list_configurations("user-2") == []
        assert [r["name"] for r in store.list_configurations(ANONYMOUS_OWNER)] == ["Anon"]

    def test_delete(self, store, settings):
        record = store.save_configuration("user-1", "A", settings, settings.steps)
        store.delete_configuration("user-1", record["id"])
        assert store.list_configurations("user-1") == []

    def test_delete_unknown(self, store):
        with pytest.raises(KeyError):
            store.delete_configuration("user-1", "nope")

    def test_load_unknown(self, store):
        with pytest.raises(KeyError):
            store.load_configuration("user-1", "nope")

    def test_empty_name_rejected(self, store, settings):
        with pytest.raises(ValueError):
            store.save_configuration("user-1", "  ", settings, settings.steps)

    def test_string_values_coerced_on_load(self, tmp_path):
        path = tmp_path / "configs.json"
        path.write_text(json.dumps({
            "user-1": [{
                "id": "cfg-1",
                "name": "From strings",
                "settings": {"hashPerTray": "0.3", "numberOfTrays": "2", "waterPercentage": "50"},
                "steps": [{"id": "s1", "temperature": "-20", "pressure": "0.4", "duration": "120"}],
                "createdAt": "2024-01-01T00:00:00+00:00",
                "updatedAt": "2024-01-01T00:00:00+00:00",
            }]
        }))
        loaded, steps = ConfigurationStore(path).load_configuration("user-1", "cfg-1")
        assert loaded.hash_per_tray == 0.3
        assert loaded.number_of_trays == 2
        assert loaded.ice_weight == pytest.approx(0.3)
        assert steps[0].temperature == -20.0
        assert loaded.steps[0].duration == 120.0

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "configs.json"
        path.write_text("{not json")
        with pytest.raises(ValueError):
            ConfigurationStore(path).list_configurations("user-1")

    def test_saved_copy_is_detached(self, store, settings):
        raw = settings.to_dict()
        store.save_configuration("user-1", "A", raw, settings.steps)
        raw["hashPerTray"] = 9.0
        assert store.list_configurations("user-1")[0]["settings"]["hashPerTray"] == 0.2

    def test_default_path_from_env(self, monkeypatch, tmp_path):
        monkeypatch.setenv(STORE_PATH_ENV, str(tmp_path / "custom.json"))
        assert default_store_path() == tmp_path / "custom.json"
        assert ConfigurationStore().path == tmp_path / "custom.json"

    def test_default_path_in_home(self, monkeypatch):
        monkeypatch.delenv(STORE_PATH_ENV, raising=False)
        assert default_store_path().name == "configurations.json"


class TestStepImportExport:
    def test_export_is_json_array(self):
        steps = [new_step(-10, 0.2, 60), new_step(14, 1.0, 30, "F", "Torr")]
        data = json.loads(export_steps(steps))
        assert isinstance(data, list)
        assert data[1]["tempUnit"] == "F"
        assert data[1]["pressureUnit"] == "Torr"

    def test_import_exported(self):
        steps = [new_step(-10, 0.2, 60), new_step(14, 1.0, 30, "F", "Torr")]
        assert import_steps(export_steps(steps)) == steps

    def test_units_defaulted(self):
        text = json.dumps([
            {"temperature": -10, "pressure": 0.2, "duration": 60, "tempUnit": "Kelvin"},
            {"temperature": -5, "pressure": 0.2, "duration": 60, "pressureUnit": "psi"},
        ])
        steps = import_steps(text)
        assert [s.temp_unit for s in steps] == ["C", "C"]
        assert [s.pressure_unit for s in steps] == ["mBar", "mBar"]
        assert all(s.id for s in steps)

    def test_numbers_coerced(self):
        steps = import_steps('[{"temperature": "-10", "pressure": "0.2", "duration": "60"}]')
        assert steps[0].temperature == -10.0
        assert steps[0].duration == 60.0

    def test_empty_program(self):
        assert import_steps("[]") == []

    @pytest.mark.parametrize("text", ["{not json", '{"steps": []}', "[1, 2]"])
    def test_malformed_documents(self, text):
        with pytest.raises(StepImportError):
            import_steps(text)

    def test_non_numeric_field(self):
        with pytest.raises(StepImportError):
            import_steps('[{"temperature": "warm", "pressure": 0.2, "duration": 60}]')

    def test_too_many_steps(self):
        text = json.dumps([{"temperature": 0, "pressure": 0.2, "duration": 10}] * 9)
        with pytest.raises(StepImportError):
            import_steps(text)

    @pytest.mark.parametrize("duration", ["NaN", "Infinity", "-Infinity", "1e400"])
    def test_non_finite_duration_rejected(self, duration):
        text = '[{"temperature": -10, "pressure": 0.2, "duration": %s}]' % duration
        with pytest.raises(StepImportError):
            import_steps(text)

    @pytest.mark.parametrize("field", ["temperature", "pressure"])
    def test_non_finite_condition_rejected(self, field):
        step = {"temperature": -10, "pressure": 0.2, "duration": 60}
        step[field] = float("nan")
        with pytest.raises(StepImportError):
            import_steps(json.dumps([step]))

    def test_negative_duration_rejected(self):
        with pytest.raises(StepImportError):
            import_steps('[{"temperature": -10, "pressure": 0.2, "duration": -30}]')

    def test_zero_duration_accepted(self):
        steps = import_steps('[{"temperature": -10, "pressure": 0.2, "duration": 0}]')
        assert steps[0].duration == 0.0
