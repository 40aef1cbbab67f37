import pytest

from orbit_tracker.config import TrackerConfig


class TestTrackerConfig:
    def test_defaults(self):
        config = TrackerConfig().validate()
        assert config.time_step_s == 3.0
        assert config.reference_radius_km == 6371.0
        assert config.initial_object_ids == ("25544",)
        assert "{object_id}" in config.api_url_template

    def test_from_env_empty(self):
        assert TrackerConfig.from_env({}) == TrackerConfig()

    def test_from_env_overrides(self):
        config = TrackerConfig.from_env({
            "ORBIT_TRACKER_TIME_STEP_S": "10",
            "ORBIT_TRACKER_GLOBE_WRITE_EVERY": "5",
            "ORBIT_TRACKER_INITIAL_OBJECT_IDS": "25544, 44713,,",
            "ORBIT_TRACKER_CATALOG_FILE": "stations.txt",
            "UNRELATED": "ignored",
        })
        assert config.time_step_s == 10.0
        assert config.globe_write_every == 5
        assert config.initial_object_ids == ("25544", "44713")
        assert config.catalog_file == "stations.txt"

    def test_from_env_bad_number(self):
        with pytest.raises(ValueError, match="ORBIT_TRACKER_TIME_STEP_S"):
            TrackerConfig.from_env({"ORBIT_TRACKER_TIME_STEP_S": "fast"})

    @pytest.mark.parametrize("kwargs, message", [
        ({"time_step_s": 0.0}, "time_step_s must be > 0"),
        ({"tick_interval_s": -0.1}, "tick_interval_s must be >= 0"),
        ({"reference_radius_km": -1.0}, "reference_radius_km must be > 0"),
        ({"request_timeout_s": 0.0}, "request_timeout_s must be > 0"),
        ({"api_url_template": "https://example.invalid/sat"}, "api_url_template"),
        ({"globe_write_every": 0}, "globe_write_every must be > 0"),
    ])
    def test_validate(self, kwargs, message):
        with pytest.raises(ValueError, match=message):
            TrackerConfig(**kwargs).validate()

    def test_from_env_validates(self):
        with pytest.raises(ValueError, match="time_step_s must be > 0"):
            TrackerConfig.from_env({"ORBIT_TRACKER_TIME_STEP_S": "-3"})
