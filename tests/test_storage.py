import json

from snake_engine import constants
from snake_engine.storage import KeyValueStore, Settings


def write(store, payload):
    with open(store.path, "w", encoding="utf-8") as handle:
        handle.write(payload if isinstance(payload, str) else json.dumps(payload))


def test_missing_file_reads_as_absent(store):
    assert store.get(constants.HIGH_SCORE_KEY) is None
    settings = Settings.load(store)
    assert settings == Settings(speed="normal", grid_size="small", high_score=0)
    assert settings.tick_ms == 100
    assert settings.grid_cells == 20


def test_corrupt_file_reads_as_absent(store):
    write(store, "{not json")
    assert store.get(constants.SPEED_KEY) is None
    assert Settings.load(store).speed == constants.DEFAULT_SPEED


def test_non_object_payload_reads_as_absent(store):
    write(store, [1, 2, 3])
    assert store.get(constants.SPEED_KEY) is None


def test_invalid_values_fall_back_to_defaults(store):
    write(store, {constants.SPEED_KEY: "warp", constants.GRID_SIZE_KEY: ["big"], constants.HIGH_SCORE_KEY: "lots"})
    settings = Settings.load(store)
    assert settings.speed == "normal"
    assert settings.grid_size == "small"
    assert settings.high_score == 0


def test_non_finite_and_boolean_scores_fall_back_to_zero(store):
    write(store, "{\"snakeHighScore\": Infinity}")
    assert Settings.load(store).high_score == 0
    write(store, "{\"snakeHighScore\": NaN}")
    assert Settings.load(store).high_score == 0
    write(store, {constants.HIGH_SCORE_KEY: True})
    assert Settings.load(store).high_score == 0
    write(store, {constants.HIGH_SCORE_KEY: 1e400})
    assert Settings.load(store).high_score == 0


def test_stored_values_are_loaded(store):
    write(store, {constants.SPEED_KEY: "fast", constants.GRID_SIZE_KEY: "large", constants.HIGH_SCORE_KEY: "120"})
    settings = Settings.load(store)
    assert settings.speed == "fast"
    assert settings.tick_ms == 50
    assert settings.grid_cells == 40
    assert settings.high_score == 120


def test_negative_high_score_is_clamped(store):
    write(store, {constants.HIGH_SCORE_KEY: -5})
    assert Settings.load(store).high_score == 0


def test_saves_persist_and_keep_other_keys(store):
    settings = Settings.load(store)
    assert settings.save_speed(store, "slow")
    assert settings.save_grid_size(store, "medium")
    assert settings.save_high_score(store, 90)

    reloaded = Settings.load(store)
    assert reloaded == Settings(speed="slow", grid_size="medium", high_score=90)


def test_invalid_tags_are_not_saved(store):
    settings = Settings.load(store)
    assert not settings.save_speed(store, "ludicrous")
    assert not settings.save_grid_size(store, "huge")
    assert store.get(constants.SPEED_KEY) is None


def test_lower_score_does_not_replace_high_score(store):
    settings = Settings.load(store)
    settings.save_high_score(store, 50)
    assert not settings.save_high_score(store, 40)
    assert not settings.save_high_score(store, 50)
    assert store.get(constants.HIGH_SCORE_KEY) == 50


def test_write_failure_is_not_fatal(tmp_path):
    store = KeyValueStore(str(tmp_path / "missing" / "snake.json"))
    assert store.set(constants.HIGH_SCORE_KEY, 10) is False
    assert store.get(constants.HIGH_SCORE_KEY) is None
