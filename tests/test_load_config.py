"""Tests for configuration loading and merging."""

from pathlib import Path

import yaml

from scriptorder.compute_input_hash import compute_input_hash
from scriptorder.load_config import DEFAULT_CONFIG, load_config, merge_config
from scriptorder.source_module import SourceModule


def test_merge_config_scalars() -> None:
    """Verify scalar replacement in config merge."""
    base = {"a": 1, "b": 2}
    update = {"b": 3, "c": 4}
    merged = merge_config(base, update)
    assert merged == {"a": 1, "b": 3, "c": 4}


def test_merge_config_nested() -> None:
    """Verify recursive merging of dictionaries."""
    base = {"nested": {"x": 1, "y": 2}}
    update = {"nested": {"y": 3, "z": 4}}
    merged = merge_config(base, update)
    assert merged == {"nested": {"x": 1, "y": 3, "z": 4}}


def test_merge_config_includes_replace() -> None:
    """Verify that include patterns are replaced, not merged."""
    base = {"includes": ["**/*.js"]}
    update = {"includes": ["lib/**/*.js"]}
    assert merge_config(base, update) == {"includes": ["lib/**/*.js"]}


def test_merge_config_excludes_additive() -> None:
    """Verify that the excludes list is merged additively."""
    base = {"excludes": ["b/*.js", "a/*.js"]}
    update = {"excludes": ["a/*.js", "c/*.js"]}
    merged = merge_config(base, update)
    assert merged["excludes"] == ["a/*.js", "b/*.js", "c/*.js"]


def test_merge_config_custom_additive_keys() -> None:
    """Verify lists replace unless their key is named additive."""
    base = {"excludes": ["a/*.js"], "includes": ["x.js"]}
    update = {"excludes": ["b/*.js"], "includes": ["y.js"]}
    assert merge_config(base, update, additive=()) == update
    merged = merge_config(base, update, additive={"includes"})
    assert merged == {"excludes": ["b/*.js"], "includes": ["x.js", "y.js"]}


def test_merge_config_leaves_inputs_unchanged() -> None:
    """Verify merging builds new dictionaries instead of updating the base."""
    base = {"sources": {"excludes": ["a/*.js"]}}
    merge_config(base, {"sources": {"excludes": ["b/*.js"]}})
    assert base == {"sources": {"excludes": ["a/*.js"]}}


def test_load_config_defaults() -> None:
    """Verify that default config is loaded when no path is provided."""
    config = load_config(None)
    assert config == DEFAULT_CONFIG
    assert config["sources"]["includes"] == ["**/*.js"]


def test_load_config_is_a_copy() -> None:
    """Verify that mutating a loaded config leaves the defaults intact."""
    config = load_config(None)
    config["output"]["bundle_filename"] = "changed.js"
    assert DEFAULT_CONFIG["output"]["bundle_filename"] == "bundle.js"


def test_load_config_with_file(tmp_path: Path) -> None:
    """Verify that user config correctly overrides defaults."""
    config_file = tmp_path / "config.yml"
    config_data = {
        "output": {"bundle_filename": "app.js"},
        "sources": {"excludes": ["test/**"]},
    }
    config_file.write_text(yaml.dump(config_data))

    loaded = load_config(str(config_file))
    assert loaded["output"]["bundle_filename"] == "app.js"
    assert loaded["output"]["scripts_dir"] == "scripts"  # Default
    assert loaded["sources"]["excludes"] == ["test/**"]


def test_load_config_missing_file(tmp_path: Path) -> None:
    """Verify that a missing config file falls back to defaults."""
    assert load_config(str(tmp_path / "nope.yml")) == DEFAULT_CONFIG


def test_input_hash_stability() -> None:
    """Verify the input hash ignores key order and module order."""
    config1 = {"b": 2, "a": 1, "nested": {"y": 2, "x": 1}}
    config2 = {"a": 1, "b": 2, "nested": {"x": 1, "y": 2}}
    m1 = SourceModule("a.js", Path("a.js"), "A")
    m2 = SourceModule("b.js", Path("b.js"), "B")
    assert compute_input_hash(config1, [m1, m2]) == compute_input_hash(
        config2, [m2, m1]
    )


def test_input_hash_tracks_sources() -> None:
    """Verify that changing module text changes the input hash."""
    before = [SourceModule("a.js", Path("a.js"), "var a;")]
    after = [SourceModule("a.js", Path("a.js"), "var a = 1;")]
    assert compute_input_hash({}, before) != compute_input_hash({}, after)
