import pytest

from slot_generator.config import DEFAULT_CONFIG, LayoutConfig


def test_defaults():
    assert DEFAULT_CONFIG.to_dict() == {
        "slot_size": 28,
        "offset": 50,
        "field_size": 400,
        "field_width": 10,
        "field_rows": 6,
        "variants_per_block": 8,
    }
    assert DEFAULT_CONFIG.half_diagonal == 20


def test_half_diagonal_follows_slot_size():
    assert LayoutConfig(slot_size=20).half_diagonal == 14


@pytest.mark.parametrize("kwargs", [
    {"slot_size": 0},
    {"field_size": -400},
    {"field_width": 0},
    {"offset": -1},
])
def test_rejects_bad_sizes(kwargs):
    with pytest.raises(ValueError):
        LayoutConfig(**kwargs)


def test_zero_offset_is_allowed():
    assert LayoutConfig(offset=0).offset == 0


def test_from_yaml(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text("slot_size: 32\nfield_width: 8\n", encoding="utf-8")

    config = LayoutConfig.from_yaml(str(path))
    assert config.slot_size == 32
    assert config.field_width == 8
    assert config.field_size == 400
    assert config.artboard_id_count == 8 * 6 * 8


def test_from_yaml_nested_section(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text("layout:\n  offset: 20\n", encoding="utf-8")
    assert LayoutConfig.from_yaml(str(path)).offset == 20


def test_from_yaml_empty_file(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text("", encoding="utf-8")
    assert LayoutConfig.from_yaml(str(path)) == DEFAULT_CONFIG


def test_from_yaml_rejects_unknown_keys(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text("slot_size: 28\ntile_colour: red\n", encoding="utf-8")
    with pytest.raises(ValueError, match="tile_colour"):
        LayoutConfig.from_yaml(str(path))


def test_from_yaml_rejects_non_mapping(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ValueError):
        LayoutConfig.from_yaml(str(path))


def test_from_yaml_rejects_non_mapping_section(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text("layout: 3\n", encoding="utf-8")
    with pytest.raises(ValueError, match="mapping"):
        LayoutConfig.from_yaml(str(path))


def test_from_yaml_rejects_invalid_yaml(tmp_path):
    path = tmp_path / "layout.yaml"
    path.write_text("slot_size: [28\n", encoding="utf-8")
    with pytest.raises(ValueError, match="not valid YAML"):
        LayoutConfig.from_yaml(str(path))
