import pytest

from analog_clock.config import ClockConfig, ClockPresets, load_clock_config


def test_default_config_is_valid():
    config = ClockConfig(fallback_to_default_font=True)
    assert config.validate() == []
    assert config.refresh_period_ms == 180


def test_default_style_from_theme_colors():
    config = ClockConfig(border_color="#102030")
    assert config.default_style().border_color == 0xFF102030


def test_validate_reports_bad_values():
    config = ClockConfig(dot_color="blue", refresh_period_ms=0, width=-1,
                         canvas_background_color=(0, 0, 300))
    issues = config.validate()
    assert len(issues) == 4


def test_presets():
    assert ClockPresets.names() == ["default", "big", "colorful"]
    big = ClockPresets.get("big")
    assert (big.width, big.height) == (1000, 1000)
    colorful = ClockPresets.get("colorful")
    assert colorful.default_style().clock_face_background_color == 0x33FF0000


def test_presets_layer_over_base_without_mutating_it():
    base = ClockConfig(second_hand_color=0xFF00FF00)
    big = ClockPresets.get("big", base)
    assert big.second_hand_color == 0xFF00FF00
    assert base.width is None


def test_unknown_preset():
    with pytest.raises(KeyError):
        ClockPresets.get("tiny")


def test_from_dict_accepts_option_names_and_ignores_unknown():
    config = ClockConfig.from_dict({"borderColor": 0xFF000000, "refresh_period_ms": 90, "bogus": 1})
    assert config.border_color == 0xFF000000
    assert config.refresh_period_ms == 90


def test_load_yaml_config(tmp_path):
    path = tmp_path / "clock.yaml"
    path.write_text(
        "clockFaceBackgroundColor: '#FAFAFA'\n"
        "refresh_period_ms: 250\n"
        "canvas_background_color: [0, 0, 0]\n",
        encoding="utf-8",
    )
    config = load_clock_config(str(path))
    assert config.refresh_period_ms == 250
    assert config.canvas_background_color == (0, 0, 0)
    assert config.default_style().clock_face_background_color == 0xFFFAFAFA


def test_load_missing_config_returns_defaults(tmp_path):
    assert load_clock_config(str(tmp_path / "absent.yaml")) == ClockConfig()
    assert load_clock_config(None) == ClockConfig()


@pytest.mark.parametrize("content", ["- just\n- a list\n", "key: [unclosed\n"])
def test_load_corrupt_config_returns_base(tmp_path, content):
    path = tmp_path / "clock.yaml"
    path.write_text(content, encoding="utf-8")
    base = ClockConfig(default_size_px=420)
    assert load_clock_config(str(path), base) == base
