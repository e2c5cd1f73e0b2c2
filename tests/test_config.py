from scribble.config import DEFAULT_CONFIG, coerce_color, coerce_int, load_config


def test_load_config_overrides(tmp_path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("window:\n  title: Scratch\nbrush:\n  size: 10\n", encoding="utf-8")
    monkeypatch.setenv("SCRIBBLE_CONFIG", str(config_path))

    config = load_config()
    assert config["window"]["title"] == "Scratch"
    assert config["window"]["border_width"] == 8
    assert config["brush"]["size"] == 10
    assert config["brush"]["color"] == [0, 0, 0]


def test_load_config_defaults_without_file(tmp_path, monkeypatch):
    monkeypatch.delenv("SCRIBBLE_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)

    config = load_config()
    assert config["window"]["title"] == "Drawing Area"
    assert config["brush"]["size"] == 6
    assert config["background"] == [255, 255, 255]


def test_load_config_ignores_non_mapping_document(tmp_path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text("- just\n- a list\n", encoding="utf-8")
    monkeypatch.setenv("SCRIBBLE_CONFIG", str(config_path))

    assert load_config()["window"]["width"] == 400


def test_coerce_color_clamps_and_falls_back():
    assert coerce_color([300, -5, "12"], (1, 2, 3)) == (255, 0, 12)
    assert coerce_color("red", (1, 2, 3)) == (1, 2, 3)
    assert coerce_color(None, (1, 2, 3)) == (1, 2, 3)


def test_coerce_int_clamps_and_falls_back():
    assert coerce_int("5", 100) == 5
    assert coerce_int(-2, 100) == 0
    assert coerce_int(0, 6, minimum=1) == 1
    assert coerce_int("bad", 100) == 100


def test_load_config_returns_independent_copy_of_defaults(tmp_path, monkeypatch):
    monkeypatch.delenv("SCRIBBLE_CONFIG", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)

    config = load_config()
    config["window"]["title"] = "Changed"
    config["brush"]["color"].append(1)

    assert DEFAULT_CONFIG["window"]["title"] == "Drawing Area"
    assert DEFAULT_CONFIG["brush"]["color"] == [0, 0, 0]
