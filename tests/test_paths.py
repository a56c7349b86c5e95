from serialtui.paths import app_data_directory, history_file, load_history, save_history


def test_history_file_location():
    path = history_file()
    assert path.name == "history.txt"
    assert path.parent.name == "tui-serial"
    assert path.parent.parent == app_data_directory()


def test_missing_file_loads_nothing(tmp_path):
    assert load_history(tmp_path / "absent.txt") == []


def test_round_trip_creates_folders(tmp_path):
    target = tmp_path / "tui-serial" / "history.txt"
    commands = ["AT", "AT+RST", "hello world"]
    save_history(target, commands)
    assert target.exists()
    assert load_history(target) == commands


def test_save_replaces_previous_content(tmp_path):
    target = tmp_path / "history.txt"
    save_history(target, ["one", "two"])
    save_history(target, ["three"])
    assert load_history(target) == ["three"]


def test_file_format_is_one_per_line(tmp_path):
    target = tmp_path / "history.txt"
    save_history(target, ["a", "b"])
    assert target.read_text(encoding="utf-8") == "a\nb\n"