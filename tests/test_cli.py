"""Tests for the camparams command line tool."""

import io

import pytest

from camparams.cli import main as cli


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    # Reconfiguring the root logger would drop pytest's capture handlers.
    monkeypatch.setattr(cli, "setup_logging_from_args", lambda args: None)


def _run(capsys, *argv):
    code = cli.main(list(argv))
    out, err = capsys.readouterr()
    return code, out, err


class TestDump:

    def test_dump(self, capsys):
        code, out, _ = _run(capsys, "dump", "zoom=3;zoom-supported=true")
        assert code == 0
        assert out == "dump: mMap.size = 2\nzoom: 3\nzoom-supported: true\n"

    def test_dump_from_stdin(self, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("zoom=3\n"))
        code, out, _ = _run(capsys, "dump")
        assert code == 0
        assert out == "dump: mMap.size = 1\nzoom: 3\n"

    def test_dump_skips_malformed(self, capsys):
        code, out, _ = _run(capsys, "dump", "badentrywithoutequals;zoom=3")
        assert code == 0
        assert out == "dump: mMap.size = 1\nzoom: 3\n"


class TestGet:

    def test_get_string(self, capsys):
        code, out, _ = _run(capsys, "get", "preview-format=yuv420sp", "preview-format")
        assert code == 0
        assert out == "yuv420sp\n"

    def test_get_typed(self, capsys):
        text = "preview-size-values=800x600, 480x320;preview-fps-range=15000,30000;zoom=3"
        assert _run(capsys, "get", text, "preview-size-values", "--type", "sizes")[1] == "800x600,480x320\n"
        assert _run(capsys, "get", text, "preview-fps-range", "--type", "range")[1] == "15000,30000\n"
        assert _run(capsys, "get", text, "zoom", "--type", "int")[1] == "3\n"
        assert _run(capsys, "get", text, "zoom", "--type", "float")[1] == "3.0\n"

    def test_get_malformed_typed_value_prints_sentinel(self, capsys):
        code, out, _ = _run(capsys, "get", "preview-size=big", "preview-size", "--type", "size")
        assert code == 0
        assert out == "-1x-1\n"

    def test_get_huge_number_prints_sentinel(self, capsys):
        huge = "9" * 5000
        text = f"zoom={huge};preview-size={huge}x480"
        assert _run(capsys, "get", text, "zoom", "--type", "int")[:2] == (0, "-1\n")
        assert _run(capsys, "get", text, "preview-size", "--type", "size")[:2] == (0, "-1x-1\n")

    def test_get_missing_key(self, capsys):
        code, out, err = _run(capsys, "get", "zoom=3", "max-zoom")
        assert code == 1
        assert out == ""
        assert "Key not found: max-zoom" in err


class TestSetRemove:

    def test_set(self, capsys):
        code, out, _ = _run(capsys, "set", "zoom=3", "zoom=4", "zoom-supported=true")
        assert code == 0
        assert out == "zoom=4;zoom-supported=true\n"

    def test_set_reserved_character_fails(self, capsys):
        code, out, err = _run(capsys, "set", "zoom=3", "zoom=4;5")
        assert code == 1
        assert out == ""
        assert err.startswith("Error: ")

    def test_set_requires_key_value(self, capsys):
        with pytest.raises(SystemExit):
            cli.main(["set", "zoom=3", "no-equals"])

    def test_remove(self, capsys):
        code, out, _ = _run(capsys, "remove", "zoom=3;zoom-supported=true;max-zoom=9", "zoom", "absent")
        assert code == 0
        assert out == "zoom-supported=true;max-zoom=9\n"


class TestProfile:

    def test_lists_active_groups(self, capsys, tmp_path):
        profile = tmp_path / "profile.txt"
        profile.write_text("feature.sony = true\nfeature.qcom = true\nfeature.lg = false\n", encoding="utf-8")
        code, out, _ = _run(capsys, "profile", "--config", str(profile))
        assert code == 0
        assert out == "qcom\nsony\n"

    def test_enable_disable_saves_profile(self, capsys, tmp_path):
        profile = tmp_path / "profile.txt"
        profile.write_text("feature.qcom = true\nfeature.lg = false\n", encoding="utf-8")

        code, out, _ = _run(capsys, "profile", "--config", str(profile), "--enable", "lg", "--disable", "qcom")
        assert code == 0
        assert out == "lg\n"
        text = profile.read_text(encoding="utf-8")
        assert "feature.qcom = false" in text
        assert "feature.lg = true" in text

    def test_enable_unknown_group(self, capsys, tmp_path):
        profile = tmp_path / "profile.txt"
        profile.write_text("feature.qcom = true\n", encoding="utf-8")
        code, _, err = _run(capsys, "profile", "--config", str(profile), "--enable", "nokia")
        assert code == 1
        assert "Unknown feature group" in err
        assert profile.read_text(encoding="utf-8") == "feature.qcom = true\n"

    def test_enable_missing_profile(self, capsys, tmp_path):
        code, _, err = _run(capsys, "profile", "--config", str(tmp_path / "absent.txt"), "--enable", "lg")
        assert code == 1
        assert "could not write profile" in err

    def test_filter(self, capsys, tmp_path):
        profile = tmp_path / "profile.txt"
        profile.write_text("feature.qcom = true\n", encoding="utf-8")
        code, out, _ = _run(
            capsys, "profile", "--config", str(profile), "--filter", "zoom=3;sony-iso=100;touch-index-af=1x2"
        )
        assert code == 0
        assert out == "zoom=3;touch-index-af=1x2\n"


def test_log_level_choices():
    parser = cli.build_parser()
    args = parser.parse_args(["--log-level", "debug", "dump", "a=1"])
    assert args.log_level == "debug"
    assert args.command == "dump"
    with pytest.raises(SystemExit):
        parser.parse_args(["--log-level", "loud", "dump"])
