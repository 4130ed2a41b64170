import logging

from typer.testing import CliRunner

from keystore.cli import app

runner = CliRunner()


class TestCLIBasicFunctionality:
    def test_help_command_works(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        assert "load" in result.output
        assert "implementations" in result.output

    def test_implementations_lists_names(self):
        result = runner.invoke(app, ["implementations"])

        assert result.exit_code == 0
        assert result.output.split() == ["hashed", "list"]


class TestLoadCommand:
    def test_accepts_and_rejects(self):
        result = runner.invoke(app, ["load", "AA-00001", "AA-00001", " "])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0] == "accepted\t'AA-00001'"
        assert lines[1] == "rejected\t'AA-00001'"
        assert lines[2] == "rejected\t' '"
        assert "size: 1/32" in result.output

    def test_named_implementation(self):
        result = runner.invoke(app, ["load", "--impl", "hashed", "AA-00001"])

        assert result.exit_code == 0
        assert "size: 1/32" in result.output

    def test_implementation_from_env(self, monkeypatch):
        monkeypatch.setenv("KEYSTORE_IMPLEMENTATION", "hashed")

        result = runner.invoke(app, ["load", "AA-00001"])

        assert result.exit_code == 0

    def test_overflow(self):
        keys = [f"CC-{i:05d}" for i in range(32)] + ["AA-00001"]

        result = runner.invoke(app, ["load", *keys])

        assert result.exit_code == 0
        assert result.output.count("accepted") == 32
        assert "rejected\t'AA-00001'" in result.output
        assert "size: 32/32" in result.output

    def test_keys_from_file(self, tmp_path):
        key_file = tmp_path / "keys.txt"
        key_file.write_text("BB-00001\n\nBB-00002\nAA-00001\n", encoding="utf-8")

        result = runner.invoke(app, ["load", "AA-00001", "--file", str(key_file)])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[:5] == [
            "accepted\t'AA-00001'",
            "accepted\t'BB-00001'",
            "rejected\t''",
            "accepted\t'BB-00002'",
            "rejected\t'AA-00001'",
        ]
        assert "size: 3/32" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["load", "--file", str(tmp_path / "absent.txt")])

        assert result.exit_code != 0

    def test_unknown_implementation(self):
        result = runner.invoke(app, ["load", "--impl", "btree", "AA-00001"])

        assert result.exit_code == 1
        assert "btree" in result.output

    def test_invalid_env_implementation(self, monkeypatch):
        monkeypatch.setenv("KEYSTORE_IMPLEMENTATION", "btree")

        result = runner.invoke(app, ["load", "AA-00001"])

        assert result.exit_code == 1
        assert "KEYSTORE_IMPLEMENTATION" in result.output


class TestLoadLogging:
    def test_log_level_from_settings_applied(self, monkeypatch):
        monkeypatch.setenv("KEYSTORE_LOG_LEVEL", "ERROR")

        result = runner.invoke(app, ["load", "AA-00001"])

        assert result.exit_code == 0
        assert logging.getLogger("keystore.cli").level == logging.ERROR

    def test_debug_level_from_settings_applied(self, monkeypatch):
        monkeypatch.setenv("KEYSTORE_LOG_LEVEL", "debug")

        result = runner.invoke(app, ["load", "AA-00001"])

        assert result.exit_code == 0
        assert logging.getLogger("keystore.cli").level == logging.DEBUG

    def test_invalid_log_level(self, monkeypatch):
        monkeypatch.setenv("KEYSTORE_LOG_LEVEL", "chatty")

        result = runner.invoke(app, ["load", "AA-00001"])

        assert result.exit_code == 1
        assert "KEYSTORE_LOG_LEVEL" in result.output
