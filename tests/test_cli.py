"""
CLI Tests
=========

One-shot commands, REPL line handling and the argparse entry point.
"""

import io

import pytest
import yaml

from Dotty.cli.__main__ import build_parser, main, split_payload
from Dotty.cli.config.defaults import DEFAULT_CONFIG_YAML
from Dotty.cli.repl.session import ConversionMode
from Dotty.cli.ui.themes import get_theme


class TestDottyCLI:

    def test_convert_prints_bare_result(self, make_cli, console_output):
        cli = make_cli()
        assert cli.convert("encode", "SOS") == "... --- ..."
        assert console_output.getvalue() == "... --- ...\n"

    def test_convert_decode(self, make_cli, console_output):
        cli = make_cli()
        assert cli.convert("decode", ".... . .-.. .-.. --- / .-- --- .-. .-.. -..") == "HELLO WORLD"
        assert "HELLO WORLD" in console_output.getvalue()

    def test_starts_in_configured_mode(self, make_cli, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("converter:\n  default_mode: decode\n")

        cli = make_cli(config_path=str(path))
        assert cli.session.mode is ConversionMode.DECODE

    def test_line_is_converted_in_active_mode(self, make_cli, console_output):
        cli = make_cli()
        assert cli.handle_line("sos") is True
        assert cli.session.output_text == "... --- ..."
        assert "... --- ..." in console_output.getvalue()

    def test_blank_line_is_ignored(self, make_cli):
        cli = make_cli()
        assert cli.handle_line("   ") is True
        assert cli.session.input_text == ""

    def test_mode_commands(self, make_cli, console_output):
        cli = make_cli()
        cli.handle_line("/decode")
        assert cli.session.mode is ConversionMode.DECODE

        cli.handle_line("... --- ...")
        assert cli.session.output_text == "SOS"

        cli.handle_line("/mode")
        assert cli.session.mode is ConversionMode.ENCODE
        assert cli.session.output_text == ""

        cli.handle_line("/encode")
        assert "Already in encode mode" in console_output.getvalue()

    def test_boundary_is_not_a_command(self, make_cli):
        cli = make_cli()
        cli.handle_line("/decode")
        cli.handle_line("/")
        assert cli.session.output_text == " "

    def test_copy_command(self, make_cli, fake_clipboard):
        cli = make_cli()
        cli.handle_line("SOS")
        cli.handle_line("/copy")

        assert fake_clipboard.copied == ["... --- ..."]
        assert cli.session.copy_status == "Copied to clipboard"

    def test_copy_with_nothing_converted(self, make_cli, console_output, fake_clipboard):
        cli = make_cli()
        cli.handle_line("/copy")

        assert fake_clipboard.copied == []
        assert "Nothing to copy" in console_output.getvalue()

    def test_auto_copy(self, make_cli, tmp_path, fake_clipboard):
        path = tmp_path / "config.yaml"
        path.write_text("session:\n  auto_copy: true\n")

        cli = make_cli(config_path=str(path))
        cli.handle_line("E")
        assert fake_clipboard.copied == ["."]

    def test_clear_command(self, make_cli):
        cli = make_cli()
        cli.handle_line("SOS")
        cli.handle_line("/clear")
        assert cli.session.output_text == ""

    def test_table_command(self, make_cli, console_output):
        cli = make_cli()
        cli.handle_line("/table")
        output = console_output.getvalue()
        assert "Morse Symbol Table" in output
        assert "-.-.--" in output

    def test_help_command(self, make_cli, console_output):
        cli = make_cli()
        cli.handle_line("/help")
        assert "/copy" in console_output.getvalue()

    @pytest.mark.parametrize("command", ["/quit", "/exit", "/QUIT"])
    def test_quit(self, make_cli, command):
        cli = make_cli()
        assert cli.handle_line(command) is False

    def test_line_starting_with_command_word_is_text(self, make_cli):
        cli = make_cli()
        assert cli.handle_line("/quit smoking today") is True
        assert cli.session.input_text == "/quit smoking today"
        assert cli.session.output_text.endswith("- --- -.. .- -.--")

    def test_theme_command_switches_and_saves(self, make_cli, home_dir, console_output):
        cli = make_cli()
        assert cli.handle_line("/theme Matrix") is True

        assert cli.renderer.theme == get_theme("matrix")
        assert "Theme set to matrix" in console_output.getvalue()
        saved = yaml.safe_load((home_dir / ".dotty" / "config.yaml").read_text())
        assert saved["ui"]["theme"] == "matrix"
        assert saved["no_color"] is False

    def test_theme_command_writes_custom_config(self, make_cli, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("converter:\n  default_mode: decode\n")

        cli = make_cli(config_path=str(path))
        cli.handle_line("/theme dark")

        saved = yaml.safe_load(path.read_text())
        assert saved["ui"]["theme"] == "dark"
        assert saved["converter"]["default_mode"] == "decode"

    def test_unknown_theme(self, make_cli, home_dir, console_output):
        cli = make_cli()
        cli.handle_line("/theme neon")

        assert "Unknown theme 'neon'" in console_output.getvalue()
        assert cli.renderer.theme == get_theme("default")
        assert not (home_dir / ".dotty" / "config.yaml").exists()

    def test_theme_without_name_is_text(self, make_cli):
        cli = make_cli()
        cli.handle_line("/theme")
        assert cli.session.input_text == "/theme"

    def test_configure_unknown_key(self, make_cli, console_output):
        cli = make_cli()
        assert cli.configure("get", key="ui.nope") == 1
        assert "Unknown setting: ui.nope" in console_output.getvalue()


class TestMain:

    def test_parser_commands(self):
        args = build_parser().parse_args(["encode", "Hello", "World"])
        assert args.command == "encode"
        assert args.text == ["Hello", "World"]

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert capsys.readouterr().out.startswith("Dotty CLI v")

    def test_encode_arguments(self, home_dir, capsys):
        assert main(["encode", "Hello", "World"]) == 0
        assert capsys.readouterr().out == ".... . .-.. .-.. --- / .-- --- .-. .-.. -..\n"

    def test_decode_arguments(self, home_dir, capsys):
        assert main(["decode", "...", "---", "..."]) == 0
        assert capsys.readouterr().out == "SOS\n"

    def test_decode_stdin(self, home_dir, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("... --- ...\n"))
        assert main(["decode"]) == 0
        assert capsys.readouterr().out == "SOS\n"

    def test_encode_stdin_drops_newline(self, home_dir, capsys, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("sos\n"))
        assert main(["--no-color", "encode"]) == 0
        assert capsys.readouterr().out == "... --- ...\n"

    def test_table(self, home_dir, capsys):
        assert main(["table"]) == 0
        assert "Morse Symbol Table" in capsys.readouterr().out

    def test_errors_become_exit_code(self, home_dir, capsys, monkeypatch):
        def _boom(*args, **kwargs):
            raise RuntimeError("broken")

        monkeypatch.setattr("Dotty.cli.app.DottyCLI.convert", _boom)
        assert main(["encode", "SOS"]) == 1
        assert "Error: broken" in capsys.readouterr().err

    def test_decode_tokens_that_look_like_options(self, home_dir, capsys):
        assert main(["decode", "-.-", "---"]) == 0
        assert capsys.readouterr().out == "KO\n"

    def test_decode_after_end_of_options(self, home_dir, capsys):
        assert main(["decode", "--", "..."]) == 0
        assert capsys.readouterr().out == "S\n"

    def test_double_dash_inside_code_is_a_letter(self, home_dir, capsys):
        assert main(["decode", ".-", "--", "..."]) == 0
        assert capsys.readouterr().out == "AMS\n"

    def test_global_options_before_decode(self, home_dir, tmp_path, capsys):
        path = tmp_path / "custom.yaml"
        path.write_text("ui:\n  theme: dark\n")

        assert main(["--no-color", "-c", str(path), "decode", "-", "."]) == 0
        assert capsys.readouterr().out == "TE\n"

    @pytest.mark.parametrize("argv,head,words", [
        (["decode", "-.-"], ["decode"], ["-.-"]),
        (["--debug", "encode", "--", "-x"], ["--debug", "encode"], ["-x"]),
        (["--config", "decode", "decode", "..."], ["--config", "decode", "decode"], ["..."]),
        (["decode", "--help"], ["decode", "--help"], None),
        (["table"], ["table"], None),
        ([], [], None),
    ])
    def test_split_payload(self, argv, head, words):
        assert split_payload(argv) == (head, words)

    def test_config_init(self, home_dir):
        assert main(["config", "init"]) == 0
        path = home_dir / ".dotty" / "config.yaml"
        assert path.read_text() == DEFAULT_CONFIG_YAML

        assert main(["config", "init"]) == 1

    def test_config_init_force(self, home_dir):
        path = home_dir / ".dotty" / "config.yaml"
        path.parent.mkdir()
        path.write_text("debug: true\n")

        assert main(["config", "init", "--force"]) == 0
        assert path.read_text() == DEFAULT_CONFIG_YAML

    def test_config_set_then_get(self, home_dir, capsys):
        assert main(["config", "set", "session.auto_copy", "true"]) == 0
        saved = yaml.safe_load((home_dir / ".dotty" / "config.yaml").read_text())
        assert saved["session"]["auto_copy"] is True

        capsys.readouterr()
        assert main(["config", "get", "session.auto_copy"]) == 0
        assert capsys.readouterr().out == "True\n"

    def test_config_set_rejects_bad_value(self, home_dir):
        assert main(["config", "set", "ui.max_width", "wide"]) == 1
        assert not (home_dir / ".dotty" / "config.yaml").exists()
