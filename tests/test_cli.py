from types import SimpleNamespace

import pytest
import yaml

from archwizard.commands.setup import run_setup
from archwizard.commands.show import run_show
from archwizard.config_loader import build_parser
from archwizard.events import Key
from archwizard.persistence import PersistenceError

from conftest import full_run_events, type_text


def _setup_args(output, **overrides):
    values = dict(command="setup", output=str(output), theme="default",
                  no_splash=True, yes=False, log_file=None, verbose=False)
    values.update(overrides)
    return SimpleNamespace(**values)


def test_parser_defaults_to_no_subcommand() -> None:
    args = build_parser().parse_args([])
    assert args.command is None
    assert args.lang is None


def test_parser_setup_options() -> None:
    args = build_parser().parse_args(
        ["setup", "--output", "x.yaml", "--theme", "dark", "--no-splash", "-y", "--log-file", "w.log", "-v"]
    )
    assert args.command == "setup"
    assert args.output == "x.yaml"
    assert args.theme == "dark"
    assert args.no_splash and args.yes and args.verbose
    assert args.log_file == "w.log"


def test_parser_lang_before_subcommand_survives() -> None:
    args = build_parser().parse_args(["--lang", "en", "show"])
    assert args.lang == "en"
    assert args.file == "arch_config.yaml"


def test_parser_rejects_unknown_theme() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["setup", "--theme", "solarized"])


def test_setup_writes_file(tmp_path, fake_screen_factory) -> None:
    output = tmp_path / "arch_config.yaml"
    record = run_setup(_setup_args(output), screen_factory=fake_screen_factory(full_run_events()))
    data = yaml.safe_load(output.read_text(encoding="utf-8"))
    assert data["hostname"] == "archbox"
    assert data["bootloader"] == "grub"
    assert data["enable_ssh"] is False
    assert record.hostname == "archbox"


def test_setup_quit_writes_nothing(tmp_path, fake_screen_factory) -> None:
    output = tmp_path / "arch_config.yaml"
    result = run_setup(_setup_args(output), screen_factory=fake_screen_factory([Key.QUIT]))
    assert result is None
    assert not output.exists()


def test_setup_keeps_existing_file_when_declined(tmp_path, monkeypatch, fake_screen_factory) -> None:
    output = tmp_path / "arch_config.yaml"
    output.write_text("keep me\n", encoding="utf-8")
    monkeypatch.setattr("archwizard.commands.setup.confirm_overwrite", lambda path: False)
    assert run_setup(_setup_args(output), screen_factory=fake_screen_factory([])) is None
    assert output.read_text(encoding="utf-8") == "keep me\n"
    assert fake_screen_factory.created == []


def test_setup_yes_overwrites_without_asking(tmp_path, monkeypatch, fake_screen_factory) -> None:
    output = tmp_path / "arch_config.yaml"
    output.write_text("old\n", encoding="utf-8")

    def _never(path):
        raise AssertionError("should not ask")

    monkeypatch.setattr("archwizard.commands.setup.confirm_overwrite", _never)
    run_setup(_setup_args(output, yes=True), screen_factory=fake_screen_factory(full_run_events()))
    assert "archbox" in output.read_text(encoding="utf-8")


def test_setup_save_failure_exits_nonzero(tmp_path, fake_screen_factory) -> None:
    def _fail(record, path):
        raise PersistenceError("disk full")

    with pytest.raises(SystemExit) as exc:
        run_setup(_setup_args(tmp_path / "out.yaml"),
                  screen_factory=fake_screen_factory(full_run_events()), save=_fail)
    assert exc.value.code == 1
    assert fake_screen_factory.created[0].exited


def test_setup_display_failure_exits_nonzero(tmp_path) -> None:
    from archwizard.terminal import DisplayError

    def _no_tty():
        raise DisplayError("standard input is not a terminal")

    with pytest.raises(SystemExit) as exc:
        run_setup(_setup_args(tmp_path / "out.yaml"), screen_factory=_no_tty)
    assert exc.value.code == 1
    assert not (tmp_path / "out.yaml").exists()


def test_setup_log_file_records_commits_without_values(tmp_path, fake_screen_factory) -> None:
    log_file = tmp_path / "wizard.log"
    run_setup(_setup_args(tmp_path / "out.yaml", log_file=str(log_file), verbose=True),
              screen_factory=fake_screen_factory(full_run_events()))
    from loguru import logger
    logger.remove()
    log = log_file.read_text(encoding="utf-8")
    assert "answered hostname (1/12)" in log
    assert "archbox" not in log.replace(str(tmp_path), "")


def test_show_prints_saved_file(tmp_path, fake_screen_factory) -> None:
    output = tmp_path / "cfg.yaml"
    record = run_setup(_setup_args(output), screen_factory=fake_screen_factory(full_run_events()))
    assert run_show(SimpleNamespace(file=str(output))) == record


def test_show_missing_file_exits_nonzero(tmp_path) -> None:
    with pytest.raises(SystemExit) as exc:
        run_show(SimpleNamespace(file=str(tmp_path / "nope.yaml")))
    assert exc.value.code == 1


def test_main_dispatches_show(tmp_path, fake_screen_factory) -> None:
    from archwizard.cli import main

    output = tmp_path / "cfg.yaml"
    run_setup(_setup_args(output), screen_factory=fake_screen_factory(full_run_events()))
    main(["--lang", "en", "show", "--file", str(output)])


def _events_with_texts(*texts):
    """Type *texts* into the three free-text questions, default the rest."""
    events = []
    for text in texts:
        events += type_text(text) + [Key.CONFIRM]
    rest = full_run_events()
    confirms = 0
    while confirms < len(texts):
        confirms += rest.pop(0) is Key.CONFIRM
    return events + rest


def test_markup_like_answers_are_saved_and_shown_literally(tmp_path, fake_screen_factory, capsys) -> None:
    output = tmp_path / "cfg.yaml"
    events = _events_with_texts("box[/]1", "[red]box", "[")
    record = run_setup(_setup_args(output), screen_factory=fake_screen_factory(events))
    assert record.hostname == "box[/]1"
    assert record.username == "[red]box"
    out = capsys.readouterr().out
    assert "box[/]1" in out
    assert "[red]box" in out

    assert run_show(SimpleNamespace(file=str(output))) == record
    out = capsys.readouterr().out
    assert "box[/]1" in out
    assert "[red]box" in out


def test_status_lines_print_paths_literally(capsys) -> None:
    from archwizard.ui import fail, info, ok, step

    for helper in (step, ok, fail, info):
        helper("/tmp/[/]weird[red]path")
    out = capsys.readouterr().out
    assert out.count("/tmp/[/]weird[red]path") == 4


def test_unexpected_error_with_markup_is_reported(monkeypatch, capsys) -> None:
    from archwizard import cli

    def _boom(argv=None):
        raise RuntimeError("closing tag '[/]' has nothing to close")

    monkeypatch.setattr(cli, "main", _boom)
    with pytest.raises(SystemExit) as exc:
        cli.run()
    assert exc.value.code == 1
    assert "closing tag '[/]'" in capsys.readouterr().out


def test_cancelled_overwrite_prompt_exits_cleanly(monkeypatch, capsys) -> None:
    from archwizard import prompts

    class _Cancelled:
        def ask(self):
            return None

    monkeypatch.setattr(prompts.questionary, "confirm", lambda **kwargs: _Cancelled())
    with pytest.raises(SystemExit) as exc:
        prompts.confirm_overwrite("arch_config.yaml")
    assert exc.value.code == 0
    assert "arch_config.yaml was not touched" in capsys.readouterr().out
