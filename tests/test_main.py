import io
import logging

import pytest

import main as cli

MESSAGE = "* B Beta I II III AAAA (TD) (KC) (JZ)\nI WAS SCARED OF CODING IN JAVA\n"


@pytest.fixture()
def message_file(tmp_path):
    path = tmp_path / "msg.in"
    path.write_text(MESSAGE, encoding="utf-8")
    return path


def test_stdout(default_conf, message_file, capsys):
    assert cli.main([str(default_conf), str(message_file)]) == 0
    assert capsys.readouterr().out == "HGJNB OKDWA LBFKU CMUTJ ZUIO\n"


def test_output_file(default_conf, message_file, tmp_path):
    out = tmp_path / "msg.out"
    assert cli.main([str(default_conf), str(message_file), str(out)]) == 0
    assert out.read_text(encoding="utf-8") == "HGJNB OKDWA LBFKU CMUTJ ZUIO\n"


def test_stdin(default_conf, monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(MESSAGE))
    assert cli.main([str(default_conf)]) == 0
    assert capsys.readouterr().out.startswith("HGJNB")


def test_domain_error_exit_code(default_conf, tmp_path, capsys):
    bad = tmp_path / "bad.in"
    bad.write_text("* B Beta I II III AAAA (ABC)\nHELLO\n", encoding="utf-8")
    assert cli.main([str(default_conf), str(bad)]) == 1
    err = capsys.readouterr().err
    assert err.startswith("Error: ")
    assert len(err.splitlines()) == 1


def test_missing_files(default_conf, tmp_path, capsys):
    assert cli.main([str(tmp_path / "none.conf"), str(tmp_path / "none.in")]) == 1
    assert "could not open" in capsys.readouterr().err
    assert cli.main([str(default_conf), str(tmp_path / "none.in")]) == 1
    assert "could not open" in capsys.readouterr().err


def test_debug_component(default_conf, message_file, caplog):
    caplog.set_level(logging.DEBUG, logger="ENIGMA")
    assert cli.main(["--debug", "stepping", str(default_conf), str(message_file)]) == 0
    assert any("[STEPPING]" in rec.getMessage() for rec in caplog.records)
    assert not any("[ENCIPHER]" in rec.getMessage() for rec in caplog.records)


def test_unknown_debug_component(default_conf):
    with pytest.raises(SystemExit):
        cli.main(["--debug", "everything", str(default_conf)])


def test_log_file_without_debug_is_rejected(default_conf, message_file, tmp_path, capsys):
    with pytest.raises(SystemExit):
        cli.main(["--log-file", str(tmp_path / "run.log"), str(default_conf), str(message_file)])
    assert "--log-file needs" in capsys.readouterr().err
