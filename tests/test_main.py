import argkit
from argkit import const


def test_main_parses_args(capsys):
    res = argkit.main(["--schema=count:usize,verbose", "--", "--count=5", "--verbose"])
    out = capsys.readouterr().out.splitlines()
    assert res == 0
    assert len(out) == 2
    assert "count" in out[0] and "5" in out[0] and "usize" in out[0]
    assert "verbose" in out[1]


def test_main_schema_as_separate_token(capsys):
    res = argkit.main(["--schema", "name:string", "--", "--name", "foo"])
    out = capsys.readouterr().out
    assert res == 0
    assert "'foo'" in out


def test_main_no_args(capsys):
    assert argkit.main([]) == 0
    assert capsys.readouterr().out == ""


def test_main_unknown_option(capsys):
    res = argkit.main(["--schema=count:usize", "--", "--other"])
    captured = capsys.readouterr()
    assert res == 1
    assert "Unknown argument 'other'" in captured.err
    assert "Usage:" in captured.out


def test_main_bad_schema(capsys):
    res = argkit.main(["--schema=count:float", "--", "--count=1"])
    assert res == 1
    assert "float" in capsys.readouterr().err


def test_main_unknown_front_option(capsys):
    assert argkit.main(["--frobnicate"]) == 1
    assert "frobnicate" in capsys.readouterr().err


def test_main_empty_schema_warns(capsys):
    assert argkit.main(["--", "--count=1"]) == 1
    assert "empty" in capsys.readouterr().err


def test_main_version(capsys):
    assert argkit.main(["--version"]) == 0
    assert const.VERSION_STR in capsys.readouterr().out


def test_main_extra_args_env(capsys, monkeypatch):
    monkeypatch.setenv(const.EXTRA_ARGS_ENV, "--schema=verbose")
    monkeypatch.setattr("sys.argv", ["argkit", "--", "--verbose"])
    assert argkit.main() == 0
    assert "verbose" in capsys.readouterr().out
