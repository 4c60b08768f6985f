import io

import pytest

from sample_runner import print_banner, prompt, run_sample


def test_run_sample_success_returns_zero():
    assert run_sample(lambda: None) == 0


def test_run_sample_passes_through_status():
    assert run_sample(lambda: 3) == 3


def test_run_sample_http_error(http_error, capsys):
    def body():
        raise http_error(404, "Video not found.")

    assert run_sample(body) == 1
    assert "HttpError code: 404 : Video not found." in capsys.readouterr().err


def test_run_sample_io_error(capsys):
    def body():
        raise FileNotFoundError("sample-video.mp4")

    assert run_sample(body) == 1
    assert "IOError: sample-video.mp4" in capsys.readouterr().err


def test_run_sample_unexpected_error(capsys):
    def body():
        raise KeyError("snippet")

    assert run_sample(body) == 1
    err = capsys.readouterr().err
    assert "Unexpected error:" in err
    assert "Traceback" in err


def test_prompt_returns_answer(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("my title\n"))
    assert prompt("Title: ", default="New Broadcast") == "my title"


def test_prompt_uses_default(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n"))
    assert prompt("Title: ", default="New Broadcast") == "New Broadcast"


def test_prompt_required_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as exc:
        prompt("Video id: ", required_message="Video Id can't be empty!")
    assert exc.value.code == 1
    assert "Video Id can't be empty!" in capsys.readouterr().err


def test_print_banner(capsys):
    print_banner("Returned Streams")
    assert "================== Returned Streams ==================" in capsys.readouterr().out
