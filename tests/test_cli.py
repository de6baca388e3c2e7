import pytest

from ttodo import cli, tui
from ttodo.models import Command
from ttodo.core import dispatch


class TestErrors:
    def test_missing_argument(self, capsys):
        with pytest.raises(SystemExit) as exc:
            cli.main([])
        assert exc.value.code == "ERROR: no input file is provided"
        assert "usage: ttodo" in capsys.readouterr().err

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "tasks.txt"
        path.write_text("TODO: a\nDONE: b\nnope\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc:
            cli.main([str(path)])
        assert exc.value.code == f"{path}:3: ERROR: ill-formed item line"

    def test_file_that_is_not_utf8(self, tmp_path):
        path = tmp_path / "tasks.txt"
        path.write_bytes(b"TODO: caf\xe9\n")
        with pytest.raises(SystemExit) as exc:
            cli.main([str(path)])
        assert exc.value.code.startswith(f"ERROR: could not load file {path}: ")

    def test_unreadable_file(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            cli.main([str(tmp_path)])
        assert exc.value.code.startswith(f"ERROR: could not load file {tmp_path}")


class TestSession:
    def test_new_file_is_saved_on_quit(self, tmp_path, monkeypatch, capsys):
        path = tmp_path / "new.txt"
        seen = {}

        def fake_tui(p, board):
            seen["path"] = p
            board.pending.extend(["Learn Rust", "Learn Zig"])
            dispatch(board, Command.TRANSFER)

        monkeypatch.setattr(tui, "main", fake_tui)
        cli.main([str(path)])

        assert seen["path"] == str(path)
        assert path.read_text(encoding="utf-8") == "TODO: Learn Zig\nDONE: Learn Rust\n"
        assert f"Saved state to {path}" in capsys.readouterr().out

    def test_log_file(self, tmp_path, monkeypatch):
        path = tmp_path / "tasks.txt"
        path.write_text("TODO: a\n", encoding="utf-8")
        log = tmp_path / "ttodo.log"
        seen = []
        monkeypatch.setattr(tui, "main", lambda p, board: None)
        monkeypatch.setattr(cli, "configure_logging", lambda f: seen.append(f))
        cli.main(["--log-file", str(log), str(path)])
        assert seen == [str(log)]
        assert path.read_text(encoding="utf-8") == "TODO: a\n"
