import io

from checkers.cli import main


def test_main_quit_reports_error(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
    assert main([]) == 0
    captured = capsys.readouterr()
    assert "CHECKERS GAME" in captured.out
    assert "Game ended with error: game quit by user" in captured.err
    assert "Game completed successfully!" not in captured.out


def test_main_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main() == 0
    captured = capsys.readouterr()
    assert "failed to read input" in captured.err


def test_main_plays_moves_before_quitting(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("5,0:4,1\nquit\n"))
    main([])
    captured = capsys.readouterr()
    assert "You moved: 5,0:4,1" in captured.out
    assert "Computer moved: " in captured.out
    assert "game quit by user" in captured.err