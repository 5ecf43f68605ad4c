import csv
import io

import pytest

from schedsim.cli import main


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    path = tmp_path / "procesos.txt"
    path.write_text("P1, 3, 0, 2\nP2, 2, 1, 1\n", encoding="utf-8")
    return tmp_path


def _run(workdir, monkeypatch, stdin_text, *extra):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin_text))
    return main(["--processes", str(workdir / "procesos.txt"), "--delay", "0", *extra])


def _rows(path):
    with open(path, newline="", encoding="utf-8") as handle:
        return list(csv.reader(handle))


@pytest.mark.parametrize(
    "choice, filename",
    [
        ("1\n", "gantt_fcfs.csv"),
        ("2\n", "gantt_sjf.csv"),
        ("3\n2\n", "gantt_rr.csv"),
        ("4\n", "gantt_srtf.csv"),
        ("5\n", "gantt_priority.csv"),
    ],
)
def test_scheduling_options_write_gantt(workdir, monkeypatch, choice, filename):
    assert _run(workdir, monkeypatch, choice) == 0
    rows = _rows(workdir / filename)
    assert rows[0] == ["Proceso", "Inicio", "Fin"]
    assert {row[0] for row in rows[1:]} == {"P1", "P2"}


def test_fcfs_prints_banner(workdir, monkeypatch, capsys):
    assert _run(workdir, monkeypatch, "1\n") == 0
    assert "=== Simulación FCFS ===" in capsys.readouterr().out


@pytest.mark.parametrize(
    "choice, filename",
    [("6\n1\n", "mutex_resultado.csv"), ("6\n2\n", "semaforo_resultado.csv")],
)
def test_sync_options_write_csv(workdir, monkeypatch, choice, filename):
    assert _run(workdir, monkeypatch, choice) == 0
    rows = _rows(workdir / filename)
    assert rows[0] == ["Proceso", "Inicio", "Duracion"]
    assert sorted(row[0] for row in rows[1:]) == ["1", "2", "3"]


def test_invalid_option_fails(workdir, monkeypatch, capsys):
    assert _run(workdir, monkeypatch, "9\n") == 1
    assert "Opción inválida." in capsys.readouterr().err


def test_invalid_sync_option_fails(workdir, monkeypatch, capsys):
    assert _run(workdir, monkeypatch, "6\n3\n") == 1
    assert "Opción de sincronización inválida." in capsys.readouterr().err


def test_missing_input_fails(workdir, monkeypatch):
    assert _run(workdir, monkeypatch, "") == 1


def test_invalid_quantum_fails(workdir, monkeypatch):
    assert _run(workdir, monkeypatch, "3\nabc\n") == 1


def test_missing_process_file_is_reported(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr("sys.stdin", io.StringIO("2\n"))
    missing = tmp_path / "nope.txt"
    assert main(["--processes", str(missing), "--delay", "0"]) == 0
    assert f"Error al abrir el archivo: {missing}" in capsys.readouterr().err
    assert _rows(tmp_path / "gantt_sjf.csv") == [["Proceso", "Inicio", "Fin"]]