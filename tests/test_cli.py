import io
import os
import logging

import pytest

from matrixprobs.cli import main, run, setup_logging
from matrixprobs.config import Config
from matrixprobs.errors import SinkOpenError


def _read(path):
    with open(path) as fd:
        return fd.read()


def test_all_reports(tmp_path, reads_file):
    marginals = str(tmp_path / "marginals.txt")
    joints = str(tmp_path / "joints.txt")
    conditionals = str(tmp_path / "conditionals.txt")
    status = main(["--marginals", marginals, "--joints", joints,
                   "--conditionals", conditionals, "--input", reads_file])
    assert status == 0
    assert _read(marginals).splitlines() == [
        "P( A ) = 0.600000 ; 3",
        "P( B ) = 0.600000 ; 3",
        "P( C ) = 0.600000 ; 3",
        "P( D ) = 0.000000 ; 0",
    ]
    lines = _read(joints).splitlines()
    assert len(lines) == 16
    assert lines[1] == "P( A , B ) = 0.40000000 ; 2"
    lines = _read(conditionals).splitlines()
    assert len(lines) == 16
    assert lines[-1] == "P( D | D ) = NaN ; 0 , 0"


def test_stdin(tmp_path, monkeypatch, ab_lines):
    monkeypatch.setattr("sys.stdin", io.StringIO("".join(ab_lines)))
    conditionals = str(tmp_path / "conditionals.txt")
    assert main(["--conditionals", conditionals, "--limit", "2"]) == 0
    assert _read(conditionals).splitlines() == [
        "P( A | A ) = 1.00000000 ; 2 , 2",
        "P( B | A ) = 0.50000000 ; 1 , 2",
        "P( A | B ) = 1.00000000 ; 1 , 1",
        "P( B | B ) = 1.00000000 ; 1 , 1",
    ]


def test_only_requested_reports(tmp_path, reads_file):
    marginals = str(tmp_path / "marginals.txt")
    assert main(["--marginals", marginals, "--input", reads_file]) == 0
    assert os.listdir(str(tmp_path)) == ["marginals.txt"]


def test_no_reports(capsys, reads_file):
    assert main(["--input", reads_file]) == 1
    assert "usage: matrixprobs" in capsys.readouterr().err


def test_negative_limit(tmp_path, reads_file):
    marginals = str(tmp_path / "marginals.txt")
    assert main(["--marginals", marginals, "--limit", "-1",
                 "--input", reads_file]) == 1
    assert not os.path.exists(marginals)


def test_sink_open_error_before_input(tmp_path):
    config = Config(marginals=str(tmp_path / "missing" / "marginals.txt"))
    input_fd = io.StringIO("read\tA\nr1\t1\n")
    with pytest.raises(SinkOpenError) as excinfo:
        run(config, input_fd)
    assert excinfo.value.path == config.marginals
    assert input_fd.tell() == 0


def test_sink_open_error_status(tmp_path, reads_file):
    joints = str(tmp_path / "missing" / "joints.txt")
    assert main(["--joints", joints, "--input", reads_file]) == 1


def test_missing_input(tmp_path):
    marginals = str(tmp_path / "marginals.txt")
    missing = str(tmp_path / "missing.tsv")
    assert main(["--marginals", marginals, "--input", missing]) == 1


def test_bad_input(tmp_path, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("name\tA\nr1\t1\n"))
    marginals = str(tmp_path / "marginals.txt")
    assert main(["--marginals", marginals]) == 1
    # The output file is created up front but nothing is written.
    assert _read(marginals) == ""


def test_run_returns_state(tmp_path, ab_lines):
    config = Config(marginals=str(tmp_path / "marginals.txt"))
    state = run(config, iter(ab_lines))
    assert state.num_reads == 3
    assert state.joints is None


def test_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert capsys.readouterr().out.startswith("matrixprobs ")


@pytest.mark.parametrize("flags,level", [([], logging.INFO),
                                         (["-v"], logging.DEBUG),
                                         (["--quiet"], logging.WARNING)])
def test_verbosity(tmp_path, reads_file, flags, level):
    marginals = str(tmp_path / "marginals.txt")
    assert main(flags + ["--marginals", marginals,
                         "--input", reads_file]) == 0
    assert logging.getLogger("matrixprobs").level == level


def test_logging_does_not_propagate(logger):
    logger.propagate = True
    logger = setup_logging(logging.INFO)
    assert not logger.propagate
    assert len(logger.handlers) == 1
