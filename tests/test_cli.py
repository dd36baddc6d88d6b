import os
import subprocess
import sys

import pytest

from pyargo.__main__ import main

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def run_cli(*args, stdin=None):
    return subprocess.run(
        [sys.executable, "-m", "pyargo", *args],
        cwd=REPO_ROOT,
        input=stdin,
        capture_output=True,
        text=True,
    )


@pytest.fixture
def write_doc(tmp_path):
    def _write(text, name="doc.argo"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)

    return _write


def test_valid_document_prints_canonical_form(write_doc):
    cp = run_cli(write_doc('{"a":1,"b":"x\\"y"}\n'))
    assert cp.returncode == 0
    assert cp.stdout == '{"a":1,"b":"x\\"y"}\n'


def test_unexpected_token_is_printed(write_doc):
    cp = run_cli(write_doc('{"a":}'))
    assert cp.returncode == 1
    assert cp.stdout == "unexpected token '}'\n"


def test_end_of_input_is_printed(write_doc):
    cp = run_cli(write_doc('{"a":1'))
    assert cp.returncode == 1
    assert cp.stdout == "unexpected end of input\n"


def test_key_failure_prints_nothing(write_doc):
    cp = run_cli(write_doc("{:1}"))
    assert cp.returncode == 1
    assert cp.stdout == ""


def test_reads_standard_input():
    cp = run_cli("-", stdin="-42")
    assert cp.returncode == 0
    assert cp.stdout == "-42\n"


def test_missing_file(tmp_path):
    cp = run_cli(str(tmp_path / "nope.argo"))
    assert cp.returncode == 1
    assert "cannot read" in cp.stderr


def test_requires_exactly_one_argument():
    assert run_cli().returncode != 0


def test_options(write_doc, capsys):
    path = write_doc('{"a":{"b":1}}tail')
    assert main([path]) == 1
    assert capsys.readouterr().out == "unexpected token 't'\n"

    assert main([path, "--allow-trailing"]) == 0
    assert capsys.readouterr().out == '{"a":{"b":1}}\n'

    assert main([path, "--allow-trailing", "--max-depth", "1"]) == 1
    assert capsys.readouterr().out == "maximum nesting depth exceeded\n"


@pytest.mark.parametrize("depth", ["-1", "100000", "deep"])
def test_bad_max_depth_is_a_usage_error(write_doc, capsys, depth):
    with pytest.raises(SystemExit) as ei:
        main([write_doc("1"), "--max-depth", depth])
    assert ei.value.code == 2
    assert "--max-depth" in capsys.readouterr().err


def test_undecodable_bytes_pass_through(tmp_path):
    path = tmp_path / "latin1.argo"
    path.write_bytes(b'{"caf\xe9":"\xff\\"x"}\n')
    cp = subprocess.run(
        [sys.executable, "-m", "pyargo", str(path)],
        cwd=REPO_ROOT,
        capture_output=True,
    )
    assert cp.returncode == 0
    assert cp.stdout == b'{"caf\xe9":"\xff\\"x"}\n'
    assert cp.stderr == b""
