"""Integration tests for the command-line interface.

These tests run the CLI in a subprocess and cover:
- The reference listing and its indentation
- Display units and threshold boundaries
- Output files and summary destinations
- Error reporting and exit codes
- Broken pipes
"""

import os
import subprocess
import sys

import pytest

pytestmark = pytest.mark.skipif(
    "not config.getoption('--run-cli-tests')", reason="Only run when --run-cli-tests is given"
)


def run_cli(args, cwd=None, timeout=10):
    """Run the dirsize CLI with the given arguments.

    Args:
        args: List of CLI arguments
        cwd: Working directory
        timeout: Maximum time to wait for command to complete

    Returns:
        CompletedProcess object with stdout/stderr as text
    """
    cmd = [sys.executable, "-m", "dirsize.cli.main"] + args
    return subprocess.run(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True, cwd=cwd, timeout=timeout)


def test_cli_reference_listing(sample_tree):
    result = run_cli([str(sample_tree), "-s", "1M", "-u", "M"])

    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert sorted(lines) == sorted(["big.txt 2.0M", "sub 3.0005M", "\tbigger.txt 3.0M"])
    assert lines[lines.index("sub 3.0005M") + 1] == "\tbigger.txt 3.0M"
    assert "small.txt" not in result.stdout
    assert result.stderr == ""


def test_cli_default_display_unit_is_kilobytes(sample_tree):
    result = run_cli([str(sample_tree), "-s", "2000000"])

    assert result.returncode == 0
    assert sorted(result.stdout.splitlines()) == sorted(["big.txt 2000.0K", "sub 3000.5K", "\tbigger.txt 3000.0K"])


def test_cli_inclusive_threshold(sample_tree):
    result = run_cli([str(sample_tree), "-s", "500", "-u", "b"])

    assert result.returncode == 0
    assert "\tsmall.txt 500.0b" in result.stdout.splitlines()

    result = run_cli([str(sample_tree), "-s", "501", "-u", "b"])
    assert "small.txt" not in result.stdout


def test_cli_nothing_above_threshold(sample_tree):
    result = run_cli([str(sample_tree), "-s", "1G"])

    assert result.returncode == 0
    assert result.stdout == ""


def test_cli_output_file_and_summary(sample_tree, tmp_path):
    output = tmp_path / "usage.txt"
    result = run_cli([str(sample_tree), "-s", "1M", "-u", "M", "-o", str(output), "-S", "file"])

    assert result.returncode == 0
    assert result.stdout == ""
    content = output.read_text(encoding="utf-8")
    assert "big.txt 2.0M" in content
    assert content.endswith("Total: 5.0005M\nShown: 3\nSkipped: 0\n")


def test_cli_summary_stderr(sample_tree):
    result = run_cli([str(sample_tree), "-s", "1M", "-S", "stderr"])

    assert result.returncode == 0
    assert "Total: 5000.5K" in result.stderr
    assert "Total:" not in result.stdout


def test_cli_missing_directory(tmp_path):
    result = run_cli([str(tmp_path / "missing"), "-s", "1M"])

    assert result.returncode == 1
    assert result.stdout == ""
    assert "Error: Root path does not exist" in result.stderr


def test_cli_file_as_root(sample_tree):
    result = run_cli([str(sample_tree / "big.txt"), "-s", "1M"])

    assert result.returncode == 1
    assert "Error: Root path is not a directory" in result.stderr


def test_cli_invalid_size(sample_tree):
    result = run_cli([str(sample_tree), "-s", "enormous"])

    assert result.returncode == 2
    assert "Invalid size format" in result.stderr


def test_cli_missing_size(sample_tree):
    result = run_cli([str(sample_tree)])
    assert result.returncode == 2


@pytest.mark.skipif(os.name != "posix" or os.geteuid() == 0, reason="Requires POSIX permissions as non-root")
def test_cli_unreadable_subdirectory_warns(sample_tree):
    locked = sample_tree / "locked"
    locked.mkdir()
    (locked / "data.bin").write_bytes(b"\0" * 2_000_000)
    locked.chmod(0)
    try:
        result = run_cli([str(sample_tree), "-s", "1M", "-u", "M", "-P", "warn", "-S", "stderr"])
    finally:
        locked.chmod(0o755)

    assert result.returncode == 0
    assert "locked" not in result.stdout
    assert "Warning: skipped" in result.stderr
    assert "Skipped: 1" in result.stderr
    assert "Total: 5.0005M" in result.stderr


def test_cli_version():
    result = run_cli(["--version"])

    assert result.returncode == 0
    assert result.stdout.startswith("dirsize ")


@pytest.mark.skipif(os.name != "posix", reason="SIGPIPE handling is POSIX-only")
def test_cli_broken_pipe(tmp_path):
    root = tmp_path / "many"
    root.mkdir()
    for i in range(5000):
        (root / f"file{i:05d}.txt").write_bytes(b"x")

    cmd = [sys.executable, "-m", "dirsize.cli.main", str(root), "-s", "0"]
    proc = subprocess.Popen(cmd, stdout=subprocess.PIPE, stderr=subprocess.PIPE)
    proc.stdout.read(10)
    proc.stdout.close()
    stderr = proc.stderr.read()
    proc.stderr.close()
    proc.wait(timeout=10)

    assert proc.returncode in (0, 141)
    assert b"Traceback" not in stderr
