import re

from click.testing import CliRunner

import primeshare.policy as policy_module
from primeshare.cli import main
from primeshare.policy import SharingPolicy

SHARE_LINE = re.compile(r"^\d+:[0-9a-f]+$")


def _share_lines(output):
    return [line for line in output.splitlines() if SHARE_LINE.match(line)]


def test_split_and_combine_from_file(tmp_path):
    secret_file = tmp_path / "secret.bin"
    secret_file.write_bytes(b"hello shamir")
    runner = CliRunner()

    result = runner.invoke(main, ["split", "-n", "5", "-k", "3", "--secret-file", str(secret_file)])
    assert result.exit_code == 0, result.output
    lines = _share_lines(result.output)
    assert len(lines) == 5

    result = runner.invoke(main, ["combine", "-k", "3", *lines[1:4]])
    assert result.exit_code == 0, result.output
    assert result.stdout_bytes == b"hello shamir"


def test_split_prompts_for_secret():
    runner = CliRunner()
    result = runner.invoke(main, ["split", "-n", "3", "-k", "2"], input="hunter2\n")
    assert result.exit_code == 0, result.output
    assert "hunter2" not in result.output
    lines = _share_lines(result.output)
    assert len(lines) == 3

    result = runner.invoke(main, ["combine", "-k", "2"], input="\n".join(lines[:2]) + "\n")
    assert result.exit_code == 0, result.output
    assert result.stdout_bytes == b"hunter2"


def test_split_uses_policy_defaults(tmp_path, monkeypatch):
    monkeypatch.setattr(policy_module, "policy", SharingPolicy(default_shares=4, default_threshold=2))
    secret_file = tmp_path / "secret.bin"
    secret_file.write_bytes(b"abc")

    result = CliRunner().invoke(main, ["split", "--secret-file", str(secret_file)])
    assert result.exit_code == 0, result.output
    assert len(_share_lines(result.output)) == 4


def test_combine_from_input_file_to_output(tmp_path):
    secret_file = tmp_path / "secret.bin"
    secret_file.write_bytes(bytes(range(256)))
    runner = CliRunner()
    result = runner.invoke(main, ["split", "-n", "4", "-k", "3", "--secret-file", str(secret_file)])
    shares_file = tmp_path / "shares.txt"
    shares_file.write_text("\n\n".join(_share_lines(result.output)) + "\n")
    out = tmp_path / "recovered.bin"

    result = runner.invoke(main, ["combine", "-k", "3", "--input", str(shares_file), "--output", str(out)])
    assert result.exit_code == 0, result.output
    assert out.read_bytes() == bytes(range(256))


def test_errors_are_reported(tmp_path):
    secret_file = tmp_path / "secret.bin"
    secret_file.write_bytes(b"abc")
    runner = CliRunner()

    result = runner.invoke(main, ["split", "-n", "256", "-k", "3", "--secret-file", str(secret_file)])
    assert result.exit_code == 1
    assert "total_shares must be <= 255" in result.output

    result = runner.invoke(main, ["combine", "-k", "3", "1:0000", "2:0000"])
    assert result.exit_code == 1
    assert "need at least 3 shares" in result.output

    result = runner.invoke(main, ["combine", "-k", "2", "1:zz", "2:0000"])
    assert result.exit_code == 1
    assert "invalid encoded share" in result.output


def test_audit_events_are_recorded(tmp_path, monkeypatch):
    audit_dir = tmp_path / "trail"
    monkeypatch.setattr(policy_module, "policy", SharingPolicy(audit=True, audit_dir=audit_dir))
    secret_file = tmp_path / "secret.bin"
    secret_file.write_bytes(b"top secret")
    runner = CliRunner()

    result = runner.invoke(main, ["split", "-n", "3", "-k", "2", "--secret-file", str(secret_file)])
    assert result.exit_code == 0, result.output
    lines = _share_lines(result.output)
    runner.invoke(main, ["combine", "-k", "2", *lines[:2]])
    runner.invoke(main, ["combine", "-k", "3", *lines[:2]])

    entries = sorted(audit_dir.glob("audit_*.json"))
    assert len(entries) == 3
    text = "".join(p.read_text() for p in entries)
    assert "top secret" not in text
    assert "shares.combine_failed" in text


def test_oversized_index_is_a_clean_error():
    result = CliRunner().invoke(main, ["combine", "-k", "2", "9" * 5000 + ":0000", "2:0000"])
    assert result.exit_code == 1
    assert "index exceeds 255" in result.output
    assert not isinstance(result.exception, ValueError)
