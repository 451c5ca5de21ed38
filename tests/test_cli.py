"""Tests for the command-line interface."""

import pytest
from click.testing import CliRunner

from vigenere_es.cli import cli
from vigenere_es.services.cipher import encrypt


@pytest.fixture
def runner(isolated_settings):
    return CliRunner()


class TestCli:
    """Test suite for the vigenere-es command."""

    def test_encrypt_to_file(self, runner, tmp_path):
        source = tmp_path / "mensaje.txt"
        output = tmp_path / "cifrado.txt"
        source.write_text("attack at dawn", encoding="utf-8")

        result = runner.invoke(cli, ["encrypt", str(source), str(output), "--key", "limon"])

        assert result.exit_code == 0, result.output
        assert output.read_text(encoding="utf-8") == "LBFOOU IF RNHU"

    def test_decrypt_to_stdout(self, runner, tmp_path):
        source = tmp_path / "cifrado.txt"
        source.write_text("ÑJOP", encoding="utf-8")

        result = runner.invoke(cli, ["decrypt", str(source), "-k", "B"])

        assert result.exit_code == 0, result.output
        assert "NIÑO" in result.output

    def test_crack(self, runner, tmp_path, spanish_text):
        source = tmp_path / "cifrado.txt"
        source.write_text(encrypt(spanish_text, "LIMON"), encoding="utf-8")

        result = runner.invoke(cli, ["crack", str(source), "--preview", "20"])

        assert result.exit_code == 0, result.output
        assert "Key length: 5" in result.output
        assert "Key (guess): LIMON" in result.output
        assert f"Original message: {spanish_text[:20]}..." in result.output

    def test_crack_with_key_length(self, runner, tmp_path, spanish_text):
        source = tmp_path / "cifrado.txt"
        source.write_text(encrypt(spanish_text, "QUIJOTE"), encoding="utf-8")

        result = runner.invoke(cli, ["crack", str(source), "--key-length", "7", "--strategy", "sampled"])

        assert result.exit_code == 0, result.output
        assert "Key (guess): QUIJOTE" in result.output

    def test_invalid_key(self, runner, tmp_path):
        source = tmp_path / "mensaje.txt"
        source.write_text("HOLA", encoding="utf-8")

        result = runner.invoke(cli, ["encrypt", str(source), "--key", "K3Y"])

        assert result.exit_code != 0
        assert "Error" in result.output

    def test_crack_without_letters(self, runner, tmp_path):
        source = tmp_path / "cifrado.txt"
        source.write_text("1234", encoding="utf-8")

        result = runner.invoke(cli, ["crack", str(source)])

        assert result.exit_code != 0
        assert "no letters" in result.output

    def test_missing_source(self, runner, tmp_path):
        result = runner.invoke(cli, ["crack", str(tmp_path / "missing.txt")])
        assert result.exit_code == 2
