"""
命令行界面单元测试
使用click.testing.CliRunner调用encrypt、decrypt和generate命令
"""

import json
import re

import pytest
from click.testing import CliRunner

from pontifex.cli import main
from pontifex.storage import load_deck


@pytest.fixture
def runner():
    return CliRunner()


@pytest.mark.unit
@pytest.mark.cli
class TestCLI:
    """命令行测试"""

    def test_help(self, runner):
        result = runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "encrypt" in result.output
        assert "decrypt" in result.output
        assert "generate" in result.output

    def test_encrypt(self, runner, unkeyed_deck_file):
        result = runner.invoke(main, ["encrypt", "AAAAAAAAAA", "--deck", str(unkeyed_deck_file)])
        assert result.exit_code == 0
        assert "Ciphertext: EXKYIZSGEH" in result.output

    def test_decrypt(self, runner, unkeyed_deck_file):
        result = runner.invoke(main, ["decrypt", "EXKYIZSGEH", "--deck", str(unkeyed_deck_file)])
        assert result.exit_code == 0
        assert "Plaintext: AAAAAAAAAA" in result.output

    def test_encrypt_grouped(self, runner, unkeyed_deck_file):
        result = runner.invoke(
            main, ["encrypt", "aaaaa aaaaa", "--deck", str(unkeyed_deck_file), "--group"]
        )
        assert result.exit_code == 0
        assert "Ciphertext: EXKYI ZSGEH" in result.output

    def test_encrypt_literal(self, runner, unkeyed_deck_file):
        result = runner.invoke(
            main, ["encrypt", "AAAAAAAAAA", "--deck", str(unkeyed_deck_file), "--literal"]
        )
        assert result.exit_code == 0
        assert "Ciphertext: GKGJDKICIC" in result.output

    def test_deck_file_is_not_modified(self, runner, unkeyed_deck_file, new_order_tokens):
        runner.invoke(main, ["encrypt", "HELLO", "--deck", str(unkeyed_deck_file)])
        assert json.loads(unkeyed_deck_file.read_text(encoding="utf-8")) == new_order_tokens

    def test_missing_deck_option(self, runner):
        result = runner.invoke(main, ["encrypt", "HELLO"])
        assert result.exit_code == 2

    def test_invalid_deck_file(self, runner, tmp_path, new_order_tokens):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(new_order_tokens[:53]), encoding="utf-8")
        result = runner.invoke(main, ["encrypt", "HELLO", "--deck", str(path)])
        assert result.exit_code == 1
        assert "Failed to load deck" in result.output

    def test_non_utf8_deck_file(self, runner, tmp_path):
        path = tmp_path / "binary.json"
        path.write_bytes(b'\xff\xfe["AC"]')
        result = runner.invoke(main, ["encrypt", "HELLO", "--deck", str(path)])
        assert result.exit_code == 1
        assert "Failed to load deck" in result.output

    def test_generate(self, runner, tmp_path):
        path = tmp_path / "new_deck.json"
        result = runner.invoke(main, ["generate", str(path), "--seed", "5"])
        assert result.exit_code == 0
        assert "Generated random deck saved to" in result.output
        assert len(load_deck(path)) == 54

    def test_generate_then_round_trip(self, runner, tmp_path):
        path = tmp_path / "deck.json"
        runner.invoke(main, ["generate", str(path)])

        encrypted = runner.invoke(main, ["encrypt", "Solitaire works", "--deck", str(path)])
        ciphertext = re.search(r"Ciphertext: ([A-Z]+)", encrypted.output).group(1)
        decrypted = runner.invoke(main, ["decrypt", ciphertext, "--deck", str(path)])
        assert "Plaintext: SOLITAIREWORKS" in decrypted.output

    def test_log_level_option(self, runner, unkeyed_deck_file):
        result = runner.invoke(
            main, ["--log-level", "debug", "encrypt", "AAAAAAAAAA", "--deck", str(unkeyed_deck_file)]
        )
        assert result.exit_code == 0
        assert "Ciphertext: EXKYIZSGEH" in result.output
