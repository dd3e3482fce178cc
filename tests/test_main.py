"""Tests for git_status_color.__main__ — orchestration and exit behaviour."""

import pytest
from git_status_color import __main__ as cli
from git_status_color.core.errors import InvalidDigitError, ShortReadError, SourceUnavailableError
from git_status_color.core.types import Color

SHA_LIGHT = 'ffffff0123456789abcdef0123456789abcdef01'
SHA_DARK = '804020d8c1f0e7b2a9c3e5f60718293a4b5c6d7e'


def _raises(exc: Exception):
    def read() -> str:
        raise exc

    return read


class TestCurrentColor:
    def test_decodes_prefix(self) -> None:
        assert cli.current_color(lambda: SHA_DARK) == Color(128, 64, 32)

    def test_uppercase_identifier_fails(self) -> None:
        with pytest.raises(InvalidDigitError):
            cli.current_color(lambda: SHA_LIGHT.upper())


class TestPromptColor:
    def test_light(self) -> None:
        assert cli.prompt_color(lambda: SHA_LIGHT) == '\x1b[38;2;255;255;255m'

    def test_dark(self) -> None:
        assert cli.prompt_color(lambda: SHA_DARK) == '\x1b[48;2;128;64;32m\x1b[37m'

    def test_black(self) -> None:
        assert cli.prompt_color(lambda: '0' * 40) == '\x1b[48;2;0;0;0m\x1b[37m'

    def test_idempotent(self) -> None:
        assert cli.prompt_color(lambda: SHA_DARK) == cli.prompt_color(lambda: SHA_DARK)

    def test_source_errors_propagate(self) -> None:
        with pytest.raises(SourceUnavailableError):
            cli.prompt_color(_raises(SourceUnavailableError('no git')))


class TestMain:
    def test_success_writes_sequence_only(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        monkeypatch.setattr(cli, 'read_head', lambda: SHA_LIGHT)
        cli.main([])
        captured = capsys.readouterr()
        assert captured.out == '\x1b[38;2;255;255;255m'
        assert captured.err == ''

    def test_dark_output(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        monkeypatch.setattr(cli, 'read_head', lambda: '000000' + 'a' * 34)
        cli.main([])
        assert capsys.readouterr().out == '\x1b[48;2;0;0;0m\x1b[37m'

    def test_same_output_twice(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        monkeypatch.setattr(cli, 'read_head', lambda: SHA_DARK)
        cli.main([])
        first = capsys.readouterr().out
        cli.main([])
        assert capsys.readouterr().out == first

    @pytest.mark.parametrize(
        'exc',
        [
            SourceUnavailableError('git not found'),
            ShortReadError('expected 40 characters, got 0'),
            InvalidDigitError('G', 0),
        ],
    )
    def test_failure_is_silent_and_nonzero(self, exc: Exception, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        monkeypatch.setattr(cli, 'read_head', _raises(exc))
        with pytest.raises(SystemExit) as exit_info:
            cli.main([])
        assert exit_info.value.code == 1
        captured = capsys.readouterr()
        assert captured.out == ''
        assert captured.err == ''

    @pytest.mark.parametrize('identifier', ['A' * 40, 'g' + '0' * 39, '00000G' + '0' * 34])
    def test_invalid_digit_is_silent(self, identifier: str, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        monkeypatch.setattr(cli, 'read_head', lambda: identifier)
        with pytest.raises(SystemExit) as exit_info:
            cli.main([])
        assert exit_info.value.code == 1
        assert capsys.readouterr().out == ''

    def test_rejects_arguments(self, monkeypatch: pytest.MonkeyPatch, capsys) -> None:
        monkeypatch.setattr(cli, 'read_head', lambda: SHA_LIGHT)
        with pytest.raises(SystemExit) as exit_info:
            cli.main(['--colour'])
        assert exit_info.value.code != 0
        assert capsys.readouterr().out == ''
