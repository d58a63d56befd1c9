"""Tests for the command line entry point."""

import json

import pytest

from gallery.config import reset_config
from gallery.exceptions import ConfigurationError, UnknownEffectError
from i18n import get_locale, set_locale
from main import build_parser, run


@pytest.fixture(autouse=True)
def _restore(monkeypatch):
    monkeypatch.delenv("GALLERY_STRICT_EFFECTS", raising=False)
    monkeypatch.delenv("GALLERY_LOCALE", raising=False)
    reset_config()
    original = get_locale()
    yield
    set_locale(original)
    reset_config()


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_serialize(capsys):
    assert run(["serialize", "--effect", "crossfade|bogus", "--variants", "slide;flip"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data == {"effect": ["crossfade"], "effect_variants": [["slide"], ["flip"]]}


def test_serialize_built_variants(capsys):
    run(["serialize", "--effect", "pulse"])
    data = json.loads(capsys.readouterr().out)
    assert data["effect_variants"] == [["pulse"]]


def test_strict_flag(capsys):
    with pytest.raises(UnknownEffectError):
        run(["--strict", "serialize", "--effect", "bogus"])


def test_preview(capsys, monkeypatch):
    monkeypatch.setenv("COLUMNS", "200")
    assert run(["preview", "--effect", "crossfade,slide", "--events", "1"]) == 0
    out = capsys.readouterr().out
    assert "gallery-card-slide" in out
    assert "Round 3: Same as previous round" in out


def test_locale_option(capsys, monkeypatch):
    monkeypatch.setenv("COLUMNS", "200")
    run(["--locale", "zh_CN", "preview", "--effect", "flip"])
    assert get_locale() == "zh_CN"
    assert "翻转揭示" in capsys.readouterr().out


def test_invalid_config(monkeypatch):
    monkeypatch.setenv("GALLERY_LOCALE", "xx_XX")
    reset_config()
    with pytest.raises(ConfigurationError):
        run(["serialize"])
