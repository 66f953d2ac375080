"""
Config, tokenizer, CLI and MCP tool tests.

Run: pytest tests/test_interfaces.py -v
"""

import io
import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from porterstem import IRREGULAR_FORMS, PorterStemmer, StemmerConfig
from porterstem.cli import main
from porterstem.irregular import build_irregular_table
from porterstem.tokenizers import find_tokens, replace_tokens, tokenize, tokenize_for_index


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv("PORTERSTEM_IRREGULAR", raising=False)
    monkeypatch.delenv("PORTERSTEM_RESTORE_CASE", raising=False)


class TestConfig:

    def test_default(self):
        config = StemmerConfig.default()
        assert config.irregular_forms == IRREGULAR_FORMS
        assert config.min_length == 3
        assert config.restore_case is True

    def test_default_is_a_copy(self):
        config = StemmerConfig.default()
        config.irregular_forms["goose"] = ("geese",)
        assert "goose" not in IRREGULAR_FORMS

    def test_published(self):
        assert StemmerConfig.published().irregular_forms == {}

    def test_invalid_min_length(self):
        with pytest.raises(ValueError, match="min_length"):
            StemmerConfig(min_length=0)

    def test_from_env_defaults(self):
        config = StemmerConfig.from_env()
        assert config.irregular_forms == IRREGULAR_FORMS
        assert config.restore_case is True

    def test_from_env_overrides(self, monkeypatch):
        monkeypatch.setenv("PORTERSTEM_IRREGULAR", "off")
        monkeypatch.setenv("PORTERSTEM_RESTORE_CASE", "0")
        config = StemmerConfig.from_env()
        assert config.irregular_forms == {}
        assert config.restore_case is False


class TestIrregularTable:

    def test_inverted(self):
        table = build_irregular_table(IRREGULAR_FORMS)
        assert table["skies"] == "sky"
        assert table["innings"] == "inning"
        assert "sties" not in table

    def test_read_only(self):
        table = build_irregular_table(IRREGULAR_FORMS)
        with pytest.raises(TypeError):
            table["geese"] = "goose"

    def test_conflicting_forms(self):
        with pytest.raises(ValueError, match="maps to both"):
            build_irregular_table({"die": ("dying",), "dye": ("dying",)})

    def test_uppercase_form(self):
        with pytest.raises(ValueError, match="lowercase"):
            build_irregular_table({"sky": ("Skies",)})

    def test_bare_string_forms(self):
        with pytest.raises(ValueError, match="sequence"):
            build_irregular_table({"sky": "skies"})

    def test_invalid_table_rejected_by_stemmer(self):
        with pytest.raises(ValueError):
            PorterStemmer(StemmerConfig(irregular_forms={"sky": ("",)}))


class TestTokenizers:

    def test_tokenize_keeps_case(self):
        assert tokenize("Hello, world! It's 2024") == ["Hello", "world", "It", "s", "2024"]

    def test_tokenize_empty(self):
        assert tokenize("  ...  ") == []

    def test_tokenize_for_index(self):
        assert tokenize_for_index("Caresses and ponies") == "caress and poni"

    def test_tokenize_for_index_with_case(self):
        assert tokenize_for_index("Caresses", lower=False) == "Caress"

    def test_find_tokens(self):
        assert find_tokens("a cat") == [(0, 1, "a"), (2, 5, "cat")]

    def test_replace_tokens(self):
        assert replace_tokens("Running, hopping!") == "Run, hop!"

    def test_replace_tokens_custom_stemmer(self):
        stemmer = PorterStemmer(StemmerConfig.published())
        assert replace_tokens("blue skies", stemmer, lower=True) == "blue ski"


class TestCLI:

    def test_stem(self, capsys):
        main(["stem", "Running", "ponies"])
        out = capsys.readouterr().out
        assert out.splitlines() == ["Running\tRun", "ponies\tponi"]

    def test_stem_lower(self, capsys):
        main(["stem", "--lower", "Running"])
        assert capsys.readouterr().out.strip() == "Running\trun"

    def test_no_irregular(self, capsys):
        main(["--no-irregular", "stem", "skies"])
        assert capsys.readouterr().out.strip() == "skies\tski"

    def test_step(self, capsys):
        main(["step", "agreed", "step1ab"])
        assert capsys.readouterr().out.strip() == "agree"

    def test_unknown_step(self):
        with pytest.raises(SystemExit) as exc:
            main(["step", "agreed", "step9"])
        assert exc.value.code == 2

    def test_trace(self, capsys):
        main(["trace", "hopefulness"])
        out = capsys.readouterr().out
        assert out.splitlines()[0] == "hopefulness"
        assert "step3" in out
        assert out.rstrip().endswith("hope")

    def test_irregular(self, capsys):
        main(["irregular"])
        out = capsys.readouterr().out
        assert "skies" in out
        assert "→ sky" in out

    def test_irregular_disabled(self, capsys):
        main(["--no-irregular", "irregular"])
        assert "No irregular forms." in capsys.readouterr().out

    def test_text_file(self, tmp_path, capsys):
        path = tmp_path / "notes.txt"
        path.write_text("Cats running.\nPonies hopping!\n", encoding="utf-8")
        main(["text", str(path)])
        assert capsys.readouterr().out == "Cat run.\nPoni hop!\n"

    def test_text_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("The Skies were relational\n"))
        main(["text", "--lower"])
        assert capsys.readouterr().out == "the sky were relat\n"

    def test_text_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["text", str(tmp_path / "missing.txt")])
        assert exc.value.code == 1
        assert "✗" in capsys.readouterr().err

    def test_no_command(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main([])
        assert exc.value.code == 1


class TestMCPTools:

    @pytest.fixture
    def server(self, monkeypatch):
        pytest.importorskip("mcp")
        from porterstem import mcp_server
        monkeypatch.setattr(mcp_server, "_stemmer", None)
        return mcp_server

    def test_stem(self, server):
        assert server.stem_words(["Running", "skies"]) == {"Running": "Run", "skies": "sky"}

    def test_stem_lower(self, server):
        assert server.stem_words(["Running"], lower=True) == {"Running": "run"}

    def test_stem_text(self, server):
        assert server.stem_text("Cats running") == [
            {"token": "Cats", "stem": "cat"},
            {"token": "running", "stem": "run"},
        ]

    def test_trace(self, server):
        steps = server.trace_word("hopefulness")
        assert steps[0] == {"step": "step1ab", "result": "hopefulness"}
        assert steps[-1] == {"step": "step5", "result": "hope"}

    def test_env_config(self, server, monkeypatch):
        monkeypatch.setenv("PORTERSTEM_IRREGULAR", "0")
        assert server.stem_words(["skies"]) == {"skies": "ski"}
