"""
Unit tests for core modules: normalize, Config loading, prompt building.

Run with:
    pytest tests/test_core.py -v
"""

import pytest

from git_commit_message.cli.utils import normalize
from git_commit_message.config import (
    Config,
    ConfigError,
    ConfigErrorReason,
    get_config_path,
    load_config,
    save_config,
)
from git_commit_message.prompts import build_prompt


# ---------------------------------------------------------------------------
# normalize
# ---------------------------------------------------------------------------

class TestNormalize:

    @pytest.mark.parametrize("raw, expected", [
        ('"fix: bug"\nextra', "fix: bug"),
        ("`feat: x`", "feat: x"),
        ("  plain message  ", "plain message"),
        ("\n\n  chore: bump version\n", "chore: bump version"),
        ("feat: add login\n\n- add endpoint\n- validate creds", "feat: add login"),
        ('"  fix: trim inside quotes  "', "fix: trim inside quotes"),
        ("fix: windows line endings\r\nsecond", "fix: windows line endings"),
    ])
    def test_examples(self, raw, expected):
        assert normalize(raw) == expected

    def test_keeps_content_casing_and_punctuation(self):
        raw = "Fix(API)!: Handle `None` values, finally."
        assert normalize(raw) == raw

    def test_only_strips_matching_quotes(self):
        assert normalize('"fix: half quoted') == '"fix: half quoted'
        assert normalize('"fix: mixed`') == '"fix: mixed`'

    def test_leaves_single_quotes_alone(self):
        assert normalize("'fix: single'") == "'fix: single'"

    def test_inner_quotes_survive(self):
        assert normalize('fix: handle "quoted" paths') == 'fix: handle "quoted" paths'

    @pytest.mark.parametrize("raw", ["", "   ", "\n\n", '""', "``", '"'])
    def test_degenerate_input_never_raises(self, raw):
        result = normalize(raw)
        assert "\n" not in result
        assert result == result.strip()

    @pytest.mark.parametrize("raw", [
        '"fix: bug"\nextra',
        "`feat: x`",
        "  plain message  ",
        '""nested""',
        '`"mixed wrapping"`',
        "   \n  ",
        "```\nfeat: fenced\n```",
        "feat: trailing space \nmore",
    ])
    def test_output_is_single_trimmed_line_and_stable(self, raw):
        once = normalize(raw)
        assert "\n" not in once
        assert "\r" not in once
        assert once == once.strip()
        assert normalize(once) == once


# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------

class TestConfig:

    def test_defaults_are_zero_values(self):
        config = Config()
        assert config.ollama_url == ""
        assert config.model == ""
        assert config.temperature == 0.0

    def test_is_immutable(self):
        config = Config()
        with pytest.raises(AttributeError):
            config.model = "other"

    def test_from_dict_ignores_unknown_keys(self):
        config = Config.from_dict({"model": "mistral:7b", "provider": "claude"})
        assert config.model == "mistral:7b"
        assert not hasattr(config, "provider")

    def test_from_dict_coerces_numbers(self):
        assert Config.from_dict({"temperature": 1}).temperature == 1.0
        assert Config.from_dict({"temperature": "0.7"}).temperature == 0.7

    def test_temperature_not_range_checked(self):
        assert Config.from_dict({"temperature": 3.5}).temperature == 3.5

    @pytest.mark.parametrize("url, valid", [
        ("http://localhost:11434", True),
        ("https://ollama.internal/", True),
        ("localhost:11434", False),
        ("ftp://localhost", False),
        ("", False),
    ])
    def test_endpoint_is_valid(self, url, valid):
        assert Config(ollama_url=url).endpoint_is_valid() is valid


class TestLoadConfig:

    def test_default_path_under_home(self, fake_home):
        assert get_config_path() == fake_home / ".config" / "git_commit_message" / "config.yaml"

    def test_reads_all_fields(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text(
            "ollama_url: http://localhost:11434\n"
            "model: llama3.2:3b\n"
            "temperature: 0.2\n"
        )
        config = load_config(path)
        assert config == Config(ollama_url="http://localhost:11434", model="llama3.2:3b", temperature=0.2)

    def test_missing_keys_default(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("model: mistral:7b\nextra: ignored\n")
        config = load_config(path)
        assert config.model == "mistral:7b"
        assert config.ollama_url == ""
        assert config.temperature == 0.0

    def test_null_values_default(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("ollama_url:\ntemperature: ~\n")
        assert load_config(path) == Config()

    def test_empty_file_is_all_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(path) == Config()

    def test_missing_file_is_not_found(self, tmp_path):
        with pytest.raises(ConfigError) as exc:
            load_config(tmp_path / "nope.yaml")
        assert exc.value.reason is ConfigErrorReason.NOT_FOUND
        assert "nope.yaml" in str(exc.value)

    def test_directory_is_not_found(self, tmp_path):
        with pytest.raises(ConfigError) as exc:
            load_config(tmp_path)
        assert exc.value.reason is ConfigErrorReason.NOT_FOUND

    def test_default_path_missing_is_not_found(self, fake_home):
        with pytest.raises(ConfigError) as exc:
            load_config()
        assert exc.value.reason is ConfigErrorReason.NOT_FOUND

    @pytest.mark.parametrize("content", [
        "ollama_url: [unclosed\n",
        "model: a\n  bad: indent\n",
        "- just\n- a list\n",
        "plain scalar\n",
        "temperature: hot\n",
        "temperature: true\n",
        "model: {nested: map}\n",
    ])
    def test_malformed(self, tmp_path, content):
        path = tmp_path / "config.yaml"
        path.write_text(content)
        with pytest.raises(ConfigError) as exc:
            load_config(path)
        assert exc.value.reason is ConfigErrorReason.MALFORMED

    def test_non_utf8_file_is_malformed(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_bytes(b"model: caf\xe9\n")
        with pytest.raises(ConfigError) as exc:
            load_config(path)
        assert exc.value.reason is ConfigErrorReason.MALFORMED

    def test_huge_temperature_is_malformed(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("temperature: 1" + "0" * 400 + "\n")
        with pytest.raises(ConfigError) as exc:
            load_config(path)
        assert exc.value.reason is ConfigErrorReason.MALFORMED
        assert "too large" in str(exc.value)

    def test_utf8_values_survive(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_bytes("model: café\n".encode("utf-8"))
        assert load_config(path).model == "café"

    def test_rereads_on_every_call(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("model: first\n")
        assert load_config(path).model == "first"
        path.write_text("model: second\n")
        assert load_config(path).model == "second"

    def test_save_creates_directory(self, fake_home):
        original = Config(ollama_url="http://gpu-box:11434", model="gemma3:4b", temperature=0.5)
        path = save_config(original)

        assert path == get_config_path()
        assert path.exists()
        assert load_config() == original


# ---------------------------------------------------------------------------
# Prompt
# ---------------------------------------------------------------------------

class TestBuildPrompt:

    DIFF = (
        "diff --git a/app.py b/app.py\n"
        "+def handler(event): return {'ok': True}\n"
    )

    def test_embeds_diff_verbatim_in_fence(self):
        prompt = build_prompt(self.DIFF)
        assert f"```diff\n{self.DIFF}\n```" in prompt

    def test_asks_for_single_conventional_line(self):
        prompt = build_prompt(self.DIFF)
        assert "single-line" in prompt
        assert "conventional commit" in prompt
        assert "Do not include any explanation" in prompt

    def test_braces_in_diff_survive(self):
        diff = "+x = {0}.format(y) {name}"
        assert diff in build_prompt(diff)
