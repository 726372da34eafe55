"""Tests for config, logging and run helpers."""

import logging

import pytest
import yaml

from kwtrie.utils import paths as pathutil
from kwtrie.utils.logging import ROOT_LOGGER, get_logger, setup_logging
from kwtrie.utils.runinfo import new_run_id
from kwtrie.utils.validate import validate_scan_inputs


class TestPaths:
    def test_defaults_without_paths_yaml(self):
        assert pathutil.get_path("artifacts.logs") == "artifacts/logs"

    def test_reads_paths_yaml(self, isolated_config):
        (isolated_config / "paths.yaml").write_text(yaml.safe_dump({"reports": "out/reports"}), encoding="utf-8")
        assert pathutil.get_path("reports") == "out/reports"

    def test_missing_key(self):
        with pytest.raises(KeyError, match="nope"):
            pathutil.get_path("nope.key")

    def test_non_string_value(self):
        with pytest.raises(TypeError):
            pathutil.get_path("artifacts")

    def test_missing_file_is_empty_mapping(self, isolated_config):
        assert pathutil.load_yaml_once(isolated_config / "scan.yaml") == {}

    def test_cached_by_path(self, isolated_config):
        cfg = isolated_config / "scan.yaml"
        cfg.write_text("text:\n  path: a.txt\n", encoding="utf-8")
        first = pathutil.load_yaml_once(cfg)
        cfg.write_text("text:\n  path: b.txt\n", encoding="utf-8")
        assert pathutil.load_yaml_once(cfg) is first

    def test_expand_creates_parent(self, tmp_path):
        full = pathutil.expand("artifacts.logs", "scan.log")
        assert full.endswith("scan.log")
        assert (tmp_path / "artifacts" / "logs").is_dir()

    def test_get_value(self):
        cfg = {"keywords": {"column": "term"}}
        assert pathutil.get_value(cfg, "keywords.column") == "term"
        assert pathutil.get_value(cfg, "keywords.delimiter", ",") == ","


class TestLogger:
    def test_handlers_not_duplicated(self):
        setup_logging("kwtrie-test")
        setup_logging("kwtrie-test", level="debug")
        root = logging.getLogger(ROOT_LOGGER)
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
        assert root.propagate is False

    def test_unknown_level_falls_back_to_info(self):
        setup_logging("kwtrie-test", level="loud")
        assert logging.getLogger(ROOT_LOGGER).level == logging.INFO

    def test_module_loggers_inherit_configured_level(self):
        setup_logging("kwtrie-test", level="error")
        logger = get_logger("scan_text")
        assert logger.name == "kwtrie.scan_text"
        assert logger.handlers == []
        assert logger.getEffectiveLevel() == logging.ERROR
        assert not logger.isEnabledFor(logging.INFO)

    def test_setup_returns_command_logger(self):
        assert setup_logging("scan").name == "kwtrie.scan"


class TestValidate:
    def test_scan_inputs(self, keywords_csv, text_file):
        kw = keywords_csv(["x"])
        result = validate_scan_inputs(str(kw), str(text_file("x")))
        assert result == {"keywords": True, "text": True, "ok": True}

    def test_missing_files(self, tmp_path):
        result = validate_scan_inputs(str(tmp_path / "none.csv"), str(tmp_path))
        assert result == {"keywords": False, "text": False, "ok": False}


class TestMalformedYaml:
    def test_raises_value_error(self, isolated_config):
        cfg = isolated_config / "scan.yaml"
        cfg.write_text("keywords: [unclosed\n", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            pathutil.load_yaml_once(cfg)


def test_run_id_format():
    run_id = new_run_id()
    stamp, _, sha = run_id.partition("Z-")
    assert len(stamp) == len("2024-01-01T00:00:00")
    assert sha
