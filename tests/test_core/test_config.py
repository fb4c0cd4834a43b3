"""Tests for decoder configuration, contracts and stage introspection."""

from pathlib import Path

import yaml

from drcmesh.core.contracts import DecoderConfig, StageMeta
from drcmesh.core.pipeline import STAGES, load_decoder_config


class TestContracts:
    def test_defaults(self):
        cfg = DecoderConfig()
        assert cfg.codec == "dracopy"
        assert cfg.ingest.copy_buffer is True
        assert cfg.validation.supported_major_versions == [1, 2]
        assert cfg.extract.bulk_indices is True
        assert cfg.extract.extract_colors is True

    def test_stage_meta(self):
        meta = StageMeta(stage_name="extract", elapsed_seconds=0.5, params={"bulk_indices": True})
        assert meta.stage_name == "extract"
        assert meta.params["bulk_indices"] is True


class TestLoadDecoderConfig:
    def test_load_yaml(self, tmp_path: Path):
        config = {
            "codec": "dracopy",
            "ingest": {"copy_buffer": False},
            "validation": {"supported_major_versions": [2]},
            "extract": {"bulk_indices": False, "extract_colors": False},
        }
        config_file = tmp_path / "decoder.yaml"
        with open(config_file, "w") as f:
            yaml.dump(config, f)

        cfg = load_decoder_config(config_file)
        assert cfg.ingest.copy_buffer is False
        assert cfg.validation.supported_major_versions == [2]
        assert cfg.extract.bulk_indices is False
        assert cfg.reconstruct.log_attributes is True

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        config_file = tmp_path / "empty.yaml"
        config_file.write_text("")
        assert load_decoder_config(config_file) == DecoderConfig()

    def test_shipped_config_loads(self):
        shipped = Path(__file__).resolve().parents[2] / "configs" / "decoder.yaml"
        cfg = load_decoder_config(shipped)
        assert cfg == DecoderConfig()


class TestStageIntrospection:
    def test_stage_order(self):
        assert [cls.name for cls, _ in STAGES] == ["ingest", "validate", "reconstruct", "extract"]

    def test_schemas(self):
        for stage_cls, _ in STAGES:
            assert "properties" in stage_cls.get_input_schema()
            assert "properties" in stage_cls.get_output_schema()
            assert "properties" in stage_cls.get_config_schema()
