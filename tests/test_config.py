"""Tests for config module."""

import pytest
from cornerkit.config import DEFAULT_CONFIG, load_config, merge_config


class TestConfig:
    """Test configuration module."""

    def test_default_config_exists(self):
        """Test that default config exists."""
        assert DEFAULT_CONFIG is not None
        assert isinstance(DEFAULT_CONFIG, dict)

    def test_detection_config(self):
        """Test detection configuration."""
        assert 'detection' in DEFAULT_CONFIG
        detect = DEFAULT_CONFIG['detection']

        assert detect['method'] in ('harris', 'shi_tomasi')
        assert 'block_size' in detect
        assert 'ksize' in detect
        assert 'k' in detect

    def test_extraction_config(self):
        """Test extraction configuration."""
        extract = DEFAULT_CONFIG['extraction']

        assert extract['max_corners'] == -1
        assert 0 < extract['quality_level'] < 1

    def test_load_config_without_path(self):
        """Test that defaults are returned as an independent copy."""
        config = load_config()
        assert config == DEFAULT_CONFIG

        config['detection']['method'] = 'shi_tomasi'
        assert DEFAULT_CONFIG['detection']['method'] == 'harris'

    def test_load_config_merges_yaml(self, tmp_path):
        """Test that a YAML file overrides only the keys it names."""
        path = tmp_path / "config.yaml"
        path.write_text(
            "detection:\n"
            "  method: shi_tomasi\n"
            "extraction:\n"
            "  max_corners: 25\n"
            "output:\n"
            "  dir: results\n"
        )

        config = load_config(str(path))

        assert config['detection']['method'] == 'shi_tomasi'
        assert config['detection']['block_size'] == DEFAULT_CONFIG['detection']['block_size']
        assert config['extraction']['max_corners'] == 25
        assert config['extraction']['quality_level'] == 0.01
        assert config['output'] == {'dir': 'results'}

    def test_load_config_empty_file(self, tmp_path):
        """Test that an empty YAML file gives the defaults."""
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == DEFAULT_CONFIG

    def test_load_config_missing_file(self, tmp_path):
        """Test missing config file."""
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_logging_config(self):
        """Test logging configuration."""
        logging_cfg = DEFAULT_CONFIG['logging']

        assert logging_cfg['level'] == 'INFO'
        assert logging_cfg['log_dir'] is None

    def test_merge_config_nested(self):
        """Test that nested sections merge and scalars replace."""
        base = {'detection': {'method': 'harris', 'k': 0.04}, 'name': 'a'}

        merged = merge_config(base, {'detection': {'k': 0.06}, 'name': 'b', 'extra': 1})

        assert merged is base
        assert merged == {'detection': {'method': 'harris', 'k': 0.06}, 'name': 'b', 'extra': 1}

    def test_merge_config_scalar_over_section(self):
        """Test that a scalar override replaces a whole section."""
        merged = merge_config({'output': {'dir': 'x'}}, {'output': None})
        assert merged == {'output': None}
