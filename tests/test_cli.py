"""
Integration Tests for the iv-screen Command Line

Tests cover:
- Detail and summary output to stdout and files
- Config files and flag overrides
- Exit codes for invalid input
"""

import pytest
import json
import math
import pandas as pd
import yaml

from iv_screening.cli import build_parser, main, resolve_config


@pytest.mark.integration
class TestCLI:
    """Run the CLI end to end on a small CSV."""

    def test_summary_to_stdout(self, temp_csv, capsys):
        exit_code = main([str(temp_csv), '--outcome', 'gb', '--summary'])
        out = capsys.readouterr().out

        assert exit_code == 0
        assert "InformationValue" in out
        assert "duration_band" in out

    def test_detail_to_csv(self, temp_csv, tmp_path):
        output = tmp_path / 'out' / 'detail.csv'
        exit_code = main([
            str(temp_csv), '-y', 'gb', '--vars', 'duration',
            '--cp', '0', '--min-bucket', '5', '--min-split', '10',
            '--output', str(output)
        ])

        result = pd.read_csv(output)
        assert exit_code == 0
        assert list(result['bin_label']) == ['(-inf, 15.0]', '(15.0, 36.0]', '(36.0, inf]']
        assert result['miv'].sum() == pytest.approx(2 * math.log(3) / 3)

    def test_summary_to_json(self, temp_csv, tmp_path):
        output = tmp_path / 'summary.json'
        exit_code = main([str(temp_csv), '-y', 'gb', '-s', '--vars', 'duration_band',
                          '-o', str(output)])

        with open(output) as f:
            rows = json.load(f)

        assert exit_code == 0
        assert rows[0]['Variable'] == 'duration_band'
        assert rows[0]['Strength'] == 'Very strong'

    def test_config_file_with_override(self, temp_csv, tmp_path):
        config_path = tmp_path / 'screening.yaml'
        with open(config_path, 'w') as f:
            yaml.dump({
                'data_path': str(temp_csv),
                'outcome_column': 'gb',
                'summary': False,
                'binning': {'cp': 0.0, 'min_bucket': 5, 'min_split': 10},
            }, f)
        output = tmp_path / 'summary.csv'

        exit_code = main(['--config', str(config_path), '--summary', '-o', str(output)])
        result = pd.read_csv(output)

        assert exit_code == 0
        assert list(result.columns) == ['Variable', 'InformationValue', 'Bins', 'ZeroBins', 'Strength']

    def test_partial_config_completed_by_flags(self, temp_csv, tmp_path, capsys):
        """A config without data_path and outcome_column works when the flags supply them."""
        config_path = tmp_path / 'partial.yaml'
        config_path.write_text("summary: true\n")

        exit_code = main([str(temp_csv), '--outcome', 'gb', '--config', str(config_path)])

        assert exit_code == 0
        assert "InformationValue" in capsys.readouterr().out

    def test_partial_config_without_flags(self, tmp_path, capsys):
        config_path = tmp_path / 'partial.yaml'
        config_path.write_text("summary: true\n")

        assert main(['--config', str(config_path)]) == 1
        assert "outcome_column" in capsys.readouterr().err

    def test_empty_config_file(self, temp_csv, tmp_path, capsys):
        config_path = tmp_path / 'empty.yaml'
        config_path.write_text("")

        assert main([str(temp_csv), '-y', 'gb', '-c', str(config_path)]) == 1
        assert "mapping" in capsys.readouterr().err

    def test_malformed_yaml_config(self, temp_csv, tmp_path, capsys):
        config_path = tmp_path / 'broken.yaml'
        config_path.write_text("binning: [cp: 0.01\n")

        assert main([str(temp_csv), '-y', 'gb', '-c', str(config_path)]) == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_unknown_logging_key_in_config(self, temp_csv, tmp_path, capsys):
        config_path = tmp_path / 'bad_logging.yaml'
        config_path.write_text("logging:\n  colour: true\n")

        assert main([str(temp_csv), '-y', 'gb', '-c', str(config_path)]) == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_unknown_variable_exit_code(self, temp_csv, capsys):
        exit_code = main([str(temp_csv), '-y', 'gb', '--vars', 'nonexistent_col'])

        assert exit_code == 1
        assert "nonexistent_col" in capsys.readouterr().err

    def test_missing_outcome_exit_code(self, temp_csv, capsys):
        exit_code = main([str(temp_csv), '-y', 'default'])

        assert exit_code == 1
        assert "default" in capsys.readouterr().err

    def test_missing_arguments(self, capsys):
        assert main([]) == 1
        assert "--outcome" in capsys.readouterr().err

    def test_missing_data_file(self, tmp_path, capsys):
        assert main([str(tmp_path / 'missing.csv'), '-y', 'gb']) == 1
        assert "not found" in capsys.readouterr().err

    def test_invalid_binning_flag(self, temp_csv, capsys):
        assert main([str(temp_csv), '-y', 'gb', '--min-bucket', '0']) == 1


@pytest.mark.unit
class TestResolveConfig:
    """Test merging of flags into the configuration."""

    def test_binning_overrides_keep_other_fields(self, temp_csv):
        args = build_parser().parse_args([str(temp_csv), '-y', 'gb', '--cp', '0.002'])
        config = resolve_config(args)

        assert config.binning.cp == 0.002
        assert config.binning.min_bucket == 7

    def test_flags_left_unset_keep_config_values(self, temp_csv, tmp_path):
        config_path = tmp_path / 'screening.json'
        config_path.write_text(json.dumps({
            'data_path': str(temp_csv),
            'outcome_column': 'gb',
            'summary': True,
            'verbose': True,
        }))
        args = build_parser().parse_args(['-c', str(config_path)])
        config = resolve_config(args)

        assert config.summary is True
        assert config.verbose is True
        assert config.outcome_column == 'gb'
