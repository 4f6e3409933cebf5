"""
IV Screening Configuration Management

Workflow configuration for running a screening from a file (CLI or script).
"""

from dataclasses import dataclass, field, asdict
from typing import Dict, List, Optional
from pathlib import Path
import json
import yaml

from .models import BinningConfig


@dataclass
class LoggingConfig:
    """Logging level and optional log file."""

    level: str = 'INFO'
    log_file: Optional[str] = None

    def validate(self) -> List[str]:
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.level.upper() not in valid_levels:
            return [f"Invalid logging level '{self.level}'. Valid levels: {valid_levels}"]
        return []


@dataclass
class IVScreeningConfig:
    """
    Master configuration for an IV screening run.

    Example:
        >>> config = IVScreeningConfig(
        ...     data_path='data/german_credit.csv',
        ...     outcome_column='gb',
        ...     summary=True,
        ...     binning=BinningConfig(cp=0.001, min_bucket=50)
        ... )
        >>> config.to_yaml('screening.yaml')
    """

    data_path: Optional[str] = None
    outcome_column: Optional[str] = None
    variables: Optional[List[str]] = None
    summary: bool = False
    binning: BinningConfig = field(default_factory=BinningConfig)
    output_path: Optional[str] = None
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    verbose: bool = False

    # Metadata
    name: Optional[str] = None
    description: Optional[str] = None

    def validate(self) -> List[str]:
        """
        Validate the configuration.

        Returns:
            List of validation error messages (empty if all valid)
        """
        issues = []

        if not self.data_path:
            issues.append("data_path must not be empty")
        elif not Path(self.data_path).exists():
            issues.append(f"Data source not found: {self.data_path}")

        if not self.outcome_column:
            issues.append("outcome_column must not be empty")

        if self.variables is not None and len(self.variables) == 0:
            issues.append("variables must be omitted or contain at least one name")

        if self.output_path is not None:
            suffix = Path(self.output_path).suffix.lower()
            if suffix not in ('.csv', '.json'):
                issues.append(f"Unsupported output format '{suffix}'. Valid: .csv, .json")

        issues.extend(self.logging.validate())

        return issues

    def to_dict(self) -> Dict:
        """Convert to dictionary."""
        return {
            'data_path': self.data_path,
            'outcome_column': self.outcome_column,
            'variables': self.variables,
            'summary': self.summary,
            'binning': self.binning.model_dump(mode='json'),
            'output_path': self.output_path,
            'logging': asdict(self.logging),
            'verbose': self.verbose,
            'name': self.name,
            'description': self.description,
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'IVScreeningConfig':
        """
        Create from dictionary.

        data_path and outcome_column may be left out and supplied later,
        e.g. by command-line flags.

        Raises:
            ValueError: If data is not a mapping (e.g. an empty YAML file)
        """
        if not isinstance(data, dict):
            raise ValueError(
                f"Configuration must be a mapping of settings, got {type(data).__name__}"
            )

        return cls(
            data_path=data.get('data_path'),
            outcome_column=data.get('outcome_column'),
            variables=data.get('variables'),
            summary=data.get('summary', False),
            binning=BinningConfig(**(data.get('binning') or {})),
            output_path=data.get('output_path'),
            logging=LoggingConfig(**(data.get('logging') or {})),
            verbose=data.get('verbose', False),
            name=data.get('name'),
            description=data.get('description'),
        )

    def to_json(self, filepath: str) -> None:
        """
        Export configuration to JSON file.

        Args:
            filepath: Path to save JSON file
        """
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_json(cls, filepath: str) -> 'IVScreeningConfig':
        """
        Load configuration from JSON file.

        Args:
            filepath: Path to JSON file

        Returns:
            IVScreeningConfig instance
        """
        with open(filepath, 'r') as f:
            data = json.load(f)

        return cls.from_dict(data)

    def to_yaml(self, filepath: str) -> None:
        """
        Export configuration to YAML file.

        Args:
            filepath: Path to save YAML file
        """
        Path(filepath).parent.mkdir(parents=True, exist_ok=True)

        with open(filepath, 'w') as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def from_yaml(cls, filepath: str) -> 'IVScreeningConfig':
        """
        Load configuration from YAML file.

        Args:
            filepath: Path to YAML file

        Returns:
            IVScreeningConfig instance
        """
        with open(filepath, 'r') as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data)

    @classmethod
    def from_file(cls, filepath: str) -> 'IVScreeningConfig':
        """Load from .yaml/.yml or .json, chosen by extension."""
        suffix = Path(filepath).suffix.lower()
        if suffix in ('.yaml', '.yml'):
            return cls.from_yaml(filepath)
        if suffix == '.json':
            return cls.from_json(filepath)
        raise ValueError(f"Unsupported config format: {suffix}. Supported: .yaml, .yml, .json")

    def summary_text(self) -> str:
        """Human-readable summary of the configuration."""
        lines = [
            "=" * 70,
            f"IV SCREENING CONFIGURATION: {self.name or 'Unnamed'}",
            "=" * 70,
        ]

        if self.description:
            lines.append(f"Description: {self.description}")
            lines.append("")

        lines.extend([
            "Data:",
            f"  Source: {self.data_path}",
            f"  Outcome column: {self.outcome_column}",
            f"  Variables: {', '.join(self.variables) if self.variables else 'all'}",
            "",
            "Output:",
            f"  Mode: {'summary' if self.summary else 'detail'}",
            f"  Path: {self.output_path or 'stdout'}",
            "",
            self.binning.get_summary(),
            "=" * 70,
        ])

        return "\n".join(lines)
