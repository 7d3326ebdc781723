"""
Configuration file loader for ``.ivarith.yml``.

Provides defaults so the command line works without a config file, while
allowing per-directory settings for enclosure verification and output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from .enclosure import DEFAULT_TIMEOUT_MS

CONFIG_NAMES = (".ivarith.yml", ".ivarith.yaml")


@dataclass
class VerifyConfig:
    timeout_ms: int = DEFAULT_TIMEOUT_MS
    check_attained: bool = False


@dataclass
class OutputConfig:
    verbose: bool = False


@dataclass
class IvarithConfig:
    """Top-level configuration for ivarith."""
    verify: VerifyConfig = field(default_factory=VerifyConfig)
    output: OutputConfig = field(default_factory=OutputConfig)

    @classmethod
    def find(cls, root: Path) -> Optional[Path]:
        for name in CONFIG_NAMES:
            path = root / name
            if path.exists():
                return path
        return None

    @classmethod
    def load(cls, root: Path) -> "IvarithConfig":
        """Load config from .ivarith.yml in ``root``, falling back to defaults."""
        config_path = cls.find(root)
        if config_path is None:
            return cls()
        return cls.load_file(config_path)

    @classmethod
    def load_file(cls, config_path: Path) -> "IvarithConfig":
        with open(config_path) as f:
            raw = yaml.safe_load(f) or {}
        if not isinstance(raw, dict):
            raise ValueError(f"{config_path}: expected a mapping at top level")
        return cls._from_dict(raw)

    @classmethod
    def _from_dict(cls, raw: dict[str, Any]) -> "IvarithConfig":
        verify_raw = raw.get("verify") or {}
        output_raw = raw.get("output") or {}

        verify = VerifyConfig(
            timeout_ms=int(verify_raw.get("timeout-ms", verify_raw.get("timeout_ms", DEFAULT_TIMEOUT_MS))),
            check_attained=bool(verify_raw.get("check-attained", verify_raw.get("check_attained", False))),
        )
        output = OutputConfig(
            verbose=bool(output_raw.get("verbose", False)),
        )
        return cls(verify=verify, output=output)

    def to_yaml(self) -> str:
        """Serialise to YAML string."""
        lines = [
            "# .ivarith.yml: ivarith configuration",
            "",
            "verify:",
            f"  timeout-ms: {self.verify.timeout_ms}",
            f"  check-attained: {str(self.verify.check_attained).lower()}",
            "",
            "output:",
            f"  verbose: {str(self.output.verbose).lower()}",
            "",
        ]
        return "\n".join(lines)
