from __future__ import annotations

from enum import Enum
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator


class UnexpectedErrorPolicy(str, Enum):
    """How a test case treats an error it was not written to expect."""

    RAISE = "raise"
    FAIL = "fail"


class SuiteConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    purpose: str = ""
    unexpected_errors: UnexpectedErrorPolicy = UnexpectedErrorPolicy.RAISE

    @field_validator("name")
    @classmethod
    def name_must_not_be_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name must not be blank")
        return v


def load_config(path: Path) -> SuiteConfig:
    """Load and validate a suite config from a YAML file."""
    with open(path) as f:
        raw = yaml.safe_load(f)

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ValueError(f"Suite config {path} must be a mapping, got {type(raw).__name__}")

    return SuiteConfig(**raw)
