# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Pydantic models for accessibility scan input and results.
"""

import json
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Severity(str, Enum):
    """Enum for issue severity levels."""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        """Ordinal used for sorting and scoring (higher is more severe)."""
        return _SEVERITY_RANKS[self]


_SEVERITY_RANKS = {
    Severity.CRITICAL: 3,
    Severity.WARNING: 2,
    Severity.INFO: 1,
}


class Issue(BaseModel):
    """One detected accessibility defect.

    Optional fields are always present on the record and are ``None`` when the
    check could not derive them.
    """

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    severity: Severity
    category: str
    title: str
    description: str
    selector: Optional[str] = None
    line_number: Optional[int] = None
    recommended_fix: str
    code_snippet: Optional[str] = None
    fixed_code: Optional[str] = None
    wcag_criteria: Optional[str] = None
    file_path: Optional[str] = None

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class ScanResult(BaseModel):
    """Aggregated result of one scan."""

    model_config = ConfigDict(
        frozen=True, populate_by_name=True, alias_generator=to_camel
    )

    issues: List[Issue] = Field(default_factory=list)
    total_issues: int = 0
    critical_count: int = 0
    warning_count: int = 0
    info_count: int = 0
    score: int = Field(100, ge=0, le=100)
    grade: str = "A"

    def to_record(self) -> Dict[str, Any]:
        """Serialize to the stable record shape consumed by report sinks."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self, indent: Optional[int] = 2) -> str:
        return json.dumps(self.to_record(), indent=indent, ensure_ascii=False)


class SourceDocument(BaseModel):
    """A single HTML document handed from the loader to the rule engine."""

    model_config = ConfigDict(frozen=True)

    html: str
    file_path: Optional[str] = None
