"""
Code segmentation schemes for Rwanda administrative codes.

Two conventions exist for the dataset's codes. Only one is ever active for a
given index, selected by name:

    prefixed   RW-01, RW-D-01, RW-S-001, RW-C-0001, RW-V-00001
    segmented  RW-KG, RW-KG-GAS, RW-KG-GAS-BUM, ... (level = segment count)

The shipped dataset uses the prefixed scheme.
"""

import re
from dataclasses import dataclass
from typing import Dict, Optional

from ..models import AdminLevel


@dataclass(frozen=True)
class CodeScheme:
    """
    A single code convention: one pattern and one display format per level.

    Attributes:
        name: Scheme identifier used in configuration
        patterns: Compiled full-match pattern per level
        formats: Human-readable format per level (e.g. 'RW-D-XX')
    """
    name: str
    patterns: Dict[AdminLevel, re.Pattern]
    formats: Dict[AdminLevel, str]

    def classify(self, code) -> Optional[AdminLevel]:
        """
        Classify a code into its level.

        Args:
            code: Code string; surrounding whitespace is ignored

        Returns:
            The level whose pattern matches, or None if no level matches
        """
        if not isinstance(code, str):
            return None

        candidate = code.strip()
        for level in AdminLevel.ordered():
            if self.patterns[level].fullmatch(candidate):
                return level
        return None

    def format_for(self, level: AdminLevel) -> str:
        return self.formats[level]


PREFIXED_SCHEME = CodeScheme(
    name='prefixed',
    patterns={
        AdminLevel.PROVINCE: re.compile(r'RW-\d{2}'),
        AdminLevel.DISTRICT: re.compile(r'RW-D-\d{2}'),
        AdminLevel.SECTOR: re.compile(r'RW-S-\d{3}'),
        AdminLevel.CELL: re.compile(r'RW-C-\d{4}'),
        AdminLevel.VILLAGE: re.compile(r'RW-V-\d{5}'),
    },
    formats={
        AdminLevel.PROVINCE: 'RW-XX',
        AdminLevel.DISTRICT: 'RW-D-XX',
        AdminLevel.SECTOR: 'RW-S-XXX',
        AdminLevel.CELL: 'RW-C-XXXX',
        AdminLevel.VILLAGE: 'RW-V-XXXXX',
    },
)

SEGMENTED_SCHEME = CodeScheme(
    name='segmented',
    patterns={
        AdminLevel.PROVINCE: re.compile(r'RW-[A-Z]{2}'),
        AdminLevel.DISTRICT: re.compile(r'RW-[A-Z]{2}(?:-[A-Z]{3}){1}'),
        AdminLevel.SECTOR: re.compile(r'RW-[A-Z]{2}(?:-[A-Z]{3}){2}'),
        AdminLevel.CELL: re.compile(r'RW-[A-Z]{2}(?:-[A-Z]{3}){3}'),
        AdminLevel.VILLAGE: re.compile(r'RW-[A-Z]{2}(?:-[A-Z]{3}){4}'),
    },
    formats={
        AdminLevel.PROVINCE: 'RW-XX',
        AdminLevel.DISTRICT: 'RW-XX-YY',
        AdminLevel.SECTOR: 'RW-XX-YY-ZZ',
        AdminLevel.CELL: 'RW-XX-YY-ZZ-AA',
        AdminLevel.VILLAGE: 'RW-XX-YY-ZZ-AA-BB',
    },
)

CODE_SCHEMES = {
    PREFIXED_SCHEME.name: PREFIXED_SCHEME,
    SEGMENTED_SCHEME.name: SEGMENTED_SCHEME,
}
DEFAULT_CODE_SCHEME = PREFIXED_SCHEME.name


def get_code_scheme(name: str = DEFAULT_CODE_SCHEME) -> CodeScheme:
    """Return the scheme registered under ``name`` (KeyError if unknown)."""
    return CODE_SCHEMES[name]
