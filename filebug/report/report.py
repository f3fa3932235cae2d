from dataclasses import dataclass
from typing import List, Optional, Tuple

# Rendering order of the optional report sections: (label, attribute name)
SECTIONS: List[Tuple[str, str]] = [
    ("Expected behavior", "expected_behavior"),
    ("Actual behavior", "actual_behavior"),
    ("Steps to reproduce", "steps_to_reproduce"),
    ("Additional environment details", "additional_environment"),
]


@dataclass(frozen=True)
class IssueReport:
    """
    An issue to be filed with the tracker.

    Optional fields set to None are left out of the rendered report entirely. An empty string is a
    present value and renders an empty section.
    """

    title: str
    expected_behavior: Optional[str] = None
    actual_behavior: Optional[str] = None
    steps_to_reproduce: Optional[str] = None
    additional_environment: Optional[str] = None

    def sections(self) -> List[Tuple[str, Optional[str]]]:
        return [(label, getattr(self, attr)) for label, attr in SECTIONS]
