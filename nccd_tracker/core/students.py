"""
Student roster.
A fixed set of students that summary reports can be attached to.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Student:
    student_id: str
    first_name: str
    last_name: str
    year_level: str
    class_name: str
    has_nccd_funding: bool
    last_updated: str
    disabilities: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "studentId": self.student_id,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "yearLevel": self.year_level,
            "class": self.class_name,
            "hasNCCDFunding": self.has_nccd_funding,
            "disabilities": list(self.disabilities),
            "lastUpdated": self.last_updated,
        }


ROSTER = [
    Student("std-001", "Emma", "Johnson", "Year 3", "3A", True, "2024-01-15",
            ["Autism Spectrum Disorder"]),
    Student("std-002", "Liam", "Chen", "Year 5", "5B", True, "2024-01-20",
            ["ADHD", "Learning Disability"]),
    Student("std-003", "Sophia", "Williams", "Year 2", "2C", False, "2024-01-18",
            ["Speech Delay"]),
    Student("std-004", "Noah", "Brown", "Year 4", "4A", True, "2024-01-22",
            ["Intellectual Disability"]),
    Student("std-005", "Ava", "Davis", "Year 6", "6B", True, "2024-01-25",
            ["Physical Disability", "Vision Impairment"]),
]


def list_students() -> List[Student]:
    return list(ROSTER)


def get_student(student_id: str) -> Optional[Student]:
    for student in ROSTER:
        if student.student_id == student_id:
            return student
    return None
