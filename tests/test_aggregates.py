"""
Unit tests for grade_manager.aggregates
"""
import pytest

from grade_manager.aggregates import (
    assignment_average,
    average,
    class_average,
    filter_by_range,
    find_student,
    highest,
    lowest,
    student_average,
)
from grade_manager.models import Student


def uneven(name: str, grades: list[float]) -> Student:
    """Build a student without validation so grade counts can vary."""
    return Student.model_construct(name=name, grades=grades)


class TestAverage:
    """Test average function"""

    def test_empty_is_zero(self):
        assert average([]) == 0.0

    def test_mean(self):
        assert average([1, 2, 3, 4]) == 2.5

    def test_accepts_generator(self):
        assert average(x for x in [10, 20]) == 15.0

    def test_student_average(self, alice_bob):
        assert student_average(alice_bob[0]) == 45.0
        assert student_average(alice_bob[1]) == 55.0


class TestClassAverage:
    """Test class_average function"""

    def test_pooled_not_mean_of_means(self):
        """Test every grade carries equal weight"""
        students = [uneven("A", [1, 2, 3]), uneven("B", [4])]
        assert class_average(students) == pytest.approx((1 + 2 + 3 + 4) / 4)
        assert class_average(students) != pytest.approx(((1 + 2 + 3) / 3 + 4) / 2)

    def test_alice_bob(self, alice_bob):
        assert class_average(alice_bob) == 50.0

    def test_empty_roster(self):
        assert class_average([]) == 0.0


class TestAssignmentAverage:
    """Test assignment_average function"""

    def test_first_and_last(self, alice_bob):
        assert assignment_average(alice_bob, 1) == 50.0
        assert assignment_average(alice_bob, 10) == 50.0
        assert assignment_average(alice_bob, 3) == 50.0

    @pytest.mark.parametrize("assignment", [0, 11, -1])
    def test_out_of_range_is_zero(self, alice_bob, assignment):
        assert assignment_average(alice_bob, assignment) == 0.0

    def test_student_missing_index_is_skipped(self):
        students = [uneven("A", [10, 20]), uneven("B", [30])]
        assert assignment_average(students, 2) == 20.0

    def test_empty_roster(self):
        assert assignment_average([], 1) == 0.0


class TestExtremes:
    """Test lowest and highest functions"""

    def test_lowest(self, ranked_roster):
        summary = lowest(ranked_roster)
        assert summary.name == "Eve"
        assert summary.average == 65.0

    def test_highest(self, ranked_roster):
        summary = highest(ranked_roster)
        assert summary.name == "Ivan"
        assert summary.average == 95.0

    def test_ties_go_to_first_inserted(self):
        students = [
            Student(name="First", grades=[50] * 10),
            Student(name="Second", grades=[50] * 10),
        ]
        assert lowest(students).name == "First"
        assert highest(students).name == "First"

    def test_empty_roster_is_none(self):
        assert lowest([]) is None
        assert highest([]) is None

    def test_student_named_no_students(self):
        """Test a real student with the old sentinel name is reported normally"""
        students = [Student(name="No students", grades=[0] * 10)]
        summary = lowest(students)
        assert summary is not None
        assert summary.name == "No students"


class TestFilterByRange:
    """Test filter_by_range function"""

    def test_inclusive_bounds_and_order(self, ranked_roster):
        result = filter_by_range(ranked_roster, 70, 90)
        assert [s.name for s in result] == ["Frank", "Grace", "Heidi"]

    def test_no_matches(self, ranked_roster):
        assert filter_by_range(ranked_roster, 96, 100) == []

    def test_inverted_range_is_empty(self, ranked_roster):
        assert filter_by_range(ranked_roster, 90, 70) == []

    def test_returns_same_objects(self, ranked_roster):
        result = filter_by_range(ranked_roster, 0, 100)
        assert all(a is b for a, b in zip(result, ranked_roster))


class TestFindStudent:
    """Test find_student function"""

    def test_case_insensitive(self, alice_bob):
        assert find_student(alice_bob, "bOB") is alice_bob[1]

    def test_unknown(self, alice_bob):
        assert find_student(alice_bob, "Carol") is None

    def test_first_duplicate_wins(self):
        first = Student(name="Alice", grades=[1] * 10)
        second = Student(name="ALICE", grades=[2] * 10)
        assert find_student([first, second], "alice") is first
