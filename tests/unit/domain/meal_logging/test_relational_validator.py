"""Unit tests for the child-response relational validator."""

import pytest

from littlemeals.domain.meal_logging.error_codes import ErrorCode
from littlemeals.domain.meal_logging.models import Child, ChildResponse, ResponseType
from littlemeals.domain.meal_logging.relational_validator import validate_child_responses


class TestCompleteness:
    """Every child needs exactly one recorded response."""

    @pytest.mark.parametrize("size", [1, 2, 5])
    def test_full_coverage_is_valid(self, size: int) -> None:
        """N children with N valid responses yield no errors."""
        family = [Child(id=str(i), name=f"Kid {i}") for i in range(size)]
        responses = [
            ChildResponse(child_id=child.id, response=list(ResponseType)[i % 3])
            for i, child in enumerate(family)
        ]

        assert validate_child_responses(responses, family).is_valid

    def test_response_order_does_not_matter(
        self, children: list[Child], all_eaten: list[ChildResponse]
    ) -> None:
        """Responses are matched by child id, not position."""
        assert validate_child_responses(list(reversed(all_eaten)), children).is_valid

    def test_one_missing_child(self, children: list[Child], all_eaten: list[ChildResponse]) -> None:
        """Three children, two responses: one error naming the missing child."""
        result = validate_child_responses(all_eaten[:2], children)

        assert result.codes == [ErrorCode.MISSING_CHILD_RESPONSE]
        assert result.errors[0].field == "childResponses"
        assert result.errors[0].message == "Please set response for Robin"

    def test_unset_response_counts_as_missing(self, children: list[Child]) -> None:
        """An entry with the None sentinel does not satisfy the child."""
        responses = [
            ChildResponse(child_id="1", response="eaten"),
            ChildResponse(child_id="2", response=None),
            ChildResponse(child_id="3", response="partial"),
        ]

        result = validate_child_responses(responses, children)

        assert result.codes == [ErrorCode.MISSING_CHILD_RESPONSE]
        assert "Alex" in result.errors[0].message

    def test_empty_responses(self, children: list[Child]) -> None:
        """No responses: one error per child, in children order."""
        result = validate_child_responses([], children)

        assert result.codes == [ErrorCode.MISSING_CHILD_RESPONSE] * 3
        assert [e.message for e in result.errors] == [
            "Please set response for Sam",
            "Please set response for Alex",
            "Please set response for Robin",
        ]

    def test_no_children(self) -> None:
        """An empty family needs no responses."""
        assert validate_child_responses([], []).is_valid

    def test_placeholder_name(self) -> None:
        """A child without a usable name is called 'child'."""
        nameless = Child(id="9")

        result = validate_child_responses([], [nameless])

        assert result.errors[0].message == "Please set response for child"

    def test_duplicate_entries_are_reported(self, children: list[Child], all_eaten: list[ChildResponse]) -> None:
        """Two entries for one child break the exactly-one rule."""
        responses = all_eaten + [ChildResponse(child_id="1", response="refused")]

        result = validate_child_responses(responses, children)

        assert result.codes == [ErrorCode.MISSING_CHILD_RESPONSE]
        assert result.errors[0].message == "Please set a single response for Sam"


class TestReferentialIntegrity:
    """Entries must point at known children with known values."""

    def test_unknown_child_id(self, sam: Child) -> None:
        """A reference to a stranger is reported at its index."""
        responses = [
            ChildResponse(child_id="1", response="eaten"),
            ChildResponse(child_id="99", response="eaten"),
        ]

        result = validate_child_responses(responses, [sam])

        assert result.codes == [ErrorCode.INVALID_CHILD_ID]
        assert result.errors[0].field == "childResponses[1].childId"

    def test_missing_child_id(self, sam: Child) -> None:
        """An entry without child id is an invalid reference."""
        responses = [ChildResponse(child_id="1", response="eaten"), ChildResponse(response="eaten")]

        result = validate_child_responses(responses, [sam])

        assert result.codes == [ErrorCode.INVALID_CHILD_ID]

    @pytest.mark.parametrize("value", ["loved it", "EATEN", ""])
    def test_unknown_response_value(self, sam: Child, value: str) -> None:
        """Non-null values outside the enumeration are reported at their index."""
        result = validate_child_responses([ChildResponse(child_id="1", response=value)], [sam])

        assert result.codes == [ErrorCode.INVALID_RESPONSE_TYPE]
        assert result.errors[0].field == "childResponses[0].response"

    def test_checks_do_not_short_circuit(self, children: list[Child]) -> None:
        """Missing child, bad reference and bad value are all reported."""
        responses = [
            ChildResponse(child_id="1", response="eaten"),
            ChildResponse(child_id="42", response="eaten"),
            ChildResponse(child_id="3", response="gobbled"),
        ]

        result = validate_child_responses(responses, children)

        assert sorted(e.code.value for e in result.errors) == [
            "INVALID_CHILD_ID",
            "INVALID_RESPONSE_TYPE",
            "MISSING_CHILD_RESPONSE",
        ]
        assert {e.field for e in result.errors} == {
            "childResponses",
            "childResponses[1].childId",
            "childResponses[2].response",
        }

    def test_stranger_does_not_satisfy_child(self, sam: Child) -> None:
        """A mismatched reference leaves the real child unanswered."""
        result = validate_child_responses([ChildResponse(child_id="99", response="eaten")], [sam])

        assert sorted(result.codes) == sorted(
            [ErrorCode.MISSING_CHILD_RESPONSE, ErrorCode.INVALID_CHILD_ID]
        )
