"""Tests for core/response.py."""

# pylint: disable=missing-function-docstring

from dnsolve.core.response import ResponseAssembler
from dnsolve.dns.status import ResponseStatus


class TestResponseAssembler:
    """Tests for ResponseAssembler."""

    def test_defaults(self):
        assert ResponseAssembler().build() == {
            "Status": 0,
            "TC": False,
            "RD": True,
            "RA": True,
            "AD": False,
            "CD": False,
        }

    def test_empty_lists_are_omitted(self):
        response = ResponseAssembler().build()
        assert "Question" not in response
        assert "Answer" not in response
        assert "comment" not in response

    def test_question_without_answers(self):
        assembler = ResponseAssembler(status=ResponseStatus.NXDOMAIN)
        assembler.add_question("missing.example.com", 1)

        response = assembler.build()
        assert response["Status"] == 3
        assert response["Question"] == [{"name": "missing.example.com", "type": 1}]
        assert "Answer" not in response

    def test_answers_keep_insertion_order_and_duplicates(self):
        assembler = ResponseAssembler()
        assembler.add_answer("b.example.", 1, 60, "192.0.2.2")
        assembler.add_answer("a.example.", 1, 60, "192.0.2.1")
        assembler.add_answer("b.example.", 1, 60, "192.0.2.2")

        data = [a["data"] for a in assembler.build()["Answer"]]
        assert data == ["192.0.2.2", "192.0.2.1", "192.0.2.2"]

    def test_answer_shape(self):
        assembler = ResponseAssembler()
        assembler.add_answer("example.com.", 15, 3600, "10 mail.example.com.")

        assert assembler.build()["Answer"] == [
            {"name": "example.com.", "type": 15, "TTL": 3600, "data": "10 mail.example.com."}
        ]

    def test_status_is_plain_int(self):
        response = ResponseAssembler(status=ResponseStatus.REFUSED).build()
        assert type(response["Status"]) is int  # pylint: disable=unidiomatic-typecheck
        assert response["Status"] == 5

    def test_authenticated_data_flag(self):
        assert ResponseAssembler(authenticated_data=True).build()["AD"] is True

    def test_comment_included_when_set(self):
        assembler = ResponseAssembler(comment="upstream said hello")
        assert assembler.build()["comment"] == "upstream said hello"

    def test_build_does_not_share_lists(self):
        assembler = ResponseAssembler()
        assembler.add_question("example.com", 1)
        first = assembler.build()
        assembler.add_question("example.org", 1)

        assert len(first["Question"]) == 1


class TestErrorResponse:
    """Tests for ResponseAssembler.error."""

    def test_minimal_shape(self):
        assert ResponseAssembler.error(ResponseStatus.FORMERR, "bad input") == {
            "Status": 1,
            "TC": False,
            "RD": True,
            "RA": True,
            "AD": False,
            "CD": False,
            "comment": "bad input",
        }
