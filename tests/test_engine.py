"""
Tests for the questionnaire engine.
"""

import pytest

from autoui.exceptions import InputError, SchemaError
from autoui.models import Question, QuestionSchema, Section
from autoui.questionnaire import QuestionnaireEngine, is_skip_request
from autoui.questionnaire.engine import format_question_prompt, format_status_block


def two_key_schema():
    return QuestionSchema(
        sections=[
            Section(
                id="s",
                title="Only",
                questions=[Question(key="a", ask="A?"), Question(key="b", ask="B?")],
            )
        ]
    )


class TestAnswerExtraction:
    """Answer lines are found anywhere in the conversation."""

    def setup_method(self):
        self.engine = QuestionnaireEngine()

    def test_last_match_wins(self):
        schema = QuestionSchema(
            sections=[Section(id="s", title="S", questions=[Question(key="k", ask="K?")])]
        )
        result = self.engine.evaluate(schema, "k=1\nk=2")
        assert result.answers["k"] == "2"

    def test_colon_separator_and_whitespace(self, schema):
        corpus = "Intro text\n   product_name :   Acme Rockets  \n"
        result = self.engine.evaluate(schema, corpus)
        assert result.answers["product_name"] == "Acme Rockets"

    def test_key_is_case_insensitive_value_case_preserved(self, schema):
        result = self.engine.evaluate(schema, "PRODUCT_NAME=MixedCase Value")
        assert result.answers["product_name"] == "MixedCase Value"

    def test_key_must_start_the_line(self, schema):
        corpus = "my product_name=Nope\n- `product_name=...`"
        result = self.engine.evaluate(schema, corpus)
        assert "product_name" not in result.answers

    def test_empty_value_is_not_an_answer(self, schema):
        result = self.engine.evaluate(schema, "product_name=\nbrand_tone=   ")
        assert result.answers == {}

    def test_correction_in_later_comment(self, schema):
        corpus = "\n\n".join(["product_name=Old", "unrelated", "product_name=New"])
        result = self.engine.evaluate(schema, corpus)
        assert result.answers["product_name"] == "New"

    def test_key_with_regex_characters(self):
        schema = QuestionSchema(
            sections=[Section(id="s", title="S", questions=[Question(key="a.b", ask="?")])]
        )
        result = self.engine.evaluate(schema, "axb=wrong\na.b=right")
        assert result.answers == {"a.b": "right"}

    def test_crlf_line_endings(self, schema):
        corpus = "product_name=Acme\r\noffer_type=waitlist\r\n"
        result = self.engine.evaluate(schema, corpus)
        assert result.answers == {"product_name": "Acme", "offer_type": "waitlist"}

    def test_trailing_carriage_return_on_last_line(self, schema):
        corpus = "Hello\r\n\r\nbrand_tone = bold\r"
        result = self.engine.evaluate(schema, corpus)
        assert result.answers == {"brand_tone": "bold"}

    def test_key_that_prefixes_another_key(self):
        schema = QuestionSchema(
            sections=[
                Section(
                    id="s",
                    title="S",
                    questions=[Question(key="tag", ask="?"), Question(key="tagline", ask="?")],
                )
            ]
        )
        result = self.engine.evaluate(schema, "tagline=Launching soon")
        assert result.answers == {"tagline": "Launching soon"}
        assert result.pending_key == "tag"

        result = self.engine.evaluate(schema, "tagline=Launching soon\ntag: beta")
        assert result.answers == {"tag": "beta", "tagline": "Launching soon"}


class TestMerge:
    """Prior answers merge with the corpus."""

    def setup_method(self):
        self.engine = QuestionnaireEngine()

    def test_corpus_overrides_prior(self, schema):
        result = self.engine.evaluate(
            schema, "product_name=Fresh", prior_answers={"product_name": "Stale"}
        )
        assert result.answers["product_name"] == "Fresh"

    def test_prior_answers_are_kept(self, schema):
        result = self.engine.evaluate(schema, "", prior_answers={"brand_tone": "bold"})
        assert result.answers == {"brand_tone": "bold"}

    def test_unknown_prior_keys_are_dropped(self, schema):
        result = self.engine.evaluate(
            schema, "", prior_answers={"not_a_question": "x", "offer_type": "waitlist"}
        )
        assert result.answers == {"offer_type": "waitlist"}

    def test_monotonic_across_runs(self, schema):
        first = self.engine.evaluate(schema, "product_name=Acme")
        second = self.engine.evaluate(
            schema, "product_name=Acme\n\noffer_type=waitlist", first.answers
        )
        assert set(first.answers) <= set(second.answers)
        assert second.answers["product_name"] == "Acme"


class TestProgress:
    """Next question, completion and skip detection."""

    def setup_method(self):
        self.engine = QuestionnaireEngine()

    def test_completion(self):
        result = self.engine.evaluate(two_key_schema(), "a=x\n\nb=y")
        assert result.complete is True
        assert result.pending_key == ""
        assert result.next_question_prompt == ""
        assert result.section_id == ""

    def test_next_question_follows_schema_order(self, schema):
        result = self.engine.evaluate(schema, "offer_type=waitlist")
        assert result.complete is False
        assert result.pending_key == "product_name"
        assert result.section_id == "basics"
        assert result.section_title == "Basics"
        assert result.section_intro == "The essentials."
        assert result.section_links == "- https://example.com/guide"

    def test_next_question_moves_to_next_section(self, schema):
        corpus = "product_name=Acme\noffer_type=waitlist"
        result = self.engine.evaluate(schema, corpus)
        assert result.pending_key == "brand_tone"
        assert result.section_id == "look"
        assert result.section_links == ""

    def test_skipped_question_counts_as_answered(self, schema):
        corpus = "product_name=__SKIP__"
        result = self.engine.evaluate(schema, corpus)
        assert result.pending_key == "offer_type"

    def test_wants_skip(self, schema):
        assert self.engine.evaluate(schema, "", last_human_comment="skip").wants_skip
        assert not self.engine.evaluate(
            schema, "", last_human_comment="skipping stuff"
        ).wants_skip
        assert not self.engine.evaluate(schema, "", last_human_comment=None).wants_skip

    def test_idempotent(self, schema):
        args = (schema, "product_name=Acme\nbrand_tone=bold", {"offer_type": "x"}, "next")
        assert self.engine.evaluate(*args) == self.engine.evaluate(*args)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("skip", True),
        ("Next", True),
        ("please skip this one", True),
        ("ok\nnext\n", True),
        ("skipping stuff", False),
        ("next-step", False),
        ("nextskip", False),
        ("", False),
    ],
)
def test_is_skip_request(text, expected):
    assert is_skip_request(text) is expected


class TestFormatting:
    """Status block and question prompt rendering."""

    def test_status_markers(self, schema):
        answers = {"product_name": "Acme", "offer_type": "__SKIP__"}
        status = format_status_block(schema, answers)
        assert status == (
            "### Basics\n"
            "- `product_name`: ✅ Acme\n"
            "- `offer_type`: ⏭️ skipped\n"
            "\n"
            "### Look and feel\n"
            "- `brand_tone`: ❌"
        )

    def test_skip_sentinel_is_case_insensitive(self, schema):
        status = format_status_block(schema, {"brand_tone": "__skip__"})
        assert "- `brand_tone`: ⏭️ skipped" in status

    def test_prompt_with_options(self):
        question = Question(key="offer_type", ask="Which offer?", options=["a", "b"])
        assert format_question_prompt(question) == (
            "Which offer?\n\n**Options:**\n- a\n- b\n\n"
            "Reply with:\n- `offer_type=...`\n- or `skip` / `next`"
        )

    def test_prompt_without_options(self):
        prompt = format_question_prompt(Question(key="k", ask="K?"))
        assert "Options" not in prompt
        assert prompt.startswith("K?\n\nReply with:")


class TestErrors:
    """Invalid input is rejected."""

    def setup_method(self):
        self.engine = QuestionnaireEngine()

    def test_duplicate_keys(self):
        schema = QuestionSchema(
            sections=[
                Section(id="a", title="A", questions=[Question(key="k", ask="?")]),
                Section(id="b", title="B", questions=[Question(key="k", ask="?")]),
            ]
        )
        with pytest.raises(SchemaError):
            self.engine.evaluate(schema, "")

    def test_keys_differing_only_in_case(self):
        schema = QuestionSchema(
            sections=[
                Section(
                    id="s",
                    title="S",
                    questions=[Question(key="a", ask="?"), Question(key="A", ask="?")],
                )
            ]
        )
        with pytest.raises(SchemaError):
            self.engine.evaluate(schema, "a=1")

    def test_corpus_must_be_text(self, schema):
        with pytest.raises(InputError):
            self.engine.evaluate(schema, None)

    def test_prior_answers_must_be_mapping(self, schema):
        with pytest.raises(InputError):
            self.engine.evaluate(schema, "", prior_answers=["product_name"])
