"""
Issue parser for AutoUI.
Runs one questionnaire step for an issue: fetch, evaluate, persist answers, report.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from autoui.interfaces import IssueTrackerInterface
from autoui.models import SKIP_SENTINEL, EvaluationResult, QuestionSchema
from autoui.utils.logging_utils import LoggerMixin
from .answer_store import AnswerStore
from .engine import QuestionnaireEngine, is_skipped

DEFAULT_LABEL = "AutoUI"
DEFAULT_BOT_LOGIN = "github-actions[bot]"
LABEL_MISSING_STATUS = "AutoUI label missing."


def bot_author_predicate(bot_login: str = DEFAULT_BOT_LOGIN) -> Callable[[str], bool]:
    """Predicate matching comments written by the given automation account."""
    return lambda author: author == bot_login


@dataclass
class IssueParseReport:
    """Result of parsing one issue."""

    issue_number: int
    issue_title: str
    has_label: bool
    result: Optional[EvaluationResult] = None
    skipped_key: str = ""

    def outputs(self) -> Dict[str, Any]:
        """Named values for the calling workflow."""
        outputs: Dict[str, Any] = {
            "has_label": self.has_label,
            "issue_number": str(self.issue_number),
            "issue_title": self.issue_title,
        }

        if self.result is None:
            outputs.update(
                {
                    "complete": False,
                    "next_question": "",
                    "status_block": LABEL_MISSING_STATUS,
                }
            )
            return outputs

        result = self.result
        outputs.update(
            {
                "complete": result.complete,
                "wants_skip": result.wants_skip,
                "pending_key": result.pending_key,
                "section_id": result.section_id,
                "section_title": result.section_title,
                "section_intro": result.section_intro,
                "section_links": result.section_links,
                "status_block": result.status_block,
                "next_question": result.next_question_prompt,
                "skipped_key": self.skipped_key,
            }
        )
        return outputs


class IssueParser(LoggerMixin):
    """Drives the questionnaire engine from an issue tracker."""

    def __init__(
        self,
        tracker: IssueTrackerInterface,
        schema: QuestionSchema,
        engine: Optional[QuestionnaireEngine] = None,
        answer_store: Optional[AnswerStore] = None,
        label: str = DEFAULT_LABEL,
        is_automation_author: Optional[Callable[[str], bool]] = None,
    ):
        self.tracker = tracker
        self.schema = schema
        self.engine = engine or QuestionnaireEngine()
        self.answer_store = answer_store
        self.label = label
        self.is_automation_author = is_automation_author or bot_author_predicate()

    def run(self, issue_number: int, apply_skip: bool = False) -> IssueParseReport:
        """Evaluate the questionnaire for an issue.

        With apply_skip, a skip request from the respondent records the pending
        question as skipped and the questionnaire moves on to the next one.
        """
        snapshot = self.tracker.fetch_snapshot(issue_number)
        report = IssueParseReport(
            issue_number=issue_number,
            issue_title=snapshot.title,
            has_label=snapshot.has_label(self.label),
        )

        if not report.has_label:
            self.logger.info(f"Issue #{issue_number} has no '{self.label}' label, skipping")
            return report

        corpus = snapshot.corpus()
        last_human = snapshot.last_human_comment(self.is_automation_author)
        prior = self.answer_store.load() if self.answer_store else {}

        result = self.engine.evaluate(self.schema, corpus, prior, last_human)

        recorded = self._unposted_skip(corpus, prior) if apply_skip else ""
        if recorded:
            # an earlier run this turn already applied it
            report.skipped_key = recorded
        elif (
            apply_skip
            and result.wants_skip
            and result.pending_key
            and snapshot.awaiting_reply(self.is_automation_author)
        ):
            report.skipped_key = result.pending_key
            self.logger.info(f"Respondent skipped '{report.skipped_key}'")
            corpus = f"{corpus}\n\n{skip_line(report.skipped_key)}"
            result = self.engine.evaluate(self.schema, corpus, prior, last_human)

        if self.answer_store:
            self.answer_store.save(result.answers)

        report.result = result
        self.logger.info(
            f"Issue #{issue_number}: {len(result.answers)}/{len(self.schema.keys())} "
            f"answered, complete={result.complete}"
        )
        return report

    def _unposted_skip(self, corpus: str, prior: Dict[str, str]) -> str:
        """Key skipped in the answer store whose skip line is not in the conversation."""
        posted = self.engine.extract_answers(self.schema, corpus)
        for key in self.schema.keys():
            if is_skipped(prior.get(key)) and key not in posted:
                return key
        return ""


def skip_line(key: str) -> str:
    return f"{key}={SKIP_SENTINEL}"


def render_reply(report: IssueParseReport) -> str:
    """Markdown body for the automation's reply comment."""
    result = report.result
    if result is None:
        return LABEL_MISSING_STATUS

    parts = []
    if report.skipped_key:
        parts.append(f"Skipped `{report.skipped_key}`.\n\n{skip_line(report.skipped_key)}")

    parts.append(f"## Progress\n\n{result.status_block}")

    if result.complete:
        parts.append("All questions answered. Generating the front end now.")
    else:
        heading = f"## {result.section_title}"
        if result.section_intro:
            heading += f"\n\n{result.section_intro}"
        if result.section_links:
            heading += f"\n\n{result.section_links}"
        parts.append(heading)
        parts.append(result.next_question_prompt)

    return "\n\n".join(parts)
