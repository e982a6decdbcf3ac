"""
Command classes for AutoUI CLI.
Defines individual command implementations for better organization.
"""

import os
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import click

from autoui.exceptions import ConfigurationError, FileSystemError, InputError
from autoui.generator import VueGenerator
from autoui.github import ActionOutputs, GitHubClient
from autoui.models import EvaluationResult, QuestionSchema
from autoui.questionnaire import (
    AnswerStore,
    IssueParser,
    IssueParseReport,
    QuestionnaireEngine,
    SchemaLoader,
    render_reply,
)
from autoui.questionnaire.issue_parser import bot_author_predicate
from autoui.utils.file_utils import FileUtils
from autoui.utils.logging_utils import LoggerMixin


class BaseCommand(ABC, LoggerMixin):
    """Base class for all AutoUI commands."""

    def __init__(self, config: Dict[str, Any]):
        self.config = config

    def section(self, name: str) -> Dict[str, Any]:
        return self.config.get(name, {}) or {}

    def load_schema(self, schema_file: Optional[str] = None) -> QuestionSchema:
        path = schema_file or self.section("questionnaire").get("schema_file")
        return SchemaLoader().load(path)

    def answer_store(self, answers_file: Optional[str] = None) -> AnswerStore:
        return AnswerStore(answers_file or self.section("questionnaire").get("answers_file"))

    def tracker(self, repo: Optional[str] = None, token: Optional[str] = None) -> GitHubClient:
        github = self.section("github")
        repository = repo or github.get("repository") or os.environ.get("GITHUB_REPOSITORY")
        if not repository:
            raise ConfigurationError(
                "No repository configured",
                "pass --repo, set github.repository or GITHUB_REPOSITORY",
            )

        return GitHubClient(
            repository=repository,
            token=token or os.environ.get(github.get("token_env", "GITHUB_TOKEN")),
            api_url=github.get("api_url", "https://api.github.com"),
            timeout=github.get("timeout", 30),
            per_page=github.get("per_page", 100),
        )

    def issue_parser(
        self,
        repo: Optional[str] = None,
        schema_file: Optional[str] = None,
        answers_file: Optional[str] = None,
    ) -> IssueParser:
        github = self.section("github")
        return IssueParser(
            tracker=self.tracker(repo),
            schema=self.load_schema(schema_file),
            answer_store=self.answer_store(answers_file),
            label=github.get("label", "AutoUI"),
            is_automation_author=bot_author_predicate(
                github.get("bot_login", "github-actions[bot]")
            ),
        )

    @abstractmethod
    def execute(self, **kwargs) -> Any:
        """Execute the command."""
        pass


class ParseIssueCommand(BaseCommand):
    """Evaluates the questionnaire for an issue and writes step outputs."""

    def execute(
        self,
        issue: int,
        repo: Optional[str] = None,
        schema_file: Optional[str] = None,
        answers_file: Optional[str] = None,
        output_file: Optional[str] = None,
        apply_skip: bool = False,
    ) -> IssueParseReport:
        self.logger.info(f"Parsing questionnaire issue #{issue}")

        parser = self.issue_parser(repo, schema_file, answers_file)
        report = parser.run(issue, apply_skip=apply_skip)

        outputs = ActionOutputs(output_file)
        outputs.update(report.outputs())
        outputs.flush()
        return report


class CommentCommand(BaseCommand):
    """Posts the progress and next question as an issue comment."""

    def execute(
        self,
        issue: int,
        repo: Optional[str] = None,
        schema_file: Optional[str] = None,
        answers_file: Optional[str] = None,
    ) -> Optional[str]:
        parser = self.issue_parser(repo, schema_file, answers_file)
        report = parser.run(issue, apply_skip=True)

        if not report.has_label:
            click.echo(f"⚠️  Issue #{issue} is not labelled '{parser.label}', nothing posted")
            return None

        body = render_reply(report)
        parser.tracker.create_comment(issue, body)
        click.echo(f"✅ Posted questionnaire update on issue #{issue}")
        return body


class EvaluateCommand(BaseCommand):
    """Evaluates a locally stored conversation, without the issue tracker."""

    def execute(
        self,
        corpus_file: str,
        schema_file: Optional[str] = None,
        answers_file: Optional[str] = None,
        last_comment: Optional[str] = None,
        save: bool = False,
    ) -> EvaluationResult:
        try:
            corpus = FileUtils.read_file(corpus_file)
        except FileSystemError as e:
            raise InputError(f"Cannot read corpus {corpus_file}", e.details or str(e))

        schema = self.load_schema(schema_file)
        store = self.answer_store(answers_file)
        result = QuestionnaireEngine().evaluate(schema, corpus, store.load(), last_comment)

        if save:
            store.save(result.answers)

        click.echo(result.status_block)
        click.echo("")
        if result.complete:
            click.echo("✅ Questionnaire complete")
        else:
            click.echo(f"❓ Next question ({result.pending_key}):")
            click.echo(result.next_question_prompt)
        if result.wants_skip:
            click.echo("⏭️  Last comment asks to skip the pending question")
        return result


class GenerateCommand(BaseCommand):
    """Renders the Vue front end from stored answers."""

    def execute(
        self,
        answers_file: Optional[str] = None,
        templates_dir: Optional[str] = None,
        output_dir: Optional[str] = None,
        base_path: Optional[str] = None,
    ) -> List[str]:
        generator_config = self.section("generator")
        answers = self.answer_store(answers_file).load()

        generator = VueGenerator(
            templates_dir=templates_dir or generator_config.get("templates_dir"),
            output_dir=output_dir or generator_config.get("output_dir", "coming-soon"),
        )
        written = generator.generate(
            answers, base_path=base_path or generator_config.get("base_path", "/")
        )

        click.echo(f"✅ Generated {len(written)} files:")
        for path in written:
            click.echo(f"   • {path}")
        return written
