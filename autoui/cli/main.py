"""
Main CLI entry point for AutoUI.
Handles command-line interface and routing to the command classes.
"""

import sys
import traceback
from typing import Optional

import click

from autoui import __version__
from autoui.config import ConfigurationManager
from autoui.exceptions import AutoUIError
from autoui.utils.logging_utils import get_logger, setup_logging
from autoui.utils.yaml_utils import YamlUtils
from .commands import CommentCommand, EvaluateCommand, GenerateCommand, ParseIssueCommand

schema_option = click.option(
    "--schema", "schema_file", help="Question schema file (JSON or YAML)"
)
answers_option = click.option("--answers", "answers_file", help="Answer store JSON file")


@click.group()
@click.option("--config", "-c", help="Configuration file path")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.option(
    "--debug", is_flag=True, help="Enable debug mode with detailed error traces"
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[str], verbose: bool, debug: bool):
    """AutoUI - issue-driven questionnaire and coming-soon page generator.

    A respondent answers questions on a labelled issue with lines like
    `product_name=Acme`. Each workflow run re-reads the conversation,
    reports progress and asks the next question; once every question is
    answered the Vue front end is generated.

    Typical workflow steps:
      autoui parse-issue --issue 42     # Write step outputs
      autoui comment --issue 42         # Post progress and next question
      autoui generate                   # Render the Vue sources
    """

    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug
    ctx.obj["verbose"] = verbose

    if ctx.invoked_subcommand == "version":
        ctx.obj["config"] = {}
        ctx.obj["config_manager"] = None
        return

    try:
        config_manager = ConfigurationManager(config)
        ctx.obj["config"] = config_manager.load_config()
        ctx.obj["config_manager"] = config_manager
    except AutoUIError as e:
        click.echo(f"❌ Error loading configuration: {e}", err=True)
        if debug:
            click.echo(f"Debug trace:\n{traceback.format_exc()}", err=True)
        click.echo(
            "💡 Try running 'autoui config --init' to create default configuration",
            err=True,
        )
        sys.exit(1)

    log_config = ctx.obj["config"].get("logging", {})
    log_level = "DEBUG" if (verbose or debug) else log_config.get("level", "INFO")
    setup_logging(level=log_level, log_file=log_config.get("file"))

    logger = get_logger("cli.main")
    logger.debug(f"AutoUI CLI started with log level: {log_level}")


def _fail(ctx: click.Context, action: str, error: Exception) -> None:
    get_logger("cli.main").error(f"{action} failed: {error}")
    click.echo(f"❌ {action} failed: {error}", err=True)
    if ctx.obj.get("debug"):
        click.echo(f"Debug trace:\n{traceback.format_exc()}", err=True)
    sys.exit(1)


@cli.command("parse-issue")
@click.option("--issue", "-i", type=int, required=True, help="Issue number")
@click.option("--repo", help="Repository as owner/name (default: GITHUB_REPOSITORY)")
@schema_option
@answers_option
@click.option("--output-file", help="Step output file (default: GITHUB_OUTPUT)")
@click.option(
    "--apply-skip", is_flag=True, help="Record a skip request for the pending question"
)
@click.pass_context
def parse_issue(
    ctx: click.Context,
    issue: int,
    repo: Optional[str],
    schema_file: Optional[str],
    answers_file: Optional[str],
    output_file: Optional[str],
    apply_skip: bool,
):
    """Evaluate the questionnaire on an issue and write workflow outputs."""
    try:
        ParseIssueCommand(ctx.obj["config"]).execute(
            issue=issue,
            repo=repo,
            schema_file=schema_file,
            answers_file=answers_file,
            output_file=output_file,
            apply_skip=apply_skip,
        )
    except AutoUIError as e:
        _fail(ctx, "Issue parsing", e)


@cli.command()
@click.option("--issue", "-i", type=int, required=True, help="Issue number")
@click.option("--repo", help="Repository as owner/name (default: GITHUB_REPOSITORY)")
@schema_option
@answers_option
@click.pass_context
def comment(
    ctx: click.Context,
    issue: int,
    repo: Optional[str],
    schema_file: Optional[str],
    answers_file: Optional[str],
):
    """Post questionnaire progress and the next question on an issue."""
    try:
        CommentCommand(ctx.obj["config"]).execute(
            issue=issue, repo=repo, schema_file=schema_file, answers_file=answers_file
        )
    except AutoUIError as e:
        _fail(ctx, "Posting comment", e)


@cli.command()
@click.option(
    "--corpus",
    "corpus_file",
    required=True,
    help="Text file holding the issue body and comments",
)
@schema_option
@answers_option
@click.option("--last-comment", help="Most recent comment by the respondent")
@click.option("--save", is_flag=True, help="Persist the merged answers")
@click.pass_context
def evaluate(
    ctx: click.Context,
    corpus_file: str,
    schema_file: Optional[str],
    answers_file: Optional[str],
    last_comment: Optional[str],
    save: bool,
):
    """Evaluate a saved conversation offline."""
    try:
        EvaluateCommand(ctx.obj["config"]).execute(
            corpus_file=corpus_file,
            schema_file=schema_file,
            answers_file=answers_file,
            last_comment=last_comment,
            save=save,
        )
    except AutoUIError as e:
        _fail(ctx, "Evaluation", e)


@cli.command()
@answers_option
@click.option("--templates", "templates_dir", help="Directory with *.vue.template files")
@click.option("--output-dir", "-o", help="Front-end project directory")
@click.option("--base-path", envvar="BASE_PATH", help="Vite base path")
@click.pass_context
def generate(
    ctx: click.Context,
    answers_file: Optional[str],
    templates_dir: Optional[str],
    output_dir: Optional[str],
    base_path: Optional[str],
):
    """Render the coming-soon Vue sources from the stored answers."""
    try:
        GenerateCommand(ctx.obj["config"]).execute(
            answers_file=answers_file,
            templates_dir=templates_dir,
            output_dir=output_dir,
            base_path=base_path,
        )
    except AutoUIError as e:
        _fail(ctx, "Generation", e)


@cli.command()
@click.option("--init", is_flag=True, help="Write the default configuration file")
@click.option("--show", is_flag=True, help="Print the effective configuration")
@click.option("--path", default=ConfigurationManager.DEFAULT_CONFIG_PATHS[0], help="Config file to write")
@click.pass_context
def config(ctx: click.Context, init: bool, show: bool, path: str):
    """Manage AutoUI configuration."""
    manager = ctx.obj.get("config_manager") or ConfigurationManager()

    if init:
        try:
            manager.save_config(manager.get_default_config(), path)
        except AutoUIError as e:
            _fail(ctx, "Writing configuration", e)
        click.echo(f"✅ Default configuration written to {path}")

    if show or not init:
        click.echo(YamlUtils.dump_yaml_safe(ctx.obj["config"]))


@cli.command()
def version():
    """Show AutoUI version information."""
    click.echo(f"AutoUI v{__version__}")
    click.echo("Issue-driven questionnaire and coming-soon page generator")


def main():
    """Main entry point for the CLI."""
    try:
        cli()
    except KeyboardInterrupt:
        click.echo("\n⚠️  Operation cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
