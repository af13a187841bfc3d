"""Command-line interface for submitting feedback through the form controller."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import click

from feedback_form.config import Settings
from feedback_form.contracts import SubmissionService
from feedback_form.feedback import FeedbackRating, FeedbackType, FormController
from feedback_form.feedback.validation import parse_category, parse_rating
from feedback_form.lib.exceptions import SubmissionFailed, ValidationError
from feedback_form.services import FileCaptureService, JsonFileSubmissionService

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def _configure_logging(verbose: int, quiet: bool) -> None:
    level_index = min(verbose, len(LOG_LEVELS) - 1)
    level = LOG_LEVELS[level_index]
    if quiet:
        level = logging.ERROR
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s - %(message)s",
    )


def _build_sink(output: Optional[Path], github: bool) -> SubmissionService:
    if github:
        from feedback_form.feedback.github_client import GitHubSubmissionService  # noqa: PLC0415

        try:
            return GitHubSubmissionService()
        except ValueError as e:
            raise click.ClickException(str(e))
    return JsonFileSubmissionService(output or Path(Settings.OUTPUT_FILE))


async def _fill_and_submit(controller: FormController, take_screenshot: bool) -> bool:
    if take_screenshot:
        await controller.request_capture()
    return await controller.submit()


@click.group()
@click.option("--verbose", "-v", count=True, help="Increase verbosity (use up to -vv)")
@click.option("--quiet", "-q", is_flag=True, help="Only show errors")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: bool) -> None:
    """Collect and submit user feedback."""
    _configure_logging(verbose, quiet)
    ctx.obj = {"verbose": verbose, "quiet": quiet}


@cli.command()
@click.option("--type", "feedback_type", required=True, help="Feedback type, e.g. bugReport")
@click.option("--text", default="", help="Free form feedback text")
@click.option("--rating", default=None, help="Sentiment rating: bad, neutral or good")
@click.option("--screenshot", type=click.Path(path_type=Path), default=None,
              help="Image file attached as the screenshot")
@click.option("--output", type=click.Path(path_type=Path), default=None,
              help="JSON Lines file receiving the payload")
@click.option("--github", is_flag=True, help="Send to GitHub instead of a local file")
def submit(
    feedback_type: str,
    text: str,
    rating: Optional[str],
    screenshot: Optional[Path],
    output: Optional[Path],
    github: bool,
) -> None:
    """Fill in the feedback form and submit it."""
    try:
        category = parse_category(feedback_type)
        rating_value = parse_rating(rating) if rating else None
    except ValidationError as e:
        raise click.BadParameter(e.message)

    sink = _build_sink(output, github)
    capture = FileCaptureService(screenshot) if screenshot else None
    controller = FormController(sink, capture, notifier=lambda message: click.echo(message, err=True))

    controller.set_category(category)
    controller.set_text(text)
    controller.set_rating(rating_value)

    try:
        submitted = asyncio.run(_fill_and_submit(controller, screenshot is not None))
    except SubmissionFailed as e:
        raise click.ClickException(e.message)
    finally:
        controller.close()

    if not submitted:
        raise click.ClickException("Feedback could not be submitted")

    suffix = " with screenshot" if controller.screenshot_bytes else ""
    click.echo(f"Feedback submitted ({category.label}){suffix}")


@cli.command()
def options() -> None:
    """List valid feedback types and ratings."""
    click.echo("Feedback types:")
    for member in FeedbackType:
        click.echo(f"  {member.value:<16} {member.label}")
    click.echo("Ratings:")
    for member in FeedbackRating:
        click.echo(f"  {member.value}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
