"""Click CLI entry point.

Usage:
    book-validator same-title "Æsop's Fables" "AEsops Fables" --explain
    book-validator count-pages "1-3,5-6,p9"
    book-validator check-title "Harry Potter"
    book-validator clean-html "<b>bold</b><script>x</script>"
"""

from __future__ import annotations

import click

from book_validator.models import PageCount, TitleCheck, TitleComparison
from book_validator.text.pages import count_pages
from book_validator.text.sanitize import clean_for_html
from book_validator.text.titles import is_same_title, is_title, letter_skeleton
from book_validator.utils.logging import GREEN, RED, YELLOW, DIM, RESET, get_logger


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log why inputs are rejected")
def cli(verbose: bool) -> None:
    """Book catalog text validation CLI."""
    if verbose:
        get_logger(level="debug")


@cli.command("same-title")
@click.argument("a")
@click.argument("b")
@click.option("--explain", is_flag=True, help="Also print the letter skeleton of each title")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def same_title(a: str, b: str, explain: bool, as_json: bool) -> None:
    """Compare two titles ignoring accents, ligatures and non-letters."""
    result = TitleComparison(
        a=a,
        b=b,
        same=is_same_title(a, b),
        skeleton_a=letter_skeleton(a),
        skeleton_b=letter_skeleton(b),
    )
    if as_json:
        click.echo(result.model_dump_json())
    else:
        if explain:
            click.echo(f"  {DIM}{result.skeleton_a}{RESET}")
            click.echo(f"  {DIM}{result.skeleton_b}{RESET}")
        click.echo(f"{GREEN}same{RESET}" if result.same else f"{YELLOW}different{RESET}")
    if not result.same:
        raise SystemExit(1)


@cli.command("count-pages")
@click.argument("expression")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def count_pages_cmd(expression: str, as_json: bool) -> None:
    """Count the pages in a page-range expression such as 1-3,5-6,p9."""
    result = PageCount.from_count(expression, count_pages(expression))
    if as_json:
        click.echo(result.model_dump_json())
    elif result.status == "ok":
        click.echo(str(result.pages))
    else:
        click.echo(f"{RED}{result.status}{RESET}")
    if result.status != "ok":
        raise SystemExit(1)


@cli.command("check-title")
@click.argument("title")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
def check_title(title: str, as_json: bool) -> None:
    """Check a title against the allow-list and blocklist."""
    result = TitleCheck(title=title, valid=is_title(title))
    if as_json:
        click.echo(result.model_dump_json())
    else:
        click.echo(f"{GREEN}valid{RESET}" if result.valid else f"{RED}invalid{RESET}")
    if not result.valid:
        raise SystemExit(1)


@cli.command("clean-html")
@click.argument("text")
def clean_html(text: str) -> None:
    """Escape everything but <b> and <i> tags."""
    click.echo(clean_for_html(text))


if __name__ == "__main__":
    cli()
