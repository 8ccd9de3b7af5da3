from pathlib import Path
from typing import List, Optional

import typer

from .config import ConfigurationError, Settings, Severity
from .logging import get_logger
from .engine.runner import Linter
from .output.report import collect_violations, render, summarize, write_report_json
from .rules.base import Rule
from .rules.registry import RuleRegistry, UnknownRuleError, default_registry

logger = get_logger(__name__)

app = typer.Typer(help="sortlint – keeps Swift imports in sorted order", no_args_is_help=True)


def safe_echo(message: str) -> None:
    """Echo message with an ASCII fallback for consoles that cannot encode it."""
    try:
        typer.echo(message)
    except UnicodeEncodeError:
        fallback_message = (
            message.replace("✅", "[OK]")
            .replace("⚠️", "[WARN]")
            .replace("🛠️", "[FIX]")
            .replace("–", "-")
        )
        try:
            typer.echo(fallback_message)
        except UnicodeEncodeError:
            typer.echo(fallback_message.encode("ascii", errors="replace").decode("ascii"))


def build_rules(registry: RuleRegistry, identifiers: Optional[List[str]], severity: Severity) -> List[Rule]:
    """Instantiate the selected rules (all registered rules when none are named)."""
    selected = identifiers or registry.identifiers()
    return [registry.create(identifier, severity) for identifier in selected]


@app.command()
def lint(
    paths: List[Path] = typer.Argument(..., exists=True, readable=True, help="Files or directories to lint"),
    severity: str = typer.Option("warning", "--severity", "-s", help="Severity of reported violations: 'warning' or 'error'"),
    reporter: str = typer.Option("xcode", "--reporter", help="Output format: 'xcode' or 'json'"),
    report: Optional[Path] = typer.Option(None, "--report", help="Also write a JSON report to this file"),
    jobs: int = typer.Option(1, "--jobs", "-j", help="Number of files processed in parallel"),
    strict: bool = typer.Option(False, "--strict", help="Fail when any warning is reported"),
    rule: Optional[List[str]] = typer.Option(None, "--rule", "-r", help="Rule identifier to run (repeatable)"),
) -> None:
    """
    Report out-of-order imports.

    Exits with 1 when a file could not be read, with 2 when an error-severity
    violation is found, and with 3 when --strict is given and warnings are found.
    """

    try:
        settings = Settings(severity=Severity.parse(severity), jobs=jobs, reporter=reporter, strict=strict)
        rules = build_rules(default_registry(), rule, settings.severity)
    except (ConfigurationError, UnknownRuleError) as exc:
        logger.error(f"Invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc

    reports = Linter(rules, settings).lint(paths)

    for line in render(reports, settings.reporter):
        safe_echo(line)

    if report is not None:
        try:
            write_report_json(reports, report)
        except OSError as exc:
            raise typer.Exit(code=1) from exc

    violations = collect_violations(reports)
    failed = [r for r in reports if not r.ok]

    if settings.reporter == "xcode":
        marker = "✅" if not violations and not failed else "⚠️"
        safe_echo(f"{marker} {summarize(reports)}")

    if failed:
        logger.error(f"{len(failed)} files could not be read")
        raise typer.Exit(code=1)

    if any(v.severity is Severity.ERROR for v in violations):
        raise typer.Exit(code=2)
    if settings.strict and violations:
        raise typer.Exit(code=3)


@app.command()
def autocorrect(
    paths: List[Path] = typer.Argument(..., exists=True, readable=True, help="Files or directories to correct"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report corrections without writing files"),
    jobs: int = typer.Option(1, "--jobs", "-j", help="Number of files processed in parallel"),
    rule: Optional[List[str]] = typer.Option(None, "--rule", "-r", help="Rule identifier to run (repeatable)"),
) -> None:
    """Rewrite out-of-order imports in place."""

    try:
        settings = Settings(jobs=jobs)
        registry = default_registry()
        rules = build_rules(registry, rule, settings.severity)
    except (ConfigurationError, UnknownRuleError) as exc:
        logger.error(f"Invalid configuration: {exc}")
        raise typer.Exit(code=1) from exc

    uncorrectable = [r.describe().identifier for r in rules if not r.describe().correctable]
    if uncorrectable:
        logger.info(f"Rules without corrections are skipped: {', '.join(uncorrectable)}")
    rules = [r for r in rules if r.describe().correctable]

    reports = Linter(rules, settings).correct(paths, dry_run=dry_run)

    for file_report in reports:
        for correction in file_report.corrections:
            safe_echo(str(correction))

    corrected = [r for r in reports if r.corrections]
    verb = "Would correct" if dry_run else "Corrected"
    safe_echo(f"🛠️ {verb} {len(corrected)} of {len(reports)} files")

    if any(not r.ok for r in reports):
        raise typer.Exit(code=1)


@app.command(name="rules")
def list_rules() -> None:
    """List the available rules."""
    for description in default_registry().descriptions():
        flags = []
        if description.opt_in:
            flags.append("opt-in")
        if description.correctable:
            flags.append("correctable")
        suffix = f" [{', '.join(flags)}]" if flags else ""
        safe_echo(f"{description.identifier}: {description.name} – {description.description}{suffix}")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
