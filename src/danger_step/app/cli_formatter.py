"""CLI output formatting utilities for human-readable display."""

from __future__ import annotations

from pydantic import ValidationError


def format_config_report(report: dict[str, object]) -> str:
    """Format the show-config report.

    Args:
        report: Output of ShowConfigUseCase.execute

    Returns:
        Formatted string for display
    """
    lines = []
    lines.append("=" * 60)
    lines.append("STEP INPUTS")
    lines.append("=" * 60)

    inputs: dict[str, str] = report["inputs"]  # type: ignore[assignment]
    width = max(len(name) for name in inputs)
    for name, value in inputs.items():
        lines.append(f"  {name.ljust(width)} : {value if value else '-'}")

    lines.append("\n" + "-" * 60)
    lines.append("EXPORTED VARIABLES")
    lines.append("-" * 60)
    exported: list[str] = report["exported"]  # type: ignore[assignment]
    for key in exported:
        lines.append(f"  {key}")
    if not exported:
        lines.append("  (none)")

    lines.append("")
    if report["error"]:
        lines.append(f"Invalid configuration: {report['error']}")
    else:
        lines.append("Configuration is valid.")

    return "\n".join(lines)


def format_input_error(error: ValidationError) -> str:
    """Render a settings validation error one problem per line."""
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ())) or "(root)"
        problems.append(f"  {location}: {item.get('msg', 'invalid value')}")
    return "Issue with input:\n" + "\n".join(problems)
