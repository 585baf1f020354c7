"""Command-line interface.

Sub-commands::

    docbuilder catalog [--category CATEGORY]
    docbuilder generate IDS... [--frontend F] [--backend B] [--database D]
                       [--project-name NAME] [--output DIR] [--format FMT] [--validate]
    docbuilder interview ANSWERS.json [--project-name NAME] [--output DIR] [--format FMT]
    docbuilder validate DOCS.json [--report PATH] [--strict]
    docbuilder tree DOCS.json
    docbuilder show DOCS.json PATH
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from pydantic import TypeAdapter, ValidationError
from rich.markdown import Markdown
from rich.table import Table
from rich.tree import Tree

from docbuilder import __version__
from docbuilder.app import AppController, StartMode
from docbuilder.catalog import (
    Answer,
    TechStack,
    find_conflicts,
    get_all_components,
    get_component_by_id,
    get_components_by_category,
    missing_dependencies,
)
from docbuilder.config import DocBuilderConfig, ExportFormat
from docbuilder.errors import DocBuilderError, ExportError
from docbuilder.export import FileNode, build_file_tree, load_documentation
from docbuilder.utils import (
    console,
    load_json,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)
from docbuilder.validator import (
    DocumentationValidator,
    ValidationResult,
    generate_validation_report,
    passes_novice_test,
)

_answers_adapter = TypeAdapter(list[Answer])


# ---------------------------------------------------------------------------
# Output helpers
# ---------------------------------------------------------------------------


def _print_validation(result: ValidationResult, config: DocBuilderConfig) -> None:
    metrics = result.metrics
    print_summary_table(
        {
            "Clarity": f"{metrics.clarity}/25",
            "Completeness": f"{metrics.completeness}/25",
            "Verifiability": f"{metrics.verifiability}/20",
            "Examples": f"{metrics.examples}/15",
            "Organization": f"{metrics.organization}/15",
            "Errors": str(len(result.errors)),
            "Warnings": str(len(result.warnings)),
            "Novice test": "pass" if passes_novice_test(result, config.validation) else "fail",
        },
        title=f"Quality score: {result.score}/100",
    )
    if result.is_valid:
        print_success(f"PASS: documentation scored {result.score}/100")
    else:
        print_error(f"FAIL: documentation scored {result.score}/100")


def _add_nodes(branch: Tree, nodes: list[FileNode]) -> None:
    for node in nodes:
        if node.type == "folder":
            _add_nodes(branch.add(f"[bold cyan]{node.name}/[/bold cyan]"), node.children)
        else:
            branch.add(node.name)


def _report_selection_issues(component_ids: Sequence[str]) -> None:
    unknown = [cid for cid in component_ids if get_component_by_id(cid) is None]
    if unknown:
        print_warning(f"Unknown components skipped: {', '.join(unknown)}")
    for cid, missing in missing_dependencies(component_ids).items():
        print_warning(f"{cid} depends on components that are not selected: {', '.join(missing)}")
    for first, second in find_conflicts(component_ids):
        print_warning(f"{first} conflicts with {second}")


def _load_answers(path: Path) -> tuple[list[Answer], Optional[str]]:
    """Read answers from a JSON list, or an object with ``answers`` and ``project_name``."""
    try:
        data: Any = load_json(path)
    except FileNotFoundError as exc:
        raise ExportError(f"Answers file not found: {path}") from exc
    except (OSError, ValueError) as exc:
        raise ExportError(f"Answers file is unreadable: {path} ({exc})") from exc

    if "_root" in data:
        raw_answers, project_name = data["_root"], None
    else:
        raw_answers, project_name = data.get("answers", []), data.get("project_name")

    try:
        return _answers_adapter.validate_python(raw_answers), project_name
    except ValidationError as exc:
        raise ExportError(f"Answers file has an invalid shape: {path}\n{exc}") from exc


# ---------------------------------------------------------------------------
# Sub-commands
# ---------------------------------------------------------------------------


def cmd_catalog(args: argparse.Namespace, config: DocBuilderConfig) -> int:
    components = (
        get_components_by_category(args.category) if args.category else get_all_components()
    )
    table = Table(title="Component catalog", show_header=True, header_style="bold cyan")
    table.add_column("ID", no_wrap=True)
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Complexity")
    table.add_column("Hours", justify="right")
    table.add_column("Depends on")

    for component in components:
        table.add_row(
            component.id,
            f"{component.icon} {component.name}",
            component.category.value,
            component.complexity.value,
            str(component.estimated_hours),
            ", ".join(component.dependencies) or "-",
        )
    console.print(table)
    if not components:
        print_warning(f"No components in category {args.category!r}")
    return 0


def cmd_generate(args: argparse.Namespace, config: DocBuilderConfig) -> int:
    stack = TechStack(
        frontend=args.frontend or config.default_stack.frontend,
        backend=args.backend or config.default_stack.backend,
        database=args.database or config.default_stack.database,
    )
    _report_selection_issues(args.ids)

    controller = AppController(config)
    controller.start_project(StartMode.COMPONENTS)
    for component_id in args.ids:
        if component_id not in controller.state.selected_ids:
            controller.toggle_component(component_id)
    controller.set_tech_stack(stack)
    if args.project_name:
        controller.set_project_name(args.project_name)

    controller.complete_selection()
    controller.export(args.format, args.output)

    if args.validate:
        result = controller.validate()
        _print_validation(result, config)
        report_path = Path(args.output) / "quality-report.md" if args.output else config.report_path
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(generate_validation_report(result, config.validation), encoding="utf-8")
        print_success(f"Quality report written to {report_path}")
    return 0


def cmd_interview(args: argparse.Namespace, config: DocBuilderConfig) -> int:
    answers, file_project_name = _load_answers(Path(args.answers))

    controller = AppController(config)
    controller.start_project(StartMode.INTERVIEW)
    for answer in answers:
        controller.record_answer(answer)
    project_name = args.project_name or file_project_name
    if project_name:
        controller.set_project_name(project_name)

    controller.complete_interview()
    controller.export(args.format, args.output)
    return 0


def cmd_validate(args: argparse.Namespace, config: DocBuilderConfig) -> int:
    docs = load_documentation(args.docs)
    result = DocumentationValidator(config=config.validation).validate(docs)
    _print_validation(result, config)

    if args.report:
        report_path = Path(args.report)
        report_path.parent.mkdir(parents=True, exist_ok=True)
        report_path.write_text(generate_validation_report(result, config.validation), encoding="utf-8")
        print_success(f"Quality report written to {report_path}")

    if args.strict and not result.is_valid:
        return 1
    return 0


def cmd_tree(args: argparse.Namespace, config: DocBuilderConfig) -> int:
    docs = load_documentation(args.docs)
    tree = Tree(f"[bold]{Path(args.docs).name}[/bold] ({len(docs)} files)")
    _add_nodes(tree, build_file_tree(docs))
    console.print(tree)
    return 0


def cmd_show(args: argparse.Namespace, config: DocBuilderConfig) -> int:
    docs = load_documentation(args.docs)
    path = args.path if args.path.startswith("/") else f"/{args.path}"
    if path not in docs:
        raise DocBuilderError(f"No document at {path} in {args.docs}")
    console.print(Markdown(docs[path]))
    return 0


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


def _add_export_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--project-name",
        default=None,
        help="Project name used throughout the documents",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Output directory (default: ./output or DOCBUILDER_OUTPUT_DIR)",
    )
    parser.add_argument(
        "--format", "-f",
        default=None,
        choices=[fmt.value for fmt in ExportFormat],
        help="Export format (default: json)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docbuilder",
        description="Docbuilder -- project documentation generator and quality checker",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  docbuilder catalog\n"
            "  docbuilder generate basic-auth user-dashboard --frontend vue -o ./docs\n"
            "  docbuilder validate ./docs/documentation.json --report report.md\n"
        ),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    catalog = sub.add_parser("catalog", help="List the component catalog")
    catalog.add_argument("--category", default=None, help="Only show one category")
    catalog.set_defaults(handler=cmd_catalog)

    generate = sub.add_parser("generate", help="Generate documentation from components")
    generate.add_argument("ids", nargs="+", help="Component ids to include")
    generate.add_argument("--frontend", default=None, help="Frontend key (default: react)")
    generate.add_argument("--backend", default=None, help="Backend key (default: nodejs)")
    generate.add_argument("--database", default=None, help="Database key (default: postgresql)")
    _add_export_options(generate)
    generate.add_argument(
        "--validate",
        action="store_true",
        help="Score the result and write quality-report.md next to the export",
    )
    generate.set_defaults(handler=cmd_generate)

    interview = sub.add_parser("interview", help="Generate documentation from interview answers")
    interview.add_argument("answers", help="JSON file with interview answers")
    _add_export_options(interview)
    interview.set_defaults(handler=cmd_interview)

    validate = sub.add_parser("validate", help="Score an exported documentation map")
    validate.add_argument("docs", help="documentation.json produced by generate/interview")
    validate.add_argument("--report", default=None, help="Write the markdown report here")
    validate.add_argument("--strict", action="store_true", help="Exit 1 when the map is invalid")
    validate.set_defaults(handler=cmd_validate)

    tree = sub.add_parser("tree", help="Show the folder structure of an export")
    tree.add_argument("docs", help="documentation.json")
    tree.set_defaults(handler=cmd_tree)

    show = sub.add_parser("show", help="Render one document from an export")
    show.add_argument("docs", help="documentation.json")
    show.add_argument("path", help="Document path, e.g. /README.md")
    show.set_defaults(handler=cmd_show)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """CLI entry point for ``docbuilder`` and ``python -m docbuilder``."""
    args = build_parser().parse_args(argv)
    config = DocBuilderConfig.from_env()

    try:
        status = args.handler(args, config)
    except DocBuilderError as exc:
        print_error(f"Error: {exc}")
        sys.exit(1)

    if status:
        sys.exit(status)


if __name__ == "__main__":
    main()
