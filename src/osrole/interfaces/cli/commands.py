"""Command-line interface: plan, apply, show, import, destroy, serve."""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from osrole import __version__
from osrole.application.dto.plan import PlanAction, PlanEntry
from osrole.domain.exceptions import OSRoleError
from osrole.infrastructure.declarations.yaml_loader import load_roles

logger = logging.getLogger(__name__)

_PLAN_SYMBOLS = {
    PlanAction.CREATE: "+",
    PlanAction.UPDATE: "~",
    PlanAction.NO_OP: " ",
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="osrole", description="Manage OpenSearch security roles declaratively"
    )
    parser.add_argument("--version", action="version", version=f"osrole {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    plan = sub.add_parser("plan", help="Show what apply would change")
    plan.add_argument("file", type=Path, help="YAML file with a 'roles' list")
    plan.add_argument(
        "--detailed-exitcode",
        action="store_true",
        help="Exit 2 when changes are pending",
    )

    apply = sub.add_parser("apply", help="Create or update declared roles")
    apply.add_argument("file", type=Path, help="YAML file with a 'roles' list")

    show = sub.add_parser("show", help="Print a role's current state as JSON")
    show.add_argument("role_name")

    imp = sub.add_parser("import", help="Print an existing role as a YAML declaration")
    imp.add_argument("role_name")

    destroy = sub.add_parser("destroy", help="Delete roles")
    destroy.add_argument("role_names", nargs="+")

    sub.add_parser("serve", help="Run the provider API")
    return parser


def format_plan(plan: list[PlanEntry]) -> str:
    lines = [f"{_PLAN_SYMBOLS[e.action]} {e.action:<7} {e.role_name}" for e in plan]
    changed = sum(1 for e in plan if e.changed)
    lines.append(f"Plan: {changed} to change, {len(plan) - changed} unchanged.")
    return "\n".join(lines)


async def run_command(args: argparse.Namespace, use_cases, out=None) -> int:
    """Execute a parsed command against the given use cases; return exit code."""
    out = out or sys.stdout
    try:
        if args.command == "plan":
            plan = await use_cases.plan_roles.execute(load_roles(args.file))
            print(format_plan(plan), file=out)
            if args.detailed_exitcode and any(e.changed for e in plan):
                return 2
            return 0
        if args.command == "apply":
            plan = await use_cases.apply_roles.execute(load_roles(args.file))
            print(format_plan(plan), file=out)
            return 0
        if args.command == "show":
            state = await use_cases.read_role.execute(args.role_name)
            if state is None:
                print(f"Role {args.role_name!r} not found", file=sys.stderr)
                return 1
            print(json.dumps(state.state(), indent=2), file=out)
            return 0
        if args.command == "import":
            state = await use_cases.import_role.execute(args.role_name)
            print(yaml.safe_dump({"roles": [state.model_dump()]}, sort_keys=False), file=out)
            return 0
        if args.command == "destroy":
            for name in args.role_names:
                await use_cases.delete_role.execute(name)
                print(f"- destroyed {name}", file=out)
            return 0
    except OSRoleError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    raise ValueError(f"Unknown command {args.command!r}")
