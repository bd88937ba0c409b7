# src/depprune/cli.py
"""
Entrada de linha de comando do depprune.

Uso:
    depprune [ROOT] [--cargo-check-command CMD]... [--polarity {all_fail,all_pass}]
             [--config FILE] [--report FILE]

A CLI apenas monta configuração, contexto, oráculo e orquestrador; toda a
lógica vive em `depprune.core`. Qualquer erro fatal vira uma única mensagem
em stderr e código de saída 1.
"""

from __future__ import annotations

import argparse
import sys
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from depprune import __version__
from depprune.core.config import compute_config_hash, load_config, resolve_settings
from depprune.core.config.errors import ConfigError, ConfigNotFoundError, InvalidConfigValueError
from depprune.core.engine import build_orchestrator
from depprune.core.errors import exception_to_error
from depprune.core.exceptions import PruneException
from depprune.core.oracle import CommandOracle, Polarity
from depprune.core.run_context import RunContext
from depprune.core.traceability import create_record, run_failed, run_finished, save_record


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="depprune",
        description="Remove declared dependencies that the project does not need.",
    )
    ap.add_argument("root", nargs="?", default=".", help="Directory tree to scan (default: .)")
    ap.add_argument(
        "--cargo-check-command",
        "--check-command",
        dest="check_commands",
        action="append",
        metavar="CMD",
        help=(
            "Define how the necessity of the dependencies should be checked. "
            "Repeatable; given as '<executable> <space-delimited args>'. "
            "Default: 'cargo check'."
        ),
    )
    ap.add_argument(
        "--polarity",
        choices=[p.value for p in Polarity],
        default=None,
        help="How exit statuses become a verdict (default: all_fail).",
    )
    ap.add_argument("--config", default=None, help="YAML/JSON file overriding the packaged defaults.")
    ap.add_argument("--report", default=None, help="Write the JSON run record to this path.")
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap


def _cli_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    if args.check_commands:
        overrides.setdefault("check", {})["commands"] = list(args.check_commands)
    if args.polarity is not None:
        overrides.setdefault("check", {})["polarity"] = args.polarity
    if args.report is not None:
        overrides["report"] = {"path": args.report}
    return overrides


def _print_error(exc: BaseException) -> None:
    error = exception_to_error(exc)
    print(f"error: {error.message}", file=sys.stderr)
    if error.hint:
        print(f"  hint: {error.hint}", file=sys.stderr)


def run(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if args.config is not None and not Path(args.config).exists():
            raise ConfigNotFoundError(f"Arquivo de configuração não encontrado: {args.config}")
        config = load_config(local_path=args.config, overrides=_cli_overrides(args))
        settings = resolve_settings(config)

        root = Path(args.root)
        if not root.is_dir():
            raise InvalidConfigValueError(f"ROOT não é um diretório: {root}")
    except ConfigError as e:
        _print_error(e)
        return 1

    started_at = datetime.now(timezone.utc)
    ctx = RunContext(
        run_id=uuid.uuid4().hex,
        created_at=started_at,
        config=config,
        meta={"root": str(root), "depprune_version": __version__},
        stream=sys.stderr,
    )
    record = create_record(
        run_id=ctx.run_id,
        started_at=started_at,
        version=__version__,
        root=str(root),
        config_hash=compute_config_hash(config),
        commands=settings.commands,
        polarity=settings.polarity.value,
    )

    oracle = CommandOracle(commands=settings.commands, polarity=settings.polarity, cwd=root, ctx=ctx)
    orchestrator = build_orchestrator(
        oracle=oracle,
        ctx=ctx,
        manifest_filename=settings.manifest_filename,
        exclude=settings.exclude,
        record=record,
    )

    code = 0
    try:
        result = orchestrator.run(root)
    except PruneException as e:
        run_failed(record, ts=datetime.now(timezone.utc), error=exception_to_error(e).to_dict())
        _print_error(e)
        code = 1
    else:
        run_finished(record, ts=datetime.now(timezone.utc), removed=result.removed_count)
        print(
            f"Removed {result.removed_count} dependencies across {len(result.manifests)} manifests",
            file=sys.stderr,
        )
        for scope, messages in ctx.warnings.items():
            for message in messages:
                print(f"warning: {scope}: {message}", file=sys.stderr)

    if settings.report_path is not None:
        save_record(record, Path(settings.report_path))

    return code


def main(argv: Optional[List[str]] = None) -> None:
    sys.exit(run(argv))
