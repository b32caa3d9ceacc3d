"""Entry point for git-stacker"""

import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape

from git_stacker.cli.args import parse_args
from git_stacker.config import Config
from git_stacker.context import StackerContext, create_context
from git_stacker.exceptions import StackerError
from git_stacker.logging_config import get_logger, setup_logging
from git_stacker.workflows import CreateStatus, StackedBranchWorkflow, SubmissionWorkflow

console = Console()
logger = get_logger(__name__)


def run_create(ctx: StackerContext) -> None:
    result = StackedBranchWorkflow(ctx).run()
    if result.status is CreateStatus.ABORTED:
        ctx.console.print("[yellow]Nothing to do, no branch was created[/yellow]")
        return

    parent = result.parent
    ctx.console.print(f"[green]Created branch [bold]{escape(result.branch_name)}[/bold][/green]")
    if parent is not None:
        ctx.console.print(
            f"  stacked on {escape(parent.parent_branch_name)} ({parent.parent_branch_revision[:8]})"
        )


def run_submit(ctx: StackerContext) -> None:
    result = SubmissionWorkflow(ctx).run()
    ctx.console.print(
        f"[green]Opened pull request {escape(result.branch)} -> {escape(result.trunk)} on "
        f"{result.repository.full_name}[/green]"
    )
    ctx.console.print(result.pull_request_url)


COMMANDS = {
    "create": run_create,
    "submit": run_submit,
}


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the application."""
    parsed_args = parse_args(argv)
    setup_logging(verbose=parsed_args.verbose, debug=parsed_args.debug)

    try:
        config = Config(verbose=parsed_args.verbose, debug=parsed_args.debug)
        if parsed_args.debug:
            console.print("[yellow]Debug mode enabled[/yellow]")
            for key, value in config.to_dict().items():
                console.print(f"  {key}: {value}")

        ctx = create_context(config, console=console)
        COMMANDS[parsed_args.command](ctx)
        return 0
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return 1
    except StackerError as e:
        logger.debug(f"{type(e).__name__}: {e.message}")
        console.print(f"[red]Error: {escape(e.message)}[/red]", highlight=False)
        if e.suggestion:
            console.print(f"[yellow]Suggestion: {escape(e.suggestion)}[/yellow]", highlight=False)
        return 1
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if parsed_args.debug:
            console.print_exception()
        return 1


if __name__ == "__main__":
    sys.exit(main())
