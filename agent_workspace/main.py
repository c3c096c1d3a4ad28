from __future__ import annotations
"""Main entry point for the AI Project Workspace"""

import argparse
import asyncio
import logging
from typing import Optional

from rich.console import Console
from rich.prompt import Prompt

from .adapters.cli.commands import parse_command
from .adapters.cli.dashboard import ConsoleNotifier, TerminalDashboard, print_help, print_welcome
from .adapters.cli.tui import WorkspaceApp
from .adapters.config_yaml import DEFAULT_CONFIG_PATH, WorkspaceConfig, build_session, load_config
from .adapters.scheduling import AsyncioScheduler
from .adapters.selection import RandomSelection
from .core.errors import ConfigurationError, WorkspaceError
from .logging_config import configure_logging
from .runtime.session import WorkspaceSession

console = Console()
logger = logging.getLogger(__name__)


class _MessageFeed:
    """Tracks which conversation messages were already printed"""

    def __init__(self, session: WorkspaceSession):
        self.session = session
        self._printed = 0
        self._first_id: Optional[str] = None

    def take_new(self):
        messages = self.session.messages
        first_id = messages[0].id if messages else None
        if first_id != self._first_id:
            self._printed = 0
            self._first_id = first_id
        new = list(messages[self._printed:])
        self._printed = len(messages)
        return new


async def _wait_for_replies(session: WorkspaceSession) -> None:
    while session.pending_dispatches:
        await asyncio.sleep(0.05)


async def run_plain(config: WorkspaceConfig, seed: Optional[int] = None) -> None:
    """Line-based chat loop on the console"""
    session = build_session(
        config,
        scheduler=AsyncioScheduler(),
        selection=RandomSelection(seed),
        notifier=ConsoleNotifier(console),
    )
    dashboard = TerminalDashboard(session, console)
    feed = _MessageFeed(session)

    print_help(console)
    dashboard.print_messages(feed.take_new())

    while True:
        line = await asyncio.to_thread(Prompt.ask, "[cyan]You[/cyan]", console=console, default="")
        command = parse_command(line)

        try:
            if command.command == "quit":
                break
            elif command.command == "help":
                print_help(console)
                continue
            elif command.command == "status":
                dashboard.print_status()
                continue
            elif command.command == "team":
                session.update_agent_selection(command.agent_ids)
            elif command.command == "project":
                if command.project_id is None:
                    project = config.next_project(session.project.id)
                else:
                    project = config.get_project(command.project_id)
                if project is None:
                    console.print(f"[yellow]Unknown project: {command.project_id}[/yellow]")
                    console.print("Projects: " + ", ".join(p.id for p in config.projects))
                    continue
                session.switch_project(project)
            else:
                session.submit_message(command.text, command.agent_ids)
                # Skip the echo of the user's own line
                feed.take_new()
                await _wait_for_replies(session)
        except WorkspaceError as e:
            console.print(f"[red]Error: {e}[/red]")
            continue

        dashboard.print_messages(feed.take_new())


def main(argv: Optional[list[str]] = None) -> None:
    """Main entry point"""
    parser = argparse.ArgumentParser(prog="agent-workspace", description="Chat with a project's AI team")
    parser.add_argument("--config", default=DEFAULT_CONFIG_PATH, help="Path to settings YAML")
    parser.add_argument("--plain", action="store_true", help="Use the line-based console instead of the TUI")
    parser.add_argument("--strict", action="store_true", help="Report empty messages and unknown @mentions as errors")
    parser.add_argument("--seed", type=int, default=None, help="Seed for reply selection")
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except ConfigurationError as e:
        console.print(f"[red]Configuration error: {e}[/red]")
        raise SystemExit(2)

    if args.strict:
        config.strict = True

    configure_logging(config.log_level)
    logger.debug("Starting with project %s and %d agents", config.current_project.id, len(config.agents))

    try:
        if args.plain:
            print_welcome(console)
            asyncio.run(run_plain(config, seed=args.seed))
        else:
            WorkspaceApp(config, selection=RandomSelection(args.seed)).run()
    except KeyboardInterrupt:
        console.print("\n[yellow]Goodbye![/yellow]")


if __name__ == "__main__":
    main()
