from __future__ import annotations
"""Terminal Dashboard - workspace status and conversation display using Rich"""

from datetime import datetime, timezone
from typing import Optional

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ...core.models import AgentStatus, Message, Project, Sender, Visibility
from ...core.ports.notifications import NotificationPort
from ...runtime.metrics import DashboardData
from ...runtime.session import WorkspaceSession

STATUS_STYLES = {
    AgentStatus.ACTIVE: "green",
    AgentStatus.IDLE: "blue",
    AgentStatus.THINKING: "yellow",
    AgentStatus.OFFLINE: "red",
}

SEVERITY_STYLES = {
    "information": "cyan",
    "warning": "yellow",
    "error": "red",
}


def speaker_label(message: Message, session: WorkspaceSession) -> str:
    """Who a message is from, for display"""
    if message.sender == Sender.USER:
        return "You"
    if message.is_system:
        return "System"
    if message.is_collaborative:
        return "Team"
    for agent in session.agents:
        if agent.id == message.agent_id:
            return agent.name
    return message.agent_id or "Agent"


class ConsoleNotifier(NotificationPort):
    """Prints notifications as one-line console messages"""

    def __init__(self, console: Console):
        self.console = console

    def notify(self, text: str, severity: str = "information") -> None:
        style = SEVERITY_STYLES.get(severity, "cyan")
        self.console.print(f"[{style}]▶ {text}[/{style}]")


class TerminalDashboard:
    """
    Rich-based terminal rendering of a workspace session.
    """

    def __init__(self, session: WorkspaceSession, console: Optional[Console] = None):
        self.session = session
        self.console = console or Console()

    def render_dashboard(self, data: Optional[DashboardData] = None) -> Panel:
        """Render the complete dashboard as a Rich Panel"""
        if data is None:
            data = self.session.get_dashboard_data()

        body = Group(
            self._render_header(self.session.project),
            Panel(self._render_agent_table(data), title="Agent Team"),
            Panel(self._render_conversation(data.recent_messages), title="Conversation"),
            self._render_footer(data),
        )
        return Panel(body, title="🤖 AI Project Workspace", border_style="blue")

    def _render_header(self, project: Project) -> Panel:
        """Render the header section"""
        text = Text()
        text.append(f"📋 {project.name}", style="bold cyan")
        text.append("  |  Client: ", style="dim")
        text.append(project.client.name or "-", style="white")
        text.append("  |  Status: ", style="dim")
        text.append(f"{project.status.emoji} {project.status.value}", style="yellow")
        text.append("  |  Progress: ", style="dim")
        text.append(f"{project.progress}%", style="green")
        return Panel(text, style="dim")

    def _render_agent_table(self, data: DashboardData) -> Table:
        """Render the agent status table"""
        table = Table(show_header=True, header_style="bold magenta", expand=True)

        table.add_column("Id", style="dim", width=9)
        table.add_column("Agent", style="cyan", width=12)
        table.add_column("Role", width=20)
        table.add_column("Status", width=12)
        table.add_column("Last", width=14)
        table.add_column("Resp.", justify="right", width=6)
        table.add_column("Success", justify="right", width=8)

        for row in data.agents:
            table.add_row(
                row.agent_id,
                row.name,
                row.role,
                Text(f"{row.status_emoji} {row.status.value}", style=STATUS_STYLES.get(row.status, "white")),
                row.last_activity,
                row.response_time,
                f"{row.success_rate:.1f}%",
            )

        if not data.agents:
            table.add_row("", "", Text("No agents in the team", style="dim italic"), "", "", "", "")

        return table

    def _render_conversation(self, messages: list[Message]) -> Table:
        """Render the tail of the conversation"""
        table = Table(show_header=False, expand=True, box=None)
        table.add_column("Time", width=6)
        table.add_column("From", width=10)
        table.add_column("Message")

        now = datetime.now(timezone.utc)
        for msg in messages:
            seconds = (now - msg.timestamp).total_seconds()
            time_str = f"{int(seconds)}s" if seconds < 60 else f"{int(seconds // 60)}m"

            label = speaker_label(msg, self.session)
            style = "green" if msg.sender == Sender.USER else "cyan"
            if msg.is_system:
                style = "magenta"

            content = msg.content
            if msg.attachments:
                content += f"\n📎 {', '.join(a.name for a in msg.attachments)}"

            table.add_row(Text(time_str, style="dim"), Text(label, style=style), content)

        if not messages:
            table.add_row("", "", Text("No messages yet...", style="dim italic"))

        return table

    def _render_footer(self, data: DashboardData) -> Panel:
        """Render footer with metrics"""
        metrics = data.metrics
        text = Text()
        text.append("📊 ", style="bold")
        text.append(f"Active agents: {metrics.active_agents}", style="green")
        text.append("  |  ", style="dim")
        text.append(f"Queries: {metrics.total_queries}", style="cyan")
        text.append("  |  ", style="dim")
        text.append(f"Success: {metrics.success_rate:.1f}%", style="blue")
        text.append("  |  ", style="dim")
        text.append(f"Avg: {metrics.avg_response_time}", style="dim")
        text.append("  |  ", style="dim")
        text.append(
            f"Thinking: {data.thinking} ({data.pending_dispatches} pending)",
            style="yellow" if data.pending_dispatches else "dim",
        )
        return Panel(text, style="dim")

    def print_status(self) -> None:
        """Print a one-time status update"""
        self.console.print(self.render_dashboard())

    def print_summary(self) -> None:
        """Print a concise summary"""
        self.console.print(Panel(self.session.get_summary(), title="Status Summary", border_style="blue"))

    def print_messages(self, messages: list[Message]) -> None:
        """Print messages as they arrive"""
        for msg in messages:
            label = speaker_label(msg, self.session)
            style = "magenta" if msg.is_system else ("green" if msg.sender == Sender.USER else "cyan")
            subtitle = msg.visibility.label if msg.visibility != Visibility.PROJECT else None
            self.console.print(Panel(
                msg.content,
                title=label,
                title_align="left",
                subtitle=subtitle,
                subtitle_align="right",
                border_style=style,
            ))


def print_welcome(console: Console) -> None:
    """Print welcome message"""
    console.print()
    console.print(Panel.fit(
        "[bold cyan]🤖 AI Project Workspace[/bold cyan]\n"
        "[dim]Talk to your project's AI team[/dim]",
        border_style="blue",
    ))
    console.print()


def print_help(console: Console) -> None:
    """Print the plain-mode command reference"""
    console.print(Panel(
        "[bold]message[/bold]                 ask the whole team (one collaborative reply)\n"
        "[bold]/to id,id message[/bold]       ask specific agents (one reply each)\n"
        "[bold]/team id,id[/bold]             change the agent team\n"
        "[bold]/project id[/bold]             switch project\n"
        "[bold]/status[/bold]                 show the dashboard\n"
        "[bold]/quit[/bold]                   leave",
        title="Commands",
        border_style="dim",
    ))
