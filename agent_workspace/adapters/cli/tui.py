from __future__ import annotations
"""Interactive Terminal UI for a workspace session using Textual"""

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.reactive import reactive
from textual.widgets import DataTable, Footer, Header, Input, Label, RichLog, Static

from rich.text import Text

from ...core.errors import WorkspaceError
from ...core.models import Message, Sender, Visibility
from ...core.ports.notifications import NotificationPort
from ...core.ports.selection import SelectionPort
from ...runtime.session import WorkspaceSession
from ..config_yaml import WorkspaceConfig, build_session
from ..scheduling import AsyncioScheduler
from ..selection import RandomSelection
from .commands import parse_command
from .dashboard import speaker_label


class AppNotifier(NotificationPort):
    """Forwards engine notifications to Textual toasts"""

    def __init__(self, app: App):
        self.app = app

    def notify(self, text: str, severity: str = "information") -> None:
        self.app.notify(text, severity=severity, timeout=3)


class AgentStatusWidget(Static):
    """Widget displaying status of all agents"""

    def __init__(self, session: WorkspaceSession, **kwargs):
        super().__init__(**kwargs)
        self.session = session

    def compose(self) -> ComposeResult:
        yield DataTable(id="agent-table")

    def on_mount(self) -> None:
        table = self.query_one("#agent-table", DataTable)
        table.add_columns("Id", "Agent", "Role", "Status", "Last")
        self.refresh_data()

    def refresh_data(self) -> None:
        """Refresh the agent status table"""
        table = self.query_one("#agent-table", DataTable)
        table.clear()

        for agent in self.session.agents:
            table.add_row(
                agent.id,
                f"{agent.avatar} {agent.name}".strip(),
                agent.role_label,
                f"{agent.status.emoji} {agent.status.value}",
                agent.last_activity or "-",
            )


class ConversationWidget(Static):
    """Widget displaying the conversation"""

    def __init__(self, session: WorkspaceSession, **kwargs):
        super().__init__(**kwargs)
        self.session = session
        self._rendered = 0
        self._first_id: Optional[str] = None

    def compose(self) -> ComposeResult:
        yield RichLog(id="conversation-log", wrap=True, markup=False, max_lines=500)

    def refresh_data(self) -> None:
        """Write messages added since the last refresh; redraw after a reset"""
        messages = self.session.messages
        log = self.query_one("#conversation-log", RichLog)

        first_id = messages[0].id if messages else None
        if first_id != self._first_id:
            log.clear()
            self._rendered = 0
            self._first_id = first_id

        for msg in messages[self._rendered:]:
            log.write(self._format(msg))
        self._rendered = len(messages)

    def _format(self, msg: Message) -> Text:
        label = speaker_label(msg, self.session)
        if msg.sender == Sender.USER:
            style = "bold green"
        elif msg.is_system:
            style = "bold magenta"
        else:
            style = "bold cyan"

        text = Text()
        text.append(f"{label}: ", style=style)
        text.append(msg.content)
        if msg.visibility != Visibility.PROJECT:
            text.append(f"  {msg.visibility.label}", style="dim")
        if msg.mentions:
            text.append(f"  [@ {', '.join(msg.mentions)}]", style="dim")
        if msg.attachments:
            text.append(f"\n📎 {', '.join(a.name for a in msg.attachments)}", style="dim")
        text.append("\n")
        return text


class MetricsWidget(Static):
    """Widget displaying workspace metrics"""

    active_agents = reactive(0)
    total_queries = reactive(0)
    success_rate = reactive(0.0)
    pending = reactive(0)

    def render(self) -> Text:
        text = Text()
        text.append("📊 ", style="bold")
        text.append(f"Active: {self.active_agents}", style="green")
        text.append(" | ", style="dim")
        text.append(f"Queries: {self.total_queries}", style="cyan")
        text.append(" | ", style="dim")
        text.append(f"Success: {self.success_rate:.1f}%", style="blue")
        text.append(" | ", style="dim")
        text.append(f"Pending: {self.pending}", style="yellow" if self.pending else "dim")
        return text


class ProjectHeaderWidget(Static):
    """Widget displaying project header info"""

    project_name = reactive("AI Project Workspace")
    client_name = reactive("")
    project_status = reactive("active")
    progress = reactive(0)

    def render(self) -> Text:
        text = Text()
        text.append(f"📋 {self.project_name}", style="bold cyan")
        text.append("  |  Client: ", style="dim")
        text.append(self.client_name or "-")
        text.append("  |  Status: ", style="dim")
        text.append(self.project_status, style="yellow")
        text.append("  |  Progress: ", style="dim")
        text.append(f"{self.progress}%", style="green")
        return text


class WorkspaceApp(App):
    """Chat with a project's AI team"""

    CSS = """
    Screen {
        layout: grid;
        grid-size: 1;
        grid-rows: auto 1fr auto auto;
    }

    #header-container {
        height: 3;
        padding: 0 1;
        background: $surface;
        border-bottom: solid $primary;
    }

    #main-container {
        layout: grid;
        grid-size: 2;
        grid-columns: 2fr 3fr;
        padding: 1;
    }

    #agents-panel {
        border: solid $primary;
        padding: 1;
        height: 100%;
    }

    #conversation-panel {
        border: solid $accent;
        padding: 1;
        height: 100%;
    }

    #metrics-container {
        height: 3;
        padding: 0 1;
        background: $surface;
        border-top: solid $primary;
    }

    #agent-table, #conversation-log {
        height: 100%;
    }

    .panel-title {
        text-style: bold;
        color: $text;
        padding-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+p", "next_project", "Next Project"),
        Binding("ctrl+s", "status", "Status"),
        Binding("ctrl+q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit", show=False),
    ]

    def __init__(
        self,
        config: WorkspaceConfig,
        selection: Optional[SelectionPort] = None,
        **kwargs
    ):
        super().__init__(**kwargs)
        self.workspace_config = config
        self.session = build_session(
            config,
            scheduler=AsyncioScheduler(),
            selection=selection or RandomSelection(),
            notifier=AppNotifier(self),
        )

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Container(id="header-container"):
            yield ProjectHeaderWidget(id="project-header")

        with Container(id="main-container"):
            with Vertical(id="agents-panel"):
                yield Label("👥 Agent Team", classes="panel-title")
                yield AgentStatusWidget(self.session, id="agent-status")

            with Vertical(id="conversation-panel"):
                yield Label("💬 Conversation", classes="panel-title")
                yield ConversationWidget(self.session, id="conversation")

        with Container(id="metrics-container"):
            yield MetricsWidget(id="metrics")

        yield Input(placeholder="Message, /to id,id message, /team id,id, /project id", id="chat-input")
        yield Footer()

    def on_mount(self) -> None:
        """Start the update loop when mounted"""
        self.title = "🤖 AI Project Workspace"
        self._refresh_display()
        self.set_interval(0.25, self._refresh_display)
        self.query_one("#chat-input", Input).focus()

    def _refresh_display(self) -> None:
        """Refresh all display elements"""
        project = self.session.project
        self.sub_title = project.name

        header = self.query_one("#project-header", ProjectHeaderWidget)
        header.project_name = project.name
        header.client_name = project.client.name
        header.project_status = project.status.value
        header.progress = project.progress

        self.query_one("#agent-status", AgentStatusWidget).refresh_data()
        self.query_one("#conversation", ConversationWidget).refresh_data()

        metrics = self.session.metrics
        widget = self.query_one("#metrics", MetricsWidget)
        widget.active_agents = metrics.active_agents
        widget.total_queries = metrics.total_queries
        widget.success_rate = metrics.success_rate
        widget.pending = self.session.pending_dispatches

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.input.value = ""
        command = parse_command(event.value)

        try:
            if command.command == "send":
                self.session.submit_message(command.text, command.agent_ids)
            elif command.command == "team":
                self.session.update_agent_selection(command.agent_ids)
            elif command.command == "project":
                self._switch_project(command.project_id)
            elif command.command == "status":
                self.action_status()
            elif command.command == "quit":
                self.exit()
                return
        except WorkspaceError as e:
            self.notify(str(e), severity="error")

        self._refresh_display()

    def _switch_project(self, project_id: Optional[str]) -> None:
        if project_id is None:
            self.action_next_project()
            return
        project = self.workspace_config.get_project(project_id)
        if project is None:
            self.notify(f"Unknown project: {project_id}", severity="warning")
            return
        self.session.switch_project(project)

    def action_next_project(self) -> None:
        """Cycle through the configured projects"""
        self.session.switch_project(self.workspace_config.next_project(self.session.project.id))
        self._refresh_display()

    def action_status(self) -> None:
        """Show a status summary"""
        self.notify(self.session.get_summary(), title="Status", timeout=6)
