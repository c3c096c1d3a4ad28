"""Tests for the console host: command parsing and Rich rendering"""
from __future__ import annotations

from rich.console import Console

from agent_workspace.adapters.cli.commands import parse_command
from agent_workspace.adapters.cli.dashboard import ConsoleNotifier, TerminalDashboard, speaker_label


class TestParseCommand:
    """Test chat input parsing"""

    def test_plain_text(self):
        command = parse_command("  How are we doing?  ")
        assert command.command == "send"
        assert command.text == "How are we doing?"
        assert command.agent_ids == []

    def test_directed_message(self):
        command = parse_command("/to pm-001, da-001 Give me the numbers")
        assert command.command == "send"
        assert command.agent_ids == ["pm-001"]
        assert command.text == "da-001 Give me the numbers"

        command = parse_command("/to pm-001,da-001 Give me the numbers")
        assert command.agent_ids == ["pm-001", "da-001"]
        assert command.text == "Give me the numbers"

    def test_team(self):
        command = parse_command("/team pm-001,ba-001")
        assert command.command == "team"
        assert command.agent_ids == ["pm-001", "ba-001"]

    def test_project(self):
        assert parse_command("/project proj-002").project_id == "proj-002"
        assert parse_command("/project").project_id is None

    def test_simple_commands(self):
        assert parse_command("/status").command == "status"
        assert parse_command("/HELP").command == "help"
        assert parse_command("/quit").command == "quit"
        assert parse_command("/exit").command == "quit"

    def test_unknown_command_sent_as_text(self):
        command = parse_command("/shrug whatever")
        assert command.command == "send"
        assert command.text == "/shrug whatever"


class TestTerminalDashboard:
    """Test Rich rendering"""

    def _console(self) -> Console:
        return Console(record=True, width=140, force_terminal=False)

    def test_dashboard_lists_project_and_agents(self, session):
        console = self._console()
        TerminalDashboard(session, console).print_status()
        output = console.export_text()

        assert "Digital Transformation Initiative" in output
        assert "TechCorp Solutions" in output
        assert "Alex" in output and "Sarah" in output
        assert "Queries: 10" in output

    def test_dashboard_shows_thinking(self, session):
        session.submit_message("Hi", ["a2"])
        console = self._console()
        TerminalDashboard(session, console).print_status()
        output = console.export_text()

        assert "thinking" in output
        assert "1 pending" in output

    def test_print_messages_labels_speakers(self, session, scheduler):
        session.submit_message("Hi", ["a1"])
        scheduler.run_all()

        console = self._console()
        TerminalDashboard(session, console).print_messages(list(session.messages))
        output = console.export_text()

        assert "System" in output
        assert "You" in output
        assert "Project Manager" in output

    def test_private_messages_show_visibility(self, session):
        session.submit_message("Budget numbers for leadership only", [], "private")
        session.submit_message("Open question for everyone")

        console = self._console()
        TerminalDashboard(session, console).print_messages(list(session.messages))
        output = console.export_text()

        assert output.count("🔒 Private") == 1
        assert "👥 Project" not in output

    def test_speaker_labels(self, session, scheduler):
        session.submit_message("Hi")
        scheduler.run_all()
        labels = [speaker_label(m, session) for m in session.messages]
        assert labels == ["System", "You", "Team"]

    def test_summary(self, session):
        console = self._console()
        TerminalDashboard(session, console).print_summary()
        assert "2 active" in console.export_text()


class TestConsoleNotifier:
    def test_prints_notification(self):
        console = Console(record=True, width=100)
        ConsoleNotifier(console).notify("Team updated: 2 agents active")
        assert "Team updated: 2 agents active" in console.export_text()
