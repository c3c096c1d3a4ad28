from __future__ import annotations
"""Chat input commands shared by the plain console and the TUI"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ChatCommand:
    """One parsed line of user input"""
    command: str  # send, team, project, status, help, quit
    text: str = ""
    agent_ids: list[str] = field(default_factory=list)
    project_id: Optional[str] = None


def _split_ids(value: str) -> list[str]:
    return [part.strip() for part in value.split(",") if part.strip()]


def parse_command(line: str) -> ChatCommand:
    """
    Parse a line typed by the user.

    - plain text            -> send to the whole team
    - /to id,id text        -> send to the listed agents
    - /team id,id           -> change the team
    - /project [id]         -> switch project (no id = next configured one)
    - /status, /help, /quit
    Unknown slash commands are sent as plain text.
    """
    stripped = line.strip()
    if not stripped.startswith("/"):
        return ChatCommand(command="send", text=stripped)

    head, _, rest = stripped.partition(" ")
    rest = rest.strip()
    name = head[1:].lower()

    if name == "to":
        ids, _, text = rest.partition(" ")
        return ChatCommand(command="send", text=text.strip(), agent_ids=_split_ids(ids))
    if name == "team":
        return ChatCommand(command="team", agent_ids=_split_ids(rest))
    if name == "project":
        return ChatCommand(command="project", project_id=rest or None)
    if name in ("status", "help", "quit"):
        return ChatCommand(command=name)
    if name == "exit":
        return ChatCommand(command="quit")

    return ChatCommand(command="send", text=stripped)
