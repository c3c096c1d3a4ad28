from __future__ import annotations
"""YAML configuration - engine settings, agent roster and projects"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml

from ..core.errors import ConfigurationError
from ..core.models import (
    Agent, AgentRole, AgentStatus, ClientInfo, Project, ProjectMetrics,
    ProjectPriority, ProjectStatus,
)
from ..core.ports.notifications import NotificationPort
from ..core.ports.scheduler import SchedulerPort
from ..core.ports.selection import SelectionPort
from ..runtime.session import WorkspaceSession

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "config/settings.yaml"

# Used when no settings file exists
DEFAULT_CONFIG: dict[str, Any] = {
    "engine": {
        "response_delay_ms": 800,
        "strict": False,
    },
    "logging": {
        "level": "WARNING",
    },
    "metrics": {
        "total_queries": 1247,
        "success_rate": 94.2,
        "avg_response_time": "1.5s",
        "tasks_generated": 89,
        "documents_created": 34,
    },
    "current_project": "proj-001",
    "projects": [
        {
            "id": "proj-001",
            "name": "Digital Transformation Initiative",
            "client": {"name": "TechCorp Solutions", "industry": "Technology"},
            "status": "active",
            "progress": 65,
            "start_date": "2025-01-15",
            "end_date": "2025-06-30",
            "team_size": 8,
            "description": "Comprehensive digital transformation strategy and implementation",
            "priority": "high",
            "budget": "€450,000",
        },
        {
            "id": "proj-002",
            "name": "Market Expansion Analysis",
            "client": {"name": "GlobalRetail Inc", "industry": "Retail"},
            "status": "active",
            "progress": 40,
            "start_date": "2025-02-01",
            "end_date": "2025-05-15",
            "team_size": 5,
            "description": "Strategic analysis for European market expansion",
            "priority": "medium",
            "budget": "€180,000",
        },
        {
            "id": "proj-003",
            "name": "Process Optimization Study",
            "client": {"name": "Manufacturing Plus", "industry": "Manufacturing"},
            "status": "planning",
            "progress": 15,
            "start_date": "2025-03-01",
            "end_date": "2025-08-30",
            "team_size": 6,
            "description": "Operational efficiency improvement and cost reduction",
            "priority": "medium",
            "budget": "€320,000",
        },
    ],
    "agents": [
        {
            "id": "pm-001",
            "name": "Alex",
            "role": "Project Manager",
            "status": "active",
            "avatar": "🧭",
            "description": "Timeline, milestones, task orchestration",
            "capabilities": ["Timeline Management", "Task Assignment", "Status Summaries"],
            "response_time": "1.0s",
            "success_rate": 96.2,
        },
        {
            "id": "ba-001",
            "name": "Sarah",
            "role": "Business Analyst",
            "status": "idle",
            "avatar": "📝",
            "description": "Requirements, user stories, acceptance criteria",
            "capabilities": ["Requirement Capture", "User Stories", "Acceptance Criteria"],
            "response_time": "1.8s",
            "success_rate": 92.5,
        },
        {
            "id": "da-001",
            "name": "Marcus",
            "role": "Data Analyst",
            "status": "active",
            "avatar": "📊",
            "description": "Data ingestion, analysis, KPIs and visuals",
            "capabilities": ["CSV Ingestion", "Aggregation", "Charts & Tables"],
            "response_time": "0.9s",
            "success_rate": 93.7,
        },
        {
            "id": "sc-001",
            "name": "Diana",
            "role": "Strategy Consultant",
            "status": "active",
            "avatar": "🎯",
            "description": "Market analysis, strategic recommendations",
            "capabilities": ["Market Research", "Competitive Analysis", "Strategy"],
            "response_time": "1.5s",
            "success_rate": 91.3,
        },
        {
            "id": "pmo-001",
            "name": "Robert",
            "role": "PMO Analyst",
            "status": "active",
            "avatar": "📋",
            "description": "Governance, resource monitoring, reporting",
            "capabilities": ["Governance", "Resource Monitoring", "Reporting"],
            "response_time": "1.1s",
            "success_rate": 95.7,
        },
    ],
}


@dataclass
class WorkspaceConfig:
    """Parsed configuration"""
    response_delay: float = 0.8  # seconds
    strict: bool = False
    log_level: str = "WARNING"
    metrics: ProjectMetrics = field(default_factory=ProjectMetrics)
    projects: list[Project] = field(default_factory=list)
    agents: list[Agent] = field(default_factory=list)
    current_project_id: Optional[str] = None

    @property
    def current_project(self) -> Project:
        for project in self.projects:
            if project.id == self.current_project_id:
                return project
        return self.projects[0]

    def get_project(self, project_id: str) -> Optional[Project]:
        for project in self.projects:
            if project.id == project_id:
                return project
        return None

    def next_project(self, project_id: str) -> Project:
        """The project after `project_id`, wrapping around"""
        ids = [p.id for p in self.projects]
        index = (ids.index(project_id) + 1) % len(ids) if project_id in ids else 0
        return self.projects[index]


def _require(data: dict[str, Any], key: str, context: str) -> Any:
    if key not in data or data[key] in (None, ""):
        raise ConfigurationError(f"{context}.{key}", "missing required value")
    return data[key]


def _enum(enum_cls, value: Any, key: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ConfigurationError(key, f"'{value}' is not one of: {allowed}") from None


def _int(value: Any, key: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(key, "must be an integer")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(key, "must be an integer") from None


def _float(value: Any, key: str) -> float:
    if isinstance(value, bool):
        raise ConfigurationError(key, "must be a number")
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ConfigurationError(key, "must be a number") from None


def _bool(value: Any, key: str) -> bool:
    # YAML already maps true/false/yes/no; quoted strings are rejected
    if not isinstance(value, bool):
        raise ConfigurationError(key, f"expected true or false, got {value!r}")
    return value


def _mapping(value: Any, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ConfigurationError(key, f"expected a mapping, got {type(value).__name__}")
    return value


def parse_agent(data: dict[str, Any]) -> Agent:
    """Build an Agent from a roster entry"""
    if not isinstance(data, dict):
        raise ConfigurationError("agents", f"expected a mapping, got {type(data).__name__}")

    agent_id = str(_require(data, "id", "agents"))
    label = str(data.get("role", ""))
    role = AgentRole.from_label(label) if label else AgentRole.GENERALIST
    # Keep the roster wording when it has no role of its own
    role_title = label if role == AgentRole.GENERALIST and label else ""

    return Agent(
        id=agent_id,
        name=str(_require(data, "name", f"agents[{agent_id}]")),
        role=role,
        role_title=role_title,
        status=_enum(AgentStatus, data.get("status", "idle"), f"agents[{agent_id}].status"),
        avatar=str(data.get("avatar", "")),
        description=str(data.get("description", "")),
        capabilities=[str(c) for c in data.get("capabilities") or []],
        response_time=str(data.get("response_time", "")),
        success_rate=_float(data.get("success_rate", 0.0), f"agents[{agent_id}].success_rate"),
        is_configurable=_bool(data.get("is_configurable", True), f"agents[{agent_id}].is_configurable"),
        last_activity=str(data.get("last_activity", "")),
    )


def parse_project(data: dict[str, Any]) -> Project:
    """Build a Project from a projects entry"""
    if not isinstance(data, dict):
        raise ConfigurationError("projects", f"expected a mapping, got {type(data).__name__}")

    project_id = str(_require(data, "id", "projects"))
    client = _mapping(data.get("client"), f"projects[{project_id}].client")

    progress = _int(data.get("progress", 0), f"projects[{project_id}].progress")
    if not 0 <= progress <= 100:
        raise ConfigurationError(f"projects[{project_id}].progress", "must be between 0 and 100")

    return Project(
        id=project_id,
        name=str(_require(data, "name", f"projects[{project_id}]")),
        client=ClientInfo(
            name=str(client.get("name", "")),
            industry=str(client.get("industry", "")),
        ),
        status=_enum(ProjectStatus, data.get("status", "active"), f"projects[{project_id}].status"),
        progress=progress,
        start_date=str(data.get("start_date", "")),
        end_date=str(data.get("end_date", "")),
        team_size=_int(data.get("team_size", 0), f"projects[{project_id}].team_size"),
        description=str(data.get("description", "")),
        priority=_enum(ProjectPriority, data.get("priority", "medium"), f"projects[{project_id}].priority"),
        budget=str(data.get("budget", "")),
        last_activity=str(data.get("last_activity", "")),
    )


def parse_metrics(data: dict[str, Any]) -> ProjectMetrics:
    return ProjectMetrics(
        total_queries=_int(data.get("total_queries", 0), "metrics.total_queries"),
        success_rate=_float(data.get("success_rate", 95.0), "metrics.success_rate"),
        avg_response_time=str(data.get("avg_response_time", "0.8s")),
        tasks_generated=_int(data.get("tasks_generated", 0), "metrics.tasks_generated"),
        documents_created=_int(data.get("documents_created", 0), "metrics.documents_created"),
    )


def parse_config(raw: dict[str, Any]) -> WorkspaceConfig:
    """Validate a raw configuration mapping"""
    engine = _mapping(raw.get("engine"), "engine")
    delay_ms = engine.get("response_delay_ms", 800)
    if isinstance(delay_ms, bool) or not isinstance(delay_ms, (int, float)) or delay_ms < 0:
        raise ConfigurationError("engine.response_delay_ms", "must be a non-negative number")

    agents = [parse_agent(entry) for entry in raw.get("agents") or []]
    if not agents:
        raise ConfigurationError("agents", "at least one agent is required")

    projects = [parse_project(entry) for entry in raw.get("projects") or []]
    if not projects:
        raise ConfigurationError("projects", "at least one project is required")

    current = raw.get("current_project")
    if current is not None and current not in {p.id for p in projects}:
        raise ConfigurationError("current_project", f"unknown project id '{current}'")

    return WorkspaceConfig(
        response_delay=delay_ms / 1000.0,
        strict=_bool(engine.get("strict", False), "engine.strict"),
        log_level=str(_mapping(raw.get("logging"), "logging").get("level", "WARNING")).upper(),
        metrics=parse_metrics(_mapping(raw.get("metrics"), "metrics")),
        projects=projects,
        agents=agents,
        current_project_id=current,
    )


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> WorkspaceConfig:
    """Load configuration from YAML file"""
    config_file = Path(config_path)

    if config_file.exists():
        with open(config_file, encoding="utf-8") as f:
            try:
                raw = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ConfigurationError(str(config_file), f"invalid YAML: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigurationError(str(config_file), "top level must be a mapping")
        logger.debug("Loaded configuration from %s", config_file)
        return parse_config(raw)

    logger.debug("No configuration at %s, using built-in defaults", config_file)
    return parse_config(DEFAULT_CONFIG)


def build_session(
    config: WorkspaceConfig,
    scheduler: SchedulerPort,
    selection: SelectionPort,
    notifier: Optional[NotificationPort] = None,
) -> WorkspaceSession:
    """Create a session for the configured current project and roster"""
    return WorkspaceSession(
        project=config.current_project,
        roster=config.agents,
        scheduler=scheduler,
        selection=selection,
        notifier=notifier,
        initial_metrics=config.metrics,
        response_delay=config.response_delay,
        strict=config.strict,
    )
