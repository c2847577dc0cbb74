from dataclasses import dataclass


@dataclass(frozen=True)
class ClusterRef:
    display_name: str
    identifier: str

    def __str__(self):
        return f"{self.display_name} ({self.identifier})"


class TaskRecord:
    """A describe_tasks record, kept whole for the logs path."""

    def __init__(self, raw: dict):
        self.raw = raw

    @property
    def identifier(self) -> str:
        return self.raw.get("taskArn")

    @property
    def definition_identifier(self) -> str:
        return self.raw.get("taskDefinitionArn")

    def __str__(self):
        return self.identifier or ""

    def __eq__(self, other):
        return isinstance(other, TaskRecord) and self.raw == other.raw

    def __repr__(self):
        return f"TaskRecord({self.identifier!r})"


@dataclass(frozen=True)
class ContainerRef:
    display_name: str
    identifier: str
    runtime_id: str

    @classmethod
    def from_description(cls, container: dict):
        """Return None for containers that are not ready for execute-command."""
        name = container.get("name")
        arn = container.get("containerArn")
        runtime_id = container.get("runtimeId")
        if not (name and arn and runtime_id):
            return None
        return cls(name, arn, runtime_id)

    def __str__(self):
        return f"{self.display_name} ({self.identifier})"


@dataclass(frozen=True)
class ExecSession:
    session_id: str
    stream_url: str
    token_value: str

    @classmethod
    def from_response(cls, session: dict):
        return cls(
            session_id=session.get("sessionId"),
            stream_url=session.get("streamUrl"),
            token_value=session.get("tokenValue"),
        )


@dataclass(frozen=True)
class LogGroupReference:
    group: str
    region: str
    stream_prefix: str = None

    def __str__(self):
        if self.stream_prefix:
            return f"{self.group} ({self.region}, prefix {self.stream_prefix})"
        return f"{self.group} ({self.region})"
