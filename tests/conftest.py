from iecs.exceptions import PromptFailed

CLUSTER_ARN = "arn:aws:ecs:eu-west-1:123456789012:cluster/prod"
TASK_ARN = (
    "arn:aws:ecs:eu-west-1:123456789012:task/prod/0123456789abcdef0123456789abcdef"
)
OTHER_TASK_ARN = (
    "arn:aws:ecs:eu-west-1:123456789012:task/prod/fedcba9876543210fedcba9876543210"
)
TASK_DEFINITION_ARN = "arn:aws:ecs:eu-west-1:123456789012:task-definition/web:7"


class ScriptedSelector:
    """Picks candidates by index instead of asking on a terminal."""

    def __init__(self, *choices):
        self.choices = list(choices)
        self.prompts = []

    def select(self, prompt, candidates):
        self.prompts.append((prompt, list(candidates)))
        if not self.choices:
            raise PromptFailed(f"Unable to render {prompt.lower()} selector")
        return candidates[self.choices.pop(0)]


def container(name, runtime_id="r1", arn=None):
    description = {
        "name": name,
        "containerArn": arn or f"arn:aws:ecs:eu-west-1:123456789012:container/{name}",
    }
    if runtime_id is not None:
        description["runtimeId"] = runtime_id
    return description


def task(arn=TASK_ARN, containers=()):
    return {
        "taskArn": arn,
        "taskDefinitionArn": TASK_DEFINITION_ARN,
        "containers": list(containers),
    }
