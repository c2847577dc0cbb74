import logging

from .ecs_id_resolver import api_call
from .exceptions import NotFound, UnsupportedLogDriver
from .models import LogGroupReference

logger = logging.getLogger(__name__)

SUPPORTED_LOG_DRIVERS = ("awslogs",)


class LogConfigurationInspector:
    stage = "logs"

    def __init__(self, ecs_client, region: str):
        self.ecs = ecs_client
        self.region = region

    def container_definition(self, task_definition, container_name):
        if not task_definition:
            raise NotFound("'taskDefinitionArn' is not defined", stage=self.stage)
        with api_call(self.stage, "DescribeTaskDefinition"):
            response = self.ecs.describe_task_definition(taskDefinition=task_definition)
        definitions = response.get("taskDefinition", {}).get("containerDefinitions", [])
        for definition in definitions:
            if definition.get("name") == container_name:
                return definition
        raise NotFound(
            f"Container definition '{container_name}' not found in {task_definition}",
            stage=self.stage,
        )

    def inspect(self, task_definition, container_name) -> LogGroupReference:
        definition = self.container_definition(task_definition, container_name)
        log_configuration = definition.get("logConfiguration")
        if not log_configuration:
            raise UnsupportedLogDriver("none")
        driver = log_configuration.get("logDriver")
        if driver not in SUPPORTED_LOG_DRIVERS:
            raise UnsupportedLogDriver(driver)

        options = log_configuration.get("options", {})
        group = options.get("awslogs-group")
        if not group:
            raise NotFound(
                f"'awslogs-group' is not defined for container '{container_name}'",
                stage=self.stage,
            )
        reference = LogGroupReference(
            group=group,
            region=options.get("awslogs-region", self.region),
            stream_prefix=options.get("awslogs-stream-prefix"),
        )
        logger.info(f"Log group: {reference}")
        return reference
