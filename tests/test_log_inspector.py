from unittest.mock import MagicMock

import pytest

from conftest import TASK_DEFINITION_ARN
from iecs.exceptions import NotFound, UnsupportedLogDriver
from iecs.log_inspector import LogConfigurationInspector
from iecs.models import LogGroupReference


def task_definition(*container_definitions):
    return {"taskDefinition": {"containerDefinitions": list(container_definitions)}}


class TestLogConfigurationInspector:
    def test_awslogs(self):
        mock_ecs = MagicMock()
        mock_ecs.describe_task_definition.return_value = task_definition(
            {"name": "sidecar"},
            {
                "name": "app",
                "logConfiguration": {
                    "logDriver": "awslogs",
                    "options": {
                        "awslogs-group": "/ecs/web",
                        "awslogs-region": "eu-central-1",
                        "awslogs-stream-prefix": "web",
                    },
                },
            },
        )

        reference = LogConfigurationInspector(mock_ecs, "eu-west-1").inspect(
            TASK_DEFINITION_ARN, "app"
        )

        assert reference == LogGroupReference("/ecs/web", "eu-central-1", "web")
        mock_ecs.describe_task_definition.assert_called_once_with(
            taskDefinition=TASK_DEFINITION_ARN
        )

    def test_region_defaults_to_session(self):
        mock_ecs = MagicMock()
        mock_ecs.describe_task_definition.return_value = task_definition(
            {
                "name": "app",
                "logConfiguration": {
                    "logDriver": "awslogs",
                    "options": {"awslogs-group": "/ecs/web"},
                },
            }
        )
        reference = LogConfigurationInspector(mock_ecs, "eu-west-1").inspect(
            TASK_DEFINITION_ARN, "app"
        )
        assert reference == LogGroupReference("/ecs/web", "eu-west-1")

    def test_unsupported_driver_rejected_before_options(self):
        options = MagicMock()
        mock_ecs = MagicMock()
        mock_ecs.describe_task_definition.return_value = task_definition(
            {
                "name": "app",
                "logConfiguration": {"logDriver": "splunk", "options": options},
            }
        )
        with pytest.raises(UnsupportedLogDriver, match="'splunk'") as e:
            LogConfigurationInspector(mock_ecs, "eu-west-1").inspect(
                TASK_DEFINITION_ARN, "app"
            )
        assert e.value.driver == "splunk"
        options.get.assert_not_called()

    def test_no_log_configuration(self):
        mock_ecs = MagicMock()
        mock_ecs.describe_task_definition.return_value = task_definition({"name": "app"})
        with pytest.raises(UnsupportedLogDriver, match="'none'"):
            LogConfigurationInspector(mock_ecs, "eu-west-1").inspect(
                TASK_DEFINITION_ARN, "app"
            )

    def test_container_definition_missing(self):
        mock_ecs = MagicMock()
        mock_ecs.describe_task_definition.return_value = task_definition({"name": "web"})
        with pytest.raises(NotFound, match="Container definition 'app' not found"):
            LogConfigurationInspector(mock_ecs, "eu-west-1").inspect(
                TASK_DEFINITION_ARN, "app"
            )

    def test_log_group_missing(self):
        mock_ecs = MagicMock()
        mock_ecs.describe_task_definition.return_value = task_definition(
            {"name": "app", "logConfiguration": {"logDriver": "awslogs", "options": {}}}
        )
        with pytest.raises(NotFound, match="awslogs-group"):
            LogConfigurationInspector(mock_ecs, "eu-west-1").inspect(
                TASK_DEFINITION_ARN, "app"
            )
