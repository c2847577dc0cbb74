import logging
from contextlib import contextmanager

from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import ApiError, EmptyResult, NotFound
from .identifier import parse_identifier
from .models import ClusterRef, ContainerRef, TaskRecord
from .selector import choose

logger = logging.getLogger(__name__)


@contextmanager
def api_call(stage, operation):
    try:
        yield
    except (ClientError, BotoCoreError) as e:
        raise ApiError(f"{operation} failed: {e}", stage=stage, cause=e) from e


class ClusterResolver:
    stage = "cluster"

    def __init__(self, ecs_client, selector):
        self.ecs = ecs_client
        self.selector = selector

    def resolve(self, cluster_name=None) -> ClusterRef:
        if cluster_name:
            with api_call(self.stage, "DescribeClusters"):
                clusters = self.ecs.describe_clusters(clusters=[cluster_name]).get(
                    "clusters", []
                )
            if not clusters:
                raise NotFound(f"Cluster '{cluster_name}' not found", stage=self.stage)
            cluster = clusters[0]
            return ClusterRef(cluster["clusterName"], cluster["clusterArn"])

        with api_call(self.stage, "ListClusters"):
            cluster_arns = self.ecs.list_clusters().get("clusterArns", [])
        if not cluster_arns:
            raise EmptyResult("No clusters found", stage=self.stage)

        candidates = [
            ClusterRef(parse_identifier(arn, self.stage).display_name, arn)
            for arn in cluster_arns
        ]
        cluster = choose(self.selector, "Cluster", candidates)
        logger.info(f"Cluster: {cluster.identifier}")
        return cluster


class TaskResolver:
    stage = "task"

    def __init__(self, ecs_client, selector):
        self.ecs = ecs_client
        self.selector = selector

    def describe_tasks(self, cluster, task_ids):
        if not task_ids:
            return []
        with api_call(self.stage, "DescribeTasks"):
            return self.ecs.describe_tasks(cluster=cluster, tasks=task_ids).get(
                "tasks", []
            )

    def resolve(self, cluster, task_name=None) -> TaskRecord:
        if task_name:
            tasks = self.describe_tasks(cluster, [task_name])
            if not tasks:
                raise NotFound(f"Task '{task_name}' not found", stage=self.stage)
            return TaskRecord(tasks[0])

        with api_call(self.stage, "ListTasks"):
            task_arns = self.ecs.list_tasks(cluster=cluster).get("taskArns", [])
        if not task_arns:
            raise EmptyResult("No tasks found", stage=self.stage)
        tasks = self.describe_tasks(cluster, task_arns)
        if len(tasks) < len(task_arns):
            raise ApiError(
                f"DescribeTasks returned {len(tasks)} of {len(task_arns)} tasks",
                stage=self.stage,
            )

        task = choose(self.selector, "Task", [TaskRecord(t) for t in tasks])
        logger.info(f"Task: {task.identifier}")
        return task


class ContainerResolver:
    stage = "container"

    def __init__(self, ecs_client, selector):
        self.ecs = ecs_client
        self.selector = selector

    def candidates(self, cluster, task):
        with api_call(self.stage, "DescribeTasks"):
            tasks = self.ecs.describe_tasks(cluster=cluster, tasks=[task]).get(
                "tasks", []
            )
        containers = []
        for description in tasks:
            for container in description.get("containers", []):
                ref = ContainerRef.from_description(container)
                if ref is None:
                    logger.debug(
                        f"Skipping container '{container.get('name')}', not ready"
                    )
                    continue
                containers.append(ref)
        return containers

    def resolve(self, cluster, task, container_name=None) -> ContainerRef:
        containers = self.candidates(cluster, task)
        if container_name:
            for container in containers:
                if container.display_name == container_name:
                    return container
            raise NotFound(
                f"Container '{container_name}' not found", stage=self.stage
            )

        if not containers:
            raise EmptyResult("No containers found", stage=self.stage)
        container = choose(self.selector, "Container", containers)
        logger.info(f"Container: {container.display_name}")
        return container
