import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from .exceptions import AWSSessionError


class AWSSessions:
    def __init__(self, profile_name=None, region_name=None):
        # This is put here due to https://github.com/boto/botocore/issues/1841
        boto3.set_stream_logger(name="botocore.credentials", level=logging.ERROR)

        self.profile_name = profile_name
        self.region_name = region_name
        self.session = None

    def get_session(self):
        if not self.session:
            self.session = self.create_session()
        return self.session

    def create_session(self):
        try:
            session = boto3.Session(
                profile_name=self.profile_name, region_name=self.region_name
            )
            if not session.region_name:
                raise AWSSessionError("'region' is not defined", stage="session")
            sts = session.client("sts")
            sts.get_caller_identity()
        except (BotoCoreError, ClientError) as e:
            raise AWSSessionError(
                f"Failed to create AWS session with profile '{self.profile_name}': {e}",
                stage="session",
                cause=e,
            ) from e
        return session

    @property
    def region(self):
        return self.get_session().region_name

    def ecs_client(self):
        return self.get_session().client("ecs")
