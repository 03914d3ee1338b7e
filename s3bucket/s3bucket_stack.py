from aws_cdk import (
    CfnOutput,
    Stack,
)
from constructs import Construct

from s3bucket.common import get_logger
from s3bucket.patterns.secure_bucket import SecureBucket
from s3bucket.s3bucket_identity import resolve_bucket_id
from s3bucket.s3bucket_inputs import BucketInputs


class S3BucketStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        inputs: BucketInputs,
        account_alias: str,
        **kwargs,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)
        self.logger = get_logger(self.__class__.__name__)

        #
        # identifier
        #
        self.bucket_id = resolve_bucket_id(account_alias, inputs.bucket)
        self.logger.info(f"Declaring bucket '{self.bucket_id}'")

        #
        # bucket
        #
        self.secure_bucket = SecureBucket(
            self,
            "SecureBucket",
            bucket_id=self.bucket_id,
            logging_bucket=inputs.logging_bucket,
            custom_bucket_policy=inputs.custom_bucket_policy,
            tags=inputs.tags,
        )
        self.bucket = self.secure_bucket.bucket

        #
        # outputs
        #
        CfnOutput(
            self,
            "BucketId",
            value=self.bucket_id,
            export_name=f"{self.stack_name}-BucketId",
        )
