from aws_cdk import (
    Duration,
    Tags,
    aws_s3 as _s3,
)
from constructs import Construct
from typing import Dict

from s3bucket.common import (
    ABORT_INCOMPLETE_MULTIPART_UPLOAD_DAYS,
    LOGGING_PREFIX,
    NONCURRENT_VERSION_EXPIRATION_DAYS,
    NONCURRENT_VERSION_TRANSITION_DAYS,
    get_logger,
)
from s3bucket.s3bucket_policy import build_policy_document


class SecureBucket(Construct):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        *,
        bucket_id: str,
        logging_bucket: str,
        custom_bucket_policy: str = "",
        tags: Dict[str, str] = None,
    ) -> None:
        super().__init__(scope, construct_id)
        self.logger = get_logger(self.__class__.__name__)

        # parse before declaring anything so a bad policy fails the synth early
        self.policy_document = build_policy_document(bucket_id, custom_bucket_policy)
        self.logger.debug(f"Bucket policy for '{bucket_id}':\n{self.policy_document.to_json()}")

        self.logging_prefix = LOGGING_PREFIX.format(bucket_id=bucket_id)
        self.bucket = _s3.Bucket(
            self,
            "Bucket",
            bucket_name=bucket_id,
            access_control=_s3.BucketAccessControl.PRIVATE,
            encryption=_s3.BucketEncryption.S3_MANAGED,
            versioned=True,
            server_access_logs_bucket=_s3.Bucket.from_bucket_name(
                self, "LoggingBucket", logging_bucket
            ),
            server_access_logs_prefix=self.logging_prefix,
            lifecycle_rules=[
                _s3.LifecycleRule(
                    id="default",
                    enabled=True,
                    abort_incomplete_multipart_upload_after=Duration.days(
                        ABORT_INCOMPLETE_MULTIPART_UPLOAD_DAYS
                    ),
                    expired_object_delete_marker=True,
                    noncurrent_version_transitions=[
                        _s3.NoncurrentVersionTransition(
                            storage_class=_s3.StorageClass.INFREQUENT_ACCESS,
                            transition_after=Duration.days(
                                NONCURRENT_VERSION_TRANSITION_DAYS
                            ),
                        )
                    ],
                    noncurrent_version_expiration=Duration.days(
                        NONCURRENT_VERSION_EXPIRATION_DAYS
                    ),
                )
            ],
        )
        for key, value in (tags or {}).items():
            Tags.of(self.bucket).add(key, value)

        self.bucket_policy = _s3.CfnBucketPolicy(
            self,
            "BucketPolicy",
            bucket=self.bucket.bucket_name,
            policy_document=self.policy_document.to_dict(),
        )
