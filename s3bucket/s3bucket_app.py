import aws_cdk as cdk

from s3bucket.common import get_logger
from s3bucket.s3bucket_identity import AccountAliasResolver
from s3bucket.s3bucket_inputs import read_inputs
from s3bucket.s3bucket_stack import S3BucketStack

logger = get_logger("S3BucketApp")


def build_app(app: cdk.App, resolver: AccountAliasResolver = None) -> S3BucketStack:
    """Wires context inputs and the account alias into the bucket stack.
    An `account_alias` context value takes precedence over the IAM lookup.
    """
    inputs = read_inputs(app.node)
    account_alias = app.node.try_get_context("account_alias")
    if account_alias:
        logger.info(f"Using account alias '{account_alias}' from context")
    else:
        account_alias = (resolver or AccountAliasResolver()).resolve()

    return S3BucketStack(
        scope=app,
        construct_id=f"s3bucket-{inputs.bucket}",
        inputs=inputs,
        account_alias=account_alias,
        description=f"s3bucket - {inputs.bucket} with logging, versioning and lifecycle defaults",
    )
