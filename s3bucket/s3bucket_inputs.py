import json
from collections import namedtuple

from constructs import Node

from s3bucket.common import (
    InvalidInputException,
    MissingInputException,
    get_logger,
)

logger = get_logger("BucketInputs")

BucketInputs = namedtuple(
    "BucketInputs",
    [
        "bucket",
        "logging_bucket",
        "custom_bucket_policy",
        "tags",
    ],
)


def _read_required(node: Node, key: str) -> str:
    value = node.try_get_context(key)
    if not value or not str(value).strip():
        msg = f"Missing required context value '{key}' (pass it with -c {key}=...)."
        logger.error(msg)
        raise MissingInputException(msg)
    return str(value)


def _read_custom_bucket_policy(node: Node) -> str:
    value = node.try_get_context("custom_bucket_policy")
    if not value:
        return ""
    if isinstance(value, str):
        return value
    # objects in cdk.json arrive already parsed
    return json.dumps(value)


def _read_tags(node: Node) -> dict:
    value = node.try_get_context("tags")
    if not value:
        return {}
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError as e:
            raise InvalidInputException(f"Context value 'tags' is not valid JSON: {e}") from e
    if not isinstance(value, dict):
        raise InvalidInputException(
            f"Context value 'tags' must be a mapping, got {type(value).__name__}."
        )
    for key, tag_value in value.items():
        if not isinstance(key, str) or not isinstance(tag_value, str):
            raise InvalidInputException(
                f"Tag '{key}' must map a string to a string, got '{tag_value}'."
            )
    return dict(value)


def read_inputs(node: Node) -> BucketInputs:
    """Collects the module inputs from the CDK context:
    * bucket, logging_bucket (required)
    * custom_bucket_policy (JSON string or object, optional)
    * tags (mapping or JSON string, optional)
    """
    inputs = BucketInputs(
        bucket=_read_required(node, "bucket"),
        logging_bucket=_read_required(node, "logging_bucket"),
        custom_bucket_policy=_read_custom_bucket_policy(node),
        tags=_read_tags(node),
    )
    logger.debug(f"Read inputs: {inputs}")
    return inputs
