import json

import aws_cdk as core
import pytest

from s3bucket.common import InvalidInputException, MissingInputException
from s3bucket.s3bucket_inputs import BucketInputs, read_inputs

BASE_CONTEXT = {
    "bucket": "logs-archive",
    "logging_bucket": "acme-access-logs",
}


def _node(**context):
    return core.App(context={**BASE_CONTEXT, **context}).node


def test_should_read_required_inputs_with_defaults():
    result = read_inputs(_node())

    assert result == BucketInputs(
        bucket="logs-archive",
        logging_bucket="acme-access-logs",
        custom_bucket_policy="",
        tags={},
    )


@pytest.mark.parametrize("missing", ["bucket", "logging_bucket"])
def test_should_raise_on_missing_required_input(missing):
    context = dict(BASE_CONTEXT)
    del context[missing]

    with pytest.raises(MissingInputException):
        read_inputs(core.App(context=context).node)


def test_should_raise_on_empty_required_input():
    with pytest.raises(MissingInputException):
        read_inputs(_node(bucket=""))


def test_should_pass_custom_policy_string_through():
    policy = '{"Statement": []}'

    result = read_inputs(_node(custom_bucket_policy=policy))

    assert result.custom_bucket_policy == policy


def test_should_serialize_custom_policy_object():
    policy = {"Statement": [{"Effect": "Allow"}]}

    result = read_inputs(_node(custom_bucket_policy=policy))

    assert json.loads(result.custom_bucket_policy) == policy


def test_should_read_tags_mapping():
    result = read_inputs(_node(tags={"owner": "platform"}))

    assert result.tags == {"owner": "platform"}


def test_should_parse_tags_from_json_string():
    result = read_inputs(_node(tags='{"owner": "platform"}'))

    assert result.tags == {"owner": "platform"}


@pytest.mark.parametrize(
    "tags",
    [
        "{not json",
        '["owner"]',
        {"owner": 1},
    ],
)
def test_should_reject_invalid_tags(tags):
    with pytest.raises(InvalidInputException):
        read_inputs(_node(tags=tags))


@pytest.mark.parametrize("key", ["bucket", "logging_bucket"])
def test_should_raise_on_whitespace_only_required_input(key):
    with pytest.raises(MissingInputException):
        read_inputs(_node(**{key: "  "}))
