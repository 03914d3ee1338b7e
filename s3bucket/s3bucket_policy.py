import json
from typing import List

from s3bucket.common import PUBLIC_ACLS, InvalidBucketPolicyException

POLICY_VERSION = "2012-10-17"
DENY_PUBLIC_WRITE_SID = "DenyPublicReadACL"


class PolicyDocument:
    """Bucket policy as an ordered list of statements.

    Statements are kept as plain dicts in the IAM JSON layout so the document
    can be handed to CloudFormation unchanged.
    """

    def __init__(self, statements: List[dict] = None, version=POLICY_VERSION, policy_id=None):
        self.version = version
        self.policy_id = policy_id
        self.statements = list(statements or [])

    @classmethod
    def from_json(cls, text: str) -> "PolicyDocument":
        if not text or not text.strip():
            return cls()
        try:
            document = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidBucketPolicyException(
                f"custom_bucket_policy is not valid JSON: {e}"
            ) from e
        if not isinstance(document, dict):
            raise InvalidBucketPolicyException(
                f"custom_bucket_policy must be a JSON object, got {type(document).__name__}."
            )
        statements = document.get("Statement", [])
        if isinstance(statements, dict):
            statements = [statements]
        if not isinstance(statements, list):
            raise InvalidBucketPolicyException(
                "'Statement' in custom_bucket_policy must be an object or a list."
            )
        for statement in statements:
            if not isinstance(statement, dict):
                raise InvalidBucketPolicyException(
                    f"Policy statement must be a JSON object, got '{statement}'."
                )
        return cls(
            statements=statements,
            version=document.get("Version", POLICY_VERSION),
            policy_id=document.get("Id"),
        )

    def append(self, statement: dict) -> None:
        sid = statement.get("Sid")
        if sid:
            for index, existing in enumerate(self.statements):
                if existing.get("Sid") == sid:
                    self.statements[index] = statement
                    return
        self.statements.append(statement)

    def to_dict(self) -> dict:
        document = {"Version": self.version}
        if self.policy_id:
            document["Id"] = self.policy_id
        document["Statement"] = list(self.statements)
        return document

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def deny_public_write_statement(bucket_id: str) -> dict:
    return {
        "Sid": DENY_PUBLIC_WRITE_SID,
        "Effect": "Deny",
        "Principal": {"AWS": "*"},
        "Action": ["s3:PutObject", "s3:PutObjectAcl"],
        "Resource": f"arn:aws:s3:::{bucket_id}/*",
        "Condition": {"StringEquals": {"s3:x-amz-acl": list(PUBLIC_ACLS)}},
    }


def build_policy_document(bucket_id: str, custom_bucket_policy: str = "") -> PolicyDocument:
    document = PolicyDocument.from_json(custom_bucket_policy)
    document.append(deny_public_write_statement(bucket_id))
    return document
