import boto3

from s3bucket.common import AccountAliasNotFoundException, get_logger


class AccountAliasResolver:
    """Looks up the IAM account alias of the active credentials.
    Errors from boto3 (missing credentials, access denied) are not caught.
    """

    def __init__(self, session=None) -> None:
        self.logger = get_logger(self.__class__.__name__)
        self.iam_client = (session or boto3).client("iam")

    def _list_account_aliases(self):
        return self.iam_client.list_account_aliases()["AccountAliases"]

    def resolve(self) -> str:
        aliases = self._list_account_aliases()
        if not aliases:
            msg = "No IAM account alias set for the current account."
            self.logger.error(msg)
            raise AccountAliasNotFoundException(msg)
        account_alias = aliases[0]
        self.logger.info(f"Resolved account alias: '{account_alias}'")
        return account_alias


def resolve_bucket_id(account_alias: str, bucket: str) -> str:
    if not account_alias:
        raise AccountAliasNotFoundException(
            f"Cannot derive bucket id for '{bucket}' without an account alias."
        )
    return f"{account_alias}-{bucket}"
