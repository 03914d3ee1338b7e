import logging
import os

logging.basicConfig(format="%(asctime)s %(name)s %(levelname)s %(message)s")


LOGGING_PREFIX = "s3/{bucket_id}/"

ABORT_INCOMPLETE_MULTIPART_UPLOAD_DAYS = 14
NONCURRENT_VERSION_TRANSITION_DAYS = 30
NONCURRENT_VERSION_EXPIRATION_DAYS = 365

PUBLIC_ACLS = ["public-read", "public-read-write"]


class MissingInputException(Exception):
    pass


class InvalidInputException(Exception):
    pass


class InvalidBucketPolicyException(Exception):
    pass


class AccountAliasNotFoundException(Exception):
    pass


def get_logger(name):
    the_logger = logging.getLogger(name)
    the_logger.setLevel(os.environ.get("LOGGING", logging.INFO))
    return the_logger
